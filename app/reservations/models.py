from enum import Enum

from sqlalchemy import Column, Integer, String, Date, DateTime, Numeric, ForeignKey, func, Index, CheckConstraint
from sqlalchemy.orm import relationship

from app.database.engine import Base


class ReservationStatus(str, Enum):
    """Reservation status."""
    CONFIRMED = "Confirmed"
    CANCELLED = "Cancelled"
    COMPLETED = "Completed"


class Reservation(Base):
    __tablename__ = "reservations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    hotel_id = Column(ForeignKey("hotels.id", ondelete="RESTRICT"), nullable=False, index=True)
    room_type_id = Column(ForeignKey("room_types.id", ondelete="RESTRICT"), nullable=False)

    guest_name = Column(String(200), nullable=False)
    # Stay covers [check_in, check_out)
    check_in = Column(Date, nullable=False)
    check_out = Column(Date, nullable=False)

    status = Column(String(50), default=ReservationStatus.CONFIRMED.value, nullable=False)
    total_amount = Column(Numeric(18, 2), nullable=False)
    created_at = Column(DateTime, default=func.now(), nullable=False)

    hotel = relationship("Hotel")
    room_type = relationship("RoomType")

    __table_args__ = (
        CheckConstraint("check_out > check_in", name="ck_reservations_dates"),
        Index("idx_reservations_created", created_at),
    )

    @property
    def nights(self) -> int:
        return (self.check_out - self.check_in).days

    @property
    def hotel_name(self):
        return self.hotel.name if self.hotel is not None else None

    @property
    def room_type_name(self):
        return self.room_type.name if self.room_type is not None else None
