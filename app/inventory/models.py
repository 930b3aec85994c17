from sqlalchemy import Column, Integer, ForeignKey, Date, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import relationship

from app.database.engine import Base


class InventoryDay(Base):
    """Ledger row: rooms of one type in one hotel for one calendar day."""

    __tablename__ = "inventory_days"

    id = Column(Integer, primary_key=True, autoincrement=True)
    hotel_id = Column(ForeignKey("hotels.id", ondelete="RESTRICT"), nullable=False)
    room_type_id = Column(ForeignKey("room_types.id", ondelete="RESTRICT"), nullable=False)
    day = Column(Date, nullable=False)
    total = Column(Integer, nullable=False)
    reserved = Column(Integer, nullable=False, default=0)

    hotel = relationship("Hotel")
    room_type = relationship("RoomType")

    __table_args__ = (
        UniqueConstraint("hotel_id", "room_type_id", "day", name="uq_inventory_days_key"),
        CheckConstraint("reserved >= 0 AND reserved <= total", name="ck_inventory_days_reserved"),
    )

    @property
    def available(self) -> int:
        return self.total - self.reserved

    @property
    def hotel_name(self):
        return self.hotel.name if self.hotel is not None else None

    @property
    def room_type_name(self):
        return self.room_type.name if self.room_type is not None else None
