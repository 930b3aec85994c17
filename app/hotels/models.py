from sqlalchemy import Column, Integer, String, Boolean, CheckConstraint
from sqlalchemy.orm import relationship

from app.database.engine import Base


class Hotel(Base):
    __tablename__ = "hotels"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    address = Column(String(500), nullable=False)
    # Star rating, 1..5
    category = Column(Integer, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)

    room_types = relationship(
        "RoomType",
        back_populates="hotel",
        cascade="all, delete-orphan",
        order_by="RoomType.id",
    )

    __table_args__ = (
        CheckConstraint("category BETWEEN 1 AND 5", name="ck_hotels_category"),
    )
