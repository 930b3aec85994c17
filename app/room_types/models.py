from sqlalchemy import Column, Integer, String, Numeric, ForeignKey
from sqlalchemy.orm import relationship

from app.database.engine import Base


class RoomType(Base):
    __tablename__ = "room_types"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    base_price = Column(Numeric(18, 2), nullable=False)
    hotel_id = Column(ForeignKey("hotels.id", ondelete="CASCADE"), nullable=False, index=True)

    hotel = relationship("Hotel", back_populates="room_types")

    @property
    def hotel_name(self):
        return self.hotel.name if self.hotel is not None else None
