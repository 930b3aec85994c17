import logging

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from app.database.engine import get_async_session
from app.exceptions import (
    HotelNotFoundException,
    RoomTypeNotFoundException,
    StillReferencedException,
    ValidationException,
)
from app.hotels.models import Hotel
from app.room_types.models import RoomType
from app.room_types.schemas import SAssignRoomTypesResult, SRoomTypeCreate, SRoomTypeUpdate

logger = logging.getLogger(__name__)


class RoomTypeRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    def _query(self):
        return select(RoomType).options(joinedload(RoomType.hotel))

    async def list_all(self):
        result = await self.db.execute(self._query().order_by(RoomType.id))
        return result.scalars().all()

    async def list_by_hotel(self, hotel_id: int):
        query = self._query().where(RoomType.hotel_id == hotel_id).order_by(RoomType.id)
        result = await self.db.execute(query)
        return result.scalars().all()

    async def get_by_id(self, room_type_id: int):
        query = self._query().where(RoomType.id == room_type_id).execution_options(populate_existing=True)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def create(self, data: SRoomTypeCreate):
        if await self.db.get(Hotel, data.hotel_id) is None:
            raise HotelNotFoundException()

        room_type = RoomType(name=data.name, base_price=data.base_price, hotel_id=data.hotel_id)
        self.db.add(room_type)
        await self.db.commit()
        logger.info(f"Created room type {room_type.id} ({room_type.name}) for hotel {data.hotel_id}")
        return await self.get_by_id(room_type.id)

    async def update(self, room_type_id: int, data: SRoomTypeUpdate):
        room_type = await self.get_by_id(room_type_id)
        if room_type is None:
            return None

        room_type.name = data.name
        room_type.base_price = data.base_price
        await self.db.commit()
        logger.info(f"Updated room type {room_type_id}")
        return await self.get_by_id(room_type_id)

    async def delete(self, room_type_id: int) -> bool:
        room_type = await self.get_by_id(room_type_id)
        if room_type is None:
            return False

        await self.db.delete(room_type)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise StillReferencedException("Room type still has inventory or reservations.")

        logger.info(f"Deleted room type {room_type_id}")
        return True

    async def assign_to_hotel(self, hotel_id: int, room_type_ids: list[int]) -> SAssignRoomTypesResult:
        """Move existing room types under another hotel; unknown ids are ignored."""
        if not room_type_ids:
            raise ValidationException("At least one room type must be specified.")

        if await self.db.get(Hotel, hotel_id) is None:
            raise HotelNotFoundException(f"Hotel with id {hotel_id} not found.")

        result = await self.db.execute(
            select(RoomType).where(RoomType.id.in_(room_type_ids)).order_by(RoomType.id)
        )
        room_types = result.scalars().all()
        if not room_types:
            raise RoomTypeNotFoundException("No room types found for the given ids.")

        for room_type in room_types:
            room_type.hotel_id = hotel_id
        await self.db.commit()

        assigned = [room_type.id for room_type in room_types]
        logger.info(f"Assigned room types {assigned} to hotel {hotel_id}")
        return SAssignRoomTypesResult(
            message="Room types assigned successfully",
            hotel_id=hotel_id,
            assigned_room_type_ids=assigned,
        )


async def get_room_type_repository(db: AsyncSession = Depends(get_async_session)):
    return RoomTypeRepository(db)
