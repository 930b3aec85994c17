import logging

from fastapi import Depends
from sqlalchemy import select, func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.database.engine import get_async_session
from app.exceptions import ValidationException, StillReferencedException
from app.hotels.models import Hotel
from app.hotels.schemas import SHotel, SHotelCreate, SHotelPage, SHotelUpdate

logger = logging.getLogger(__name__)


class HotelRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    def _query(self):
        return select(Hotel).options(selectinload(Hotel.room_types))

    async def list_all(self):
        result = await self.db.execute(self._query().order_by(Hotel.id))
        return result.scalars().all()

    async def list_active(self):
        query = self._query().where(Hotel.is_active.is_(True)).order_by(Hotel.id)
        result = await self.db.execute(query)
        return result.scalars().all()

    async def get_paged(self, page_number: int, page_size: int, search_term: str | None = None) -> SHotelPage:
        """Page through hotels ordered by name, optionally filtered by name or address."""
        if page_number < 1 or page_size < 1:
            raise ValidationException("Page number and page size must be greater than 0.")

        query = self._query()
        count_query = select(func.count()).select_from(Hotel)

        if search_term and search_term.strip():
            term = search_term.strip()
            # "%" and "_" in the term are matched literally
            condition = or_(
                Hotel.name.icontains(term, autoescape=True),
                Hotel.address.icontains(term, autoescape=True),
            )
            query = query.where(condition)
            count_query = count_query.where(condition)

        total_count = await self.db.scalar(count_query)
        result = await self.db.execute(
            query.order_by(Hotel.name, Hotel.id)
            .offset((page_number - 1) * page_size)
            .limit(page_size)
        )
        return SHotelPage(
            items=[SHotel.model_validate(hotel) for hotel in result.scalars().all()],
            total_count=total_count,
            page_number=page_number,
            page_size=page_size,
        )

    async def get_by_id(self, hotel_id: int):
        query = self._query().where(Hotel.id == hotel_id).execution_options(populate_existing=True)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def create(self, data: SHotelCreate):
        hotel = Hotel(
            name=data.name,
            address=data.address,
            category=data.category,
            is_active=data.is_active,
        )
        self.db.add(hotel)
        await self.db.commit()
        logger.info(f"Created hotel {hotel.id}: {hotel.name}")
        return await self.get_by_id(hotel.id)

    async def update(self, hotel_id: int, data: SHotelUpdate):
        hotel = await self.get_by_id(hotel_id)
        if hotel is None:
            return None

        hotel.name = data.name
        hotel.address = data.address
        hotel.category = data.category
        hotel.is_active = data.is_active

        await self.db.commit()
        logger.info(f"Updated hotel {hotel_id} (active={hotel.is_active})")
        return await self.get_by_id(hotel_id)

    async def delete(self, hotel_id: int) -> bool:
        hotel = await self.get_by_id(hotel_id)
        if hotel is None:
            return False

        await self.db.delete(hotel)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise StillReferencedException("Hotel still has inventory or reservations; deactivate it instead.")

        logger.info(f"Deleted hotel {hotel_id}")
        return True


async def get_hotel_repository(db: AsyncSession = Depends(get_async_session)):
    return HotelRepository(db)
