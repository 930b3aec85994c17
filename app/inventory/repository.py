import logging
from datetime import date, timedelta

from fastapi import Depends
from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from app.database.engine import get_async_session
from app.exceptions import (
    ConflictException,
    HotelNotFoundException,
    InsufficientInventoryException,
    InventoryAlreadyExistsException,
    InventoryNotFoundException,
    ReservedExceedsTotalException,
    RoomTypeNotFoundException,
    ValidationException,
)
from app.hotels.models import Hotel
from app.inventory.models import InventoryDay
from app.inventory.schemas import SAvailabilityQuery, SAvailabilityResult, SInventoryDay
from app.room_types.models import RoomType

logger = logging.getLogger(__name__)


def count_nights(start: date, end: date) -> int:
    """Nights in the stay [start, end); the checkout day is not counted."""
    return (end - start).days


class InventoryRepository:
    """Per-day room ledger: lookups, availability checks, provisioning and guarded reserved updates.

    Nothing here creates ledger rows on read. A missing row means no inventory was
    configured for that day, which is different from a row with zero rooms left.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    def _query(self):
        return select(InventoryDay).options(
            joinedload(InventoryDay.hotel),
            joinedload(InventoryDay.room_type),
        )

    # Ledger reads

    async def list_all(self):
        query = self._query().order_by(InventoryDay.hotel_id, InventoryDay.room_type_id, InventoryDay.day)
        result = await self.db.execute(query)
        return result.scalars().all()

    async def get_by_id(self, inventory_id: int):
        query = self._query().where(InventoryDay.id == inventory_id).execution_options(populate_existing=True)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def get_by_key(self, hotel_id: int, room_type_id: int, day: date):
        query = (
            self._query()
            .where(
                InventoryDay.hotel_id == hotel_id,
                InventoryDay.room_type_id == room_type_id,
                InventoryDay.day == day,
            )
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def get_range(self, hotel_id: int, room_type_id: int, start: date, end: date):
        """Rows stored for [start, end], both ends included, ascending by day."""
        query = (
            self._query()
            .where(
                InventoryDay.hotel_id == hotel_id,
                InventoryDay.room_type_id == room_type_id,
                InventoryDay.day >= start,
                InventoryDay.day <= end,
            )
            .order_by(InventoryDay.day)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(query)
        return result.scalars().all()

    async def stay_rows(self, hotel_id: int, room_type_id: int, start: date, end: date):
        """First `nights` rows of the range, or None when fewer rows than nights are configured."""
        nights = count_nights(start, end)
        rows = await self.get_range(hotel_id, room_type_id, start, end)
        if len(rows) < nights:
            return None
        return rows[:nights]

    # Availability

    async def check_availability(self, hotel_id: int, room_type_id: int, start: date, end: date, rooms: int) -> bool:
        if start >= end:
            raise ValidationException("Start date must be before end date.")
        if rooms <= 0:
            raise ValidationException("The number of rooms must be greater than 0.")

        rows = await self.stay_rows(hotel_id, room_type_id, start, end)
        if rows is None:
            return False
        return all(row.available >= rooms for row in rows)

    async def availability_report(self, query: SAvailabilityQuery) -> SAvailabilityResult:
        available = await self.check_availability(
            query.hotel_id, query.room_type_id, query.start, query.end, query.rooms
        )
        if not available:
            return SAvailabilityResult(
                available=False,
                message="Not enough availability for the selected dates",
            )

        rows = await self.stay_rows(query.hotel_id, query.room_type_id, query.start, query.end)
        return SAvailabilityResult(
            available=True,
            message="Rooms are available for the selected dates",
            inventory_details=[SInventoryDay.model_validate(row) for row in rows],
        )

    # Provisioning

    async def _ensure_hotel_and_room_type(self, hotel_id: int, room_type_id: int) -> None:
        if await self.db.get(Hotel, hotel_id) is None:
            raise HotelNotFoundException()
        if await self.db.get(RoomType, room_type_id) is None:
            raise RoomTypeNotFoundException()

    async def create_single_day(self, hotel_id: int, room_type_id: int, day: date, total: int):
        if total < 0:
            raise ValidationException("Total rooms cannot be negative.")
        await self._ensure_hotel_and_room_type(hotel_id, room_type_id)

        if await self.get_by_key(hotel_id, room_type_id, day) is not None:
            raise InventoryAlreadyExistsException()

        row = InventoryDay(hotel_id=hotel_id, room_type_id=room_type_id, day=day, total=total, reserved=0)
        self.db.add(row)
        try:
            await self.db.commit()
        except IntegrityError:
            # Lost a race against another writer for the same key
            await self.db.rollback()
            raise InventoryAlreadyExistsException()

        logger.info(f"Created inventory {row.id}: hotel={hotel_id} room_type={room_type_id} day={day} total={total}")
        return await self.get_by_id(row.id)

    async def bulk_create_range(self, hotel_id: int, room_type_id: int, start: date, end: date, total: int):
        """Create one row per night in [start, end). Days that already have a row are left untouched."""
        if start >= end:
            raise ValidationException("Start date must be before end date.")
        if total <= 0:
            raise ValidationException("Total rooms must be greater than 0.")
        await self._ensure_hotel_and_room_type(hotel_id, room_type_id)

        existing = {row.day for row in await self.get_range(hotel_id, room_type_id, start, end)}

        created = []
        for offset in range(count_nights(start, end)):
            day = start + timedelta(days=offset)
            if day in existing:
                continue
            row = InventoryDay(hotel_id=hotel_id, room_type_id=room_type_id, day=day, total=total, reserved=0)
            self.db.add(row)
            created.append(row)

        if not created:
            logger.info(f"Bulk inventory for hotel={hotel_id} room_type={room_type_id} {start}..{end}: nothing to create")
            return []

        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise ConflictException("Inventory was provisioned concurrently for this range; retry the request.")

        logger.info(
            f"Bulk inventory for hotel={hotel_id} room_type={room_type_id} {start}..{end}: "
            f"created {len(created)}, skipped {count_nights(start, end) - len(created)}"
        )
        result = await self.db.execute(
            self._query()
            .where(InventoryDay.id.in_([row.id for row in created]))
            .order_by(InventoryDay.day)
            .execution_options(populate_existing=True)
        )
        return result.scalars().all()

    # Writes

    async def update_counts(self, inventory_id: int, total: int, reserved: int):
        """Manual override of both counts, checked against 0 <= reserved <= total."""
        row = await self.get_by_id(inventory_id)
        if row is None:
            return None

        if total < 0 or reserved < 0:
            raise ValidationException("Room counts cannot be negative.")
        if reserved > total:
            raise ReservedExceedsTotalException()

        row.total = total
        row.reserved = reserved
        await self.db.commit()
        logger.info(f"Inventory {inventory_id} overridden: total={total} reserved={reserved}")
        return await self.get_by_id(inventory_id)

    async def apply_reserved_delta(self, hotel_id: int, room_type_id: int, day: date, delta: int) -> None:
        """Shift the reserved count of one day by `delta` inside the caller's transaction.

        The bounds check is part of the UPDATE itself, so two writers cannot both
        take the last room between a read and a write.
        """
        statement = (
            update(InventoryDay)
            .where(
                InventoryDay.hotel_id == hotel_id,
                InventoryDay.room_type_id == room_type_id,
                InventoryDay.day == day,
                InventoryDay.reserved + delta >= 0,
                InventoryDay.reserved + delta <= InventoryDay.total,
            )
            .values(reserved=InventoryDay.reserved + delta)
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(statement)
        if result.rowcount == 0:
            if await self.get_by_key(hotel_id, room_type_id, day) is None:
                raise InventoryNotFoundException(f"No inventory configured for {day}.")
            raise InsufficientInventoryException(f"Not enough rooms left for {day}.")

    async def reserve_stay(self, hotel_id: int, room_type_id: int, start: date, end: date, rooms: int) -> None:
        """Take `rooms` from every night of the stay; raises when any night cannot absorb it."""
        rows = await self.stay_rows(hotel_id, room_type_id, start, end)
        if rows is None:
            raise InsufficientInventoryException("Inventory is missing for part of the stay.")
        for row in rows:
            await self.apply_reserved_delta(hotel_id, room_type_id, row.day, rooms)


async def get_inventory_repository(db: AsyncSession = Depends(get_async_session)):
    return InventoryRepository(db)
