import logging
from datetime import date
from decimal import Decimal

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from app.database.engine import get_async_session
from app.exceptions import InsufficientInventoryException, InventoryNotFoundException
from app.hotels.models import Hotel
from app.inventory.repository import InventoryRepository, count_nights
from app.reservations.models import Reservation, ReservationStatus
from app.reservations.schemas import SReservation, SReservationCreate, SReservationResult
from app.room_types.models import RoomType
from app.schemas import CENTS

logger = logging.getLogger(__name__)


class ReservationRepository:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.inventory = InventoryRepository(db)

    def _query(self):
        return select(Reservation).options(
            joinedload(Reservation.hotel),
            joinedload(Reservation.room_type),
        )

    async def list_all(self):
        query = self._query().order_by(Reservation.created_at.desc(), Reservation.id.desc())
        result = await self.db.execute(query)
        return result.scalars().all()

    async def list_by_hotel(self, hotel_id: int):
        query = (
            self._query()
            .where(Reservation.hotel_id == hotel_id)
            .order_by(Reservation.created_at.desc(), Reservation.id.desc())
        )
        result = await self.db.execute(query)
        return result.scalars().all()

    async def get_by_id(self, reservation_id: int):
        query = self._query().where(Reservation.id == reservation_id).execution_options(populate_existing=True)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    def _rejected(self, data: SReservationCreate, message: str) -> SReservationResult:
        logger.warning(
            f"Reservation rejected for hotel={data.hotel_id} room_type={data.room_type_id} "
            f"{data.check_in}..{data.check_out}: {message}"
        )
        return SReservationResult(success=False, message=message)

    async def create_reservation(self, data: SReservationCreate) -> SReservationResult:
        """Validate, price and book a stay, taking the rooms from every night of the ledger.

        Business-rule failures are returned as success=False results. The reservation
        insert and the ledger updates share one transaction: if any night can no
        longer absorb the rooms, nothing is written.
        """
        if data.check_in < date.today():
            return self._rejected(data, "The entry date cannot be in the past")
        if data.check_out <= data.check_in:
            return self._rejected(data, "The exit date must be after the entry date")
        if data.rooms <= 0:
            return self._rejected(data, "The number of rooms must be greater than 0")

        hotel = await self.db.get(Hotel, data.hotel_id)
        if hotel is None:
            return self._rejected(data, "Hotel not found")
        if not hotel.is_active:
            return self._rejected(data, "The hotel is not active")

        room_type = await self.db.get(RoomType, data.room_type_id)
        if room_type is None:
            return self._rejected(data, "Room type not found")

        available = await self.inventory.check_availability(
            data.hotel_id, data.room_type_id, data.check_in, data.check_out, data.rooms
        )
        if not available:
            return self._rejected(data, "No availability for the selected dates")

        nights = count_nights(data.check_in, data.check_out)
        total_amount = (Decimal(room_type.base_price) * nights * data.rooms).quantize(CENTS)

        reservation = Reservation(
            hotel_id=data.hotel_id,
            room_type_id=data.room_type_id,
            guest_name=data.guest_name,
            check_in=data.check_in,
            check_out=data.check_out,
            status=ReservationStatus.CONFIRMED.value,
            total_amount=total_amount,
        )
        self.db.add(reservation)

        try:
            await self.db.flush()
            await self.inventory.reserve_stay(
                data.hotel_id, data.room_type_id, data.check_in, data.check_out, data.rooms
            )
        except (InsufficientInventoryException, InventoryNotFoundException):
            # Headroom was taken between the availability check and the write
            await self.db.rollback()
            return self._rejected(data, "No availability for the selected dates")

        await self.db.commit()
        logger.info(
            f"Reservation {reservation.id} confirmed: hotel={data.hotel_id} room_type={data.room_type_id} "
            f"{data.check_in}..{data.check_out} rooms={data.rooms} amount={total_amount}"
        )

        created = await self.get_by_id(reservation.id)
        return SReservationResult(
            success=True,
            message="Reservation created successfully",
            reservation=SReservation.model_validate(created),
        )

    async def cancel_reservation(self, reservation_id: int) -> bool:
        reservation = await self.get_by_id(reservation_id)
        if reservation is None:
            return False

        reservation.status = ReservationStatus.CANCELLED.value
        # TODO: give the nights back with InventoryRepository.apply_reserved_delta once
        # reservations store their room count; until then cancelling keeps the ledger as is.
        await self.db.commit()
        logger.info(f"Reservation {reservation_id} cancelled (ledger not released)")
        return True

    async def update_status(self, reservation_id: int, status: ReservationStatus):
        """Overwrite the status; any transition between known statuses is accepted."""
        reservation = await self.get_by_id(reservation_id)
        if reservation is None:
            return None

        previous = reservation.status
        reservation.status = status.value
        await self.db.commit()
        logger.info(f"Reservation {reservation_id} status {previous} -> {status.value}")
        return await self.get_by_id(reservation_id)


async def get_reservation_repository(db: AsyncSession = Depends(get_async_session)):
    return ReservationRepository(db)
