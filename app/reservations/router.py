from fastapi import APIRouter, Depends, Response, status

from app.exceptions import ReservationNotFoundException
from app.reservations.repository import ReservationRepository, get_reservation_repository
from app.reservations.schemas import (
    SMessage,
    SReservation,
    SReservationCreate,
    SReservationResult,
    SReservationStatusUpdate,
)


router = APIRouter(
    prefix="/reservations",
    tags=["Reservations"]
)


@router.get("")
async def get_reservations(repo: ReservationRepository = Depends(get_reservation_repository)) -> list[SReservation]:
    return await repo.list_all()


@router.get("/hotel/{hotel_id}")
async def get_reservations_by_hotel(
    hotel_id: int,
    repo: ReservationRepository = Depends(get_reservation_repository),
) -> list[SReservation]:
    return await repo.list_by_hotel(hotel_id)


@router.get("/{reservation_id}")
async def get_reservation(
    reservation_id: int,
    repo: ReservationRepository = Depends(get_reservation_repository),
) -> SReservation:
    reservation = await repo.get_by_id(reservation_id)
    if reservation is None:
        raise ReservationNotFoundException(f"Reservation with id {reservation_id} not found.")
    return reservation


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_reservation(
    data: SReservationCreate,
    response: Response,
    repo: ReservationRepository = Depends(get_reservation_repository),
) -> SReservationResult:
    """
    Books a stay. Business-rule failures keep the same body shape
    (success=false plus a message) and are answered with 400.
    """
    result = await repo.create_reservation(data)
    if not result.success:
        response.status_code = status.HTTP_400_BAD_REQUEST
    return result


@router.patch("/{reservation_id}/status")
async def update_reservation_status(
    reservation_id: int,
    data: SReservationStatusUpdate,
    repo: ReservationRepository = Depends(get_reservation_repository),
) -> SReservation:
    reservation = await repo.update_status(reservation_id, data.status)
    if reservation is None:
        raise ReservationNotFoundException(f"Reservation with id {reservation_id} not found.")
    return reservation


@router.post("/{reservation_id}/cancel")
async def cancel_reservation(
    reservation_id: int,
    repo: ReservationRepository = Depends(get_reservation_repository),
) -> SMessage:
    if not await repo.cancel_reservation(reservation_id):
        raise ReservationNotFoundException(f"Reservation with id {reservation_id} not found.")
    return SMessage(message="Reservation cancelled successfully")
