from datetime import date, datetime

from pydantic import Field

from app.reservations.models import ReservationStatus
from app.schemas import SBase, Day, Money


class SReservationCreate(SBase):
    hotel_id: int = Field(alias="hotelId")
    room_type_id: int = Field(alias="roomTypeId")
    guest_name: str = Field(alias="huespedNombre", min_length=1, max_length=200)
    check_in: Day = Field(alias="fechaEntrada")
    check_out: Day = Field(alias="fechaSalida")
    rooms: int = Field(1, alias="cantidadHabitaciones")


class SReservation(SBase):
    id: int
    hotel_id: int = Field(alias="hotelId")
    room_type_id: int = Field(alias="roomTypeId")
    guest_name: str = Field(alias="huespedNombre")
    check_in: date = Field(alias="fechaEntrada")
    check_out: date = Field(alias="fechaSalida")
    status: ReservationStatus = Field(alias="estado")
    total_amount: Money = Field(alias="montoTotal")
    created_at: datetime = Field(alias="fechaCreacion")
    hotel_name: str | None = Field(None, alias="hotelNombre")
    room_type_name: str | None = Field(None, alias="roomTypeName")
    nights: int = Field(alias="noches")


class SReservationResult(SBase):
    """Outcome of a booking attempt; business failures come back with success=False."""
    success: bool
    message: str
    reservation: SReservation | None = None


class SReservationStatusUpdate(SBase):
    status: ReservationStatus = Field(alias="estado")


class SMessage(SBase):
    message: str
