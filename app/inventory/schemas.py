from datetime import date

from pydantic import Field

from app.schemas import SBase, Day


class SInventoryDay(SBase):
    id: int
    hotel_id: int = Field(alias="hotelId")
    room_type_id: int = Field(alias="roomTypeId")
    day: date = Field(alias="fecha")
    total: int = Field(alias="cantidadTotal")
    reserved: int = Field(alias="cantidadReservada")
    available: int = Field(alias="cantidadDisponible")
    hotel_name: str | None = Field(None, alias="hotelNombre")
    room_type_name: str | None = Field(None, alias="roomTypeName")


class SInventoryCreate(SBase):
    hotel_id: int = Field(alias="hotelId")
    room_type_id: int = Field(alias="roomTypeId")
    day: Day = Field(alias="fecha")
    total: int = Field(alias="cantidadTotal")


class SInventoryBulkCreate(SBase):
    hotel_id: int = Field(alias="hotelId")
    room_type_id: int = Field(alias="roomTypeId")
    start: Day = Field(alias="fechaInicio")
    end: Day = Field(alias="fechaFin")
    total: int = Field(alias="cantidadTotal")


class SInventoryUpdate(SBase):
    total: int = Field(alias="cantidadTotal")
    reserved: int = Field(alias="cantidadReservada")


class SAvailabilityQuery(SBase):
    hotel_id: int = Field(alias="hotelId")
    room_type_id: int = Field(alias="roomTypeId")
    start: Day = Field(alias="fechaInicio")
    end: Day = Field(alias="fechaFin")
    rooms: int = Field(alias="cantidadHabitaciones")


class SAvailabilityResult(SBase):
    available: bool
    message: str
    inventory_details: list[SInventoryDay] | None = Field(None, alias="inventoryDetails")
