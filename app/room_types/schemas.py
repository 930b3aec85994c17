from decimal import Decimal

from pydantic import Field

from app.schemas import SBase, Money


class SRoomTypeUpdate(SBase):
    name: str = Field(alias="nombre", min_length=1, max_length=100)
    base_price: Decimal = Field(alias="precioBase", ge=0, max_digits=18, decimal_places=2)


class SRoomTypeCreate(SRoomTypeUpdate):
    hotel_id: int = Field(alias="hotelId")


class SRoomType(SBase):
    id: int
    name: str = Field(alias="nombre")
    base_price: Money = Field(alias="precioBase")
    hotel_id: int = Field(alias="hotelId")
    hotel_name: str | None = Field(None, alias="hotelNombre")


class SAssignRoomTypes(SBase):
    hotel_id: int = Field(alias="hotelId")
    room_type_ids: list[int] = Field(default_factory=list, alias="roomTypeIds")


class SAssignRoomTypesResult(SBase):
    message: str
    hotel_id: int = Field(alias="hotelId")
    assigned_room_type_ids: list[int] = Field(alias="assignedRoomTypeIds")
