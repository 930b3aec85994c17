import math

from pydantic import Field, computed_field

from app.schemas import SBase, Money


class SHotelCreate(SBase):
    name: str = Field(alias="nombre", min_length=1, max_length=200)
    address: str = Field(alias="direccion", min_length=1, max_length=500)
    category: int = Field(alias="categoria", ge=1, le=5)
    is_active: bool = Field(True, alias="estado")


class SHotelUpdate(SHotelCreate):
    is_active: bool = Field(alias="estado")


class SHotelRoomType(SBase):
    id: int
    name: str = Field(alias="nombre")
    base_price: Money = Field(alias="precioBase")
    hotel_id: int = Field(alias="hotelId")


class SHotel(SBase):
    id: int
    name: str = Field(alias="nombre")
    address: str = Field(alias="direccion")
    category: int = Field(alias="categoria")
    is_active: bool = Field(alias="estado")
    room_types: list[SHotelRoomType] = Field(default_factory=list, alias="roomTypes")


class SHotelPage(SBase):
    items: list[SHotel]
    total_count: int = Field(alias="totalCount")
    page_number: int = Field(alias="pageNumber")
    page_size: int = Field(alias="pageSize")

    @computed_field(alias="totalPages")
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @computed_field(alias="hasPreviousPage")
    @property
    def has_previous_page(self) -> bool:
        return self.page_number > 1

    @computed_field(alias="hasNextPage")
    @property
    def has_next_page(self) -> bool:
        return self.page_number < self.total_pages
