from fastapi import APIRouter, Depends, Query, Response, status

from app.exceptions import HotelNotFoundException
from app.hotels.repository import HotelRepository, get_hotel_repository
from app.hotels.schemas import SHotel, SHotelCreate, SHotelPage, SHotelUpdate


router = APIRouter(
    prefix="/hotels",
    tags=["Hotels"]
)


@router.get("")
async def get_hotels(repo: HotelRepository = Depends(get_hotel_repository)) -> list[SHotel]:
    return await repo.list_all()


@router.get("/paged")
async def get_hotels_paged(
    page_number: int = Query(1, alias="pageNumber"),
    page_size: int = Query(10, alias="pageSize"),
    search_term: str | None = Query(None, alias="searchTerm"),
    repo: HotelRepository = Depends(get_hotel_repository),
) -> SHotelPage:
    return await repo.get_paged(page_number, page_size, search_term)


@router.get("/active")
async def get_active_hotels(repo: HotelRepository = Depends(get_hotel_repository)) -> list[SHotel]:
    return await repo.list_active()


@router.get("/{hotel_id}")
async def get_hotel(hotel_id: int, repo: HotelRepository = Depends(get_hotel_repository)) -> SHotel:
    hotel = await repo.get_by_id(hotel_id)
    if hotel is None:
        raise HotelNotFoundException(f"Hotel with id {hotel_id} not found.")
    return hotel


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_hotel(data: SHotelCreate, repo: HotelRepository = Depends(get_hotel_repository)) -> SHotel:
    return await repo.create(data)


@router.put("/{hotel_id}")
async def update_hotel(
    hotel_id: int,
    data: SHotelUpdate,
    repo: HotelRepository = Depends(get_hotel_repository),
) -> SHotel:
    hotel = await repo.update(hotel_id, data)
    if hotel is None:
        raise HotelNotFoundException(f"Hotel with id {hotel_id} not found.")
    return hotel


@router.delete("/{hotel_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_hotel(hotel_id: int, repo: HotelRepository = Depends(get_hotel_repository)):
    if not await repo.delete(hotel_id):
        raise HotelNotFoundException(f"Hotel with id {hotel_id} not found.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
