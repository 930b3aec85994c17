from fastapi import APIRouter, Depends, Response, status

from app.exceptions import RoomTypeNotFoundException
from app.room_types.repository import RoomTypeRepository, get_room_type_repository
from app.room_types.schemas import (
    SAssignRoomTypes,
    SAssignRoomTypesResult,
    SRoomType,
    SRoomTypeCreate,
    SRoomTypeUpdate,
)


router = APIRouter(
    prefix="/roomtypes",
    tags=["Room types"]
)


@router.get("")
async def get_room_types(repo: RoomTypeRepository = Depends(get_room_type_repository)) -> list[SRoomType]:
    return await repo.list_all()


@router.get("/hotel/{hotel_id}")
async def get_room_types_by_hotel(
    hotel_id: int,
    repo: RoomTypeRepository = Depends(get_room_type_repository),
) -> list[SRoomType]:
    return await repo.list_by_hotel(hotel_id)


@router.post("/assign-to-hotel")
async def assign_room_types_to_hotel(
    data: SAssignRoomTypes,
    repo: RoomTypeRepository = Depends(get_room_type_repository),
) -> SAssignRoomTypesResult:
    return await repo.assign_to_hotel(data.hotel_id, data.room_type_ids)


@router.get("/{room_type_id}")
async def get_room_type(
    room_type_id: int,
    repo: RoomTypeRepository = Depends(get_room_type_repository),
) -> SRoomType:
    room_type = await repo.get_by_id(room_type_id)
    if room_type is None:
        raise RoomTypeNotFoundException(f"Room type with id {room_type_id} not found.")
    return room_type


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_room_type(
    data: SRoomTypeCreate,
    repo: RoomTypeRepository = Depends(get_room_type_repository),
) -> SRoomType:
    return await repo.create(data)


@router.put("/{room_type_id}")
async def update_room_type(
    room_type_id: int,
    data: SRoomTypeUpdate,
    repo: RoomTypeRepository = Depends(get_room_type_repository),
) -> SRoomType:
    room_type = await repo.update(room_type_id, data)
    if room_type is None:
        raise RoomTypeNotFoundException(f"Room type with id {room_type_id} not found.")
    return room_type


@router.delete("/{room_type_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_room_type(room_type_id: int, repo: RoomTypeRepository = Depends(get_room_type_repository)):
    if not await repo.delete(room_type_id):
        raise RoomTypeNotFoundException(f"Room type with id {room_type_id} not found.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
