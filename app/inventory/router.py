from fastapi import APIRouter, Depends, Query, status

from app.exceptions import InventoryNotFoundException, ValidationException
from app.inventory.repository import InventoryRepository, get_inventory_repository
from app.inventory.schemas import (
    SAvailabilityQuery,
    SAvailabilityResult,
    SInventoryBulkCreate,
    SInventoryCreate,
    SInventoryDay,
    SInventoryUpdate,
)
from app.schemas import Day


router = APIRouter(
    prefix="/inventory",
    tags=["Inventory"]
)


@router.get("")
async def get_inventory(repo: InventoryRepository = Depends(get_inventory_repository)) -> list[SInventoryDay]:
    return await repo.list_all()


@router.get("/hotel/{hotel_id}/roomtype/{room_type_id}")
async def get_inventory_range(
    hotel_id: int,
    room_type_id: int,
    start: Day = Query(alias="fechaInicio"),
    end: Day = Query(alias="fechaFin"),
    repo: InventoryRepository = Depends(get_inventory_repository),
) -> list[SInventoryDay]:
    if start >= end:
        raise ValidationException("Start date must be before end date.")
    return await repo.get_range(hotel_id, room_type_id, start, end)


@router.post("/check-availability")
async def check_availability(
    query: SAvailabilityQuery,
    repo: InventoryRepository = Depends(get_inventory_repository),
) -> SAvailabilityResult:
    return await repo.availability_report(query)


@router.post("/bulk")
async def bulk_create_inventory(
    data: SInventoryBulkCreate,
    repo: InventoryRepository = Depends(get_inventory_repository),
) -> list[SInventoryDay]:
    return await repo.bulk_create_range(data.hotel_id, data.room_type_id, data.start, data.end, data.total)


@router.get("/{inventory_id}")
async def get_inventory_by_id(
    inventory_id: int,
    repo: InventoryRepository = Depends(get_inventory_repository),
) -> SInventoryDay:
    row = await repo.get_by_id(inventory_id)
    if row is None:
        raise InventoryNotFoundException(f"Inventory with id {inventory_id} not found.")
    return row


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_inventory(
    data: SInventoryCreate,
    repo: InventoryRepository = Depends(get_inventory_repository),
) -> SInventoryDay:
    return await repo.create_single_day(data.hotel_id, data.room_type_id, data.day, data.total)


@router.put("/{inventory_id}")
async def update_inventory(
    inventory_id: int,
    data: SInventoryUpdate,
    repo: InventoryRepository = Depends(get_inventory_repository),
) -> SInventoryDay:
    row = await repo.update_counts(inventory_id, data.total, data.reserved)
    if row is None:
        raise InventoryNotFoundException(f"Inventory with id {inventory_id} not found.")
    return row
