import logging
import random
from datetime import date, timedelta
from decimal import Decimal

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.hotels.models import Hotel
from app.inventory.models import InventoryDay
from app.reservations.models import Reservation, ReservationStatus
from app.room_types.models import RoomType

logger = logging.getLogger(__name__)

SAMPLE_HOTELS = [
    ("Hotel Ritz Madrid", "Plaza de la Lealtad, 5, 28014 Madrid", 5, True),
    ("Hotel Marriott Barcelona", "Avinguda Diagonal, 250, 08029 Barcelona", 5, True),
    ("Hotel NH Collection Valencia", "Calle de Xativa, 14, 46004 Valencia", 4, True),
    ("Hotel AC Malaga", "Calle Cortina del Muelle, 1, 29015 Malaga", 4, True),
    ("Hotel Silken Gran Hotel Domine", "Alameda de Mazarredo, 61, 48009 Bilbao", 5, True),
    ("Hotel Catalonia Sevilla", "Calle Marques de Paradas, 41, 41001 Sevilla", 3, True),
    ("Hotel Occidental Bilbao", "Calle de Rodriguez Arias, 66, 48013 Bilbao", 4, True),
    ("Hotel Zenit Conde de Orgaz", "Calle del Conde de Orgaz, 5, 28027 Madrid", 3, False),
]

# (room type name, price multiplier per star, rooms per day)
ROOM_TYPES_BY_CATEGORY = {
    5: [
        ("Standard Room", 60, 15),
        ("Superior Room", 90, 20),
        ("Junior Suite", 180, 8),
        ("Executive Suite", 250, 5),
        ("Presidential Suite", 400, 2),
    ],
    4: [
        ("Single Room", 50, 15),
        ("Double Room", 75, 20),
        ("Triple Room", 100, 12),
        ("Suite", 150, 6),
    ],
    3: [
        ("Single Room", 40, 15),
        ("Double Room", 60, 20),
        ("Family Room", 85, 12),
    ],
}

GUEST_NAMES = [
    "Juan Perez Garcia",
    "Maria Gonzalez Lopez",
    "Carlos Ramirez Martinez",
    "Ana Fernandez Sanchez",
    "Luis Torres Diaz",
    "Laura Jimenez Ruiz",
    "Pedro Morales Castro",
    "Carmen Vazquez Romero",
]

SEED_DAYS = 30
SEED_RESERVATIONS = 15


def _occupancy(rng: random.Random, total: int, days_from_today: int, day: date) -> int:
    weekend = day.weekday() >= 5
    soon = days_from_today < 7
    if soon and weekend:
        low, high = 0.6, 0.8
    elif soon:
        low, high = 0.3, 0.5
    elif weekend:
        low, high = 0.2, 0.4
    else:
        low, high = 0.05, 0.2
    return min(rng.randint(int(total * low), int(total * high)), total)


async def seed_initial_data(session: AsyncSession, today: date | None = None) -> bool:
    """Fill an empty database with sample hotels, room types, 30 days of inventory and reservations.

    Returns False without touching anything when a hotel already exists.
    """
    if await session.scalar(select(func.count()).select_from(Hotel)):
        logger.info("Seed skipped: hotels already present")
        return False

    today = today or date.today()
    rng = random.Random(42)

    hotels = [
        Hotel(name=name, address=address, category=category, is_active=active)
        for name, address, category, active in SAMPLE_HOTELS
    ]
    session.add_all(hotels)
    await session.flush()

    stock = []
    for hotel in hotels:
        for name, multiplier, rooms in ROOM_TYPES_BY_CATEGORY[hotel.category]:
            room_type = RoomType(name=name, base_price=Decimal(hotel.category * multiplier), hotel_id=hotel.id)
            stock.append((room_type, rooms))
    room_types = [room_type for room_type, _ in stock]
    session.add_all(room_types)
    await session.flush()

    for room_type, total in stock:
        for offset in range(SEED_DAYS):
            day = today + timedelta(days=offset)
            session.add(InventoryDay(
                hotel_id=room_type.hotel_id,
                room_type_id=room_type.id,
                day=day,
                total=total,
                reserved=_occupancy(rng, total, offset, day),
            ))

    statuses = [
        ReservationStatus.CONFIRMED,
        ReservationStatus.CONFIRMED,
        ReservationStatus.CONFIRMED,
        ReservationStatus.COMPLETED,
        ReservationStatus.CANCELLED,
    ]
    for i in range(SEED_RESERVATIONS):
        hotel = rng.choice(hotels)
        room_type = rng.choice([rt for rt in room_types if rt.hotel_id == hotel.id])
        nights = rng.randint(2, 5)
        check_in = today + timedelta(days=rng.randint(0, 24))
        session.add(Reservation(
            hotel_id=hotel.id,
            room_type_id=room_type.id,
            guest_name=GUEST_NAMES[i % len(GUEST_NAMES)],
            check_in=check_in,
            check_out=check_in + timedelta(days=nights),
            status=rng.choice(statuses).value,
            total_amount=(room_type.base_price * nights).quantize(Decimal("0.01")),
        ))

    await session.commit()
    logger.info(f"Seeded {len(hotels)} hotels, {len(room_types)} room types, {SEED_DAYS} days of inventory")
    return True
