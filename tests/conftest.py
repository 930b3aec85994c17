"""
Shared fixtures.

Every test gets a fresh in-memory SQLite database (aiosqlite driver, single
shared connection) with the tables created from the ORM metadata.
"""
from datetime import date, timedelta
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.database.engine import Base, get_async_session
from app.hotels.models import Hotel
from app.inventory.models import InventoryDay
from app.main import app
from app.room_types.models import RoomType


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    # SQLite leaves foreign keys unchecked unless asked per connection
    @event.listens_for(engine.sync_engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def hotel(session):
    hotel = Hotel(name="Hotel Ritz Madrid", address="Plaza de la Lealtad, 5, Madrid", category=5, is_active=True)
    session.add(hotel)
    await session.commit()
    return hotel


@pytest_asyncio.fixture
async def room_type(session, hotel):
    room_type = RoomType(name="Double Room", base_price=Decimal("100.00"), hotel_id=hotel.id)
    session.add(room_type)
    await session.commit()
    return room_type


@pytest_asyncio.fixture
async def add_inventory(session, hotel, room_type):
    """Insert ledger rows directly: add_inventory(start, nights, total, reserved=0)."""
    async def _add(start: date, nights: int, total: int, reserved: int = 0):
        rows = [
            InventoryDay(
                hotel_id=hotel.id,
                room_type_id=room_type.id,
                day=start + timedelta(days=offset),
                total=total,
                reserved=reserved,
            )
            for offset in range(nights)
        ]
        session.add_all(rows)
        await session.commit()
        return rows

    return _add
