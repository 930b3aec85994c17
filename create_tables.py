import asyncio
import logging
import sys
import selectors

from app.config import SEED_DATA
from app.database.engine import engine, Base, AsyncSessionLocal
from app.database.seed import seed_initial_data
from app.hotels.models import Hotel  # noqa: F401
from app.inventory.models import InventoryDay  # noqa: F401
from app.reservations.models import Reservation  # noqa: F401
from app.room_types.models import RoomType  # noqa: F401

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger("create_tables")


async def main():
    logger.info("Connecting to the database...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tables created")

    if SEED_DATA:
        async with AsyncSessionLocal() as session:
            await seed_initial_data(session)

    await engine.dispose()

if __name__ == "__main__":
    if sys.platform == 'win32':
        loop_factory = lambda: asyncio.SelectorEventLoop(selectors.SelectSelector())
        asyncio.run(main(), loop_factory=loop_factory)
    else:
        asyncio.run(main())
