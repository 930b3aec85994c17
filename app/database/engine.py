from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker, declarative_base

from app.config import DATABASE_URL, DB_ECHO, DB_POOL_SIZE

engine_options = {"echo": DB_ECHO}
if not DATABASE_URL.startswith("sqlite"):
    engine_options.update(pool_size=DB_POOL_SIZE, max_overflow=0)

# 1. Async engine (the psycopg driver must be installed: pip install "psycopg[binary]")
engine = create_async_engine(DATABASE_URL, **engine_options)

# 2. Declarative base shared by every feature package
Base = declarative_base()

# 3. Session factory
AsyncSessionLocal = sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False
)


# 4. One session per request (FastAPI dependency)
async def get_async_session():
    async with AsyncSessionLocal() as session:
        yield session
