from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from known.core.config import settings
from known.db.base import Base

# Async engine
engine = create_async_engine(settings.database_url, future=True)

# Sessions
SessionLocal = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


async def get_db():
    async with SessionLocal() as session:
        yield session


async def init_models(bind=engine):
    """Create all tables that do not exist yet"""
    import known.db.models  # noqa: F401  registers the mappers

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
