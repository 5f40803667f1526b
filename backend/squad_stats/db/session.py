from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from squad_stats.core.config import settings
from squad_stats.db.base import Base

engine = create_async_engine(settings.DATABASE_URL)
SessionLocal = async_sessionmaker(engine, expire_on_commit=False)


# FastAPI dependency: one session per request
async def get_db():
    async with SessionLocal() as session:
        yield session


async def init_models(bind: AsyncEngine = engine):
    # make sure every model is registered on Base.metadata
    import squad_stats.models  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
