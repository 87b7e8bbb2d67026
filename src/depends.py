from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.cache_service import create_cache_service
from src.app.services.cache_service import CacheService

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

_cache_service = None


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


def get_cache_service() -> CacheService:
    global _cache_service
    if _cache_service is None:
        _cache_service = create_cache_service(
            ApplicationConfig.CACHE_BACKEND, ApplicationConfig.REDIS_URL
        )
    return _cache_service


async def init_db() -> None:
    """Create missing tables; deployments with managed schemas turn this off"""
    import src.domain  # noqa: F401  registers every table on SQLModel.metadata

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
