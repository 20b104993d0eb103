from sqlalchemy import URL
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from app.config import settings

DEFAULT_SQLITE_URL = "sqlite+aiosqlite:///./catalog.sqlite3"


def _get_database_url() -> str:
    url = settings.database_url
    if not url and settings.db_host:
        return URL.create(
            "postgresql+asyncpg",
            username=settings.db_user or None,
            password=settings.db_password or None,
            host=settings.db_host,
            port=settings.db_port,
            database=settings.db_name or None,
        ).render_as_string(hide_password=False)
    if not url:
        return DEFAULT_SQLITE_URL
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql+asyncpg://", 1)
    elif url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


_database_url = _get_database_url()


def _is_sqlite() -> bool:
    return _database_url.startswith("sqlite")


_engine_kwargs: dict = {"echo": False}
if _is_sqlite():
    # aiosqlite connections are cheap; don't carry them across event loops
    _engine_kwargs.update(poolclass=NullPool)
else:
    _engine_kwargs.update(pool_size=5, max_overflow=10, pool_pre_ping=True)

engine = create_async_engine(_database_url, **_engine_kwargs)
async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


async def create_tables(drop_existing: bool = False):
    async with engine.begin() as conn:
        from app.models import book, user  # noqa: F401
        if drop_existing:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


async def get_db():
    async with async_session() as session:
        yield session
