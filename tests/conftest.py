import os

import pytest

# Point the app at a throwaway database before app.config is imported.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test_catalog.sqlite3"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["BCRYPT_ROUNDS"] = "4"


@pytest.fixture(autouse=True, scope="session")
def setup_test_db():
    import asyncio

    from app.database import create_tables, engine

    async def _setup():
        await create_tables(drop_existing=True)
        await engine.dispose()

    asyncio.run(_setup())
    yield
    if os.path.exists("test_catalog.sqlite3"):
        os.remove("test_catalog.sqlite3")
