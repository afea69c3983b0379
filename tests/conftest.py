import os
import tempfile

import pytest

_TEST_DB_PATH = os.path.join(tempfile.gettempdir(), f"fleet-backoffice-test-{os.getpid()}.sqlite3")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_PATH}"


@pytest.fixture(autouse=True, scope="session")
def setup_test_db():
    import asyncio

    if os.path.exists(_TEST_DB_PATH):
        os.remove(_TEST_DB_PATH)

    # Disable API key auth for tests
    from app.config import settings
    settings.api_key = ""

    from app.database import create_tables, async_session
    from app.seed import seed_data

    async def _setup():
        await create_tables()
        async with async_session() as session:
            await seed_data(session)

    asyncio.run(_setup())
    yield

    if os.path.exists(_TEST_DB_PATH):
        os.remove(_TEST_DB_PATH)
