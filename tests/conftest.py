import pytest
import pytest_asyncio

from quizbowl.core.db import Database


@pytest_asyncio.fixture
async def database(tmp_path):
    """每个用例一个临时 SQLite 文件库，已建好全部表。"""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'quizbowl.db'}")
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
def offline_database():
    """未配置 DATABASE_URL 的连接提供者。"""
    return Database(None)
