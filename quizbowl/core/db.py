"""数据库连接：Base 声明与按需创建的 Database 连接提供者。"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from quizbowl.core.config import Settings

logger = logging.getLogger(__name__)

Base = declarative_base()


def _to_async_url(url: str) -> str:
    if url.startswith("postgresql+psycopg2://"):
        return url.replace("postgresql+psycopg2://", "postgresql+asyncpg://", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    return url


def _redact_url(url: str) -> str:
    """隐藏密码，便于日志核对连接的是哪个库。"""
    if "@" in url and "//" in url:
        pre, _, rest = url.partition("//")
        if "@" in rest:
            user_part, _, host_part = rest.rpartition("@")
            if ":" in user_part:
                user = user_part.split(":")[0]
                return f"{pre}//{user}:****@{host_part}"
    return url


class Database:
    """
    进程内共享的数据库连接提供者。

    首次调用 get_engine() 时才创建引擎；未配置 URL 或创建失败时记为不可用，
    同一实例生命周期内不再重试。调用方拿到 None 时应返回空结果而不是报错。
    """

    def __init__(self, url: str | None, *, echo: bool = False, pool_pre_ping: bool = True):
        self.url = url or ""
        self.echo = echo
        self.pool_pre_ping = pool_pre_ping
        self._engine: AsyncEngine | None = None
        self._sessionmaker: async_sessionmaker[AsyncSession] | None = None
        self._initialized = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.database_url, echo=settings.db_echo, pool_pre_ping=settings.db_pool_pre_ping)

    def get_engine(self) -> AsyncEngine | None:
        if self._initialized:
            return self._engine
        self._initialized = True
        if not self.url:
            logger.info("[Database] 未配置 DATABASE_URL，数据访问将返回空结果")
            return None
        try:
            engine = create_async_engine(
                _to_async_url(self.url),
                echo=self.echo,
                pool_pre_ping=self.pool_pre_ping,
            )
        except Exception as e:
            logger.warning("[Database] 连接失败 %s: %s", _redact_url(self.url), e)
            return None
        self._engine = engine
        # expire_on_commit=False：会话关闭后仍可读取已加载字段，避免懒加载 MissingGreenlet
        self._sessionmaker = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )
        return engine

    @property
    def available(self) -> bool:
        return self.get_engine() is not None

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession | None]:
        """产出一个 AsyncSession；数据库不可用时产出 None。"""
        if self.get_engine() is None or self._sessionmaker is None:
            yield None
            return
        async with self._sessionmaker() as db:
            yield db

    async def create_all(self) -> None:
        """按 models 中的声明建表（已存在的表跳过）。"""
        engine = self.get_engine()
        if engine is None:
            logger.warning("[Database] 数据库不可用，跳过建表")
            return
        import quizbowl.models  # noqa: F401  注册全部表

        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """进程退出时释放连接池。"""
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._sessionmaker = None
