
import contextlib
from typing import Any, AsyncIterator

from sqlalchemy.ext.asyncio import (AsyncEngine, AsyncSession,
                                    async_sessionmaker, create_async_engine)

from config import settings
from database.models.base import Base


def get_db_url(user: str, password: str, ip: str, port: int, name: str) -> str:
    return f"postgresql+asyncpg://{user}:{password}@{ip}:{port}/{name}"


class DatabaseSessionManager:
    """Owns the async engine and hands out sessions.

    The engine is created lazily so that importing the application never
    needs a reachable database; `init` swaps the target (used by tests).
    """

    def __init__(self, url: str, engine_kwargs: dict[str, Any] | None = None):
        self._url = url
        self._engine_kwargs = engine_kwargs or {}
        self._engine: AsyncEngine | None = None
        self._sessionmaker: async_sessionmaker[AsyncSession] | None = None

    def init(self, url: str, engine_kwargs: dict[str, Any] | None = None) -> None:
        self._url = url
        self._engine_kwargs = engine_kwargs or {}
        self._engine = None
        self._sessionmaker = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            self._engine = create_async_engine(self._url, **self._engine_kwargs)
        return self._engine

    @property
    def sessionmaker(self) -> async_sessionmaker[AsyncSession]:
        if self._sessionmaker is None:
            self._sessionmaker = async_sessionmaker(self.engine,
                                                    expire_on_commit=False)
        return self._sessionmaker

    async def close(self) -> None:
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._sessionmaker = None

    async def create_all(self) -> None:
        async with self.engine.begin() as connection:
            await connection.run_sync(Base.metadata.create_all)

    @contextlib.asynccontextmanager
    async def context_session(self) -> AsyncIterator[AsyncSession]:
        session = self.sessionmaker()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self.context_session() as session:
            yield session


session_manager = DatabaseSessionManager(get_db_url(settings.db_user,
                                                    settings.db_password,
                                                    settings.db_ip,
                                                    settings.db_port,
                                                    settings.db_name),
                                         {"echo": settings.db_echo})
