# studium/adapters/outbound/persistence/database.py (async version)

import logging
from typing import Any, AsyncGenerator, Dict, Optional
from contextlib import asynccontextmanager

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker

from studium.adapters.configuration.config import Settings
from studium.adapters.outbound.persistence.models.base_model import Base

# Configure logger
logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Owns the async engine and the session factory.

    One instance is built by the application factory and kept in
    ``app.state.database``; the lifespan opens and disposes it.
    Repositories never touch the engine, they receive a session.
    """

    def __init__(self, url: str, echo: bool = False, **engine_kwargs: Any):
        self.url = make_url(url)
        self.is_sqlite = self.url.get_backend_name() == "sqlite"

        self.engine: AsyncEngine = create_async_engine(url, echo=echo, future=True, **engine_kwargs)
        if self.is_sqlite:
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        self.session_factory = async_sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
            expire_on_commit=False,
        )
        logger.info(f"Banco de dados configurado: {self.url.render_as_string(hide_password=True).split('@')[-1]}")

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        url = str(settings.DATABASE_URL)
        kwargs: Dict[str, Any] = {}
        if not url.startswith("sqlite"):
            kwargs.update(
                pool_size=settings.DB_POOL_SIZE,
                max_overflow=settings.DB_MAX_OVERFLOW,
                pool_timeout=settings.DB_POOL_TIMEOUT,
                pool_recycle=settings.DB_POOL_RECYCLE,
                pool_pre_ping=True,
            )
        return cls(url, echo=settings.DB_ECHO, **kwargs)

    async def create_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Tabelas verificadas/criadas")

    async def drop_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def ping(self) -> bool:
        """Returns True when the database answers ``SELECT 1``."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error(f"Falha ao verificar conexão com o banco: {str(e)}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Conexões com o banco encerradas")

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Provides an async session, rolling back on error and
        always closing it at the end.

        Example:
            ```python
            async with database.session() as db:
                repo = DisciplinaRepository(db)
                disciplinas = await repo.find_all()
            ```
        """
        session = self.session_factory()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency injection for use with FastAPI.

    Yields:
        AsyncSession: session bound to the application's database
    """
    database: Optional[Database] = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database não inicializado em app.state")
    async with database.session() as session:
        yield session
