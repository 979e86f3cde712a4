"""
Audit database for transaction requests.

The engine is created on first use from ``settings.audit_database_url``;
importing this module does not touch the database. The client opens one
session per audited request through ``audit_session()``.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from buckaroo_gateway.config import settings
from buckaroo_gateway.models.audit import Base

_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def get_engine() -> AsyncEngine:
    global _engine, _session_factory
    if _engine is None:
        _engine = create_async_engine(settings.audit_database_url, echo=False)
        _session_factory = async_sessionmaker(_engine, class_=AsyncSession, expire_on_commit=False)
    return _engine


async def init_db() -> None:
    """Create the audit tables. Safe to call multiple times (CREATE IF NOT EXISTS)."""
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@asynccontextmanager
async def audit_session() -> AsyncIterator[AsyncSession]:
    """Session that commits the audit entries on exit, also when the request failed."""
    get_engine()
    async with _session_factory() as session:
        try:
            yield session
        finally:
            await session.commit()


async def dispose_engine() -> None:
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None
