"""
Shared fixtures: a throwaway SQLite database per test and repositories bound to it.
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from legalconnect.infrastructure.local.chat_room_repository import SqliteChatRoomRepository
from legalconnect.infrastructure.local.connection_request_repository import (
    SqliteConnectionRequestRepository,
)
from legalconnect.infrastructure.local.database import Base
from legalconnect.infrastructure.local.lawyer_profile_repository import (
    SqliteLawyerProfileRepository,
)
from legalconnect.interfaces.auth_provider import User
from legalconnect.models.enums import UserRole


@pytest.fixture
async def db_setup(tmp_path):
    """Create a file-backed database with all tables."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session_factory = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    yield async_session_factory

    await engine.dispose()


@pytest.fixture
def session_context_factory(db_setup):
    """Create a factory for async session context managers."""
    def factory():
        class SessionCtx:
            def __init__(self):
                self._session = None

            async def __aenter__(self):
                self._session = db_setup()
                return self._session

            async def __aexit__(self, exc_type, exc_val, exc_tb):
                if self._session:
                    await self._session.close()
        return SessionCtx()
    return factory


@pytest.fixture
def request_repo(session_context_factory):
    return SqliteConnectionRequestRepository(session_factory=session_context_factory)


@pytest.fixture
def room_repo(session_context_factory):
    return SqliteChatRoomRepository(session_factory=session_context_factory)


@pytest.fixture
def lawyer_repo(session_context_factory):
    return SqliteLawyerProfileRepository(session_factory=session_context_factory)


@pytest.fixture
def seeker():
    return User(id="U1", role=UserRole.USER, email="u1@example.com")


@pytest.fixture
def lawyer():
    return User(id="L1", role=UserRole.LAWYER, email="l1@example.com")


@pytest.fixture
def outsider():
    return User(id="U9", role=UserRole.USER)
