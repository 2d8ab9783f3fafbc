"""
SQLite database configuration and ORM models.

This module defines the SQLAlchemy ORM models and database initialization.
"""

from uuid import uuid4

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from legalconnect.core.config import get_settings
from legalconnect.utils.datetime_utils import now_utc


class Base(DeclarativeBase):
    """SQLAlchemy declarative base."""

    pass


# ===========================================
# ORM Models
# ===========================================


class ConnectionRequestORM(Base):
    """Connection request ORM model."""

    __tablename__ = "connection_requests"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    seeker_id = Column(String(255), nullable=False, index=True)
    lawyer_id = Column(String(255), nullable=False, index=True)
    subject = Column(String(500), nullable=False)
    status = Column(String(20), nullable=False, default="pending", index=True)
    # "<len(seeker)>:<seeker>|<lawyer>" while pending/accepted, NULL once rejected
    active_pair_key = Column(String(520), nullable=True, unique=True)
    chat_room_id = Column(String(36), nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc, index=True)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)


class ChatRoomORM(Base):
    """Chat room ORM model."""

    __tablename__ = "chat_rooms"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    connection_request_id = Column(
        String(36),
        ForeignKey("connection_requests.id"),
        nullable=False,
        unique=True,
    )
    seeker_id = Column(String(255), nullable=False, index=True)
    lawyer_id = Column(String(255), nullable=False, index=True)
    subject = Column(String(500), nullable=False, default="Chat")
    created_at = Column(DateTime(timezone=True), default=now_utc)
    last_message_at = Column(DateTime(timezone=True), default=now_utc, index=True)


class ChatMessageORM(Base):
    """
    Chat message ORM model.

    One row per message; seq gives the insertion order within every room.
    """

    __tablename__ = "chat_messages"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), nullable=False, unique=True, default=lambda: str(uuid4()))
    room_id = Column(String(36), ForeignKey("chat_rooms.id"), nullable=False, index=True)
    sender_id = Column(String(255), nullable=False)
    text = Column(Text, nullable=False, default="")
    attachment_kind = Column(String(20), nullable=True)
    attachment_content_type = Column(String(255), nullable=True)
    attachment_name = Column(String(255), nullable=True)
    attachment_size = Column(Integer, nullable=True)
    attachment_url = Column(String(2000), nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)


class LawyerProfileORM(Base):
    """Lawyer profile ORM model."""

    __tablename__ = "lawyer_profiles"

    lawyer_id = Column(String(255), primary_key=True)
    name = Column(String(200), nullable=False)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    state = Column(String(100), nullable=True)
    city = Column(String(100), nullable=True)
    age = Column(Integer, nullable=True)
    gender = Column(String(30), nullable=True)
    bar_number = Column(String(100), nullable=True)
    degree = Column(String(200), nullable=True)
    description = Column(Text, nullable=True)
    specializations = Column(JSON, nullable=True, default=list)
    experience_years = Column(Integer, nullable=True)
    fees = Column(Float, nullable=True)
    status = Column(String(20), nullable=False, default="pending", index=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)


# ===========================================
# Database Session Management
# ===========================================

_engine = None


def get_engine():
    """Get the shared async engine instance."""
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = create_async_engine(settings.DATABASE_URL, echo=False)
    return _engine


def get_session_factory():
    """Get async session factory."""
    engine = get_engine()
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def init_db():
    """Initialize database tables."""
    engine = get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine():
    """Close pooled connections on shutdown."""
    global _engine
    if _engine is not None:
        await _engine.dispose()
        _engine = None
