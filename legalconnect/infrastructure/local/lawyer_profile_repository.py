"""
SQLite implementation of lawyer profile repository.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import select

from legalconnect.core.exceptions import NotFoundError
from legalconnect.infrastructure.local.database import LawyerProfileORM, get_session_factory
from legalconnect.interfaces.lawyer_profile_repository import ILawyerProfileRepository
from legalconnect.models.enums import LawyerStatus
from legalconnect.models.lawyer import LawyerProfile, LawyerProfileUpdate
from legalconnect.utils.datetime_utils import ensure_utc, now_utc


class SqliteLawyerProfileRepository(ILawyerProfileRepository):
    """SQLite implementation of lawyer profile repository."""

    def __init__(self, session_factory=None):
        self._session_factory = session_factory or get_session_factory()

    def _orm_to_model(self, orm: LawyerProfileORM) -> LawyerProfile:
        return LawyerProfile(
            lawyer_id=orm.lawyer_id,
            name=orm.name,
            email=orm.email,
            phone=orm.phone,
            state=orm.state,
            city=orm.city,
            age=orm.age,
            gender=orm.gender,
            bar_number=orm.bar_number,
            degree=orm.degree,
            description=orm.description,
            specializations=list(orm.specializations or []),
            experience_years=orm.experience_years,
            fees=orm.fees,
            status=LawyerStatus(orm.status),
            created_at=ensure_utc(orm.created_at),
            updated_at=ensure_utc(orm.updated_at),
        )

    async def get(self, lawyer_id: str) -> Optional[LawyerProfile]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(LawyerProfileORM).where(LawyerProfileORM.lawyer_id == lawyer_id)
            )
            orm = result.scalar_one_or_none()
            return self._orm_to_model(orm) if orm else None

    async def upsert(self, lawyer_id: str, data: LawyerProfileUpdate) -> LawyerProfile:
        async with self._session_factory() as session:
            result = await session.execute(
                select(LawyerProfileORM).where(LawyerProfileORM.lawyer_id == lawyer_id)
            )
            orm = result.scalar_one_or_none()
            now = now_utc()
            if not orm:
                orm = LawyerProfileORM(lawyer_id=lawyer_id, created_at=now)
                session.add(orm)

            for field, value in data.model_dump().items():
                setattr(orm, field, value)
            # Any self-edit requires re-verification.
            orm.status = LawyerStatus.PENDING.value
            orm.updated_at = now
            await session.commit()
            await session.refresh(orm)
            return self._orm_to_model(orm)

    async def list(self, status: Optional[LawyerStatus] = None) -> list[LawyerProfile]:
        async with self._session_factory() as session:
            query = select(LawyerProfileORM)
            if status:
                query = query.where(LawyerProfileORM.status == status.value)
            result = await session.execute(query.order_by(LawyerProfileORM.name.asc()))
            return [self._orm_to_model(orm) for orm in result.scalars().all()]

    async def set_status(self, lawyer_id: str, status: LawyerStatus) -> LawyerProfile:
        async with self._session_factory() as session:
            result = await session.execute(
                select(LawyerProfileORM).where(LawyerProfileORM.lawyer_id == lawyer_id)
            )
            orm = result.scalar_one_or_none()
            if not orm:
                raise NotFoundError(f"Lawyer profile {lawyer_id} not found")

            orm.status = status.value
            orm.updated_at = now_utc()
            await session.commit()
            await session.refresh(orm)
            return self._orm_to_model(orm)
