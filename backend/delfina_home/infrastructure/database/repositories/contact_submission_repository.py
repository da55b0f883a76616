"""Concrete repository implementation for ContactSubmission backed by SQLAlchemy."""

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from delfina_home.application.interfaces import ContactSubmissionRepository
from delfina_home.domain.entities import ContactSubmission
from delfina_home.infrastructure.database.models import ContactSubmissionModel
from delfina_home.infrastructure.database.repositories._timestamps import to_millis


class SQLAlchemyContactSubmissionRepository(ContactSubmissionRepository):
    """Implements the ContactSubmissionRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ContactSubmissionModel) -> ContactSubmission:
        """Map ORM model → domain entity."""
        return ContactSubmission(
            id=model.id,
            name=model.name,
            email=model.email,
            message=model.message,
            date=to_millis(model.date),
            read=model.read,
        )

    async def get_all(self) -> list[ContactSubmission]:
        stmt = select(ContactSubmissionModel).order_by(ContactSubmissionModel.date.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, name: str, email: str, message: str) -> ContactSubmission:
        model = ContactSubmissionModel(
            id=str(uuid4()),
            name=name,
            email=email,
            message=message,
            date=datetime.now(timezone.utc),
            read=False,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def mark_read(self, submission_id: str) -> None:
        await self._session.execute(
            update(ContactSubmissionModel)
            .where(ContactSubmissionModel.id == submission_id)
            .values(read=True)
        )
        await self._session.flush()
