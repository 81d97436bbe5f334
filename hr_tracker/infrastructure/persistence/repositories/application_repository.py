"""
SQL Application Repository

Transactional updater for job application status, implementing
ApplicationRepositoryProtocol on top of the injected Database handle.

Responsibility:
    - Conditional UPDATE ... RETURNING for single and mass transitions
    - One timestamp for every row touched by a call
    - Explicit rollback when zero rows satisfy the precondition
    - Listing of active applications for a job

Concurrency:
    The precondition lives in the UPDATE's WHERE clause, so the check and the
    write are one statement. Two concurrent mass transitions with the same
    from_status are serialized by the database: the second one matches only
    rows still in from_status after the first commits (often zero).
"""

import logging
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.sql import Update

from hr_tracker.domain.applications.entities import JobApplication
from hr_tracker.domain.applications.repositories import (
    TransitionResult,
    UpdatedApplication,
)
from hr_tracker.domain.applications.status import ApplicationStatus
from hr_tracker.domain.shared.exceptions import PreconditionFailedError
from hr_tracker.infrastructure.persistence.database.connection import Database
from hr_tracker.infrastructure.persistence.database.tables import job_applications

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SqlApplicationRepository:
    """
    SQLAlchemy implementation of the application store.

    Usage:
        >>> repository = SqlApplicationRepository(database)
        >>> result = await repository.apply_mass_transition(
        ...     job_id, ApplicationStatus.PENDING, ApplicationStatus.UNDER_REVIEW
        ... )
        >>> result.matched_count
        3
    """

    def __init__(self, database: Database) -> None:
        self.database = database

    async def _apply(
        self, statement: Update, not_found_message: str, precondition: dict[str, str]
    ) -> TransitionResult:
        statement = statement.returning(job_applications.c.id, job_applications.c.status)

        async with self.database.transaction() as conn:
            result = await conn.execute(statement)
            rows = result.fetchall()

            if not rows:
                # Nothing matched: undo explicitly before reporting
                await conn.rollback()
                logger.info(f"Transition precondition not met: {precondition}")
                raise PreconditionFailedError(not_found_message, precondition=precondition)

        updated = [
            UpdatedApplication(id=row.id, status=ApplicationStatus(row.status)) for row in rows
        ]
        return TransitionResult(matched_count=len(updated), updated_rows=updated)

    async def apply_single_transition(
        self, application_id: UUID, status: ApplicationStatus
    ) -> TransitionResult:
        """
        Set the status of one active application.

        Raises:
            PreconditionFailedError: Application missing or inactive
            TransientStoreError: Database failure
        """
        statement = (
            update(job_applications)
            .where(job_applications.c.id == application_id)
            .where(job_applications.c.is_active.is_(True))
            .values(status=status, updated_at=_utcnow())
        )
        return await self._apply(
            statement,
            "Application not found or already inactive",
            {"application_id": str(application_id)},
        )

    async def apply_mass_transition(
        self, job_id: UUID, from_status: ApplicationStatus, to_status: ApplicationStatus
    ) -> TransitionResult:
        """
        Move every active application of job_id in from_status to to_status.

        Raises:
            PreconditionFailedError: No active application of the job is in from_status
            TransientStoreError: Database failure
        """
        statement = (
            update(job_applications)
            .where(job_applications.c.job_id == job_id)
            .where(job_applications.c.status == from_status)
            .where(job_applications.c.is_active.is_(True))
            .values(status=to_status, updated_at=_utcnow())
        )
        return await self._apply(
            statement,
            "No matching applications found",
            {"job_id": str(job_id), "from_status": from_status.value},
        )

    async def list_for_job(
        self, job_id: UUID, status: Optional[ApplicationStatus] = None
    ) -> list[JobApplication]:
        """Active applications of a job, newest first, optionally by status."""
        statement = (
            select(job_applications)
            .where(job_applications.c.job_id == job_id)
            .where(job_applications.c.is_active.is_(True))
            .order_by(job_applications.c.created_at.desc())
        )
        if status is not None:
            statement = statement.where(job_applications.c.status == status)

        async with self.database.connection() as conn:
            result = await conn.execute(statement)
            return [JobApplication.from_row(row) for row in result.mappings()]
