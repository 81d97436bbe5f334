"""
JobApplication Repository Interface

Contract for the transactional store that owns application rows.

Architecture Notes:
    - Protocol-based interface (structural typing)
    - Async methods (database I/O is the suspension point)
    - Implementation in Infrastructure layer (SQLAlchemy)
    - The repository is the only writer of the status column
"""

from dataclasses import dataclass, field
from typing import Optional, Protocol
from uuid import UUID

from .entities import JobApplication
from .status import ApplicationStatus


@dataclass(frozen=True)
class UpdatedApplication:
    """Row returned by the conditional UPDATE (id and new status)."""

    id: UUID
    status: ApplicationStatus

    def to_dict(self) -> dict[str, str]:
        return {"id": str(self.id), "status": self.status.value}


@dataclass(frozen=True)
class TransitionResult:
    """
    Outcome of a committed transition.

    Attributes:
        matched_count: Rows that satisfied the precondition (always > 0)
        updated_rows: Updated rows in the order the store returned them
    """

    matched_count: int
    updated_rows: list[UpdatedApplication] = field(default_factory=list)


class ApplicationRepositoryProtocol(Protocol):
    """
    Transactional store for job applications.

    Both transition methods run one conditional UPDATE inside one
    transaction. Zero matched rows rolls back and raises
    PreconditionFailedError; store failures roll back and raise
    TransientStoreError.
    """

    async def apply_single_transition(
        self, application_id: UUID, status: ApplicationStatus
    ) -> TransitionResult:
        """Set the status of one active application."""
        ...

    async def apply_mass_transition(
        self, job_id: UUID, from_status: ApplicationStatus, to_status: ApplicationStatus
    ) -> TransitionResult:
        """Move every active application of a job from one status to another."""
        ...

    async def list_for_job(
        self, job_id: UUID, status: Optional[ApplicationStatus] = None
    ) -> list[JobApplication]:
        """Active applications of a job, newest first."""
        ...
