"""
JobApplication Entity.

A single candidate's application to a job posting. The persistent store owns
the row; this dataclass is the in-memory view returned by repository reads.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from hr_tracker.domain.applications.status import ApplicationStatus


@dataclass
class JobApplication:
    """
    Job application row with its current workflow status.

    Only rows with is_active=True are eligible for transition or retrieval.
    Rows are soft-deactivated elsewhere and never physically deleted here.

    Attributes:
        id: Application identifier
        job_id: Job posting the application belongs to
        applicant_id: Applicant (user) identifier
        status: Current workflow status
        score: Fit score computed at application time (may be missing)
        is_active: Soft-deletion marker
        created_at: When the application was submitted
        updated_at: Last status change
    """

    id: UUID
    job_id: UUID
    applicant_id: UUID
    status: ApplicationStatus
    score: Optional[float] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Any) -> "JobApplication":
        """Build from a SQLAlchemy row mapping of APP_JOB_APPLICATIONS."""
        return cls(
            id=row["id"],
            job_id=row["job_id"],
            applicant_id=row["applicant_id"],
            status=ApplicationStatus(row["status"]),
            score=row["score"],
            is_active=bool(row["is_active"]),
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "job_id": str(self.job_id),
            "applicant_id": str(self.applicant_id),
            "status": self.status.value,
            "score": self.score,
            "is_active": self.is_active,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
