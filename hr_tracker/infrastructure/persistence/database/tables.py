"""
Database Schema

SQLAlchemy Core table definitions for the tables this service owns.
Column names match the existing APP_JOB_APPLICATIONS table; the status
column uses the "application_status" enumerated type.
"""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Enum,
    Float,
    Index,
    MetaData,
    Table,
    Uuid,
    func,
    text,
)

from hr_tracker.domain.applications.status import ApplicationStatus

metadata = MetaData()

application_status_type = Enum(
    ApplicationStatus,
    name="application_status",
    values_callable=lambda enum: [member.value for member in enum],
    validate_strings=True,
)

job_applications = Table(
    "APP_JOB_APPLICATIONS",
    metadata,
    Column("id", Uuid(as_uuid=True), primary_key=True),
    Column("job_id", Uuid(as_uuid=True), nullable=False),
    Column("applicant_id", Uuid(as_uuid=True), nullable=False),
    Column(
        "status",
        application_status_type,
        nullable=False,
        server_default=ApplicationStatus.PENDING.value,
    ),
    Column("score", Float, nullable=True),
    Column("is_active", Boolean, nullable=False, server_default=text("true")),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)

# Mass transitions filter on (job_id, status, is_active)
Index(
    "ix_app_job_applications_job_status",
    job_applications.c.job_id,
    job_applications.c.status,
    job_applications.c.is_active,
)
