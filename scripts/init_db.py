#!/usr/bin/env python3
"""
CLI tool for preparing a development database.

Creates the APP_JOB_APPLICATIONS table (and the application_status enum on
PostgreSQL) if missing, optionally seeds one demo job with pending
applications and optionally stores an HR session in Redis so the API can be
exercised with curl.

Usage:
    python scripts/init_db.py
    python scripts/init_db.py --database-url sqlite+aiosqlite:///./hr_tracker.db --seed-demo 5
    python scripts/init_db.py --seed-demo 3 --hr-session

Output:
    - Seeded job id (with --seed-demo)
    - Session token to send as "Authorization: Bearer <token>" (with --hr-session)
"""

import argparse
import asyncio
import json
import logging
import secrets
import sys
import uuid
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from hr_tracker.domain.applications.status import ApplicationStatus
from hr_tracker.infrastructure.persistence.database.connection import Database, database_from_url
from hr_tracker.infrastructure.persistence.database.tables import job_applications
from hr_tracker.infrastructure.persistence.redis.connection import close_client, create_redis_client
from hr_tracker.shared.config import Settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

SESSION_TTL_SECONDS = 8 * 3600


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Create the job applications schema and optional demo data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create schema using DATABASE_URL from the environment / .env
  python scripts/init_db.py

  # Local SQLite database with 5 demo applications
  python scripts/init_db.py --database-url sqlite+aiosqlite:///./hr_tracker.db --seed-demo 5

  # Also store an HR session in Redis and print its token
  python scripts/init_db.py --seed-demo 3 --hr-session
        """,
    )
    parser.add_argument(
        "--database-url",
        type=str,
        default=None,
        help="SQLAlchemy async URL (default: DATABASE_URL)",
    )
    parser.add_argument(
        "--seed-demo",
        type=int,
        default=0,
        metavar="N",
        help="Insert one demo job with N pending applications",
    )
    parser.add_argument(
        "--hr-session",
        action="store_true",
        help="Store an HR session in Redis and print the token",
    )
    return parser.parse_args()


async def seed_demo(database: Database, count: int) -> uuid.UUID:
    job_id = uuid.uuid4()
    rows = [
        {
            "id": uuid.uuid4(),
            "job_id": job_id,
            "applicant_id": uuid.uuid4(),
            "status": ApplicationStatus.PENDING,
            "score": None,
        }
        for _ in range(count)
    ]
    async with database.transaction() as conn:
        await conn.execute(job_applications.insert(), rows)
    logger.info(f"Seeded {count} pending applications for job {job_id}")
    return job_id


def store_hr_session(settings: Settings) -> str:
    token = secrets.token_urlsafe(32)
    client = create_redis_client(settings)
    try:
        client.set(
            f"{settings.session_key_prefix}{token}",
            json.dumps({"id": "demo-hr", "role": settings.privileged_role}),
            ex=SESSION_TTL_SECONDS,
        )
    finally:
        close_client(client)
    return token


async def main():
    args = parse_args()
    settings = Settings.from_env()

    if args.seed_demo < 0:
        logger.error("--seed-demo must be >= 0")
        sys.exit(1)

    database = (
        database_from_url(args.database_url, settings)
        if args.database_url
        else Database.from_settings(settings)
    )
    try:
        await database.create_schema()
        if args.seed_demo:
            job_id = await seed_demo(database, args.seed_demo)
            print(f"Demo job id: {job_id}")
    finally:
        await database.dispose()

    if args.hr_session:
        token = store_hr_session(settings)
        print(f"HR session token: {token}")


if __name__ == "__main__":
    asyncio.run(main())
