"""
Seed Data Script
Replaces one user's jobs with the mock dataset for local development

    python scripts/seed_data.py --email test@example.com
"""
import argparse
import asyncio
import json
from datetime import datetime
from pathlib import Path
from uuid import uuid4

from loguru import logger
from sqlalchemy import delete, select

from core.database import get_db_session, init_db, close_db
from domain.enums import JobStatus, JobType, DEFAULT_JOB_LOCATION
from infrastructure.persistence.models import JobModel, UserModel

MOCK_DATA = Path(__file__).with_name("mock_jobs.json")


def load_jobs(path: Path = MOCK_DATA) -> list:
    with path.open(encoding="utf-8") as f:
        return json.load(f)


def to_model(record: dict, owner_id) -> JobModel:
    created_at = datetime.fromisoformat(record["created_at"].replace("Z", "+00:00"))
    return JobModel(
        id=uuid4(),
        created_by=owner_id,
        company=record["company"],
        position=record["position"],
        status=JobStatus(record.get("status", JobStatus.PENDING.value)).value,
        job_type=JobType(record.get("job_type", JobType.FULL_TIME.value)).value,
        job_location=record.get("job_location", DEFAULT_JOB_LOCATION),
        created_at=created_at,
        updated_at=created_at
    )


async def seed_database(email: str):
    """Delete the user's jobs and insert the mock dataset"""
    records = load_jobs()

    try:
        await init_db()
        async with get_db_session() as session:
            result = await session.execute(select(UserModel).where(UserModel.email == email))
            user = result.scalar_one_or_none()
            if not user:
                logger.error(f"No user registered with e-mail {email}")
                return False

            await session.execute(delete(JobModel).where(JobModel.created_by == user.id))
            session.add_all([to_model(r, user.id) for r in records])
    finally:
        await close_db()

    logger.info(f"✅ Seeded {len(records)} jobs for {email}")
    return True


def main():
    parser = argparse.ArgumentParser(description="Seed jobs for a registered user")
    parser.add_argument("--email", required=True, help="Owner of the seeded jobs")
    args = parser.parse_args()
    if not asyncio.run(seed_database(args.email)):
        raise SystemExit(1)


if __name__ == "__main__":
    main()
