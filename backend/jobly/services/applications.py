"""
Apply-to-job workflow.

Applying is idempotent: the (username, job_id) uniqueness constraint absorbs
duplicates via ON CONFLICT DO NOTHING, so a retried request gets the same
success as the first one and no second row is written.
"""
import logging
from typing import Optional

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.errors import NotFoundError, UnauthorizedError, ValidationError
from jobly.models.application import Application
from jobly.models.job import Job
from jobly.schemas.auth import SessionIdentity

logger = logging.getLogger(__name__)


def _insert_for(db: AsyncSession):
    """Dialect-specific insert() that supports on_conflict_do_nothing."""
    if db.get_bind().dialect.name == "postgresql":
        return postgresql.insert
    return sqlite.insert


def _coerce_job_id(job_id) -> int:
    try:
        return int(job_id)
    except (TypeError, ValueError):
        raise ValidationError([f"jobId: Input should be a valid integer, got {job_id!r}"])


async def apply_to_job(
    db: AsyncSession,
    identity: Optional[SessionIdentity],
    job_id
) -> int:
    """
    Record that identity applied to job_id.

    The username always comes from the authenticated identity, never from
    the request body.

    Returns:
        The job id applied to (also when the application already existed)

    Raises:
        UnauthorizedError: No authenticated identity
        NotFoundError: Job does not exist
    """
    if identity is None:
        raise UnauthorizedError("User must be logged in")

    job_id = _coerce_job_id(job_id)

    job = await db.get(Job, job_id)
    if job is None:
        raise NotFoundError(f"No job: {job_id}")

    insert = _insert_for(db)
    stmt = (
        insert(Application)
        .values(username=identity.username, job_id=job_id)
        .on_conflict_do_nothing(index_elements=["username", "job_id"])
    )

    try:
        result = await db.execute(stmt)
        await db.commit()
    except IntegrityError:
        # Job (or user) removed between the lookup and the insert
        await db.rollback()
        raise NotFoundError(f"No job: {job_id}")

    if result.rowcount:
        logger.info(f"User {identity.username} applied to job {job_id}")
    else:
        logger.info(f"User {identity.username} already applied to job {job_id}")

    return job_id

