"""
Job query resolution and mutations.

Every entry point validates its input against a schema before touching the
database, and raises from jobly.errors on failure.
"""
import logging
from typing import Any, List, Mapping

from sqlalchemy import select, delete, and_
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.errors import NotFoundError, ValidationError
from jobly.models.application import Application
from jobly.models.company import Company
from jobly.models.job import Job, MUTABLE_FIELDS
from jobly.schemas.job import (
    CompanyResponse,
    JobDetail,
    JobListItem,
    JobNew,
    JobResponse,
    JobSearch,
    JobUpdate,
)
from jobly.services.filters import normalize_job_filters
from jobly.validation import validate_or_raise

logger = logging.getLogger(__name__)


def build_job_response(job: Job) -> JobResponse:
    """Build JobResponse from Job model."""
    return JobResponse(
        id=job.id,
        title=job.title,
        salary=job.salary,
        equity=job.equity,
        company_handle=job.company_handle,
    )


def build_filter_conditions(filters: JobSearch) -> list:
    """
    Translate a validated filter spec into SQL conditions.

    An empty list means no constraint, i.e. every job matches.
    """
    conditions = []
    if filters.min_salary is not None:
        conditions.append(Job.salary >= filters.min_salary)
    if filters.has_equity:
        # NULL equity never compares > 0, so those rows drop out too
        conditions.append(Job.equity > 0)
    if filters.title is not None:
        conditions.append(Job.title.icontains(filters.title, autoescape=True))
    return conditions


# ============================================================
# QUERIES
# ============================================================

async def find_jobs(db: AsyncSession, filters: JobSearch) -> List[JobListItem]:
    """Run a validated search, joining each job to its company name."""
    query = select(Job, Company.name).join(Company, Job.company_handle == Company.handle)

    conditions = build_filter_conditions(filters)
    if conditions:
        query = query.where(and_(*conditions))

    query = query.order_by(Job.title, Job.id)

    result = await db.execute(query)
    jobs = [
        JobListItem(
            id=job.id,
            title=job.title,
            salary=job.salary,
            equity=job.equity,
            company_handle=job.company_handle,
            company_name=company_name,
        )
        for job, company_name in result.all()
    ]

    logger.info(
        f"Listed {len(jobs)} jobs (filters: min_salary={filters.min_salary}, "
        f"has_equity={filters.has_equity}, title={filters.title!r})"
    )
    return jobs


async def search_jobs(db: AsyncSession, query: Mapping[str, Any]) -> List[JobListItem]:
    """Normalize raw query parameters, validate them, then search."""
    filters = validate_or_raise(normalize_job_filters(query), JobSearch)
    return await find_jobs(db, filters)


async def get_job(db: AsyncSession, job_id: int) -> JobDetail:
    """Get a job by ID with its company detail."""
    result = await db.execute(
        select(Job, Company)
        .join(Company, Job.company_handle == Company.handle)
        .where(Job.id == job_id)
    )
    row = result.one_or_none()

    if row is None:
        raise NotFoundError(f"No job: {job_id}")

    job, company = row
    return JobDetail(
        id=job.id,
        title=job.title,
        salary=job.salary,
        equity=job.equity,
        company_handle=job.company_handle,
        company=CompanyResponse(
            handle=company.handle,
            name=company.name,
            description=company.description,
            num_employees=company.num_employees,
            logo_url=company.logo_url,
        ),
    )


# ============================================================
# MUTATIONS
# ============================================================

async def create_job(db: AsyncSession, payload: Any) -> JobResponse:
    """
    Validate and create a job.

    Raises ValidationError if the payload fails the schema or names a
    company that does not exist.
    """
    data = validate_or_raise(payload, JobNew)

    company = await db.get(Company, data.company_handle)
    if company is None:
        raise ValidationError([f"companyHandle: No company with handle '{data.company_handle}'"])

    job = Job(
        title=data.title,
        salary=data.salary,
        equity=data.equity,
        company_handle=data.company_handle,
    )

    db.add(job)
    await db.commit()
    await db.refresh(job)

    logger.info(f"Created job {job.id}: {job.title} at {job.company_handle}")

    return build_job_response(job)


async def update_job(db: AsyncSession, job_id: int, payload: Any) -> JobResponse:
    """
    Apply a partial update to a job.

    Only the fields present in the payload change. Validation runs before the
    lookup, so a bad payload for a missing job reports the payload errors.
    """
    data = validate_or_raise(payload, JobUpdate)

    job = await db.get(Job, job_id)
    if job is None:
        raise NotFoundError(f"No job: {job_id}")

    changes = data.model_dump(exclude_unset=True)
    for field, value in changes.items():
        if field in MUTABLE_FIELDS:
            setattr(job, field, value)

    await db.commit()
    await db.refresh(job)

    logger.info(f"Updated job {job_id}: {sorted(changes)}")

    return build_job_response(job)


async def remove_job(db: AsyncSession, job_id: int) -> int:
    """Delete a job and its applications. Returns the deleted id."""
    job = await db.get(Job, job_id)
    if job is None:
        raise NotFoundError(f"No job: {job_id}")

    await db.execute(delete(Application).where(Application.job_id == job_id))
    await db.delete(job)
    await db.commit()

    logger.info(f"Deleted job {job_id}")

    return job_id
