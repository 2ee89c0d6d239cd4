"""
Jobs API endpoints.
Handles job search, CRUD and applications.
"""
import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.api.auth import ensure_logged_in, require_admin
from jobly.database import get_db
from jobly.schemas.auth import SessionIdentity
from jobly.schemas.job import (
    AppliedResponse,
    DeletedResponse,
    JobDetailEnvelope,
    JobEnvelope,
    JobListEnvelope,
)
from jobly.services import applications as application_service
from jobly.services import jobs as job_service

# Configure logger
logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/", response_model=JobEnvelope, status_code=201)
async def create_job(
    payload: Dict[str, Any] = Body(...),
    admin: SessionIdentity = Depends(require_admin),
    db: AsyncSession = Depends(get_db)
):
    """
    Create a job posting.

    Body: { title, salary?, equity?, companyHandle }

    Authorization required: admin
    """
    job = await job_service.create_job(db, payload)
    return JobEnvelope(job=job)


@router.get("/", response_model=JobListEnvelope)
async def list_jobs(
    request: Request,
    db: AsyncSession = Depends(get_db)
):
    """
    Search jobs.

    Optional query filters:
    - minSalary: lower bound on salary
    - hasEquity: "true" returns only jobs with equity > 0; other values are ignored
    - title: case-insensitive partial match

    Unknown parameters are rejected.

    Authorization required: none
    """
    jobs = await job_service.search_jobs(db, request.query_params)
    return JobListEnvelope(jobs=jobs)


@router.get("/{job_id}", response_model=JobDetailEnvelope)
async def get_job(
    job_id: int,
    db: AsyncSession = Depends(get_db)
):
    """
    Get a job with its company { handle, name, description, numEmployees, logoUrl }.

    Authorization required: none
    """
    job = await job_service.get_job(db, job_id)
    return JobDetailEnvelope(job=job)


@router.patch("/{job_id}", response_model=JobEnvelope)
async def update_job(
    job_id: int,
    payload: Dict[str, Any] = Body(...),
    admin: SessionIdentity = Depends(require_admin),
    db: AsyncSession = Depends(get_db)
):
    """
    Partially update a job. Body may include { title, salary, equity }.

    Authorization required: admin
    """
    job = await job_service.update_job(db, job_id, payload)
    return JobEnvelope(job=job)


@router.delete("/{job_id}", response_model=DeletedResponse)
async def delete_job(
    job_id: int,
    admin: SessionIdentity = Depends(require_admin),
    db: AsyncSession = Depends(get_db)
):
    """
    Delete a job (and its applications).

    Authorization required: admin
    """
    deleted = await job_service.remove_job(db, job_id)
    return DeletedResponse(deleted=deleted)


@router.post("/{job_id}/apply", response_model=AppliedResponse)
async def apply_to_job(
    job_id: int,
    identity: SessionIdentity = Depends(ensure_logged_in),
    db: AsyncSession = Depends(get_db)
):
    """
    Apply the logged-in user to a job. Applying twice is a no-op success.

    Authorization required: logged-in user
    """
    applied = await application_service.apply_to_job(db, identity, job_id)
    return AppliedResponse(applied=applied)
