import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from vahub.database import get_db
from vahub.dependencies import get_current_employer
from vahub.models.user import User
from vahub.repos.job_repo import create as create_job
from vahub.schemas.job import JobCreate, JobCreated
from vahub.services.listing_service import get_job_detail, list_approved_jobs

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/jobs", tags=["jobs"])


@router.get("")
def list_jobs(db: Session = Depends(get_db)):
    """Approved jobs with company and skills, featured first."""
    return list_approved_jobs(db)


@router.get("/{job_id}")
def get_job(job_id: str, db: Session = Depends(get_db)):
    job = get_job_detail(db, job_id)
    if not job:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found")
    return job


@router.post("", response_model=JobCreated)
def post_job(
    body: JobCreate,
    db: Session = Depends(get_db),
    employer: User = Depends(get_current_employer),
):
    """Create a job for review. It stays hidden until an admin approves it."""
    try:
        job = create_job(
            db,
            employer.id,
            body.title,
            body.description,
            salary_min=body.salary_min,
            salary_max=body.salary_max,
            job_type=body.job_type,
            experience_level=body.experience_level,
            skills=body.skills,
        )
        return JobCreated(id=job.id)
    except Exception as e:
        logger.exception("Job create failed for employer=%s: %s", employer.id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create job") from e
