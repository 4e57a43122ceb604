import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from vahub.core.errors import ConstraintViolation
from vahub.database import get_db
from vahub.dependencies import get_current_active_user, get_current_job_seeker
from vahub.models.enums import JobStatus, ReportTargetType
from vahub.models.user import User
from vahub.repos import application_repo, report_repo
from vahub.repos.job_repo import get_by_id as get_job_by_id
from vahub.repos.user_repo import get_by_id as get_user_by_id
from vahub.schemas.application import ApplicationCreate, ReportCreate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["applications"])


@router.post("/applications")
def submit_application(
    body: ApplicationCreate,
    db: Session = Depends(get_db),
    seeker: User = Depends(get_current_job_seeker),
):
    """Apply to an approved job. One application per job and job seeker."""
    job = get_job_by_id(db, body.job_id)
    if not job or job.status != JobStatus.APPROVED.value:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Job is not open for applications")
    try:
        application = application_repo.create(db, job.id, seeker.id, body.cover_letter)
    except ConstraintViolation as e:
        logger.info("Application rejected job=%s va=%s: %s", job.id, seeker.id, e.message)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    logger.info("Application %s submitted job=%s va=%s", application.id, job.id, seeker.id)
    return {"id": application.id}


@router.post("/reports")
def file_report(
    body: ReportCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_active_user),
):
    """Report a user or job for admin review."""
    target_type = ReportTargetType(body.target_type)
    if target_type == ReportTargetType.JOB:
        target = get_job_by_id(db, body.target_id)
    else:
        target = get_user_by_id(db, body.target_id)
    if not target:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{target_type.value.title()} not found")
    try:
        report = report_repo.create(db, user.id, target_type, body.target_id, body.reason)
    except Exception as e:
        logger.exception("Report create failed for user=%s: %s", user.id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to file report") from e
    return {"id": report.id}
