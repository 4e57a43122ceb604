import logging

from sqlalchemy.orm import Session, joinedload, selectinload

from vahub.core.security import generate_id
from vahub.models.enums import JobStatus
from vahub.models.job import Job, JobSkill
from vahub.models.user import User

logger = logging.getLogger(__name__)


def _with_listing_relations(q):
    return q.options(
        selectinload(Job.skills),
        joinedload(Job.employer).joinedload(User.employer_profile),
    )


def create(
    db: Session,
    employer_id: str,
    title: str,
    description: str,
    *,
    salary_min: float | None = None,
    salary_max: float | None = None,
    job_type: str | None = None,
    experience_level: str | None = None,
    skills: list[str] | None = None,
    is_featured: bool = False,
    status: JobStatus = JobStatus.PENDING,
    job_id: str | None = None,
) -> Job:
    """Insert a job and its skill tags in one commit. New posts start PENDING."""
    job = Job(
        id=job_id or generate_id(),
        employer_id=employer_id,
        title=title,
        description=description,
        salary_min=salary_min,
        salary_max=salary_max,
        job_type=job_type,
        experience_level=experience_level,
        status=JobStatus(status).value,
        is_featured=bool(is_featured),
    )
    job.skills = [JobSkill(id=generate_id(), job_id=job.id, skill_name=name) for name in (skills or [])]
    db.add(job)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(job)
    logger.info("Job created: %s by employer=%s (%d skills)", job.id, employer_id, len(job.skills))
    return job


def get_by_id(db: Session, job_id: str) -> Job | None:
    return db.query(Job).filter(Job.id == job_id).first()


def get_detail(db: Session, job_id: str) -> Job | None:
    """Job in any status with employer profile and skills eagerly loaded."""
    return _with_listing_relations(db.query(Job)).filter(Job.id == job_id).first()


def list_by_status(
    db: Session,
    status: JobStatus | str | None = None,
    *,
    featured_first: bool = False,
) -> list[Job]:
    q = _with_listing_relations(db.query(Job))
    if status:
        q = q.filter(Job.status == JobStatus(status).value)
    if featured_first:
        q = q.order_by(Job.is_featured.desc(), Job.created_at.desc())
    else:
        q = q.order_by(Job.created_at.desc())
    return q.all()
