from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from vahub.core.errors import ConstraintViolation
from vahub.core.security import generate_id
from vahub.models.application import Application


def get_existing(db: Session, job_id: str, va_id: str) -> Application | None:
    return (
        db.query(Application)
        .filter(Application.job_id == job_id, Application.va_id == va_id)
        .first()
    )


def create(db: Session, job_id: str, va_id: str, cover_letter: str | None = None) -> Application:
    """One application per (job, job seeker). Raises ConstraintViolation on a repeat."""
    if get_existing(db, job_id, va_id):
        raise ConstraintViolation("You have already applied to this job")
    application = Application(
        id=generate_id(),
        job_id=job_id,
        va_id=va_id,
        cover_letter=cover_letter,
    )
    db.add(application)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConstraintViolation("Application failed") from e
    db.refresh(application)
    return application
