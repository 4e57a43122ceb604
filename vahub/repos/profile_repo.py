from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload, selectinload

from vahub.core.security import generate_id
from vahub.models.enums import UserRole, UserStatus
from vahub.models.profile import EmployerProfile, VAProfile, VASkill
from vahub.models.user import User


def get_va_profile(db: Session, user_id: str) -> VAProfile | None:
    return db.query(VAProfile).filter(VAProfile.user_id == user_id).first()


def get_employer_profile(db: Session, user_id: str) -> EmployerProfile | None:
    return db.query(EmployerProfile).filter(EmployerProfile.user_id == user_id).first()


def update_va_profile(db: Session, user_id: str, **fields) -> VAProfile | None:
    profile = get_va_profile(db, user_id)
    if not profile:
        return None
    for key, value in fields.items():
        if value is not None and hasattr(profile, key):
            setattr(profile, key, value)
    db.commit()
    db.refresh(profile)
    return profile


def update_employer_profile(db: Session, user_id: str, **fields) -> EmployerProfile | None:
    profile = get_employer_profile(db, user_id)
    if not profile:
        return None
    for key, value in fields.items():
        if value is not None and hasattr(profile, key):
            setattr(profile, key, value)
    db.commit()
    db.refresh(profile)
    return profile


def set_va_skills(db: Session, profile: VAProfile, skills: list[tuple[str, int | None]]) -> VAProfile:
    """Replace the profile's skills with (name, years_experience) pairs."""
    profile.skills = [
        VASkill(id=generate_id(), va_profile_id=profile.id, skill_name=name, years_experience=years)
        for name, years in skills
    ]
    db.commit()
    db.refresh(profile)
    return profile


def search_talent(
    db: Session,
    query: str | None = None,
    min_rate: float | None = None,
    max_rate: float | None = None,
    min_verification: int | None = None,
    skill: str | None = None,
) -> list[VAProfile]:
    """ACTIVE job seekers only. Rate bounds are inclusive; profiles without a rate fail any rate bound."""
    q = (
        db.query(VAProfile)
        .join(User, VAProfile.user_id == User.id)
        .options(joinedload(VAProfile.user), selectinload(VAProfile.skills))
        .filter(
            User.role == UserRole.JOB_SEEKER.value,
            User.status == UserStatus.ACTIVE.value,
        )
    )
    if min_rate is not None:
        q = q.filter(VAProfile.hourly_rate >= min_rate)
    if max_rate is not None:
        q = q.filter(VAProfile.hourly_rate <= max_rate)
    if min_verification is not None:
        q = q.filter(VAProfile.verification_score >= min_verification)
    if query and query.strip():
        term = query.strip()
        q = q.filter(
            or_(
                User.name.icontains(term, autoescape=True),
                VAProfile.headline.icontains(term, autoescape=True),
                VAProfile.bio.icontains(term, autoescape=True),
            )
        )
    if skill and skill.strip():
        q = q.filter(VAProfile.skills.any(VASkill.skill_name.icontains(skill.strip(), autoescape=True)))
    return q.order_by(VAProfile.is_featured.desc(), User.name).all()
