import logging

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from vahub.core.errors import DuplicateEmail
from vahub.core.security import hash_password, generate_id
from vahub.models.enums import UserRole, UserStatus
from vahub.models.profile import EmployerProfile, VAProfile
from vahub.models.user import User

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def get_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == normalize_email(email)).first()


def get_by_id(db: Session, user_id: str) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def default_status_for(role: UserRole | str) -> UserStatus:
    """Employers can post right away; job seekers wait for admin vetting."""
    role = UserRole(role)
    if role == UserRole.JOB_SEEKER:
        return UserStatus.PENDING
    return UserStatus.ACTIVE


def add_new(
    db: Session,
    name: str,
    email: str,
    password: str,
    role: UserRole | str,
    *,
    status: UserStatus | str | None = None,
    company_name: str | None = None,
    user_id: str | None = None,
) -> User:
    """
    Stage a user plus the profile row its role needs. Does not commit.
    Raises DuplicateEmail if the email is already taken.
    """
    role = UserRole(role)
    email = normalize_email(email)
    if get_by_email(db, email):
        raise DuplicateEmail(email)
    user = User(
        id=user_id or generate_id(),
        name=name.strip(),
        email=email,
        password_hash=hash_password(password),
        role=role,
        status=status or default_status_for(role),
    )
    db.add(user)
    if role == UserRole.JOB_SEEKER:
        db.add(VAProfile(id=generate_id(), user_id=user.id))
    elif role == UserRole.EMPLOYER:
        db.add(EmployerProfile(id=generate_id(), user_id=user.id, company_name=company_name or name.strip()))
    return user


def create(
    db: Session,
    name: str,
    email: str,
    password: str,
    role: UserRole | str,
    *,
    status: UserStatus | str | None = None,
    company_name: str | None = None,
    user_id: str | None = None,
) -> User:
    """
    Create a user plus the profile row its role needs, in one commit.
    Raises DuplicateEmail if the email is taken; nothing is written in that case.
    """
    user = add_new(
        db, name, email, password, role, status=status, company_name=company_name, user_id=user_id
    )
    try:
        db.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent registration for the same email.
        db.rollback()
        logger.info("Duplicate registration rejected for %s", user.email)
        raise DuplicateEmail(user.email) from e
    db.refresh(user)
    return user


def search(
    db: Session,
    query: str | None = None,
    role: UserRole | str | None = None,
    status: UserStatus | str | None = None,
    *,
    include_admins: bool = False,
) -> list[User]:
    """
    Case-insensitive substring match on name or email, intersected with exact role/status filters.
    Admin accounts are excluded unless include_admins or role=ADMIN is requested.
    """
    q = db.query(User)
    if role:
        q = q.filter(User.role == UserRole(role).value)
    elif not include_admins:
        q = q.filter(User.role != UserRole.ADMIN.value)
    if status:
        q = q.filter(User.status == UserStatus(status).value)
    if query and query.strip():
        # autoescape keeps % and _ literal
        term = query.strip()
        q = q.filter(or_(User.name.icontains(term, autoescape=True), User.email.icontains(term, autoescape=True)))
    return q.order_by(User.created_at.desc(), User.name).all()


def admin_exists(db: Session) -> bool:
    return db.query(User.id).filter(User.role == UserRole.ADMIN.value).first() is not None
