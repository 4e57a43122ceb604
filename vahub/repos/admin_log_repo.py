from sqlalchemy.orm import Session

from vahub.core.security import generate_id
from vahub.models.moderation import AdminLog
from vahub.models.user import User


def add_entry(
    db: Session,
    admin_id: str,
    action_type: str,
    target_type: str | None,
    target_id: str | None,
    description: str,
) -> AdminLog:
    """Stage an audit entry in the caller's transaction. Does not commit."""
    entry = AdminLog(
        id=generate_id(),
        admin_id=admin_id,
        action_type=action_type,
        target_type=target_type,
        target_id=target_id,
        description=description,
    )
    db.add(entry)
    return entry


def get_recent(db: Session, limit: int = 100) -> list[tuple[AdminLog, str | None]]:
    """Newest first, paired with the admin's name (None once that account is gone)."""
    return (
        db.query(AdminLog, User.name)
        .outerjoin(User, AdminLog.admin_id == User.id)
        .order_by(AdminLog.created_at.desc())
        .limit(limit)
        .all()
    )
