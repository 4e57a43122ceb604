import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from vahub.database import get_db
from vahub.core.security import decode_access_token
from vahub.models.enums import BLOCKED_USER_STATUSES, UserRole, UserStatus
from vahub.models.user import User
from vahub.repos.user_repo import get_by_id

logger = logging.getLogger(__name__)
security = HTTPBearer(auto_error=False)


def get_current_user(
    db: Session = Depends(get_db),
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> User:
    if not credentials:
        logger.info("Auth failed: missing bearer credentials")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    user_id = decode_access_token(credentials.credentials)
    if not user_id:
        logger.info("Auth failed: invalid or expired token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )
    user = get_by_id(db, user_id)
    if not user:
        logger.info("Auth failed: user from token not found")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )
    return user


def get_current_active_user(
    user=Depends(get_current_user),
):
    """Reject suspended and banned accounts even when their token is still valid."""
    if user.status in {s.value for s in BLOCKED_USER_STATUSES}:
        logger.info("Auth blocked: user=%s status=%s", user.id, user.status)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account is disabled",
        )
    return user


def require_role(*roles: UserRole):
    """Dependency factory: authenticated, non-blocked user holding one of ``roles``."""
    allowed = {r.value for r in roles}

    def _dependency(user=Depends(get_current_active_user)):
        if user.role not in allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Requires role: {', '.join(sorted(allowed))}",
            )
        return user

    return _dependency


get_current_employer = require_role(UserRole.EMPLOYER)
get_current_job_seeker = require_role(UserRole.JOB_SEEKER)


def get_current_admin(
    user=Depends(get_current_active_user),
):
    """Require an ACTIVE account with role ADMIN."""
    if user.role != UserRole.ADMIN.value or user.status != UserStatus.ACTIVE.value:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return user
