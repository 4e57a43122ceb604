import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from vahub.core.errors import DuplicateEmail
from vahub.core.security import create_access_token, verify_password
from vahub.database import get_db
from vahub.dependencies import get_current_user
from vahub.models.enums import BLOCKED_USER_STATUSES
from vahub.models.user import User
from vahub.repos.user_repo import create as create_user, get_by_email
from vahub.schemas.auth import Token, UserLogin, UserRegister, UserResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/auth", tags=["auth"])


def _user_to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role,
        status=user.status,
        subscription_status=user.subscription_status or "none",
        created_at=user.created_at.isoformat() if user.created_at else None,
    )


def _token_for(user: User) -> Token:
    return Token(access_token=create_access_token(user.id, user.role), user=_user_to_response(user))


@router.post("/register", response_model=Token)
def register(data: UserRegister, db: Session = Depends(get_db)):
    logger.info("Registration attempt for: %s as %s", data.email, data.role.value)
    try:
        if get_by_email(db, data.email):
            raise DuplicateEmail(data.email)
        user = create_user(
            db,
            data.name,
            data.email,
            data.password,
            data.role,
            company_name=data.company_name,
        )
        logger.info("User registered: %s (%s, %s)", user.email, user.role, user.status)
        return _token_for(user)
    except DuplicateEmail as e:
        logger.info("Registration rejected for %s: duplicate email", data.email)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    except Exception as e:
        logger.exception("Register failed for email=%s: %s", data.email, e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Registration failed") from e


@router.post("/login", response_model=Token)
def login(data: UserLogin, db: Session = Depends(get_db)):
    try:
        user = get_by_email(db, data.email)
        if not user or not verify_password(data.password, user.password_hash):
            logger.info("Login failed for: %s - invalid credentials", data.email)
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid credentials",
            )
        if user.status in {s.value for s in BLOCKED_USER_STATUSES}:
            logger.info("Login refused for %s: account %s", data.email, user.status)
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Account is disabled",
            )
        logger.info("User logged in: %s", user.email)
        return _token_for(user)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Login failed for email=%s: %s", data.email, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error") from e


@router.get("/me", response_model=UserResponse)
def get_me(user: User = Depends(get_current_user)):
    return _user_to_response(user)
