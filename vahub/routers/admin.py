import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from vahub.config import settings
from vahub.core.errors import MarketplaceError, http_status_for
from vahub.database import get_db
from vahub.dependencies import get_current_admin
from vahub.models.enums import JobStatus, ReportStatus, SubscriptionStatus, UserRole, UserStatus
from vahub.models.user import User
from vahub.schemas.admin import (
    ActionResult,
    AdminUserCreate,
    AdminUserUpdate,
    JobDecision,
    JobRejection,
    ReportResolution,
    UserDelete,
    UserStatusUpdate,
)
from vahub.services.listing_service import (
    admin_stats,
    list_jobs_by_status,
    list_payments,
    list_pending_jobs,
    list_reports,
    list_subscriptions,
    recent_admin_logs,
    search_users,
    user_to_dict,
)
from vahub.services.status_workflow import (
    approve_job as approve_job_workflow,
    create_user as create_user_workflow,
    delete_user as delete_user_workflow,
    flag_job as flag_job_workflow,
    reject_job as reject_job_workflow,
    resolve_report as resolve_report_workflow,
    transition_user_status,
    update_user as update_user_workflow,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/admin", tags=["admin"])


def _raise_http(action: str, admin: User, exc: MarketplaceError):
    logger.info("Admin %s %s refused: %s", admin.id, action, exc.message)
    raise HTTPException(status_code=http_status_for(exc), detail=exc.message) from exc


def _enum_or_400(enum_cls, value: str | None, label: str):
    if value is None or value == "" or value.upper() == "ALL":
        return None
    try:
        return enum_cls(value)
    except ValueError:
        try:
            return enum_cls(value.upper())
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Unknown {label}: {value}") from e


@router.get("/stats")
def get_admin_stats(
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    """Return dashboard counts. Admin only."""
    try:
        return admin_stats(db)
    except Exception as e:
        logger.exception("Admin stats failed for admin=%s: %s", admin.id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to load admin stats") from e


@router.get("/pending-jobs")
def get_pending_jobs(
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    return list_pending_jobs(db)


@router.get("/jobs")
def get_jobs(
    status: str | None = None,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    """All jobs, or those in one status (PENDING, APPROVED, REJECTED, FLAGGED)."""
    return list_jobs_by_status(db, _enum_or_400(JobStatus, status, "job status"))


@router.post("/approve-job", response_model=ActionResult)
def approve_job(
    body: JobDecision,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    try:
        approve_job_workflow(db, body.id, admin.id)
    except MarketplaceError as e:
        _raise_http("approve-job", admin, e)
    return ActionResult()


@router.post("/reject-job", response_model=ActionResult)
def reject_job(
    body: JobRejection,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    try:
        reject_job_workflow(db, body.id, admin.id, body.reason)
    except MarketplaceError as e:
        _raise_http("reject-job", admin, e)
    return ActionResult()


@router.post("/flag-job", response_model=ActionResult)
def flag_job(
    body: JobRejection,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    """Flag an approved job, taking it off the public board."""
    try:
        flag_job_workflow(db, body.id, admin.id, body.reason)
    except MarketplaceError as e:
        _raise_http("flag-job", admin, e)
    return ActionResult()


@router.get("/users")
def list_users(
    search: str | None = None,
    role: str | None = None,
    status: str | None = None,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    """Non-admin users matching name/email search and optional role/status filters."""
    return search_users(
        db,
        query=search,
        role=_enum_or_400(UserRole, role, "role"),
        status=_enum_or_400(UserStatus, status, "user status"),
    )


@router.post("/users")
def create_user(
    body: AdminUserCreate,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    """Provision an account of any role. Starts ACTIVE unless a status is given."""
    try:
        user = create_user_workflow(
            db,
            admin.id,
            body.name,
            body.email,
            body.password,
            body.role,
            status=body.status,
            company_name=body.company_name,
        )
    except MarketplaceError as e:
        _raise_http("create-user", admin, e)
    return user_to_dict(user)


@router.put("/users/{user_id}")
def update_user(
    user_id: str,
    body: AdminUserUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    try:
        user = update_user_workflow(
            db,
            user_id,
            admin.id,
            name=body.name,
            email=body.email,
            status=body.status,
            password=body.password,
            role=body.role,
        )
    except MarketplaceError as e:
        _raise_http("update-user", admin, e)
    return user_to_dict(user)


@router.post("/update-user-status", response_model=ActionResult)
def update_user_status(
    body: UserStatusUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    try:
        transition_user_status(db, body.id, body.status, admin.id)
    except MarketplaceError as e:
        _raise_http("update-user-status", admin, e)
    return ActionResult()


@router.delete("/delete-user", response_model=ActionResult)
def delete_user(
    body: UserDelete,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    try:
        delete_user_workflow(db, body.id, admin.id)
    except MarketplaceError as e:
        _raise_http("delete-user", admin, e)
    return ActionResult()


@router.get("/logs")
def get_logs(
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    """Latest audit entries with the acting admin's name."""
    return recent_admin_logs(db, limit=settings.admin_log_limit)


@router.get("/reports")
def get_reports(
    status: str | None = None,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    return list_reports(db, _enum_or_400(ReportStatus, status, "report status"))


@router.post("/resolve-report", response_model=ActionResult)
def resolve_report(
    body: ReportResolution,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    try:
        resolve_report_workflow(db, body.id, body.status, admin.id)
    except MarketplaceError as e:
        _raise_http("resolve-report", admin, e)
    return ActionResult()


@router.get("/subscriptions")
def get_subscriptions(
    status: str | None = None,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    return list_subscriptions(db, _enum_or_400(SubscriptionStatus, status and status.lower(), "subscription status"))


@router.get("/payments")
def get_payments(
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    return list_payments(db)
