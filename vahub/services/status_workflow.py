"""
Status workflow for jobs, users and reports.

Every privileged mutation goes through ``audited_mutation`` so the entity
change and its AdminLog entry are committed in the same transaction: either
both are persisted or neither is.
"""

import logging
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from vahub.core.errors import DuplicateEmail, InvalidTransition, NotFoundError, ValidationFailed
from vahub.core.security import generate_id, hash_password
from vahub.models.enums import AuditTargetType, JobStatus, ReportStatus, UserRole, UserStatus
from vahub.models.job import Job
from vahub.models.moderation import Report
from vahub.models.user import User
from vahub.repos import admin_log_repo, user_repo
from vahub.repos.report_repo import get_by_id as get_report_by_id

logger = logging.getLogger(__name__)

# Legal job moves. REJECTED and FLAGGED are terminal.
JOB_TRANSITIONS: dict[JobStatus, frozenset[JobStatus]] = {
    JobStatus.PENDING: frozenset({JobStatus.APPROVED, JobStatus.REJECTED}),
    JobStatus.APPROVED: frozenset({JobStatus.FLAGGED}),
    JobStatus.REJECTED: frozenset(),
    JobStatus.FLAGGED: frozenset(),
}

JOB_ACTIONS = {
    JobStatus.APPROVED: "job_approved",
    JobStatus.REJECTED: "job_rejected",
    JobStatus.FLAGGED: "job_flagged",
}

REPORT_TRANSITIONS: dict[ReportStatus, frozenset[ReportStatus]] = {
    ReportStatus.PENDING: frozenset({ReportStatus.REVIEWED, ReportStatus.RESOLVED}),
    ReportStatus.REVIEWED: frozenset({ReportStatus.RESOLVED}),
    ReportStatus.RESOLVED: frozenset(),
}

REPORT_ACTIONS = {
    ReportStatus.REVIEWED: "report_reviewed",
    ReportStatus.RESOLVED: "report_resolved",
}


@contextmanager
def audited_mutation(
    db: Session,
    admin_id: str,
    action_type: str,
    target_type: AuditTargetType | str,
    target_id: str,
    description: str,
):
    """
    Apply an entity change and its audit entry as one unit.

    The body makes its changes on ``db``; on normal exit the AdminLog entry is
    staged and both are committed together. Any exception rolls everything
    back and is re-raised.
    """
    try:
        yield
        admin_log_repo.add_entry(
            db,
            admin_id=admin_id,
            action_type=action_type,
            target_type=AuditTargetType(target_type).value,
            target_id=target_id,
            description=description,
        )
        db.commit()
    except Exception:
        db.rollback()
        raise


def can_transition_job(current: JobStatus | str, target: JobStatus | str) -> bool:
    return JobStatus(target) in JOB_TRANSITIONS.get(JobStatus(current), frozenset())


def _parse_job_status(value: JobStatus | str) -> JobStatus:
    try:
        return JobStatus(value)
    except ValueError as e:
        raise ValidationFailed(f"Unknown job status: {value}") from e


def transition_job_status(
    db: Session,
    job_id: str,
    target_status: JobStatus | str,
    actor_admin_id: str,
    reason: str | None = None,
) -> Job:
    """
    Move a job along PENDING -> APPROVED | REJECTED, APPROVED -> FLAGGED.
    Rejecting requires a non-blank reason. Illegal moves raise InvalidTransition
    and leave the job untouched.
    """
    target = _parse_job_status(target_status)
    job = db.query(Job).filter(Job.id == job_id).first()
    if not job:
        raise NotFoundError("Job", job_id)

    current = JobStatus(job.status)
    if not can_transition_job(current, target):
        logger.warning(
            "Rejected job transition %s -> %s for job=%s by admin=%s",
            current.value, target.value, job_id, actor_admin_id,
        )
        raise InvalidTransition("job", current.value, target.value)

    clean_reason = (reason or "").strip()
    if target == JobStatus.REJECTED and not clean_reason:
        raise ValidationFailed("A rejection reason is required")

    if target == JobStatus.APPROVED:
        description = f"Approved job: {job_id}"
    elif target == JobStatus.REJECTED:
        description = f"Rejected job: {job_id}. Reason: {clean_reason}"
    else:
        description = f"Flagged job: {job_id}"
        if clean_reason:
            description += f". Reason: {clean_reason}"

    with audited_mutation(db, actor_admin_id, JOB_ACTIONS[target], AuditTargetType.JOB, job_id, description):
        job.status = target.value
        job.rejection_reason = clean_reason if target == JobStatus.REJECTED else None

    db.refresh(job)
    logger.info("Job %s moved %s -> %s by admin=%s", job_id, current.value, target.value, actor_admin_id)
    return job


def approve_job(db: Session, job_id: str, actor_admin_id: str) -> Job:
    return transition_job_status(db, job_id, JobStatus.APPROVED, actor_admin_id)


def reject_job(db: Session, job_id: str, actor_admin_id: str, reason: str | None) -> Job:
    return transition_job_status(db, job_id, JobStatus.REJECTED, actor_admin_id, reason=reason)


def flag_job(db: Session, job_id: str, actor_admin_id: str, reason: str | None = None) -> Job:
    return transition_job_status(db, job_id, JobStatus.FLAGGED, actor_admin_id, reason=reason)


def transition_user_status(
    db: Session,
    user_id: str,
    target_status: UserStatus | str,
    actor_admin_id: str,
) -> User:
    """
    Any user status may move to any other. An admin cannot lock themselves
    out by moving their own account away from ACTIVE.
    """
    try:
        target = UserStatus(target_status)
    except ValueError as e:
        raise ValidationFailed(f"Unknown user status: {target_status}") from e

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User", user_id)

    previous = user.status
    if user.id == actor_admin_id and target != UserStatus.ACTIVE:
        raise InvalidTransition("user", previous, target.value, "Cannot change the status of your own account")

    description = f"Updated user status from {previous} to {target.value}"
    with audited_mutation(db, actor_admin_id, "user_status_updated", AuditTargetType.USER, user_id, description):
        user.status = target.value

    db.refresh(user)
    logger.info("User %s status %s -> %s by admin=%s", user_id, previous, target.value, actor_admin_id)
    return user


def create_user(
    db: Session,
    actor_admin_id: str,
    name: str,
    email: str,
    password: str,
    role: UserRole | str,
    *,
    status: UserStatus | str | None = None,
    company_name: str | None = None,
) -> User:
    """
    Provision an account from the admin console. Any role may be created,
    staff roles included, and the account starts ACTIVE unless told otherwise.
    """
    try:
        role = UserRole(role)
        status = UserStatus(status or UserStatus.ACTIVE)
    except ValueError as e:
        raise ValidationFailed(str(e)) from e
    if not (name or "").strip():
        raise ValidationFailed("Name is required")

    user_id = generate_id()
    email = user_repo.normalize_email(email)
    description = f"Created user: {user_id} ({email}, {role.value})"
    try:
        with audited_mutation(db, actor_admin_id, "user_created", AuditTargetType.USER, user_id, description):
            user = user_repo.add_new(
                db, name, email, password, role, status=status, company_name=company_name, user_id=user_id
            )
    except IntegrityError as e:
        raise DuplicateEmail(email) from e

    db.refresh(user)
    logger.info("User %s (%s) created by admin=%s", user_id, role.value, actor_admin_id)
    return user


def update_user(
    db: Session,
    user_id: str,
    actor_admin_id: str,
    *,
    name: str | None = None,
    email: str | None = None,
    status: UserStatus | str | None = None,
    password: str | None = None,
    role: UserRole | str | None = None,
) -> User:
    """
    Edit name, email, status or password. Role is fixed at creation; passing a
    different one is refused rather than ignored.
    """
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User", user_id)

    try:
        if role is not None and UserRole(role).value != user.role:
            raise ValidationFailed("User role cannot be changed")
        target_status = UserStatus(status) if status is not None else None
    except ValueError as e:
        raise ValidationFailed(str(e)) from e

    new_name = name.strip() if name is not None else None
    if name is not None and not new_name:
        raise ValidationFailed("Name is required")
    new_email = user_repo.normalize_email(email) if email is not None else None
    if new_email is not None and new_email != user.email:
        other = user_repo.get_by_email(db, new_email)
        if other and other.id != user.id:
            raise DuplicateEmail(new_email)
    if user.id == actor_admin_id and target_status not in (None, UserStatus.ACTIVE):
        raise InvalidTransition("user", user.status, target_status.value, "Cannot change the status of your own account")

    changes = []
    if new_name is not None and new_name != user.name:
        changes.append("name")
    if new_email is not None and new_email != user.email:
        changes.append("email")
    if target_status is not None and target_status.value != user.status:
        changes.append(f"status {user.status} -> {target_status.value}")
    if password:
        changes.append("password")
    description = f"Updated user: {user_id} ({', '.join(changes) or 'no changes'})"

    try:
        with audited_mutation(db, actor_admin_id, "user_updated", AuditTargetType.USER, user_id, description):
            if new_name is not None:
                user.name = new_name
            if new_email is not None:
                user.email = new_email
            if target_status is not None:
                user.status = target_status.value
            if password:
                user.password_hash = hash_password(password)
    except IntegrityError as e:
        raise DuplicateEmail(new_email) from e

    db.refresh(user)
    logger.info("User %s updated by admin=%s: %s", user_id, actor_admin_id, description)
    return user


def delete_user(db: Session, user_id: str, actor_admin_id: str) -> None:
    """Hard-delete a user and everything it owns. The audit entry keeps the id."""
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User", user_id)
    if user.id == actor_admin_id:
        raise InvalidTransition("user", user.status, "DELETED", "Cannot delete your own account")

    description = f"Deleted user: {user_id} ({user.email}, {user.role})"
    with audited_mutation(db, actor_admin_id, "user_deleted", AuditTargetType.USER, user_id, description):
        db.delete(user)
    logger.info("User %s deleted by admin=%s", user_id, actor_admin_id)


def resolve_report(
    db: Session,
    report_id: str,
    target_status: ReportStatus | str,
    actor_admin_id: str,
) -> Report:
    try:
        target = ReportStatus(target_status)
    except ValueError as e:
        raise ValidationFailed(f"Unknown report status: {target_status}") from e

    report = get_report_by_id(db, report_id)
    if not report:
        raise NotFoundError("Report", report_id)

    current = ReportStatus(report.status)
    if target not in REPORT_TRANSITIONS[current]:
        raise InvalidTransition("report", current.value, target.value)

    description = f"Marked report {report_id} on {report.target_type} {report.target_id} as {target.value}"
    with audited_mutation(db, actor_admin_id, REPORT_ACTIONS[target], AuditTargetType.REPORT, report_id, description):
        report.status = target.value

    db.refresh(report)
    return report
