"""Admin dashboard aggregates."""

from sqlalchemy import func
from sqlalchemy.orm import Session

from vahub.models.application import Application
from vahub.models.billing import Subscription
from vahub.models.enums import JobStatus, ReportStatus, SubscriptionStatus, UserRole
from vahub.models.job import Job
from vahub.models.moderation import Report
from vahub.models.user import User


def get_stats(db: Session) -> dict:
    """Return admin dashboard stats."""
    total_vas = db.query(func.count(User.id)).filter(User.role == UserRole.JOB_SEEKER.value).scalar() or 0
    total_employers = db.query(func.count(User.id)).filter(User.role == UserRole.EMPLOYER.value).scalar() or 0
    total_jobs = db.query(func.count(Job.id)).scalar() or 0
    pending_jobs = db.query(func.count(Job.id)).filter(Job.status == JobStatus.PENDING.value).scalar() or 0
    approved_jobs = db.query(func.count(Job.id)).filter(Job.status == JobStatus.APPROVED.value).scalar() or 0
    applications = db.query(func.count(Application.id)).scalar() or 0
    active_subscriptions = (
        db.query(func.count(Subscription.id))
        .filter(Subscription.status == SubscriptionStatus.ACTIVE.value)
        .scalar()
        or 0
    )
    pending_reports = (
        db.query(func.count(Report.id)).filter(Report.status == ReportStatus.PENDING.value).scalar() or 0
    )
    return {
        "totalVAs": total_vas,
        "totalEmployers": total_employers,
        "totalJobs": total_jobs,
        "pendingJobs": pending_jobs,
        "approvedJobs": approved_jobs,
        "totalApplications": applications,
        "activeSubscriptions": active_subscriptions,
        "pendingReports": pending_reports,
    }
