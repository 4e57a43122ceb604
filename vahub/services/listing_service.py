"""Read-only listings for the public board, talent search and admin views."""

from datetime import datetime

from sqlalchemy.orm import Session

from vahub.core.formatting import format_salary
from vahub.models.billing import Payment, Plan, Subscription
from vahub.models.enums import JobStatus, ReportStatus, SubscriptionStatus, UserRole, UserStatus
from vahub.models.job import Job
from vahub.models.moderation import AdminLog, Report
from vahub.models.profile import VAProfile
from vahub.models.user import User
from vahub.repos import admin_log_repo, billing_repo, job_repo, profile_repo, report_repo, user_repo
from vahub.repos.admin_repo import get_stats


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def user_to_dict(u: User) -> dict:
    return {
        "id": u.id,
        "name": u.name,
        "email": u.email,
        "role": u.role,
        "status": u.status,
        "subscription_status": u.subscription_status or SubscriptionStatus.NONE.value,
        "created_at": _iso(u.created_at),
    }


def job_to_dict(job: Job) -> dict:
    return {
        "id": job.id,
        "employer_id": job.employer_id,
        "title": job.title,
        "description": job.description,
        "salary_min": job.salary_min,
        "salary_max": job.salary_max,
        "salary_display": format_salary(job.salary_min, job.salary_max),
        "job_type": job.job_type,
        "experience_level": job.experience_level,
        "status": job.status,
        "is_featured": bool(job.is_featured),
        "rejection_reason": job.rejection_reason,
        "skills": job.skill_names,
        "created_at": _iso(job.created_at),
    }


def _employer_profile(job: Job):
    return job.employer.employer_profile if job.employer else None


def _listing_dict(job: Job) -> dict:
    out = job_to_dict(job)
    profile = _employer_profile(job)
    out["company_name"] = profile.company_name if profile else None
    out["logo_url"] = profile.logo_url if profile else None
    return out


def list_approved_jobs(db: Session) -> list[dict]:
    """Public board: APPROVED only, featured first then newest."""
    jobs = job_repo.list_by_status(db, JobStatus.APPROVED, featured_first=True)
    return [_listing_dict(j) for j in jobs]


def list_pending_jobs(db: Session) -> list[dict]:
    """Moderation queue, newest first."""
    out = []
    for job in job_repo.list_by_status(db, JobStatus.PENDING):
        item = job_to_dict(job)
        profile = _employer_profile(job)
        item["company_name"] = profile.company_name if profile else None
        out.append(item)
    return out


def list_jobs_by_status(db: Session, status: JobStatus | str | None = None) -> list[dict]:
    return [_listing_dict(j) for j in job_repo.list_by_status(db, status)]


def get_job_detail(db: Session, job_id: str) -> dict | None:
    job = job_repo.get_detail(db, job_id)
    if not job:
        return None
    out = job_to_dict(job)
    profile = _employer_profile(job)
    out.update(
        {
            "company_name": profile.company_name if profile else None,
            "company_description": profile.company_description if profile else None,
            "logo_url": profile.logo_url if profile else None,
            "website": profile.website if profile else None,
            "industry": profile.industry if profile else None,
        }
    )
    return out


def search_users(
    db: Session,
    query: str | None = None,
    role: UserRole | str | None = None,
    status: UserStatus | str | None = None,
) -> list[dict]:
    return [user_to_dict(u) for u in user_repo.search(db, query=query, role=role, status=status)]


def talent_to_dict(profile: VAProfile) -> dict:
    return {
        "id": profile.id,
        "user_id": profile.user_id,
        "name": profile.user.name if profile.user else None,
        "email": profile.user.email if profile.user else None,
        "headline": profile.headline,
        "bio": profile.bio,
        "hourly_rate": profile.hourly_rate,
        "availability": profile.availability,
        "experience_years": profile.experience_years,
        "intro_video_url": profile.intro_video_url,
        "resume_url": profile.resume_url,
        "profile_views": profile.profile_views or 0,
        "is_featured": bool(profile.is_featured),
        "verification_score": profile.verification_score or 0,
        "skills": [
            {"skill_name": s.skill_name, "years_experience": s.years_experience}
            for s in profile.skills or []
        ],
    }


def search_talent(
    db: Session,
    query: str | None = None,
    min_rate: float | None = None,
    max_rate: float | None = None,
    min_verification: int | None = None,
    skill: str | None = None,
) -> list[dict]:
    profiles = profile_repo.search_talent(
        db,
        query=query,
        min_rate=min_rate,
        max_rate=max_rate,
        min_verification=min_verification,
        skill=skill,
    )
    return [talent_to_dict(p) for p in profiles]


def admin_log_to_dict(entry: AdminLog, admin_name: str | None = None) -> dict:
    return {
        "id": entry.id,
        "admin_id": entry.admin_id,
        "admin_name": admin_name,
        "action_type": entry.action_type,
        "target_type": entry.target_type,
        "target_id": entry.target_id,
        "description": entry.description,
        "created_at": _iso(entry.created_at),
    }


def recent_admin_logs(db: Session, limit: int = 100) -> list[dict]:
    return [admin_log_to_dict(entry, name) for entry, name in admin_log_repo.get_recent(db, limit=limit)]


def report_to_dict(r: Report) -> dict:
    return {
        "id": r.id,
        "reporter_id": r.reporter_id,
        "target_type": r.target_type,
        "target_id": r.target_id,
        "reason": r.reason,
        "status": r.status,
        "created_at": _iso(r.created_at),
    }


def list_reports(db: Session, status: ReportStatus | str | None = None) -> list[dict]:
    return [report_to_dict(r) for r in report_repo.get_all(db, status=status)]


def plan_to_dict(p: Plan) -> dict:
    return {
        "id": p.id,
        "name": p.name,
        "price": p.price,
        "job_post_limit": p.job_post_limit,
        "messaging_limit": p.messaging_limit,
        "candidate_unlock_limit": p.candidate_unlock_limit,
        "featured_jobs_limit": p.featured_jobs_limit,
    }


def list_plans(db: Session) -> list[dict]:
    return [plan_to_dict(p) for p in billing_repo.get_all_plans(db)]


def subscription_to_dict(s: Subscription) -> dict:
    return {
        "id": s.id,
        "employer_id": s.employer_id,
        "employer_name": s.employer.name if s.employer else None,
        "plan_id": s.plan_id,
        "plan_name": s.plan.name if s.plan else None,
        "price": s.plan.price if s.plan else None,
        "status": s.status,
        "current_period_end": _iso(s.current_period_end),
    }


def list_subscriptions(db: Session, status: SubscriptionStatus | str | None = None) -> list[dict]:
    return [subscription_to_dict(s) for s in billing_repo.list_subscriptions(db, status=status)]


def payment_to_dict(p: Payment) -> dict:
    return {
        "id": p.id,
        "user_id": p.user_id,
        "amount": p.amount,
        "currency": p.currency,
        "status": p.status,
        "payment_method": p.payment_method,
        "transaction_id": p.transaction_id,
        "created_at": _iso(p.created_at),
    }


def list_payments(db: Session) -> list[dict]:
    return [payment_to_dict(p) for p in billing_repo.list_payments(db)]


def admin_stats(db: Session) -> dict:
    return get_stats(db)
