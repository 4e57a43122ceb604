"""
Idempotent startup seeding: plans, the first admin account, and demo data.

Each step checks for existing rows first, so running it on every boot is
safe. Demo accounts and sample jobs are never created in production, and the
admin account there is only created from explicitly configured credentials.
"""

import logging

from sqlalchemy.orm import Session

from vahub.config import Settings
from vahub.models.enums import JobStatus, UserRole, UserStatus
from vahub.repos import billing_repo, job_repo, profile_repo, user_repo

logger = logging.getLogger(__name__)

DEMO_ADMIN_EMAIL = "admin@vahub.com"
DEMO_ADMIN_PASSWORD = "admin12345"

DEMO_VA = {
    "id": "va-demo-1",
    "name": "Demo VA",
    "email": "vademo@email.com",
    "password": "vademo123",
    "headline": "Expert Virtual Assistant",
    "bio": "I am a demo VA profile with extensive experience in administrative tasks.",
    "hourly_rate": 15,
    "skills": [("Customer Support", 3), ("Data Entry", 4), ("Scheduling", 2)],
}

DEMO_EMPLOYER = {
    "id": "employer-demo-1",
    "name": "Demo Employer",
    "email": "edemo@dmail.com",
    "password": "edemo123",
    "company_name": "Demo Corp",
    "industry": "Technology",
    "plan_id": "premium",
    "payment_method": "card",
}

# id, title, description, salary_min, salary_max, job_type, featured, skills
SAMPLE_JOBS = [
    ("j1", "Warm-Call Appointment Setter - Remote",
     "Are you a great communicator who enjoys talking to people? We are looking for a Warm-Call Appointment Setter.",
     1000, 1200, "Full-Time", True, ["Outbound Sales", "Cold Calling", "Sales"]),
    ("j2", "Full-Time Remote Sales Specialist (Chat-Based)",
     "We are a growing U.S.-based inventory buying company looking for a full-time chat-based Sales Specialist.",
     800, 2500, "Full-Time", True, ["Inbound Sales", "Outbound Sales", "Sales"]),
    ("j3", "Assistant for Property Management",
     "We are seeking an organized and proactive Assistant to support our property management operations.",
     650, 900, "Full-Time", False, ["Real Estate Marketing", "Customer Support", "Property Management"]),
    ("j4", "Virtual Real Estate Assistant/Admin",
     "A fast-growing real estate company is seeking a dedicated, organized Virtual Real Estate Assistant.",
     500, 500, "Full-Time", False, []),
    ("j5", "Excel & Data Management Virtual Assistant",
     "We are looking for a dedicated Virtual Assistant with advanced Excel skills to join our team.",
     800, 800, "Full-Time", False, ["Excel", "Data Entry"]),
    ("j6", "Social Media Video Editor (AI TikTok)",
     "Hiring immediately! We need a full-time creator who specializes in AI-generated short videos at scale.",
     700, 700, "Full-Time", True, ["Video Editing", "Social Media", "AI Tools"]),
    ("j7", "Senior Full Stack Developer",
     "A business technology and ERP solutions firm building custom ERP systems and workflow automation.",
     850, 1625, "Full-Time", True, ["React JS", "Next JS", "Supabase"]),
    ("j8", "Graphic Designer - 3 Month Project",
     "Looking for a highly skilled and innovative Graphic Designer for a 3-month full-time project.",
     700, 700, "Contract", False, ["Photoshop", "Graphic Design", "Canva"]),
]


def seed_admin(db: Session, settings: Settings) -> bool:
    """Create the first admin if none exists. Returns True when an account was created."""
    if user_repo.admin_exists(db):
        return False
    email = settings.bootstrap_admin_email
    password = settings.bootstrap_admin_password
    if not (email and password):
        if settings.is_production:
            logger.warning("No admin account exists and BOOTSTRAP_ADMIN_EMAIL/PASSWORD are not set")
            return False
        email, password = DEMO_ADMIN_EMAIL, DEMO_ADMIN_PASSWORD
        logger.warning("Seeding demo admin %s with the default password; do not use outside development", email)
    if user_repo.get_by_email(db, email):
        logger.warning("Cannot seed admin: %s is already registered with another role", email)
        return False
    user_repo.create(
        db,
        settings.bootstrap_admin_name,
        email,
        password,
        UserRole.ADMIN,
        status=UserStatus.ACTIVE,
    )
    logger.info("Seeded admin account %s", email)
    return True


def seed_demo_accounts(db: Session) -> int:
    created = 0
    if not user_repo.get_by_email(db, DEMO_VA["email"]):
        va = user_repo.create(
            db,
            DEMO_VA["name"],
            DEMO_VA["email"],
            DEMO_VA["password"],
            UserRole.JOB_SEEKER,
            status=UserStatus.ACTIVE,
            user_id=DEMO_VA["id"],
        )
        profile_repo.update_va_profile(
            db,
            va.id,
            headline=DEMO_VA["headline"],
            bio=DEMO_VA["bio"],
            hourly_rate=DEMO_VA["hourly_rate"],
            verification_score=80,
        )
        profile_repo.set_va_skills(db, profile_repo.get_va_profile(db, va.id), DEMO_VA["skills"])
        created += 1
    if not user_repo.get_by_email(db, DEMO_EMPLOYER["email"]):
        emp = user_repo.create(
            db,
            DEMO_EMPLOYER["name"],
            DEMO_EMPLOYER["email"],
            DEMO_EMPLOYER["password"],
            UserRole.EMPLOYER,
            status=UserStatus.ACTIVE,
            company_name=DEMO_EMPLOYER["company_name"],
            user_id=DEMO_EMPLOYER["id"],
        )
        profile_repo.update_employer_profile(db, emp.id, industry=DEMO_EMPLOYER["industry"])
        seed_demo_billing(db, emp.id)
        created += 1
    return created


def seed_demo_billing(db: Session, employer_id: str) -> bool:
    """Give the demo employer a paid subscription and its first payment. Needs plans seeded."""
    plan = next((p for p in billing_repo.get_all_plans(db) if p.id == DEMO_EMPLOYER["plan_id"]), None)
    if plan is None:
        logger.warning("Plan %s missing; demo employer left without a subscription", DEMO_EMPLOYER["plan_id"])
        return False
    billing_repo.create_subscription(db, employer_id, plan.id)
    billing_repo.record_payment(db, employer_id, plan.price, payment_method=DEMO_EMPLOYER["payment_method"])
    return True


def seed_sample_jobs(db: Session, employer_id: str = DEMO_EMPLOYER["id"]) -> int:
    """Insert sample approved jobs that are missing. Returns count inserted."""
    if not user_repo.get_by_id(db, employer_id):
        return 0
    created = 0
    for job_id, title, description, salary_min, salary_max, job_type, featured, skills in SAMPLE_JOBS:
        if job_repo.get_by_id(db, job_id):
            continue
        job_repo.create(
            db,
            employer_id,
            title,
            description,
            salary_min=salary_min,
            salary_max=salary_max,
            job_type=job_type,
            experience_level="Intermediate",
            skills=skills,
            is_featured=featured,
            status=JobStatus.APPROVED,
            job_id=job_id,
        )
        created += 1
    return created


def seed_all(db: Session, settings: Settings) -> dict:
    """Run every seeding step. Safe to call on every startup."""
    _, plans_created = billing_repo.seed_default_plans(db)
    admin_created = seed_admin(db, settings)
    demo_accounts = 0
    sample_jobs = 0
    if settings.seed_demo_data and not settings.is_production:
        demo_accounts = seed_demo_accounts(db)
        sample_jobs = seed_sample_jobs(db)
    summary = {
        "plans": plans_created,
        "admin": admin_created,
        "demo_accounts": demo_accounts,
        "sample_jobs": sample_jobs,
    }
    logger.info("Bootstrap complete: %s", summary)
    return summary
