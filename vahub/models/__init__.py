from vahub.models.user import User
from vahub.models.profile import VAProfile, VASkill, EmployerProfile
from vahub.models.job import Job, JobSkill
from vahub.models.application import Application
from vahub.models.billing import Plan, Subscription, Payment
from vahub.models.moderation import AdminLog, Report, Message

__all__ = [
    "User",
    "VAProfile",
    "VASkill",
    "EmployerProfile",
    "Job",
    "JobSkill",
    "Application",
    "Plan",
    "Subscription",
    "Payment",
    "AdminLog",
    "Report",
    "Message",
]
