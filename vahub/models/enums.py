from enum import Enum


class UserRole(str, Enum):
    ADMIN = "ADMIN"
    EMPLOYER = "EMPLOYER"
    JOB_SEEKER = "JOB_SEEKER"
    MODERATOR = "MODERATOR"
    SUPPORT = "SUPPORT"


# Roles a visitor may pick at sign-up. Staff accounts are provisioned by scripts.
SELF_REGISTRABLE_ROLES = (UserRole.EMPLOYER, UserRole.JOB_SEEKER)


class UserStatus(str, Enum):
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"
    BANNED = "BANNED"
    PENDING = "PENDING"


# Statuses that may not authenticate.
BLOCKED_USER_STATUSES = (UserStatus.SUSPENDED, UserStatus.BANNED)


class SubscriptionStatus(str, Enum):
    ACTIVE = "active"
    CANCELED = "canceled"
    PAST_DUE = "past_due"
    NONE = "none"


class JobStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    FLAGGED = "FLAGGED"


class ApplicationStatus(str, Enum):
    APPLIED = "applied"
    SHORTLISTED = "shortlisted"
    REJECTED = "rejected"
    HIRED = "hired"


class PaymentStatus(str, Enum):
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"
    PENDING = "PENDING"


class ReportTargetType(str, Enum):
    USER = "USER"
    JOB = "JOB"


class ReportStatus(str, Enum):
    PENDING = "PENDING"
    REVIEWED = "REVIEWED"
    RESOLVED = "RESOLVED"


class AuditTargetType(str, Enum):
    JOB = "JOB"
    USER = "USER"
    REPORT = "REPORT"
