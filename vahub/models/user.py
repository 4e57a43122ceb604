from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship, validates
from sqlalchemy.sql import func

from vahub.database import Base
from vahub.models.enums import SubscriptionStatus, UserRole, UserStatus


class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    role = Column(String, nullable=False, index=True)
    status = Column(String, nullable=False, default=UserStatus.PENDING.value, index=True)
    subscription_status = Column(String, nullable=False, default=SubscriptionStatus.NONE.value)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    va_profile = relationship(
        "VAProfile", back_populates="user", uselist=False, cascade="all, delete-orphan", passive_deletes=True
    )
    employer_profile = relationship(
        "EmployerProfile", back_populates="user", uselist=False, cascade="all, delete-orphan", passive_deletes=True
    )
    jobs = relationship("Job", back_populates="employer", cascade="all, delete-orphan", passive_deletes=True)
    applications = relationship(
        "Application", back_populates="va", cascade="all, delete-orphan", passive_deletes=True
    )
    subscriptions = relationship(
        "Subscription", back_populates="employer", cascade="all, delete-orphan", passive_deletes=True
    )
    payments = relationship("Payment", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)

    @validates("role")
    def _validate_role(self, _key, value):
        role = value.value if isinstance(value, UserRole) else str(value)
        if role not in {r.value for r in UserRole}:
            raise ValueError(f"Unknown role: {role}")
        # Role is write-once: assigned at creation, never reassigned.
        if self.role is not None and self.role != role:
            raise ValueError("User role cannot be changed after registration")
        return role

    @validates("status")
    def _validate_status(self, _key, value):
        status = value.value if isinstance(value, UserStatus) else str(value)
        if status not in {s.value for s in UserStatus}:
            raise ValueError(f"Unknown user status: {status}")
        return status
