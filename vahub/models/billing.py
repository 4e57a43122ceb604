from sqlalchemy import Column, String, Float, Integer, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from vahub.database import Base
from vahub.models.enums import PaymentStatus, SubscriptionStatus


class Plan(Base):
    __tablename__ = "plans"

    id = Column(String, primary_key=True, index=True)  # slug, e.g. "free"
    name = Column(String, nullable=False)
    price = Column(Float, nullable=False)
    job_post_limit = Column(Integer)
    messaging_limit = Column(Integer)
    candidate_unlock_limit = Column(Integer)
    featured_jobs_limit = Column(Integer)

    subscriptions = relationship("Subscription", back_populates="plan")


class Subscription(Base):
    __tablename__ = "subscriptions"

    id = Column(String, primary_key=True, index=True)
    employer_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    plan_id = Column(String, ForeignKey("plans.id"), nullable=False)
    status = Column(String, nullable=False, default=SubscriptionStatus.ACTIVE.value)
    current_period_end = Column(DateTime(timezone=True))
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    employer = relationship("User", back_populates="subscriptions")
    plan = relationship("Plan", back_populates="subscriptions")


class Payment(Base):
    """Transaction record. Append-only: never updated or deleted by the service."""

    __tablename__ = "payments"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    amount = Column(Float, nullable=False)
    currency = Column(String, nullable=False, default="USD")
    status = Column(String, nullable=False, default=PaymentStatus.PENDING.value)
    payment_method = Column(String)
    transaction_id = Column(String, unique=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="payments")
