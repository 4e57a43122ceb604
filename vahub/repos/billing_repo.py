from datetime import datetime

from sqlalchemy.orm import Session, joinedload

from vahub.core.security import generate_id
from vahub.models.billing import Payment, Plan, Subscription
from vahub.models.enums import PaymentStatus, SubscriptionStatus
from vahub.models.user import User

DEFAULT_PLANS = [
    # id, name, price, job_post_limit, messaging_limit, candidate_unlock_limit, featured_jobs_limit
    ("free", "Free", 0, 1, 5, 2, 0),
    ("premium", "Premium", 29, 9999, 9999, 9999, 10),
]


def get_all_plans(db: Session) -> list[Plan]:
    return db.query(Plan).order_by(Plan.price).all()


def seed_default_plans(db: Session) -> tuple[list[Plan], int]:
    """
    Seed pricing plans if the table is empty.
    Returns (plans, number_created). number_created is 0 if plans already existed.
    """
    existing = get_all_plans(db)
    if existing:
        return existing, 0
    created = []
    for plan_id, name, price, posts, messages, unlocks, featured in DEFAULT_PLANS:
        plan = Plan(
            id=plan_id,
            name=name,
            price=price,
            job_post_limit=posts,
            messaging_limit=messages,
            candidate_unlock_limit=unlocks,
            featured_jobs_limit=featured,
        )
        db.add(plan)
        created.append(plan)
    db.commit()
    return created, len(created)


def create_subscription(
    db: Session,
    employer_id: str,
    plan_id: str,
    *,
    status: SubscriptionStatus | str = SubscriptionStatus.ACTIVE,
    current_period_end: datetime | None = None,
) -> Subscription:
    """Attach a plan to an employer and mirror the status onto the user row."""
    status = SubscriptionStatus(status).value
    sub = Subscription(
        id=generate_id(),
        employer_id=employer_id,
        plan_id=plan_id,
        status=status,
        current_period_end=current_period_end,
    )
    db.add(sub)
    user = db.query(User).filter(User.id == employer_id).first()
    if user:
        user.subscription_status = status
    db.commit()
    db.refresh(sub)
    return sub


def list_subscriptions(db: Session, status: SubscriptionStatus | str | None = None) -> list[Subscription]:
    q = db.query(Subscription).options(joinedload(Subscription.plan), joinedload(Subscription.employer))
    if status:
        q = q.filter(Subscription.status == SubscriptionStatus(status).value)
    return q.order_by(Subscription.created_at.desc()).all()


def record_payment(
    db: Session,
    user_id: str,
    amount: float,
    *,
    currency: str = "USD",
    status: PaymentStatus | str = PaymentStatus.SUCCESS,
    payment_method: str | None = None,
    transaction_id: str | None = None,
) -> Payment:
    """Append a payment record. Payments are never edited afterwards."""
    payment = Payment(
        id=generate_id(),
        user_id=user_id,
        amount=amount,
        currency=currency.upper(),
        status=PaymentStatus(status).value,
        payment_method=payment_method,
        transaction_id=transaction_id or generate_id(),
    )
    db.add(payment)
    db.commit()
    db.refresh(payment)
    return payment


def list_payments(db: Session, limit: int = 200) -> list[Payment]:
    return db.query(Payment).order_by(Payment.created_at.desc()).limit(limit).all()
