from sqlalchemy.orm import Session

from vahub.core.security import generate_id
from vahub.models.enums import ReportStatus, ReportTargetType
from vahub.models.moderation import Report


def create(db: Session, reporter_id: str, target_type: ReportTargetType | str, target_id: str, reason: str) -> Report:
    report = Report(
        id=generate_id(),
        reporter_id=reporter_id,
        target_type=ReportTargetType(target_type).value,
        target_id=target_id,
        reason=reason.strip(),
    )
    db.add(report)
    db.commit()
    db.refresh(report)
    return report


def get_by_id(db: Session, report_id: str) -> Report | None:
    return db.query(Report).filter(Report.id == report_id).first()


def get_all(db: Session, status: ReportStatus | str | None = None) -> list[Report]:
    q = db.query(Report).order_by(Report.created_at.desc())
    if status:
        q = q.filter(Report.status == ReportStatus(status).value)
    return q.all()
