from sqlalchemy import Column, String, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.sql import func

from vahub.database import Base
from vahub.models.enums import ReportStatus


class AdminLog(Base):
    """
    Append-only audit record of a privileged action.
    admin_id and target_id are plain strings, not foreign keys, so entries
    outlive the accounts and entities they mention.
    """

    __tablename__ = "admin_logs"

    id = Column(String, primary_key=True, index=True)
    admin_id = Column(String, nullable=False, index=True)
    action_type = Column(String, nullable=False)
    target_type = Column(String)
    target_id = Column(String, index=True)
    description = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)


class Report(Base):
    __tablename__ = "reports"

    id = Column(String, primary_key=True, index=True)
    reporter_id = Column(String, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    target_type = Column(String, nullable=False)
    target_id = Column(String, nullable=False)
    reason = Column(Text, nullable=False)
    status = Column(String, nullable=False, default=ReportStatus.PENDING.value)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Message(Base):
    __tablename__ = "messages"

    id = Column(String, primary_key=True, index=True)
    sender_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    receiver_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    message_body = Column(Text, nullable=False)
    is_flagged = Column(Boolean, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
