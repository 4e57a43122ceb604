from sqlalchemy import Column, String, Text, Float, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from vahub.database import Base
from vahub.models.enums import JobStatus


class Job(Base):
    """Employer job post. Only APPROVED jobs are visible to job seekers."""

    __tablename__ = "jobs"

    id = Column(String, primary_key=True, index=True)
    employer_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    salary_min = Column(Float)
    salary_max = Column(Float)
    job_type = Column(String)
    experience_level = Column(String)
    status = Column(String, nullable=False, default=JobStatus.PENDING.value, index=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    rejection_reason = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    employer = relationship("User", back_populates="jobs")
    skills = relationship(
        "JobSkill",
        back_populates="job",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="JobSkill.skill_name",
    )
    applications = relationship(
        "Application", back_populates="job", cascade="all, delete-orphan", passive_deletes=True
    )

    @property
    def skill_names(self) -> list[str]:
        return [s.skill_name for s in self.skills or []]


class JobSkill(Base):
    __tablename__ = "job_skills"

    id = Column(String, primary_key=True, index=True)
    job_id = Column(String, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    skill_name = Column(String, nullable=False)

    job = relationship("Job", back_populates="skills")
