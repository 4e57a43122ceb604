from sqlalchemy import Column, String, Text, Float, Integer, Boolean, ForeignKey
from sqlalchemy.orm import relationship

from vahub.database import Base


class VAProfile(Base):
    """Job seeker profile shown in talent search."""

    __tablename__ = "va_profiles"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    headline = Column(String)
    bio = Column(Text)
    hourly_rate = Column(Float)
    availability = Column(String)
    experience_years = Column(Integer)
    intro_video_url = Column(String)
    resume_url = Column(String)
    profile_views = Column(Integer, default=0)
    is_featured = Column(Boolean, default=False)
    verification_score = Column(Integer, default=0)  # identity verification, 0-100

    user = relationship("User", back_populates="va_profile")
    skills = relationship(
        "VASkill",
        back_populates="profile",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="VASkill.skill_name",
    )


class VASkill(Base):
    __tablename__ = "va_skills"

    id = Column(String, primary_key=True, index=True)
    va_profile_id = Column(String, ForeignKey("va_profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    skill_name = Column(String, nullable=False)
    years_experience = Column(Integer)

    profile = relationship("VAProfile", back_populates="skills")


class EmployerProfile(Base):
    __tablename__ = "employer_profiles"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    company_name = Column(String)
    company_description = Column(Text)
    website = Column(String)
    industry = Column(String)
    team_size = Column(String)
    logo_url = Column(String)

    user = relationship("User", back_populates="employer_profile")
