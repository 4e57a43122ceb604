from pydantic import BaseModel, Field


class ApplicationCreate(BaseModel):
    job_id: str = Field(min_length=1)
    cover_letter: str | None = Field(default=None, max_length=20000)


class ReportCreate(BaseModel):
    target_type: str = Field(pattern="^(USER|JOB)$")
    target_id: str = Field(min_length=1)
    reason: str = Field(min_length=1, max_length=5000)
