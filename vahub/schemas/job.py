from pydantic import BaseModel, Field, field_validator, model_validator


class JobCreate(BaseModel):
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1, max_length=50000)
    salary_min: float | None = Field(default=None, ge=0)
    salary_max: float | None = Field(default=None, ge=0)
    job_type: str | None = Field(default=None, max_length=50)
    experience_level: str | None = Field(default=None, max_length=50)
    skills: list[str] = Field(default_factory=list, max_length=30)

    @field_validator("title", "description")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Field cannot be blank")
        return v.strip()

    @field_validator("skills")
    @classmethod
    def clean_skills(cls, v: list[str]) -> list[str]:
        # Trim, drop blanks and duplicates (case-insensitive), keep first spelling.
        seen = set()
        out = []
        for raw in v:
            name = (raw or "").strip()
            if not name or name.lower() in seen:
                continue
            seen.add(name.lower())
            out.append(name[:100])
        return out

    @model_validator(mode="after")
    def salary_range_ordered(self):
        if self.salary_min is not None and self.salary_max is not None and self.salary_min > self.salary_max:
            raise ValueError("salary_min cannot exceed salary_max")
        return self


class JobCreated(BaseModel):
    id: str
