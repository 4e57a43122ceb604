from pydantic import BaseModel, EmailStr, Field, field_validator

from vahub.models.enums import ReportStatus, UserRole, UserStatus


class JobDecision(BaseModel):
    id: str = Field(min_length=1)


class JobRejection(BaseModel):
    id: str = Field(min_length=1)
    # Checked by the workflow engine so a blank reason yields a domain error, not a schema error.
    reason: str | None = None


class UserStatusUpdate(BaseModel):
    id: str = Field(min_length=1)
    status: UserStatus


class UserDelete(BaseModel):
    id: str = Field(min_length=1)


class ReportResolution(BaseModel):
    id: str = Field(min_length=1)
    status: ReportStatus = ReportStatus.RESOLVED


class ActionResult(BaseModel):
    success: bool = True


class AdminUserCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    password: str = Field(min_length=8)
    role: UserRole
    status: UserStatus | None = None
    company_name: str | None = Field(default=None, max_length=200)


class AdminUserUpdate(BaseModel):
    """Fields left out are unchanged. A blank password keeps the current one."""

    name: str | None = Field(default=None, max_length=200)
    email: EmailStr | None = None
    status: UserStatus | None = None
    password: str | None = None
    role: UserRole | None = None

    @field_validator("password", mode="before")
    @classmethod
    def blank_password_is_unset(cls, v):
        return v or None

    @field_validator("password")
    @classmethod
    def password_min_length(cls, v: str | None) -> str | None:
        if v is not None and len(v) < 8:
            raise ValueError("Password must be at least 8 characters")
        return v
