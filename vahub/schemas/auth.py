from pydantic import BaseModel, EmailStr, Field, field_validator

from vahub.models.enums import SELF_REGISTRABLE_ROLES, UserRole


class UserRegister(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    password: str
    role: UserRole
    company_name: str | None = Field(default=None, max_length=200)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name is required")
        return v.strip()

    @field_validator("password")
    @classmethod
    def password_min_length(cls, v: str) -> str:
        if len(v) < 8:
            raise ValueError("Password must be at least 8 characters")
        return v

    @field_validator("role")
    @classmethod
    def role_self_registrable(cls, v: UserRole) -> UserRole:
        if v not in SELF_REGISTRABLE_ROLES:
            raise ValueError("Only EMPLOYER or JOB_SEEKER accounts can be registered")
        return v


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    role: str
    status: str
    subscription_status: str = "none"
    created_at: str | None = None


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
