from pydantic_settings import BaseSettings

PLACEHOLDER_SECRET_KEY = "replace-with-a-long-random-secret-key"


class Settings(BaseSettings):
    # Override both in .env / deployment secrets
    database_url: str = "sqlite:///./vahub.db"
    secret_key: str = PLACEHOLDER_SECRET_KEY
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 7  # 7 days
    app_env: str = "development"  # development, staging, production

    # CORS origins as comma-separated values
    # Example: "https://app.example.com,https://admin.example.com"
    cors_allow_origins: str = "http://localhost:3000,http://localhost:5173"

    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR

    # Startup seeding. Demo data is never seeded in production.
    seed_demo_data: bool = True
    bootstrap_admin_email: str | None = None
    bootstrap_admin_password: str | None = None
    bootstrap_admin_name: str = "System Admin"

    # Audit trail page size for /api/admin/logs
    admin_log_limit: int = 100

    # Request guards
    rate_limit_auth_per_min: int = 20
    rate_limit_write_per_min: int = 30

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def is_production(self) -> bool:
        return (self.app_env or "development").lower() in {"production", "prod"}


settings = Settings()
