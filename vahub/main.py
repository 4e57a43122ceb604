import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from vahub.config import PLACEHOLDER_SECRET_KEY, settings
from vahub.core.errors import MarketplaceError, http_status_for
from vahub.core.rate_limiter import rate_limiter
from vahub.database import SessionLocal, engine, init_db
from vahub.logging_config import setup_logging
from vahub.routers import admin, applications, auth, jobs, talents
from vahub.services.bootstrap import seed_all

setup_logging()
logger = logging.getLogger(__name__)

AUTH_PATHS = {"/api/auth/login", "/api/auth/register"}
WRITE_PATHS = {"/api/jobs", "/api/applications", "/api/reports"}

app = FastAPI(
    title="VAHub API",
    description="Job marketplace for virtual assistants, employers and admins.",
    version="1.0.0",
)

cors_origins = [o.strip() for o in settings.cors_allow_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(jobs.router)
app.include_router(applications.router)
app.include_router(talents.router)
app.include_router(admin.router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc):
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    message = first.get("msg", "Invalid request")
    detail = f"{field}: {message}" if field else message
    logger.info("Validation failed on %s %s: %s", request.method, request.url.path, detail)
    return JSONResponse(status_code=400, content={"detail": detail})


@app.exception_handler(MarketplaceError)
async def marketplace_exception_handler(request, exc):
    return JSONResponse(status_code=http_status_for(exc), content={"detail": exc.message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request, exc):
    logger.exception("Unhandled server error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.middleware("http")
async def apply_rate_limits(request, call_next):
    path = request.url.path.rstrip("/") or "/"
    if request.method in {"OPTIONS", "GET"}:
        return await call_next(request)

    client_ip = request.client.host if request.client else "unknown"
    limit = None
    if path in AUTH_PATHS:
        limit = settings.rate_limit_auth_per_min
    elif path in WRITE_PATHS:
        limit = settings.rate_limit_write_per_min

    if limit is not None and limit > 0:
        key = f"{client_ip}:{path}"
        allowed, retry_after = rate_limiter.allow(key, limit=limit, window_seconds=60)
        if not allowed:
            return JSONResponse(
                status_code=429,
                content={"detail": "Too many requests. Please retry shortly."},
                headers={"Retry-After": str(retry_after)},
            )

    return await call_next(request)


@app.get("/health/live")
def health_live():
    return {"status": "ok"}


@app.get("/health/ready")
def health_ready():
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"status": "ready"}
    except Exception:
        logger.exception("Readiness check failed")
        return JSONResponse(status_code=503, content={"status": "not_ready"})


def check_settings() -> None:
    """Refuse placeholder secrets in production; warn elsewhere."""
    if settings.is_production:
        if settings.secret_key == PLACEHOLDER_SECRET_KEY:
            raise RuntimeError("SECRET_KEY placeholder is not allowed in production")
        if "username:password@" in settings.database_url:
            raise RuntimeError("DATABASE_URL placeholder credentials are not allowed in production")
    else:
        if settings.secret_key == PLACEHOLDER_SECRET_KEY:
            logger.warning("SECRET_KEY is using placeholder default. Set SECRET_KEY in .env for secure deployments.")
        if "username:password@" in settings.database_url:
            logger.warning("DATABASE_URL appears to use placeholder credentials. Set DATABASE_URL in .env.")


def run_bootstrap() -> dict:
    db = SessionLocal()
    try:
        return seed_all(db, settings)
    finally:
        db.close()


@app.on_event("startup")
def on_startup():
    logger.info("Starting VAHub API (env=%s)", settings.app_env)
    check_settings()
    init_db()
    run_bootstrap()


@app.get("/")
def root():
    return {"message": "VAHub API. Browse approved jobs at /api/jobs."}
