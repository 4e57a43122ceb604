import logging

from sqlalchemy import create_engine, event, inspect
from sqlalchemy.orm import sessionmaker, declarative_base

from vahub.config import settings

logger = logging.getLogger(__name__)


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        # Sessions are handed across FastAPI's threadpool workers.
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


def enable_sqlite_foreign_keys(target_engine) -> None:
    """SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection."""
    if target_engine.dialect.name != "sqlite":
        return

    @event.listens_for(target_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, _connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_engine(settings.database_url, **_engine_kwargs(settings.database_url))
enable_sqlite_foreign_keys(engine)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _import_models() -> None:
    from vahub import models  # noqa: F401


def init_db():
    _import_models()
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database initialized")
    except Exception as e:
        logger.exception("Database initialization failed: %s", e)
        raise


def ensure_tables_exist():
    """Create any missing tables without touching existing data."""
    _import_models()
    try:
        inspector = inspect(engine)
        existing_tables = set(inspector.get_table_names())

        # create_all only creates missing tables, never drops existing ones.
        Base.metadata.create_all(bind=engine)
        target_tables = set(Base.metadata.tables.keys())
        created_tables = sorted(target_tables - existing_tables)

        if created_tables:
            logger.info("Created missing DB tables: %s", ", ".join(created_tables))
        else:
            logger.info("All DB tables already exist; no schema changes applied.")
        return created_tables
    except Exception as e:
        logger.exception("Ensure tables failed: %s", e)
        raise
