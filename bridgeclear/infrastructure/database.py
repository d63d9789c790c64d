"""Database setup via SQLAlchemy."""

from typing import Any, Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.schema import CreateSchema

from bridgeclear.config import get_settings

settings = get_settings()


class Base(DeclarativeBase):
    pass


def engine_options(url: str) -> dict[str, Any]:
    """Keyword arguments for create_engine() for the given database URL.

    SQLite has no schemas, so the billing namespace is mapped onto the
    default one there.
    """
    if url.startswith("sqlite"):
        return {
            "connect_args": {"check_same_thread": False},
            "execution_options": {"schema_translate_map": {settings.BILLING_SCHEMA: None}},
        }
    return {"pool_pre_ping": True}


def build_engine(url: str, **kwargs: Any) -> Engine:
    options = engine_options(url)
    options.update(kwargs)
    return create_engine(url, **options)


engine = build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency for DB session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine = engine) -> None:
    """Create all tables, plus the billing schema where the backend has schemas."""
    if bind.dialect.name != "sqlite":
        with bind.begin() as conn:
            conn.execute(CreateSchema(settings.BILLING_SCHEMA, if_not_exists=True))
    Base.metadata.create_all(bind=bind)
