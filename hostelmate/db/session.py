"""Engine and per-request sessions."""
from typing import Any, Dict, Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from hostelmate.config.settings import settings


def _engine_options() -> Dict[str, Any]:
    """Engine keyword arguments for the configured backend."""
    options: Dict[str, Any] = {
        "pool_pre_ping": True,
        "echo": settings.DATABASE_ECHO,
    }
    if settings.is_sqlite():
        # SQLite connections are shared across the threadpool FastAPI runs sync routes in
        options["connect_args"] = {"check_same_thread": False, **settings.DB_CONNECT_ARGS}
    else:
        options["pool_size"] = settings.DB_POOL_SIZE
        options["max_overflow"] = settings.DB_POOL_OVERFLOW
        if settings.DB_CONNECT_ARGS:
            options["connect_args"] = settings.DB_CONNECT_ARGS
    return options


engine = create_engine(settings.get_database_url(), **_engine_options())

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency: one session per request, closed afterwards."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
