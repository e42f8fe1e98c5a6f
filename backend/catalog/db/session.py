"""Engine and session factory configuration."""

from collections.abc import Generator
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import QueuePool

from catalog.core.config import get_settings
from catalog.db.base import Base

logger = logging.getLogger(__name__)

settings = get_settings()


def build_engine(database_url: str) -> Engine:
    """Create an engine tuned for the backend named by ``database_url``.

    PostgreSQL gets a pre-pinged, recycled connection pool with TCP
    keepalives; other backends (SQLite for local runs) use SQLAlchemy
    defaults.
    """
    if database_url.startswith("postgresql"):
        return create_engine(
            database_url,
            echo=False,
            poolclass=QueuePool,
            pool_pre_ping=True,  # Test connections before using
            pool_recycle=1800,  # Recycle connections after 30 minutes
            pool_size=5,
            max_overflow=10,
            connect_args={
                "connect_timeout": 10,
                "keepalives": 1,
                "keepalives_idle": 30,
                "keepalives_interval": 10,
                "keepalives_count": 5,
            },
        )
    return create_engine(database_url, echo=False)


engine = build_engine(settings.database_url)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def init_db(bind: Engine | None = None) -> None:
    """Create any missing tables for the registered models."""
    # Importing the models package registers every table on Base.metadata
    import catalog.db.models  # noqa: F401

    target = bind or engine
    Base.metadata.create_all(bind=target)
    logger.info(f"Database tables ensured on {target.url.render_as_string(hide_password=True)}")


def get_db() -> Generator[Session, None, None]:
    """Yield a transactional session for a request or script run."""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
