"""Database configuration and session management."""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from leadreach.config import settings
from leadreach.utils.logger import logger

# Create engine
engine = create_engine(settings.database_url, echo=settings.debug)

# Create session factory
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)

# Create base class for models
Base = declarative_base()


def init_db(bind=None):
    """Create all tables for the registered models."""
    import leadreach.models  # noqa: F401  register all models with Base.metadata

    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database tables created")


def reset_db(bind=None):
    """Drop and recreate all tables."""
    import leadreach.models  # noqa: F401

    target = bind or engine
    Base.metadata.drop_all(bind=target)
    Base.metadata.create_all(bind=target)
    logger.info("Database tables dropped and recreated")
