import logging
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.exc import SQLAlchemyError

from .base import Base
from ..config import settings

logger = logging.getLogger(__name__)


@lru_cache
def get_engine() -> Engine:
    """Process-wide engine, created on first use and reused afterwards."""
    url = settings.DATABASE_URL
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    engine = create_engine(url, connect_args=connect_args)
    logger.info("Database engine initialised")
    return engine


@lru_cache
def get_session_factory() -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine())


def get_db():
    db = get_session_factory()()
    try:
        yield db
    except SQLAlchemyError as e:
        logger.error(f"Database error: {e}")
        db.rollback()
        raise
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def create_tables():
    from . import models  # noqa: F401  registers the tables on Base.metadata

    Base.metadata.create_all(bind=get_engine())
    logger.info("Database tables created successfully")
