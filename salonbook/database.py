import logging
from collections.abc import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from .config import Settings

logger = logging.getLogger(__name__)

Base = declarative_base()


def create_db_engine(settings: Settings) -> Engine:
    """Create the engine; pool sizing only applies to server databases"""
    url = settings.database_url
    try:
        if url.startswith("sqlite"):
            engine = create_engine(url, connect_args={"check_same_thread": False})
        else:
            engine = create_engine(
                url,
                pool_pre_ping=True,  # Test connections before using
                pool_recycle=settings.db_pool_recycle,
                pool_size=settings.db_pool_size,
                max_overflow=settings.db_max_overflow,
                pool_timeout=settings.db_pool_timeout,
                echo=False,
            )
        logger.info("✅ Database engine created successfully")
        if not url.startswith("sqlite"):
            logger.info(
                f"📊 Connection pool: size={settings.db_pool_size}, "
                f"max_overflow={settings.db_max_overflow}, timeout={settings.db_pool_timeout}s"
            )
    except Exception as e:
        logger.error(f"❌ Failed to create database engine: {e}")
        raise
    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


def init_db(engine: Engine) -> None:
    """Create tables"""
    from . import models  # noqa: F401

    Base.metadata.create_all(bind=engine, checkfirst=True)


def get_db(request: Request) -> Iterator[Session]:
    """One session per request from the factory the app was built with"""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
