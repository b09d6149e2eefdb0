#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from typing import Generator, Optional
from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from core.config_loader import AppConfig
from core.matcher.ports import MatchingStore
from database.repository import MatchingRepository
from .config import get_config
from .services.matching_service import MatchingApiService


class DatabaseManager:
    """Manages database connections and sessions."""

    def __init__(self, url: str):
        self.engine = create_engine(
            url,
            pool_pre_ping=True,  # Verify connections before using
            pool_size=10,
            max_overflow=20
        )
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

    def get_session(self) -> Generator[Session, None, None]:
        """
        Get a database session.

        Commits when the request handler finishes without error and
        rolls back otherwise.

        Yields:
            Session: SQLAlchemy database session.
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()


# Created on first use so importing the app does not open a pool
_db_manager: Optional[DatabaseManager] = None


def get_db_manager() -> DatabaseManager:
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager(get_config().database.url)
    return _db_manager


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session.

    Usage:
        @app.get("/endpoint")
        def my_endpoint(db: Session = Depends(get_db)):
            ...

    Yields:
        Session: Database session that will be automatically closed.
    """
    yield from get_db_manager().get_session()


def get_matching_store(db: Session = Depends(get_db)) -> MatchingStore:
    """FastAPI dependency for the persistence port."""
    return MatchingRepository(db)


def get_app_config() -> AppConfig:
    return get_config()


def get_matching_service(
    store: MatchingStore = Depends(get_matching_store),
    config: AppConfig = Depends(get_app_config)
) -> MatchingApiService:
    """FastAPI dependency wiring the matching services to the request's store."""
    return MatchingApiService(store, config.matching)
