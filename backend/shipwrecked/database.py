"""Database connection and session management."""
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import NullPool
from shipwrecked.config import settings

# Pooler connections (pgbouncer / Supabase on 6543) need NullPool
if settings.database_url.startswith("sqlite"):
    engine = create_engine(
        settings.database_url,
        connect_args={"check_same_thread": False},
        echo=settings.environment == "development",
    )
elif "pooler" in settings.database_url or settings.database_url.endswith(":6543"):
    engine = create_engine(
        settings.database_url,
        poolclass=NullPool,
        echo=settings.environment == "development",
    )
else:
    engine = create_engine(
        settings.database_url,
        pool_size=20,
        max_overflow=10,
        pool_pre_ping=True,
        echo=settings.environment == "development",
    )

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    """Dependency for getting database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_session_factory() -> sessionmaker:
    """Dependency for code that opens its own sessions (e.g. worker threads)."""
    return SessionLocal
