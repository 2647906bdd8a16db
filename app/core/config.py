from typing import Callable, Generator, List

from fastapi import Request
from pydantic import Field
from pydantic_settings import BaseSettings
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool


# =====================================================================
# SETTINGS
# =====================================================================


class Settings(BaseSettings):
    # App
    APP_NAME: str = "DanceFit API"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./dancefit.db"

    # JWT
    SECRET_KEY: str = "Supersecretkey"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Calendar used for "today", week and month boundaries
    TIMEZONE: str = "UTC"

    # Attempts for the optimistic read-compute-write on dance stats
    ROLLUP_MAX_RETRIES: int = Field(default=3, ge=1)

    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:3000",
    ]

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()


# =====================================================================
# DATABASE
# =====================================================================

Base = declarative_base()


def build_engine(database_url: str) -> Engine:
    """Create an engine for the given URL.

    In-memory SQLite shares one connection so every session sees the same
    database.
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, **kwargs)
    return create_engine(database_url, pool_pre_ping=True)


def build_session_factory(engine: Engine) -> Callable[[], Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request) -> Generator[Session, None, None]:
    """Database session dependency."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings
