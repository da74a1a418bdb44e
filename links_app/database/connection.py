from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from links_app.config import settings


def build_engine(database_url: str, echo: bool = False):
    """
    Create an engine for the given URL.

    SQLite needs check_same_thread disabled because FastAPI runs sync
    dependencies in a threadpool. In-memory SQLite additionally needs a
    single shared connection or every session would see an empty database.
    """
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return create_engine(database_url, echo=echo, pool_pre_ping=True)

    kwargs = {"connect_args": {"check_same_thread": False}}
    if url.database in (None, "", ":memory:"):
        kwargs["poolclass"] = StaticPool
    return create_engine(database_url, echo=echo, **kwargs)


engine = build_engine(settings.database_url, echo=settings.sql_echo)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """Yield one session per request"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
