"""
SQLAlchemy engine and session helpers for the SQL mapping store.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()


def build_engine(database_url: str) -> Engine:
    """
    Create an engine for the given URL.
    
    SQLite needs check_same_thread=False because requests are served from
    a threadpool; an in-memory SQLite database must also share one
    connection, otherwise every thread would see its own empty database.
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, pool_pre_ping=True)
    
    connect_args = {"check_same_thread": False}
    if ":memory:" in database_url or database_url in ("sqlite://", "sqlite:///"):
        return create_engine(database_url, connect_args=connect_args, poolclass=StaticPool)
    return create_engine(database_url, connect_args=connect_args)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
