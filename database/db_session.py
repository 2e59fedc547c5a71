# database/db_session.py
"""
Database session and engine module.
Uses SQLite (data/dashboard.db) unless DATABASE_URL points elsewhere.
"""

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from settings import DATABASE_URL

Base = declarative_base()


def make_engine(url: str) -> Engine:
    """
    Build an engine for `url`.

    For SQLite the pysqlite driver is switched to autocommit and BEGIN is
    emitted explicitly, so CREATE TABLE statements run inside the same
    transaction as the inserts and are undone by a rollback.
    Error messages never include bound parameters (password hashes among them).
    """
    if not url.startswith("sqlite"):
        return create_engine(url, pool_pre_ping=True, hide_parameters=True)

    engine = create_engine(url, connect_args={"check_same_thread": False}, hide_parameters=True)

    @event.listens_for(engine, "connect")
    def _disable_pysqlite_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    return engine


engine = make_engine(DATABASE_URL)

SessionLocal = sessionmaker(autoflush=False, bind=engine)


def get_db():
    """
    Dependency that provides a database session to API routes.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
