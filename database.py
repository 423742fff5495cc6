"""
SQLAlchemy database connection and session management.

This module provides:
- ``Database``: an explicitly constructed store client (engine + session factory)
- ``get_session``: FastAPI dependency yielding a session from the app's client

Usage:
     db = Database(settings.database_url, pool_size=settings.pool_size)
     app.state.db = db

     # In FastAPI routes:
     @router.get("/items")
     def get_items(session: Session = Depends(get_session)):
          return session.query(Item).all()
"""
import logging
from contextlib import contextmanager
from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

logger = logging.getLogger(__name__)


def _configure_sqlite_connection(dbapi_connection, connection_record):
     # Hand transaction control to SQLAlchemy; pysqlite would otherwise commit before every DDL statement
     dbapi_connection.isolation_level = None
     # SQLite ignores REFERENCES clauses unless this is switched on per connection
     cursor = dbapi_connection.cursor()
     cursor.execute("PRAGMA foreign_keys=ON")
     cursor.close()


def _begin_sqlite_transaction(conn):
     conn.exec_driver_sql("BEGIN")


class Database:
     """
     Store client shared by every request handler.

     The pool is bounded: at most ``pool_size`` queries are in flight and
     further requests wait up to ``pool_timeout`` seconds for a connection.
     """

     def __init__(
          self,
          url: str,
          pool_size: int = 5,
          pool_timeout: int = 30,
          echo: bool = False,
     ):
          self.url = url
          if url.startswith("sqlite"):
               # One shared connection so an in-memory database survives across sessions
               self.engine: Engine = create_engine(
                    url,
                    poolclass=StaticPool,
                    connect_args={"check_same_thread": False},
                    echo=echo,
               )
               event.listen(self.engine, "connect", _configure_sqlite_connection)
               event.listen(self.engine, "begin", _begin_sqlite_transaction)
          else:
               self.engine = create_engine(
                    url,
                    poolclass=QueuePool,
                    pool_size=pool_size,
                    max_overflow=0,
                    pool_timeout=pool_timeout,
                    pool_recycle=1800,  # Recycle connections after 30 minutes
                    pool_pre_ping=True,
                    echo=echo,
               )

          self.SessionLocal = sessionmaker(
               bind=self.engine,
               autocommit=False,
               autoflush=False,
               expire_on_commit=False,
          )

     @classmethod
     def from_settings(cls, settings) -> "Database":
          return cls(
               settings.database_url,
               pool_size=settings.pool_size,
               pool_timeout=settings.pool_timeout,
               echo=settings.sql_echo,
          )

     @contextmanager
     def session(self) -> Generator[Session, None, None]:
          """
          Context manager for database sessions (for use outside FastAPI routes).

          Usage:
               with db.session() as session:
                    users = session.query(User).all()
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

     def check_connection(self) -> bool:
          """
          Test database connectivity.

          Returns:
               bool: True if connection successful, False otherwise
          """
          try:
               with self.engine.connect() as conn:
                    conn.execute(text("SELECT 1"))
               return True
          except Exception as e:
               logger.error("Database connection failed: %s", e)
               return False

     def dispose(self) -> None:
          self.engine.dispose()


def get_session(request: Request) -> Generator[Session, None, None]:
     """
     FastAPI dependency that provides a database session.

     The session comes from the ``Database`` stored on ``app.state.db``.
     Handlers commit explicitly; anything left uncommitted is rolled back.

     Yields:
          Session: SQLAlchemy database session
     """
     db: Database = request.app.state.db
     session = db.SessionLocal()
     try:
          yield session
     except Exception:
          session.rollback()
          raise
     finally:
          session.close()
