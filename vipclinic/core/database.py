from contextlib import contextmanager
from enum import Enum
from typing import Any, Dict, Generator, Optional
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError
from sqlalchemy.orm import declarative_base

from .config import Settings

logger = logging.getLogger(__name__)

Base = declarative_base()

# SQLSTATE for unique_violation
UNIQUE_VIOLATION_SQLSTATE = "23505"


class DbErrorKind(str, Enum):
    UNIQUE_VIOLATION = "unique_violation"
    OTHER = "other"


class Database:
    """
    Pooled database handle.

    Constructed once by the application entry point and handed to request
    handlers through ``app.state``; nothing in the package holds a global
    engine.
    """

    def __init__(
        self,
        url: str,
        *,
        pool_size: int = 10,
        max_overflow: int = 0,
        pool_timeout: int = 30,
        pool_recycle: int = 1800,
        ssl_mode: Optional[str] = "require",
        echo: bool = False,
    ):
        self.url = url
        engine_kwargs: Dict[str, Any] = {"echo": echo}

        if url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
        else:
            connect_args: Dict[str, Any] = {}
            if ssl_mode:
                connect_args["sslmode"] = ssl_mode
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_timeout=pool_timeout,
                pool_recycle=pool_recycle,
                connect_args=connect_args,
            )

        self.engine: Engine = create_engine(url, **engine_kwargs)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.get_database_url,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=settings.DB_POOL_RECYCLE,
            ssl_mode=settings.DATABASE_SSL_MODE,
        )

    def acquire(self) -> Connection:
        """Check a connection out of the pool."""
        try:
            return self.engine.connect()
        except SQLAlchemyError as e:
            raise ConnectionError(f"{getattr(e, 'orig', None) or e}") from e

    def release(self, conn: Connection) -> None:
        """Return a connection to the pool."""
        conn.close()

    @contextmanager
    def connection(self) -> Generator[Connection, None, None]:
        conn = self.acquire()
        try:
            yield conn
        finally:
            self.release(conn)

    def check_connectivity(self) -> bool:
        """Acquire and immediately release a connection; never raises."""
        try:
            conn = self.acquire()
        except ConnectionError as e:
            logger.error(f"Database connection failed: {e}")
            return False
        self.release(conn)
        logger.info("Database connected successfully")
        return True

    @staticmethod
    def classify_error(exc: BaseException) -> DbErrorKind:
        """Map a driver error onto the kinds the service distinguishes."""
        if not isinstance(exc, DBAPIError):
            return DbErrorKind.OTHER

        orig = exc.orig
        # psycopg2 exposes pgcode, psycopg 3 exposes sqlstate
        code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
        if code is not None:
            if code == UNIQUE_VIOLATION_SQLSTATE:
                return DbErrorKind.UNIQUE_VIOLATION
            return DbErrorKind.OTHER

        # SQLite reports no SQLSTATE
        if isinstance(exc, IntegrityError) and "UNIQUE constraint failed" in str(orig):
            return DbErrorKind.UNIQUE_VIOLATION
        return DbErrorKind.OTHER

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database connections disposed")


# Database initialization
def init_db(database: Database) -> bool:
    """Create the doctors table if it does not exist. Logs failures instead of raising."""
    from ..models import doctor  # noqa: F401  registers the table on Base.metadata

    try:
        Base.metadata.create_all(bind=database.engine)
    except SQLAlchemyError as e:
        logger.error(f"Table creation failed: {e}")
        return False

    logger.info("Doctors table ready")
    return True
