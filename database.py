import logging
import threading
from concurrent.futures import Future
from enum import Enum as PyEnum
from typing import Callable, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from config import settings
from exceptions import DatabaseConnectionError

logger = logging.getLogger(__name__)

Base = declarative_base()


class ConnectionState(PyEnum):
    UNINITIALIZED = "uninitialized"
    CONNECTING = "connecting"
    CONNECTED = "connected"


class Database:
    """An open engine plus the session factory bound to it."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine, expire_on_commit=False)

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self) -> None:
        self.engine.dispose()


def _engine_kwargs(database_url: str) -> dict:
    if not database_url.startswith("sqlite"):
        return {"pool_pre_ping": True}
    kwargs = {"connect_args": {"check_same_thread": False}}
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    return kwargs


def connect(database_url: str, echo: bool = False) -> Database:
    try:
        engine = create_engine(database_url, echo=echo, **_engine_kwargs(database_url))
        with engine.connect():
            pass
        # Import here so the model is registered on Base before create_all.
        from models import inventory  # noqa: F401
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        raise DatabaseConnectionError(cause=e) from e
    return Database(engine)


class ConnectionManager:
    """Lazily opens one Database and hands the same one to every caller.

    Concurrent callers that arrive while the first connect is still running
    wait on that attempt instead of starting their own. A failed attempt is
    forgotten so the next call can try again.
    """

    def __init__(self, database_url: str, connector: Optional[Callable[..., Database]] = None, echo: bool = False):
        self._database_url = database_url
        self._connector = connector or connect
        self._echo = echo
        self._lock = threading.Lock()
        self._pending: Optional[Future] = None
        self._active: Optional[Database] = None

    @property
    def state(self) -> ConnectionState:
        with self._lock:
            if self._active is not None:
                return ConnectionState.CONNECTED
            if self._pending is not None:
                return ConnectionState.CONNECTING
            return ConnectionState.UNINITIALIZED

    def ensure_connection(self) -> Database:
        with self._lock:
            if self._active is not None:
                return self._active
            pending = self._pending
            owner = pending is None
            if owner:
                pending = self._pending = Future()

        if not owner:
            return pending.result()

        logger.info("connecting to database")
        try:
            db = self._connector(self._database_url, echo=self._echo)
        except BaseException as e:
            # Waiters always get a DatabaseConnectionError; the caller that ran
            # the connector sees KeyboardInterrupt/SystemExit as raised.
            error = e if isinstance(e, DatabaseConnectionError) else DatabaseConnectionError(cause=e)
            with self._lock:
                self._pending = None
            logger.error("database connection failed: %r", error.cause or error)
            pending.set_exception(error)
            if error is e or not isinstance(e, Exception):
                raise
            raise error from e

        with self._lock:
            self._active = db
            self._pending = None
        pending.set_result(db)
        logger.info("database connected")
        return db

    def close(self) -> None:
        with self._lock:
            db, self._active, self._pending = self._active, None, None
        if db is not None:
            db.dispose()
            logger.info("database connection closed")


connection_manager = ConnectionManager(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
