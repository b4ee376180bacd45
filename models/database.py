"""Database connection and schema."""
import structlog
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
import streamlit as st

from utils.config import database_url
from .errors import StorageError

log = structlog.get_logger(__name__)


def create_ledger_engine(url: str) -> Engine:
    """Create a SQLAlchemy engine with SQLite tuned for a single local user."""
    is_sqlite = url.startswith("sqlite")
    engine = create_engine(
        url,
        future=True,
        connect_args={"check_same_thread": False, "timeout": 30} if is_sqlite else {},
    )

    if is_sqlite:
        @event.listens_for(engine, "connect")
        def _set_sqlite_pragmas(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA journal_mode=WAL;")
            cursor.execute("PRAGMA synchronous=NORMAL;")
            cursor.execute("PRAGMA busy_timeout=5000;")
            cursor.close()

    return engine


@st.cache_resource
def get_engine() -> Engine:
    """Get the process-wide engine for the configured database."""
    engine = create_ledger_engine(database_url())
    init_db(engine)
    return engine


def init_db(engine: Engine) -> None:
    """Create the expenses table if it does not exist."""
    try:
        with engine.begin() as conn:
            conn.execute(
                text(
                    """
                    CREATE TABLE IF NOT EXISTS expenses (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        name TEXT NOT NULL,
                        amount REAL NOT NULL,
                        date TEXT NOT NULL,
                        category INTEGER NOT NULL
                    );
                    """
                )
            )
            conn.execute(text("CREATE INDEX IF NOT EXISTS ix_expenses_date ON expenses (date);"))
    except SQLAlchemyError as exc:
        log.error("storage_error", operation="init_db", error=str(exc))
        raise StorageError(f"Could not initialize database: {exc}") from exc
