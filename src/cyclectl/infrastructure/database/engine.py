"""Database engine setup for SQLite with WAL mode.

SQLite is the persistence layer: WAL mode for concurrent reads, ACID
transactions so a half-built graph is never visible to other readers.
The DB is stored at {store_root}/.cyclectl/{name}.db, where ``name`` comes
from the ``[store]`` config section.

SQLAlchemy Core (not ORM) is used because cyclectl is a short-lived
CLI process — no benefit from session management or identity maps.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from cyclectl.infrastructure.database.schema import metadata

STORE_DIRNAME = ".cyclectl"
DEFAULT_STORE_NAME = "cyclectl"


def create_db_engine(db_path: Path) -> Engine:
    """Create a SQLite engine with WAL mode and foreign keys enabled."""
    engine = create_engine(f"sqlite:///{db_path}", echo=False)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def init_database(store_root: Path, name: str = DEFAULT_STORE_NAME) -> Engine:
    """Initialize the database at ``{store_root}/.cyclectl/{name}.db``.

    Creates the ``.cyclectl/`` directory and all tables from
    :data:`schema.metadata`. Idempotent — safe to call on an existing store.

    Returns the engine ready for use.
    """
    store_dir = store_root / STORE_DIRNAME
    store_dir.mkdir(parents=True, exist_ok=True)

    engine = create_db_engine(store_dir / f"{name}.db")
    metadata.create_all(engine)
    return engine
