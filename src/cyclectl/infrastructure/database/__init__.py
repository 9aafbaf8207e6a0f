"""SQLite database engine and schema via SQLAlchemy Core."""

from cyclectl.infrastructure.database.engine import create_db_engine, init_database
from cyclectl.infrastructure.database.schema import edges, metadata, vertices

__all__ = [
    "create_db_engine",
    "edges",
    "init_database",
    "metadata",
    "vertices",
]
