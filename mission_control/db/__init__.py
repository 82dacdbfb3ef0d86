"""Database package for Mission Control."""

from mission_control.db.database import (
    DatabaseManager,
    get_db_manager,
    init_db_manager,
)

__all__ = [
    "DatabaseManager",
    "get_db_manager",
    "init_db_manager",
]
