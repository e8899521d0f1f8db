"""Opening the SQLite database named by the environment."""

import os
import sqlite3

DATABASE_URL_ENV = "DATABASE_URL"


class DatabaseConfigError(Exception):
    """The database is not configured or cannot be opened."""


def create_connection() -> sqlite3.Connection:
    """Open a connection to the database named by ``DATABASE_URL``."""
    db_name = os.environ.get(DATABASE_URL_ENV)
    if db_name is None:
        raise DatabaseConfigError("'DATABASE_URL' not specified")

    print(f"Using DATABASE_URL: {db_name}")

    try:
        return sqlite3.connect(db_name)
    except sqlite3.Error as exc:
        raise DatabaseConfigError(f"Can't open connection to db {db_name}") from exc