"""SQLite storage of metrics."""

import sqlite3

from .line_protocol import Metric

_DROP_METRIC_TABLE = "DROP TABLE IF EXISTS metric"

_CREATE_METRIC_TABLE = """CREATE TABLE IF NOT EXISTS metric (
    id INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    tags TEXT,
    value TEXT NOT NULL,
    timestamp NUMERIC
)"""

_INSERT_METRIC_SQL = (
    "INSERT INTO metric (name, tags, value, timestamp) VALUES (?1, ?2, ?3, ?4)"
)

_SELECT_METRICS_QUERY = "SELECT id, name, tags, value, timestamp FROM metric"

_DELETE_METRIC_BY_ID = "DELETE FROM metric WHERE id = ?1"


class MetricDao:
    """Reads and writes metrics in the ``metric`` table."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def create_db_tables(self) -> None:
        """Recreate the ``metric`` table, dropping any existing one."""
        with self._conn:
            try:
                self._conn.execute(_DROP_METRIC_TABLE)
            except sqlite3.Error as exc:
                raise RuntimeError("Can't drop 'metric' table") from exc
            try:
                self._conn.execute(_CREATE_METRIC_TABLE)
            except sqlite3.Error as exc:
                raise RuntimeError("Can't create 'metric' table") from exc

    def insert_metric(self, metric: Metric) -> None:
        """Store a metric; a missing timestamp is stored as 0."""
        with self._conn:
            self._conn.execute(
                _INSERT_METRIC_SQL,
                (metric.name, metric.tags, metric.value, metric.timestamp or 0),
            )
        print("Metric saved in SQLite")

    def list_metrics(self) -> list[Metric]:
        """Return every stored metric, with its id."""
        rows = self._conn.execute(_SELECT_METRICS_QUERY).fetchall()
        return [
            Metric(id=row_id, name=name, tags=tags, value=value, timestamp=int(timestamp))
            for row_id, name, tags, value, timestamp in rows
        ]

    def delete_metric_by_id(self, metric_id: int) -> None:
        """Remove the metric with the given id."""
        with self._conn:
            self._conn.execute(_DELETE_METRIC_BY_ID, (metric_id,))