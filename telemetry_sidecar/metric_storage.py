"""Storing metrics received by the sidecar."""

from .line_protocol import Metric
from .metric_dao import MetricDao


class MetricStorage:
    """Persists received metrics through a DAO."""

    def __init__(self, dao: MetricDao) -> None:
        self._dao = dao

    def store_metric(self, metric: Metric) -> None:
        """Record a received metric."""
        print(f"Metric received: {metric!r}")
        self._dao.insert_metric(metric)