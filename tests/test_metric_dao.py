import random
import sqlite3
import time

import pytest

from telemetry_sidecar.line_protocol import Metric
from telemetry_sidecar.metric_dao import MetricDao


@pytest.fixture
def dao():
    conn = sqlite3.connect(":memory:")
    metric_dao = MetricDao(conn)
    metric_dao.create_db_tables()
    yield metric_dao
    conn.close()


def _insert_random_metrics(dao, count):
    timestamp_in_nanos = time.time_ns()
    for _ in range(count):
        dao.insert_metric(
            Metric(
                name="http_requests_total",
                tags="method='post',code='200',region='us-ashburn-1'",
                value=str(random.randrange(1, 100)),
                timestamp=timestamp_in_nanos,
            )
        )


def test_create_db_tables():
    conn = sqlite3.connect(":memory:")
    dao = MetricDao(conn)
    dao.create_db_tables()
    assert dao.list_metrics() == []


def test_create_db_tables_drops_existing(dao):
    _insert_random_metrics(dao, 2)
    dao.create_db_tables()
    assert dao.list_metrics() == []


def test_insert_metric(dao):
    dao.insert_metric(
        Metric(
            id=None,
            name="http_requests_total",
            tags='method="post",code="200",region="us-ashburn-1"',
            value="123",
            timestamp=1745825678238,
        )
    )
    [stored] = dao.list_metrics()
    assert stored.id is not None
    assert stored == Metric(
        id=stored.id,
        name="http_requests_total",
        tags='method="post",code="200",region="us-ashburn-1"',
        value="123",
        timestamp=1745825678238,
    )


def test_insert_metric_without_timestamp_stores_zero(dao):
    dao.insert_metric(Metric(name="http_requests_total", tags="", value="789"))
    [stored] = dao.list_metrics()
    assert stored.timestamp == 0


def test_list_metrics(dao):
    _insert_random_metrics(dao, 5)
    metrics = dao.list_metrics()
    assert len(metrics) == 5
    assert len({m.id for m in metrics}) == 5


def test_delete_metric_by_id(dao):
    _insert_random_metrics(dao, 5)
    metrics = dao.list_metrics()
    assert len(metrics) == 5

    dao.delete_metric_by_id(metrics[0].id)
    dao.delete_metric_by_id(metrics[2].id)

    remaining = dao.list_metrics()
    assert len(remaining) == 3
    assert {m.id for m in remaining} == {metrics[1].id, metrics[3].id, metrics[4].id}