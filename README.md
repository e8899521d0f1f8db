# telemetry-sidecar

Building blocks for a small telemetry sidecar. Metrics arrive as text lines.
Each line is parsed into a `Metric`, kept in a SQLite table, and later drained
from that table. A test client streams generated metric lines to a Unix domain
socket.

## Metric lines

A line has a name with optional tags in braces, a value and an optional
timestamp. The parts are separated by whitespace:

```
http_requests_total{method="post",code="200",region="us-ashburn-1"} 123 1745825678238
http_requests_total{method="post",code="404"} 789
http_requests_total 123 1745825678238
```

Parse a line with `parse_metric` from `telemetry_sidecar.line_protocol`:

```python
from telemetry_sidecar.line_protocol import parse_metric, MetricParseError

metric = parse_metric('http_requests_total{method="post"} 123 1745825678238')
metric.name       # 'http_requests_total'
metric.tags       # 'method="post"'
metric.value      # '123'
metric.timestamp  # 1745825678238
metric.id         # None
```

The value is kept as text. If no timestamp is given, `timestamp` is `None`.
`parse_metric` raises `MetricParseError` (a `ValueError`) when:

- the line does not have two or three parts,
- an opening `{` has no closing `}` after it,
- tags are present but the name before them is empty,
- the timestamp is not an unsigned integer that fits in 64 bits.

## Storing and draining metrics

`MetricDao` in `telemetry_sidecar.metric_dao` wraps a `sqlite3.Connection`:

```python
import sqlite3
from telemetry_sidecar.metric_dao import MetricDao
from telemetry_sidecar.metric_storage import MetricStorage
from telemetry_sidecar.metric_publisher import MetricPublisher

dao = MetricDao(sqlite3.connect(":memory:"))
dao.create_db_tables()          # drops and recreates the `metric` table

MetricStorage(dao).store_metric(metric)
published = MetricPublisher(dao).publish_new_metrics()
```

- `create_db_tables()` drops any existing `metric` table and creates it again.
- `insert_metric(metric)` stores a metric. A missing timestamp is stored as 0.
- `list_metrics()` returns every stored metric with its `id` set.
- `delete_metric_by_id(metric_id)` removes one metric.

`MetricStorage.store_metric` prints the metric and inserts it.
`MetricPublisher.publish_new_metrics` goes through every stored metric. It
prints each one, deletes it from the table, and returns the list of metrics it
removed.

`create_connection()` in `telemetry_sidecar.db_utils` opens the SQLite
database that the `DATABASE_URL` environment variable names. It raises
`DatabaseConfigError` if the variable is not set or the database cannot be
opened.

## Socket path

`unix_domain_socket_path()` in `telemetry_sidecar.config` returns the value of
`METRICS_UNIX_DOMAIN_SOCKET_PATH`. If that is not set, it returns
`/tmp/metrics.sock`.

## Test client

```
telemetry-sidecar-client [--socket-path PATH] [--count N] [--interval SECONDS] [--initial-delay SECONDS]
```

The client waits for the initial delay (3 seconds by default) and connects to
the socket. The socket is `--socket-path` if given, otherwise
`unix_domain_socket_path()`. It then sends up to `--count` lines (default
1,000,000), one every `--interval` seconds (default 3). Each line carries a
random value from 1 to 1000 and the current time in milliseconds. Every tenth
line, starting with the first, has no name, so it exercises the receiver's
error handling. The client stops early when it receives SIGTERM. If it cannot
connect or a write fails, it prints an error and exits with status 1.

The same behaviour is available from code through
`telemetry_sidecar.client.send_metrics(socket_path, count, interval,
initial_delay)`. This coroutine returns the number of lines sent.
`build_metric_line(index, value, timestamp_ms)` builds a single line.

## What this package does not do

- There is no sidecar server. Nothing here listens on the Unix domain socket,
  reads lines from it, or runs the storage and publishing steps on a schedule.
  You wire `parse_metric`, `MetricStorage` and `MetricPublisher` together
  yourself.
- `publish_new_metrics` does not send metrics to any collector over the
  network. It prints them and removes them from the database.

## Running the tests

```
pip install -e ".[test]"
pytest
```