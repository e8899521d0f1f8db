"""Runtime configuration shared by the sidecar and its client."""

import os

DEFAULT_SOCKET_PATH = "/tmp/metrics.sock"
SOCKET_PATH_ENV = "METRICS_UNIX_DOMAIN_SOCKET_PATH"


def unix_domain_socket_path() -> str:
    """Return the metrics socket path from the environment, or the default."""
    return os.environ.get(SOCKET_PATH_ENV, DEFAULT_SOCKET_PATH)