"""Telemetry sidecar parts: parse metric lines, buffer them in SQLite, drain them, and a test client."""

__version__ = "0.1.0"
__all__ = ["__version__"]