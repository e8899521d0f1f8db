"""Parsing single metric lines of the form ``name{tags} value [timestamp]``."""

import re
from dataclasses import dataclass
from typing import Optional

_U64_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


class MetricParseError(ValueError):
    """A line could not be turned into a metric."""


@dataclass
class Metric:
    """One metric sample, optionally carrying its database id."""

    name: str
    tags: str
    value: str
    timestamp: Optional[int] = None
    id: Optional[int] = None


def _parse_timestamp(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise MetricParseError("Can't parse timestamp")
    number = int(text)
    if number > _U64_MAX:
        raise MetricParseError("Can't parse timestamp")
    return number


def parse_metric(line: str) -> Metric:
    """Build a metric from a single line."""
    parts = line.split()
    if len(parts) not in (2, 3):
        raise MetricParseError(f"Can't construct metric from line '{line}'")

    name = parts[0]
    tags = ""

    start = name.find("{")
    if start != -1:
        end = name.rfind("}")
        if end == -1 or end < start:
            raise MetricParseError(f"Can't parse tags '{line}'")
        tags = name[start + 1 : end]
        name = name[:start]
        if not name:
            raise MetricParseError(f"Can't construct metric without name '{line}'")

    timestamp = _parse_timestamp(parts[2]) if len(parts) == 3 else None

    return Metric(name=name, tags=tags, value=parts[1], timestamp=timestamp)