"""Utility functions package.

Broker-only helpers (auth, CORS, error mapping) pull in ``firebase_functions``
and are imported from their own modules.
"""

from .logger import get_logger
from .timestamps import (
    now,
    to_iso8601_z,
    parse_iso8601_z,
    serialize_timestamps,
    deserialize_timestamps,
    ISO8601_Z_PATTERN,
)

__all__ = [
    "get_logger",
    "now",
    "to_iso8601_z",
    "parse_iso8601_z",
    "serialize_timestamps",
    "deserialize_timestamps",
    "ISO8601_Z_PATTERN",
]
