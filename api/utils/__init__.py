"""Utility modules."""
from api.utils.time_utils import isoformat, parse_iso_timestamp, utc_now

__all__ = [
    "isoformat",
    "parse_iso_timestamp",
    "utc_now",
]
