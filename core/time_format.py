"""
time_format.py - Date/Time Token Formatting

Renders instants as fixed-width date (YYYYMMDD) and time (HHMMSS) tokens.
Missing instants fall back to an explicit "now" supplied by the caller.
"""

from datetime import datetime
from typing import Optional
import logging

logger = logging.getLogger(__name__)


def _resolve(instant: Optional[datetime], now: Optional[datetime]) -> datetime:
    if instant is not None:
        return instant
    return now if now is not None else datetime.now()


def format_date(instant: Optional[datetime], now: Optional[datetime] = None) -> str:
    """
    Format date token

    Args:
        instant: Point in time (None means unknown)
        now: Fallback instant used when instant is None

    Returns:
        8-digit string, e.g. 20240415
    """
    d = _resolve(instant, now)
    return f"{d.year:04d}{d.month:02d}{d.day:02d}"


def format_time(instant: Optional[datetime], now: Optional[datetime] = None) -> str:
    """
    Format time token

    Args:
        instant: Point in time (None means unknown)
        now: Fallback instant used when instant is None

    Returns:
        6-digit string, e.g. 093000
    """
    d = _resolve(instant, now)
    return f"{d.hour:02d}{d.minute:02d}{d.second:02d}"


def instant_from_epoch(seconds: float) -> Optional[datetime]:
    """
    Convert epoch seconds to a local datetime

    Args:
        seconds: Epoch seconds (<= 0 means unknown)

    Returns:
        Local datetime, or None if unknown or not representable
    """
    if not seconds or seconds <= 0:
        return None
    try:
        return datetime.fromtimestamp(seconds)
    except (OverflowError, OSError, ValueError) as e:
        logger.debug("Timestamp %r not representable, treated as unknown: %s", seconds, e)
        return None
