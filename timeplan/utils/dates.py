"""Date coercion and day arithmetic helpers."""
from datetime import date, datetime
from typing import Any, Optional, Union

import pandas as pd

DateLike = Union[date, datetime, pd.Timestamp, str]


def parse_date(value: Any) -> Optional[pd.Timestamp]:
    """
    Coerce a date-like value to a day-normalized Timestamp.

    Args:
        value: date, datetime, Timestamp, ISO string, or None/NaN/''

    Returns:
        Timestamp at midnight, or None for missing values

    Raises:
        ValueError: If the value is present but cannot be parsed
    """
    if value is None:
        return None
    if isinstance(value, str) and value.strip() == '':
        return None
    if not isinstance(value, (date, datetime, pd.Timestamp, str)) and pd.isna(value):
        return None

    try:
        ts = pd.to_datetime(value)
    except (ValueError, TypeError) as e:
        raise ValueError(f'Cannot parse date value {value!r}: {e}') from e

    if pd.isna(ts):
        return None
    if ts.tzinfo is not None:
        ts = ts.tz_localize(None)
    return ts.normalize()


def days_between(start: Optional[pd.Timestamp], end: Optional[pd.Timestamp]) -> int:
    """Whole calendar days from start to end; 0 when either is missing or end precedes start."""
    if start is None or end is None:
        return 0
    return max(0, (end - start).days)
