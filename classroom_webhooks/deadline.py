"""
Decide whether work arrived on time.
"""

import datetime
from typing import Optional

SUCCESS = "success"
FAILURE = "failure"


def _as_utc(dt: datetime.datetime) -> datetime.datetime:
    # SQLite hands back naive datetimes; everything we store is UTC.
    if dt.tzinfo is None:
        return dt.replace(tzinfo=datetime.timezone.utc)
    return dt


def push_status(pushed_at: datetime.datetime, due_date: Optional[datetime.datetime]) -> str:
    """
    The commit status state for work pushed at `pushed_at`.

    Anything is on time if there's no due date.  Pushing exactly at the due
    date is still on time.
    """
    if due_date is None:
        return SUCCESS
    return SUCCESS if _as_utc(pushed_at) <= _as_utc(due_date) else FAILURE
