"""
Clock and id helpers shared by the services.
"""

import random
import string
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

_ID_ALPHABET = string.ascii_lowercase + string.digits


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def parse_timestamp(value: Union[str, datetime]) -> datetime:
    """
    Parse a stored timestamp. Naive values are treated as UTC.

    Accepts the trailing "Z" written by JavaScript's toISOString().
    """
    if isinstance(value, datetime):
        parsed = value
    else:
        text = value[:-1] + "+00:00" if value.endswith("Z") else value
        parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def advance_timestamp(now: datetime, previous: Optional[str]) -> datetime:
    """
    Return a timestamp strictly later than `previous`.

    updated_at must move forward on every mutation even when two writes
    land within the clock's resolution.
    """
    if previous is None:
        return now
    last = parse_timestamp(previous)
    if now <= last:
        return last + timedelta(microseconds=1)
    return now


def generate_id(prefix: str) -> str:
    """
    Generate an opaque id: "<prefix>-<epoch millis>-<9 random chars>".
    """
    millis = int(utc_now().timestamp() * 1000)
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"{prefix}-{millis}-{suffix}"
