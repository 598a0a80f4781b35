from datetime import date, datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Timezone-aware current UTC time"""
    return datetime.now(timezone.utc)


def utc_today(clock: Clock = utc_now) -> date:
    return clock().astimezone(timezone.utc).date()


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes read back from databases that drop tzinfo (SQLite)"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def get_clock() -> Clock:
    """FastAPI dependency; tests override it with a simulated clock."""
    return utc_now
