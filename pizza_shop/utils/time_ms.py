# pizza_shop/utils/time_ms.py
import time

SEC_MS = 1000
MIN_MS = SEC_MS * 60
HOUR_MS = MIN_MS * 60
DAY_MS = HOUR_MS * 24
WEEK_MS = DAY_MS * 7


def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


def time_ms(ms: int = 0, seconds: int = 0, minutes: int = 0,
            hours: int = 0, days: int = 0, weeks: int = 0) -> int:
    return (
        ms
        + seconds * SEC_MS
        + minutes * MIN_MS
        + hours * HOUR_MS
        + days * DAY_MS
        + weeks * WEEK_MS
    )
