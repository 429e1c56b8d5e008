# syslog_loadgen/timestamps.py
"""RFC 3339 timestamps with microsecond precision."""

import time
from typing import Callable, Optional, Tuple

from .exceptions import ClockError

# "YYYY-MM-DDTHH:MM:SS.ffffffZ"
TIMESTAMP_LENGTH = 27


class TimestampGenerator:
    """Generate event timestamps and detect second boundaries.

    The text is built from *local* calendar fields but carries a literal
    ``Z`` suffix. Receivers tested with this tool expect that exact shape,
    so it is kept even though it is not a valid UTC designation.
    """

    def __init__(
        self,
        clock: Callable[[], int] = time.time_ns,
        to_local: Callable[[int], time.struct_time] = time.localtime,
    ):
        self._clock = clock
        self._to_local = to_local
        self._last_second: Optional[int] = None

    def next(self) -> Tuple[str, bool]:
        """Return ``(text, second_changed)`` for the current instant.

        ``second_changed`` is never true on the first call. Raises
        ClockError when the clock or the calendar conversion fails.
        """
        try:
            now_ns = self._clock()
        except (OSError, OverflowError, ValueError) as e:
            raise ClockError(f"Unable to read the system clock: {e}") from e

        seconds, nanoseconds = divmod(now_ns, 1_000_000_000)

        try:
            local = self._to_local(seconds)
        except (OSError, OverflowError, ValueError) as e:
            raise ClockError(f"Unable to convert {seconds} to local time: {e}") from e

        text = time.strftime("%Y-%m-%dT%H:%M:%S.", local) + f"{nanoseconds // 1000:06d}Z"

        second_changed = self._last_second is not None and self._last_second != seconds
        self._last_second = seconds

        return text, second_changed
