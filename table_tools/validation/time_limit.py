# ================================================================================
# Time Limit
# ================================================================================
#
# Wall-clock ceiling for loops that repeat a browser action until a natural
# boundary is reached (e.g. clicking "Previous" until it is disabled).
#
# Usage:
#   limit = TimeLimit(seconds=120)
#   while navigator.to_previous_page() and limit.time_left_else_throw():
#       pass
#
# ================================================================================

import time
from datetime import timedelta
from typing import Union

from loguru import logger

from table_tools.exceptions import TimeLimitReachedError


class TimeLimit:
    """Deadline measured on the monotonic clock from construction or reset()."""

    def __init__(self, seconds: Union[float, timedelta]):
        if isinstance(seconds, timedelta):
            seconds = seconds.total_seconds()
        if seconds < 0:
            raise ValueError(f"Time limit must not be negative: {seconds}")
        self.seconds = float(seconds)
        self.reset()

    def reset(self) -> None:
        self._end = time.monotonic() + self.seconds

    @property
    def remaining(self) -> float:
        return max(0.0, self._end - time.monotonic())

    def time_left(self) -> bool:
        return time.monotonic() <= self._end

    def time_left_else_throw(self) -> bool:
        """
        Return True while the deadline has not passed.

        Raises:
            TimeLimitReachedError: Once the deadline has passed
        """
        if not self.time_left():
            message = f"The specified time limit of {self.seconds:g} seconds has been reached"
            logger.error(message)
            raise TimeLimitReachedError(message)
        return True


__all__ = ["TimeLimit"]
