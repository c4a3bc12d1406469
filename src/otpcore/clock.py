import datetime
import time
from typing import Protocol, Union


class Clock(Protocol):
    """
    Source of the current time.

    now() returns whole seconds since the Unix epoch. It is expected to be
    non-decreasing in practice but nothing guards against the host clock
    being stepped backwards.
    """

    def now(self) -> int:
        ...


class SystemClock(object):
    """
    Reads the host wall clock.
    """

    def now(self) -> int:
        return int(time.time())


class FixedClock(object):
    """
    Clock that only moves when told to.

    :param timestamp: initial time, as seconds since the epoch or a datetime
    """

    def __init__(self, timestamp: Union[int, float, datetime.datetime] = 0) -> None:
        self.set(timestamp)

    def now(self) -> int:
        return self._timestamp

    def set(self, timestamp: Union[int, float, datetime.datetime]) -> None:
        if isinstance(timestamp, datetime.datetime):
            timestamp = timestamp.timestamp()
        self._timestamp = int(timestamp)

    def advance(self, seconds: int) -> int:
        self._timestamp += int(seconds)
        return self._timestamp
