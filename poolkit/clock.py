"""A wall clock whose state is shared by the class rather than by instances."""

from __future__ import annotations

import argparse
import sys
import time
from typing import ClassVar, Sequence


class Clock:
    """Reads the local time; every read refreshes the shared hour, minute and second.

    The clock is never instantiated: all access goes through the class.
    """

    _hour: ClassVar[int] = 0
    _minute: ClassVar[int] = 0
    _second: ClassVar[int] = 0

    def __new__(cls, *args: object, **kwargs: object) -> Clock:
        raise TypeError(f"{cls.__name__} is not instantiated; use its class methods")

    @classmethod
    def _current_time(cls) -> None:
        now = time.localtime()
        cls._hour = now.tm_hour
        cls._minute = now.tm_min
        cls._second = now.tm_sec

    @classmethod
    def hour(cls) -> int:
        """Return the current local hour."""
        cls._current_time()
        return cls._hour

    @classmethod
    def minute(cls) -> int:
        """Return the current local minute."""
        cls._current_time()
        return cls._minute

    @classmethod
    def second(cls) -> int:
        """Return the current local second."""
        cls._current_time()
        return cls._second

    @classmethod
    def time_string(cls) -> str:
        """Return the current local time as ``hour:minute:second``, unpadded."""
        cls._current_time()
        return f"{cls._hour}:{cls._minute}:{cls._second}"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the current local time."""
    parser = argparse.ArgumentParser(prog="poolkit-clock", description="Print the local time.")
    parser.parse_args(argv)
    print(Clock.time_string())
    return 0


if __name__ == "__main__":
    sys.exit(main())