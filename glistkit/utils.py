"""General helpers: logging, maths, randomness, time and string utilities."""

from __future__ import annotations

import os
import random
import re
import sys
import time
from datetime import datetime
from enum import IntEnum
from typing import Any

PI = 3.14159265358979323846
_FLOAT_EPSILON = 1.1920928955078125e-07
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_logging_enabled = True
_rng = random.Random()


class LogLevel(IntEnum):
    """Severity of a log message."""

    INFO = 0
    DEBUG = 1
    WARNING = 2
    ERROR = 3


class Log:
    """A log message that is built up piece by piece and printed on flush.

    Used as a context manager, the message is flushed when the block ends.
    """

    def __init__(self, tag: str = "", level: LogLevel = LogLevel.INFO) -> None:
        self.tag = tag
        self.level = LogLevel(level)
        self._parts: list[str] = []

    def append(self, value: Any) -> Log:
        """Add a value to the message and return the log for chaining."""
        self._parts.append(to_str(value))
        return self

    __lshift__ = append

    @property
    def message(self) -> str:
        return "".join(self._parts)

    def flush(self) -> str | None:
        """Print the message and clear it; return the printed line, if any."""
        text = self.message
        self._parts.clear()
        if not _logging_enabled:
            return None
        line = f"[{self.level.name}] {self.tag}: {text}"
        stream = sys.stderr if self.level is LogLevel.ERROR else sys.stdout
        print(line, file=stream)
        return line

    def __enter__(self) -> Log:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.flush()


def logi(tag: str = "") -> Log:
    """Start an info message."""
    return Log(tag, LogLevel.INFO)


def logd(tag: str = "") -> Log:
    """Start a debug message."""
    return Log(tag, LogLevel.DEBUG)


def logw(tag: str = "") -> Log:
    """Start a warning message."""
    return Log(tag, LogLevel.WARNING)


def loge(tag: str = "") -> Log:
    """Start an error message."""
    return Log(tag, LogLevel.ERROR)


def set_logging_enabled(enabled: bool) -> None:
    global _logging_enabled
    _logging_enabled = bool(enabled)


def is_logging_enabled() -> bool:
    return _logging_enabled


def enable_logging() -> None:
    set_logging_enabled(True)


def disable_logging() -> None:
    set_logging_enabled(False)


def log_level_name(level: int) -> str:
    """Return the printed name of a log level."""
    return LogLevel(level).name


def default_width() -> int:
    return 960


def default_height() -> int:
    return 540


def default_screen_scaling() -> int:
    return 2


def rad_to_deg(radians: float) -> float:
    return radians * 180 / PI


def deg_to_rad(degrees: float) -> float:
    return degrees * PI / 180


def seed_random() -> None:
    """Seed the shared random generator from the clock and process id."""
    now_ns = time.time_ns()
    seconds, micros = divmod(now_ns // 1000, 1_000_000)
    _rng.seed((seconds ^ micros) ^ os.getpid())


def random_float(maximum: float) -> float:
    """Return a random float in [0, maximum)."""
    return (maximum * _rng.random()) * (1.0 - _FLOAT_EPSILON)


def random_signed() -> float:
    """Return a random float in [-1, 1)."""
    return -1.0 + (2.0 * _rng.random()) * (1.0 - _FLOAT_EPSILON)


def system_time_millis() -> int:
    """Milliseconds from a monotonic clock."""
    return time.monotonic_ns() // 1_000_000


def unix_time() -> int:
    return int(time.time())


def year() -> int:
    return time.localtime().tm_year


def month() -> int:
    return time.localtime().tm_mon


def day() -> int:
    return time.localtime().tm_mday


def weekday() -> int:
    """Day of the week, with Sunday as 0."""
    return (time.localtime().tm_wday + 1) % 7


def hours() -> int:
    return time.localtime().tm_hour


def minutes() -> int:
    return time.localtime().tm_min


def seconds() -> int:
    return time.localtime().tm_sec


def timestamp_string(fmt: str = "%Y-%m-%d-%H-%M-%S-%i") -> str:
    """Format the local time; ``%i`` stands for zero-padded milliseconds."""
    now = datetime.now()
    millis = now.microsecond // 1000
    pattern = string_replace(fmt, "%i", to_str(millis, 3, "0"))
    return now.strftime(pattern)


def string_replace(text: str, search: str, replace: str) -> str:
    """Replace every non-overlapping occurrence of ``search``, left to right."""
    if not search:
        raise ValueError("search string must not be empty")
    return text.replace(search, replace)


def to_lower(text: str) -> str:
    return text.lower()


def to_upper(text: str) -> str:
    return text.upper()


def to_str(value: Any, width: int | None = None, fill: str = " ") -> str:
    """Render a value as text; with a width, floats are fixed-point and padded."""
    if len(fill) != 1:
        raise ValueError("fill must be a single character")
    if isinstance(value, bool):
        text = str(int(value))
    elif isinstance(value, float):
        text = f"{value:f}" if width is not None else f"{value:g}"
    else:
        text = str(value)
    if width is not None:
        text = text.rjust(width, fill)
    return text


_INT_PATTERN = re.compile(r"\s*([+-]?\d+)")


def to_int(text: str) -> int:
    """Parse a leading integer, ignoring trailing text; 0 when none is found."""
    match = _INT_PATTERN.match(text)
    if match is None:
        return 0
    return max(_INT_MIN, min(_INT_MAX, int(match.group(1))))


def sign(value: Any) -> int:
    """Return -1, 0 or 1 according to the sign of ``value``."""
    return int(0 < value) - int(value < 0)