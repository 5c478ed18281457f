"""Argument shapes and the measurements the conditions are built on.

Shape detection decides the default label for a value, and the helpers here
count lengths, look up path status and resolve "now" for temporal values.
"""

import array
import logging
import os
import stat
from collections.abc import Collection, Iterable, Iterator, Mapping
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from itertools import islice, tee
from numbers import Real
from pathlib import Path
from typing import NamedTuple

from .config import get_config
from .formatter import to_text

logger = logging.getLogger(__name__)

ARRAY_TYPES = (tuple, bytes, bytearray, memoryview, array.array)


class Shape(str, Enum):
    """Argument shapes, valued by their LabelConfig field names."""
    OBJECT = "object"
    VALUE = "value"
    STRING = "string"
    COLLECTION = "collection"
    MAP = "map"
    ARRAY = "array"
    ITERABLE = "iterable"
    PATH = "path"
    FILE = "file"
    DIRECTORY = "directory"
    DURATION = "duration"
    DATE = "date"
    TIME = "time"
    DATE_TIME = "date_time"


class PathStatus(str, Enum):
    """Result of a single filesystem metadata lookup."""
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"
    MISSING = "missing"
    UNKNOWN = "unknown"


class DurationUnit(str, Enum):
    """Units for duration bounds given as plain numbers."""
    MICROSECONDS = "us"
    MILLISECONDS = "ms"
    SECONDS = "s"
    MINUTES = "m"
    HOURS = "h"
    DAYS = "d"

    @property
    def microseconds(self) -> int:
        return _MICROS_PER_UNIT[self]


_MICROS_PER_UNIT = {
    DurationUnit.MICROSECONDS: 1,
    DurationUnit.MILLISECONDS: 1_000,
    DurationUnit.SECONDS: 1_000_000,
    DurationUnit.MINUTES: 60_000_000,
    DurationUnit.HOURS: 3_600_000_000,
    DurationUnit.DAYS: 86_400_000_000,
}


def shape_of(value, default: Shape = Shape.OBJECT) -> Shape:
    """Classify a value; ``default`` is used for None and unrecognized values."""
    if value is None:
        return default
    if isinstance(value, str):
        return Shape.STRING
    if isinstance(value, Mapping):
        return Shape.MAP
    if isinstance(value, ARRAY_TYPES):
        return Shape.ARRAY
    if isinstance(value, Collection):
        return Shape.COLLECTION
    if isinstance(value, Iterable):
        return Shape.ITERABLE
    if isinstance(value, datetime):
        return Shape.DATE_TIME
    if isinstance(value, date):
        return Shape.DATE
    if isinstance(value, time):
        return Shape.TIME
    if isinstance(value, timedelta):
        return Shape.DURATION
    if isinstance(value, os.PathLike):
        return Shape.PATH
    if is_number(value):
        return Shape.VALUE
    return default


def resolve_label(label: str | None, shape: Shape) -> str:
    """Use the caller's label, or the configured default for the shape."""
    if label is not None:
        return label
    return getattr(get_config().labels, shape.value)


def render_contents(value) -> str:
    """Render a value for the "contains:" part of a message."""
    text = to_text(value)
    limit = get_config().messages.contents_limit
    if limit is not None and len(text) > limit:
        return text[:limit - 3] + "..."
    return text


def is_number(value) -> bool:
    return isinstance(value, (Real, Decimal))


def is_integer(value) -> bool:
    return isinstance(value, int)


class Measurement(NamedTuple):
    """Length or size of a value.

    ``capped`` means counting stopped at the limit and the real size may be
    larger. ``replay`` is set for one-shot iterators and yields every element
    of the original, including the ones read while counting.
    """
    count: int
    capped: bool
    replay: Iterator | None = None


def split_one_shot(value) -> tuple[Iterable, Iterator | None]:
    """Return an iterable to inspect and, for a one-shot iterator, a replay.

    Elements read from the scan are buffered for the replay, so the caller must
    hand back the replay instead of the original iterator.
    """
    if isinstance(value, Iterator):
        scan, replay = tee(value)
        return scan, replay
    return value, None


def measure(value, limit: int) -> Measurement | None:
    """Return the length or size of a value.

    Sized values report ``len()``. Other iterables are counted by iterating at
    most ``limit`` elements.

    Returns:
        The measurement, or None if the value has no size
    """
    try:
        return Measurement(len(value), False)
    except TypeError:
        pass

    if not isinstance(value, Iterable):
        return None

    scan, replay = split_one_shot(value)
    limit = max(limit, 0)
    count = sum(1 for _ in islice(iter(scan), limit))
    return Measurement(count, count == limit, replay)


def as_path(value) -> Path | None:
    """Coerce a str or path-like value to a Path, None if it is neither."""
    if isinstance(value, Path):
        return value
    try:
        return Path(os.fspath(value))
    except TypeError:
        return None


def path_status(path: Path) -> PathStatus:
    """Classify a path with exactly one ``os.stat`` call."""
    try:
        st = os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return PathStatus.MISSING
    except ValueError:
        # Paths the platform cannot represent, such as embedded NUL bytes.
        return PathStatus.MISSING
    except OSError as e:
        logger.debug(f"Could not determine status of {path}: {e}")
        return PathStatus.UNKNOWN

    if stat.S_ISREG(st.st_mode):
        return PathStatus.FILE
    if stat.S_ISDIR(st.st_mode):
        return PathStatus.DIRECTORY
    return PathStatus.OTHER


def absolute_text(path: Path) -> str:
    return str(path.absolute())


def now_for(moment):
    """Return "now" in the same representation as ``moment``.

    Aware values are compared against now in their own time zone, naive values
    against local now.
    """
    if isinstance(moment, datetime):
        return datetime.now(moment.tzinfo)
    if isinstance(moment, date):
        return date.today()
    if moment.tzinfo is not None:
        return datetime.now(moment.tzinfo).timetz()
    return datetime.now().time()


def total_microseconds(duration: timedelta) -> int:
    return (duration.days * 86_400 + duration.seconds) * 1_000_000 + duration.microseconds


def truncate_duration(duration: timedelta, unit: DurationUnit) -> int:
    """Whole units in ``duration``, truncated toward zero."""
    micros = total_microseconds(duration)
    whole = abs(micros) // unit.microseconds
    return whole if micros >= 0 else -whole


def human_duration(duration: timedelta) -> str:
    """Render a duration compactly.

    Examples:
        >>> human_duration(timedelta(minutes=1, seconds=5))
        '1m 5s'
        >>> human_duration(timedelta(0))
        '0s'
    """
    micros = total_microseconds(duration)
    if micros == 0:
        return "0s"

    sign = "-" if micros < 0 else ""
    remaining = abs(micros)
    parts = []
    for unit in (DurationUnit.DAYS, DurationUnit.HOURS, DurationUnit.MINUTES,
                 DurationUnit.SECONDS, DurationUnit.MILLISECONDS, DurationUnit.MICROSECONDS):
        amount, remaining = divmod(remaining, unit.microseconds)
        if amount:
            parts.append(f"{amount}{unit.value}")

    return sign + " ".join(parts)
