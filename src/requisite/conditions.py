"""Canonical condition evaluators.

Every condition is evaluated exactly once here and reported as a Verdict.
The check, check_if and require modules only translate a Verdict into their
own result convention: a bool, the value or None, or the value or an error.

Evaluators never raise for bad input. A None value yields an absent Verdict,
and a value the condition cannot apply to yields an unsupported Verdict.
"""

import ipaddress
import json
import re
from collections.abc import Collection, Container, Iterable, Iterator, Mapping
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from enum import Enum
from functools import partial
from xml.etree.ElementTree import ParseError

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import fromstring as defused_fromstring

from .formatter import format_message
from .shapes import (
    DurationUnit,
    PathStatus,
    Shape,
    absolute_text,
    as_path,
    human_duration,
    is_integer,
    is_number,
    measure,
    now_for,
    path_status,
    render_contents,
    shape_of,
    split_one_shot,
    truncate_duration,
)

# Rejects a double @ or an empty domain label; not RFC 5322.
EMAIL_PATTERN = re.compile(r"[^\s@]+@([^\s@.,]+\.)+[^\s@.,]{2,}", re.IGNORECASE)
URL_PATTERN = re.compile(r"https?://.+", re.IGNORECASE)
UUID_PATTERN = re.compile(r"[a-f0-9]{8}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{12}", re.IGNORECASE)


class Comparison(str, Enum):
    """How a measured quantity is compared with its bound(s)."""
    EQUAL = "equal"
    GREATER_THAN = "greater_than"
    GREATER_OR_EQUAL = "greater_or_equal"
    LESS_THAN = "less_than"
    LESS_OR_EQUAL = "less_or_equal"
    BETWEEN = "between"


class Timing(str, Enum):
    """Position of a point in time relative to now."""
    FUTURE = "future"
    PAST = "past"
    NOW_OR_FUTURE = "now_or_future"
    NOW_OR_PAST = "now_or_past"


class PathExpectation(str, Enum):
    """What a filesystem path is expected to be."""
    EXISTS = "exists"
    NOT_EXISTS = "not_exists"
    REGULAR_FILE = "regular_file"
    DIRECTORY = "directory"


class TextFormat(str, Enum):
    """Recognized text formats."""
    NUMBERS_ONLY = "numbers_only"
    ALPHAS_ONLY = "alphas_only"
    ALPHA_NUMERIC_ONLY = "alpha_numeric_only"
    EMAIL = "email"
    URL = "url"
    IP_ADDRESS = "ip_address"
    IPV4_ADDRESS = "ipv4_address"
    IPV6_ADDRESS = "ipv6_address"
    UUID = "uuid"
    JSON = "json"
    XML = "xml"


@dataclass(frozen=True)
class Verdict:
    """Outcome of evaluating one condition against one value.

    ``replay`` is set when the value was a one-shot iterator that had to be
    read; it yields every original element and replaces the spent iterator.
    """
    passed: bool
    shape: Shape
    detail: str = ""
    absent: bool = False
    checkable: bool = True
    replay: Iterator | None = None

    @property
    def refuted(self) -> bool:
        """True when a present, checkable value fails the condition."""
        return self.checkable and not self.passed

    def result(self, value):
        """The value to hand back to the caller after a passing check."""
        return value if self.replay is None else self.replay

    @classmethod
    def holds(cls, shape: Shape, replay: Iterator | None = None) -> "Verdict":
        return cls(True, shape, replay=replay)

    @classmethod
    def fails(cls, shape: Shape, template: str, *args) -> "Verdict":
        return cls(False, shape, format_message(template, *args))

    @classmethod
    def missing(cls, shape: Shape) -> "Verdict":
        return cls(False, shape, " is null", absent=True, checkable=False)

    @classmethod
    def unsupported(cls, shape: Shape, template: str, *args) -> "Verdict":
        return cls(False, shape, format_message(template, *args), checkable=False)


def compare(op: Comparison, actual, low, high=None) -> bool:
    """Compare ``actual`` with its bound(s); BETWEEN is a closed interval."""
    if op is Comparison.EQUAL:
        return actual == low
    if op is Comparison.GREATER_THAN:
        return actual > low
    if op is Comparison.GREATER_OR_EQUAL:
        return actual >= low
    if op is Comparison.LESS_THAN:
        return actual < low
    if op is Comparison.LESS_OR_EQUAL:
        return actual <= low
    return low <= actual <= high


def describe_bound(op: Comparison, low, high, noun: str, integral: bool, render=str) -> str:
    """Describe what the bound requires, for the second half of a message."""
    if op is Comparison.EQUAL:
        return format_message("required {} is: {}", noun, render(low))
    if op is Comparison.GREATER_THAN:
        if integral:
            return format_message("minimum is: {}", render(low + 1))
        return format_message("must be greater than: {}", render(low))
    if op is Comparison.GREATER_OR_EQUAL:
        return format_message("minimum is: {}", render(low))
    if op is Comparison.LESS_THAN:
        if integral:
            return format_message("maximum is: {}", render(low - 1))
        return format_message("must be less than: {}", render(low))
    if op is Comparison.LESS_OR_EQUAL:
        return format_message("maximum is: {}", render(low))
    return format_message("must be between: {} and {}", render(low), render(high))


def _bounds_valid(op: Comparison, low, high, accepts) -> bool:
    if not accepts(low):
        return False
    if op is Comparison.BETWEEN:
        return accepts(high)
    return True


def _bounds_text(op: Comparison, low, high) -> str:
    if op is Comparison.BETWEEN:
        return format_message("{} and {}", low, high)
    return format_message("{}", low)


def present(value) -> Verdict:
    if value is None:
        return Verdict.missing(Shape.OBJECT)
    return Verdict.holds(shape_of(value))


def not_empty(value) -> Verdict:
    shape = shape_of(value)
    if value is None:
        return Verdict.missing(shape)

    measured = measure(value, 1)
    if measured is None:
        return Verdict.unsupported(shape, " has no length: {}", render_contents(value))
    if measured.count == 0:
        return Verdict.fails(shape, " is empty")
    return Verdict.holds(shape, measured.replay)


def not_blank(value) -> Verdict:
    shape = shape_of(value, Shape.STRING)
    if value is None:
        return Verdict.missing(shape)
    if not isinstance(value, str):
        return Verdict.unsupported(shape, " is not text: {}", render_contents(value))
    if not value:
        return Verdict.fails(shape, " is empty")
    if not value.strip():
        return Verdict.fails(shape, " is blank")
    return Verdict.holds(shape)


def length(op: Comparison, value, low, high=None) -> Verdict:
    """Compare the length of a string or array with the bound(s)."""
    return _measured(op, value, low, high, Shape.STRING, "length")


def size(op: Comparison, value, low, high=None) -> Verdict:
    """Compare the size of a collection, mapping or iterable with the bound(s).

    Iterables without ``len()`` are counted one element past the largest
    bound. A one-shot iterator is read through a buffer and the Verdict
    carries its replay.
    """
    return _measured(op, value, low, high, Shape.COLLECTION, "size")


def _measured(op: Comparison, value, low, high, default_shape: Shape, noun: str) -> Verdict:
    shape = shape_of(value, default_shape)
    if value is None:
        return Verdict.missing(shape)
    if not _bounds_valid(op, low, high, is_integer):
        return Verdict.unsupported(shape, " cannot be compared with: {}", _bounds_text(op, low, high))

    limit = (high if op is Comparison.BETWEEN else low) + 1
    measured = measure(value, limit)
    if measured is None:
        return Verdict.unsupported(shape, " has no {}: {}", noun, render_contents(value))

    count, capped, replay = measured
    if compare(op, count, low, high):
        return Verdict.holds(shape, replay)

    actual = f"at least {count}" if capped else count
    return Verdict.fails(
        shape,
        " has {} {}, but {}, contains: {}",
        noun,
        actual,
        describe_bound(op, low, high, noun, integral=True),
        render_contents(value),
    )


def number(op: Comparison, value, low, high=None) -> Verdict:
    """Compare a number with the bound(s)."""
    shape = Shape.VALUE
    if value is None:
        return Verdict.missing(shape)
    if not is_number(value):
        return Verdict.unsupported(shape, " is not a number: {}", render_contents(value))
    if not _bounds_valid(op, low, high, is_number):
        return Verdict.unsupported(shape, " cannot be compared with: {}", _bounds_text(op, low, high))

    try:
        passed = compare(op, value, low, high)
    except (ArithmeticError, TypeError):
        # Ordering a Decimal NaN signals InvalidOperation.
        return Verdict.unsupported(
            shape, " is {}, which cannot be compared with: {}", value, _bounds_text(op, low, high)
        )

    if passed:
        return Verdict.holds(shape)

    integral = is_integer(value) and is_integer(low) and (high is None or is_integer(high))
    return Verdict.fails(shape, " is {}, but {}", value, describe_bound(op, low, high, "value", integral))


def _is_timedelta(bound) -> bool:
    return isinstance(bound, timedelta)


def _unit_text(bound, unit: DurationUnit) -> str:
    return f"{bound}{unit.value}"


def duration(op: Comparison, value, low, high=None, unit: DurationUnit | None = None) -> Verdict:
    """Compare a timedelta with the bound(s).

    Bounds are timedeltas, or whole numbers of ``unit`` when a unit is given;
    the duration is then truncated toward zero to that unit first.
    """
    shape = Shape.DURATION
    if value is None:
        return Verdict.missing(shape)
    if not isinstance(value, timedelta):
        return Verdict.unsupported(shape, " is not a duration: {}", render_contents(value))

    if unit is None:
        accepts = _is_timedelta
        actual = value
        render = human_duration
    else:
        try:
            unit = DurationUnit(unit)
        except ValueError:
            return Verdict.unsupported(shape, " cannot be compared in unit: {}", unit)
        accepts = is_integer
        actual = truncate_duration(value, unit)
        render = partial(_unit_text, unit=unit)

    if not _bounds_valid(op, low, high, accepts):
        return Verdict.unsupported(shape, " cannot be compared with: {}", _bounds_text(op, low, high))

    if compare(op, actual, low, high):
        return Verdict.holds(shape)

    return Verdict.fails(
        shape,
        " is {}, but {}",
        human_duration(value),
        describe_bound(op, low, high, "duration", integral=False, render=render),
    )


_TIMING_TEXT = {
    Timing.FUTURE: "in the future",
    Timing.PAST: "in the past",
    Timing.NOW_OR_FUTURE: "now or in the future",
    Timing.NOW_OR_PAST: "now or in the past",
}


def moment(timing: Timing, value) -> Verdict:
    """Compare a datetime, date or time with now."""
    shape = shape_of(value, Shape.DATE_TIME)
    if value is None:
        return Verdict.missing(shape)
    if not isinstance(value, (datetime, date, time)):
        return Verdict.unsupported(shape, " is not a date or time: {}", render_contents(value))

    now = now_for(value)
    try:
        if timing is Timing.FUTURE:
            passed = value > now
        elif timing is Timing.PAST:
            passed = value < now
        elif timing is Timing.NOW_OR_FUTURE:
            passed = value >= now
        else:
            passed = value <= now
    except TypeError:
        # Aware times whose zone has no fixed offset cannot be ordered.
        return Verdict.unsupported(shape, " cannot be compared with now: {}", value.isoformat())

    if passed:
        return Verdict.holds(shape)
    return Verdict.fails(shape, " is not {}: {} vs {}", _TIMING_TEXT[timing], value.isoformat(), now.isoformat())


_PATH_SHAPES = {
    PathExpectation.EXISTS: Shape.PATH,
    PathExpectation.NOT_EXISTS: Shape.PATH,
    PathExpectation.REGULAR_FILE: Shape.FILE,
    PathExpectation.DIRECTORY: Shape.DIRECTORY,
}


def path(expectation: PathExpectation, value) -> Verdict:
    """Check a str or path-like value against the filesystem.

    Performs exactly one metadata lookup. A path whose status cannot be
    determined (for example, permission denied on a parent) satisfies
    neither existence nor non-existence.
    """
    shape = _PATH_SHAPES[expectation]
    if value is None:
        return Verdict.missing(shape)

    target = as_path(value)
    if target is None:
        return Verdict.unsupported(shape, " is not a path: {}", render_contents(value))

    status = path_status(target)
    if status is PathStatus.UNKNOWN:
        return Verdict.unsupported(shape, " could not be checked: {}", absolute_text(target))

    if expectation is PathExpectation.NOT_EXISTS:
        if status is PathStatus.MISSING:
            return Verdict.holds(shape)
        return Verdict.fails(shape, " exists: {}", absolute_text(target))

    if status is PathStatus.MISSING:
        return Verdict.fails(shape, " does not exist: {}", absolute_text(target))
    if expectation is PathExpectation.REGULAR_FILE and status is not PathStatus.FILE:
        return Verdict.fails(shape, " is not a regular file: {}", absolute_text(target))
    if expectation is PathExpectation.DIRECTORY and status is not PathStatus.DIRECTORY:
        return Verdict.fails(shape, " is not a directory: {}", absolute_text(target))
    return Verdict.holds(shape)


def _type_name(class_type) -> str:
    if isinstance(class_type, tuple):
        return " or ".join(_type_name(t) for t in class_type)
    return getattr(class_type, "__name__", str(class_type))


def instance_of(class_type, value) -> Verdict:
    shape = shape_of(value)
    if value is None:
        return Verdict.missing(shape)
    if class_type is None:
        return Verdict.unsupported(shape, " cannot be checked against type: null")

    try:
        passed = isinstance(value, class_type)
    except TypeError:
        return Verdict.unsupported(shape, " cannot be checked against type: {}", class_type)

    if passed:
        return Verdict.holds(shape)
    return Verdict.fails(shape, " is not an instance of {}: {}", _type_name(class_type), type(value).__name__)


def contains(needle, haystack) -> Verdict:
    """Substring check for strings, membership check for everything else."""
    shape = shape_of(haystack)
    if haystack is None:
        return Verdict.missing(shape)
    if needle is None:
        return Verdict.unsupported(shape, " cannot be searched for: null")
    if isinstance(haystack, str) and not isinstance(needle, str):
        return Verdict.unsupported(shape, " cannot be searched for: {}", needle)

    replay = None
    try:
        if isinstance(haystack, Container):
            passed = needle in haystack
        elif isinstance(haystack, Iterable):
            scan, replay = split_one_shot(haystack)
            passed = any(element == needle for element in scan)
        else:
            return Verdict.unsupported(shape, " cannot be searched: {}", render_contents(haystack))
    except TypeError:
        # Unhashable needle against a hashed container.
        return Verdict.unsupported(shape, " cannot be searched for: {}", needle)

    if passed:
        return Verdict.holds(shape, replay)
    return Verdict.fails(shape, " does not contain: {}, contains: {}", needle, render_contents(haystack))


def contains_element(predicate, haystack) -> Verdict:
    """True if any element satisfies ``predicate``; errors it raises propagate."""
    shape = shape_of(haystack)
    if haystack is None:
        return Verdict.missing(shape)
    if not callable(predicate):
        return Verdict.unsupported(shape, " cannot be searched with: {}", predicate)
    if not isinstance(haystack, Iterable):
        return Verdict.unsupported(shape, " cannot be searched: {}", render_contents(haystack))

    scan, replay = split_one_shot(haystack)
    if any(predicate(element) for element in scan):
        return Verdict.holds(shape, replay)
    return Verdict.fails(shape, " has no element matching the predicate, contains: {}", render_contents(haystack))


def _compile(regex) -> re.Pattern | None:
    if isinstance(regex, re.Pattern):
        return regex
    if not isinstance(regex, str):
        return None
    try:
        return re.compile(regex)
    except re.error:
        return None


def regex(regex_value, value, full_match: bool = False) -> Verdict:
    """Search for (or fully match) a regular expression in a string."""
    shape = shape_of(value, Shape.STRING)
    if value is None:
        return Verdict.missing(shape)
    if not isinstance(value, str):
        return Verdict.unsupported(shape, " is not text: {}", render_contents(value))

    pattern = _compile(regex_value)
    if pattern is None:
        return Verdict.unsupported(shape, " cannot be matched against: {}", regex_value)

    if full_match:
        if pattern.fullmatch(value) is not None:
            return Verdict.holds(shape)
        return Verdict.fails(shape, " does not match: {}, contains: {}", pattern.pattern, render_contents(value))

    if pattern.search(value) is not None:
        return Verdict.holds(shape)
    return Verdict.fails(shape, " does not contain a match for: {}, contains: {}", pattern.pattern,
                         render_contents(value))


def mapping_key(key, mapping) -> Verdict:
    shape = shape_of(mapping, Shape.MAP)
    if mapping is None:
        return Verdict.missing(shape)
    if not isinstance(mapping, Mapping):
        return Verdict.unsupported(shape, " is not a mapping: {}", render_contents(mapping))
    if key is None:
        return Verdict.unsupported(shape, " cannot be searched for key: null")

    try:
        passed = key in mapping
    except TypeError:
        return Verdict.unsupported(shape, " cannot be searched for key: {}", key)

    if passed:
        return Verdict.holds(shape)
    return Verdict.fails(shape, " does not contain key: {}, contains: {}", key, render_contents(mapping))


def mapping_value(value, mapping) -> Verdict:
    shape = shape_of(mapping, Shape.MAP)
    if mapping is None:
        return Verdict.missing(shape)
    if not isinstance(mapping, Mapping):
        return Verdict.unsupported(shape, " is not a mapping: {}", render_contents(mapping))
    if value is None:
        return Verdict.unsupported(shape, " cannot be searched for value: null")

    if any(candidate == value for candidate in mapping.values()):
        return Verdict.holds(shape)
    return Verdict.fails(shape, " does not contain value: {}, contains: {}", value, render_contents(mapping))


def unique_elements(collection) -> Verdict:
    shape = shape_of(collection, Shape.COLLECTION)
    if collection is None:
        return Verdict.missing(shape)
    if not isinstance(collection, Collection) or isinstance(collection, str):
        return Verdict.unsupported(shape, " is not a collection: {}", render_contents(collection))

    items = list(collection)
    try:
        unique = len(set(items)) == len(items)
    except TypeError:
        unique = all(item not in items[:index] for index, item in enumerate(items))

    if unique:
        return Verdict.holds(shape)
    return Verdict.fails(shape, " contains duplicate elements: {}", render_contents(collection))


def _holds_none(container) -> bool:
    if isinstance(container, Mapping):
        return any(key is None for key in container) or any(v is None for v in container.values())
    return any(element is None for element in container)


def _none_membership(container, wanted: bool) -> Verdict:
    shape = shape_of(container, Shape.COLLECTION)
    if container is None:
        return Verdict.missing(shape)
    if not isinstance(container, Iterable) or isinstance(container, str):
        return Verdict.unsupported(shape, " is not a collection: {}", render_contents(container))

    scan, replay = split_one_shot(container)
    if _holds_none(scan) == wanted:
        return Verdict.holds(shape, replay)
    if wanted:
        return Verdict.fails(shape, " does not contain null: {}", render_contents(container))
    return Verdict.fails(shape, " contains null: {}", render_contents(container))


def with_none(container) -> Verdict:
    """Holds when the container has a None element (or mapping key/value)."""
    return _none_membership(container, True)


def without_none(container) -> Verdict:
    """Holds when the container has no None element; empty containers pass."""
    return _none_membership(container, False)


def _is_ipv4(text: str) -> bool:
    try:
        ipaddress.IPv4Address(text)
    except ValueError:
        return False
    return True


def _is_ipv6(text: str) -> bool:
    try:
        ipaddress.IPv6Address(text)
    except ValueError:
        return False
    return True


def _is_json(text: str) -> bool:
    try:
        parsed = json.loads(text)
    except ValueError:
        return False
    return isinstance(parsed, (dict, list))


def _is_xml(text: str) -> bool:
    if not text.strip():
        return False
    try:
        defused_fromstring(text)
    except (ParseError, DefusedXmlException):
        return False
    return True


_TEXT_FORMATS = {
    TextFormat.NUMBERS_ONLY: ("numbers only", str.isdecimal),
    TextFormat.ALPHAS_ONLY: ("letters only", str.isalpha),
    TextFormat.ALPHA_NUMERIC_ONLY: (
        "letters and numbers only",
        lambda text: bool(text) and all(c.isalpha() or c.isdecimal() for c in text),
    ),
    TextFormat.EMAIL: ("an email address", lambda text: EMAIL_PATTERN.fullmatch(text) is not None),
    TextFormat.URL: ("a URL", lambda text: URL_PATTERN.fullmatch(text) is not None),
    TextFormat.IP_ADDRESS: ("an IP address", lambda text: _is_ipv4(text) or _is_ipv6(text)),
    TextFormat.IPV4_ADDRESS: ("an IPv4 address", _is_ipv4),
    TextFormat.IPV6_ADDRESS: ("an IPv6 address", _is_ipv6),
    TextFormat.UUID: ("a UUID", lambda text: UUID_PATTERN.fullmatch(text) is not None),
    TextFormat.JSON: ("JSON", _is_json),
    TextFormat.XML: ("XML", _is_xml),
}


def text_format(kind: TextFormat, value) -> Verdict:
    shape = shape_of(value, Shape.STRING)
    if value is None:
        return Verdict.missing(shape)
    if not isinstance(value, str):
        return Verdict.unsupported(shape, " is not text: {}", render_contents(value))

    description, matches = _TEXT_FORMATS[kind]
    if matches(value):
        return Verdict.holds(shape)
    return Verdict.fails(shape, " is not {}: {}", description, render_contents(value))
