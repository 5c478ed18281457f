"""Checks that return the checked value, or raise when the check fails.

Intended for the top of a function or constructor::

    def __init__(self, name, retries, workdir):
        self.name = require_not_blank(name, label="Name")
        self.retries = require_value_between(0, 10, retries, label="Retries")
        self.workdir = require_directory(workdir)

A None value raises AbsentValueError. A present value that fails its
condition, or that the condition cannot apply to, raises
ArgumentViolationError. The ``label`` names the value in the message; without
one, a default is chosen from the value's shape (see ``LabelConfig``).
"""

from datetime import timedelta

from . import conditions
from .conditions import Comparison, PathExpectation, Timing, Verdict
from .errors import AbsentValueError, ArgumentViolationError, StateViolationError
from .formatter import format_message
from .shapes import DurationUnit, resolve_label

CONDITION_FALSE = "Condition is false"
CONDITION_TRUE = "Condition is true"


def _enforce(verdict: Verdict, value, label: str | None,
             error: type = ArgumentViolationError, absent_error: type = AbsentValueError):
    """Return ``value`` if the verdict passed, otherwise raise for it."""
    if verdict.passed:
        return verdict.result(value)

    name = resolve_label(label, verdict.shape)
    if verdict.absent:
        raise absent_error(f"{name} is null", label=name)
    raise error(name + verdict.detail, label=name)


def _message(message, args, default: str) -> str:
    if message is None:
        return default
    return format_message(message, *args)


def require_true(condition, message: str | None = None, *args) -> None:
    """Raise ArgumentViolationError unless ``condition`` is truthy.

    Args:
        condition: Condition on the arguments
        message: Optional message template with ``{}`` or ``%s`` placeholders
        *args: Values for the message placeholders

    Raises:
        ArgumentViolationError: If the condition is falsy
    """
    if not condition:
        raise ArgumentViolationError(_message(message, args, CONDITION_FALSE))


def require_false(condition, message: str | None = None, *args) -> None:
    """Raise ArgumentViolationError if ``condition`` is truthy."""
    if condition:
        raise ArgumentViolationError(_message(message, args, CONDITION_TRUE))


def require_state(condition, message: str | None = None, *args) -> None:
    """Like ``require_true``, for invariants on state rather than arguments.

    Raises:
        StateViolationError: If the condition is falsy
    """
    if not condition:
        raise StateViolationError(_message(message, args, CONDITION_FALSE))


def require_not_none(value, *, label: str | None = None):
    return _enforce(conditions.present(value), value, label)


def require_state_not_none(value, *, label: str | None = None):
    """Return ``value``, raising StateViolationError if it is None."""
    return _enforce(conditions.present(value), value, label, absent_error=StateViolationError)


def require_not_empty(value, *, label: str | None = None):
    """Return a string, collection, mapping or iterable that has elements.

    Raises:
        AbsentValueError: If ``value`` is None
        ArgumentViolationError: If ``value`` is empty or has no length
    """
    return _enforce(conditions.not_empty(value), value, label)


def require_not_blank(value, *, label: str | None = None):
    return _enforce(conditions.not_blank(value), value, label)


def require_length(length: int, value, *, label: str | None = None):
    """Return a string or array of exactly ``length`` elements.

    Example message: ``Name has length 4, but required length is: 5, contains: good``
    """
    return _enforce(conditions.length(Comparison.EQUAL, value, length), value, label)


def require_length_greater_than(min_length: int, value, *, label: str | None = None):
    return _enforce(conditions.length(Comparison.GREATER_THAN, value, min_length), value, label)


def require_length_greater_or_equal_to(min_length: int, value, *, label: str | None = None):
    return _enforce(conditions.length(Comparison.GREATER_OR_EQUAL, value, min_length), value, label)


def require_length_less_than(max_length: int, value, *, label: str | None = None):
    return _enforce(conditions.length(Comparison.LESS_THAN, value, max_length), value, label)


def require_length_less_or_equal_to(max_length: int, value, *, label: str | None = None):
    return _enforce(conditions.length(Comparison.LESS_OR_EQUAL, value, max_length), value, label)


def require_length_between(min_length: int, max_length: int, value, *, label: str | None = None):
    return _enforce(conditions.length(Comparison.BETWEEN, value, min_length, max_length), value, label)


def require_size(size: int, value, *, label: str | None = None):
    return _enforce(conditions.size(Comparison.EQUAL, value, size), value, label)


def require_size_greater_than(min_size: int, value, *, label: str | None = None):
    return _enforce(conditions.size(Comparison.GREATER_THAN, value, min_size), value, label)


def require_size_greater_or_equal_to(min_size: int, value, *, label: str | None = None):
    return _enforce(conditions.size(Comparison.GREATER_OR_EQUAL, value, min_size), value, label)


def require_size_less_than(max_size: int, value, *, label: str | None = None):
    return _enforce(conditions.size(Comparison.LESS_THAN, value, max_size), value, label)


def require_size_less_or_equal_to(max_size: int, value, *, label: str | None = None):
    return _enforce(conditions.size(Comparison.LESS_OR_EQUAL, value, max_size), value, label)


def require_size_between(min_size: int, max_size: int, value, *, label: str | None = None):
    return _enforce(conditions.size(Comparison.BETWEEN, value, min_size, max_size), value, label)


def require_value_equal_to(expected, value, *, label: str | None = None):
    return _enforce(conditions.number(Comparison.EQUAL, value, expected), value, label)


def require_value_greater_than(min_value, value, *, label: str | None = None):
    """Return a number greater than ``min_value``.

    For integers the message states the smallest accepted value
    (``Value is 3, but minimum is: 4``); for other numbers it states the
    exclusive bound (``Value is 0.5, but must be greater than: 0.5``).
    """
    return _enforce(conditions.number(Comparison.GREATER_THAN, value, min_value), value, label)


def require_value_greater_or_equal_to(min_value, value, *, label: str | None = None):
    return _enforce(conditions.number(Comparison.GREATER_OR_EQUAL, value, min_value), value, label)


def require_value_less_than(max_value, value, *, label: str | None = None):
    return _enforce(conditions.number(Comparison.LESS_THAN, value, max_value), value, label)


def require_value_less_or_equal_to(max_value, value, *, label: str | None = None):
    return _enforce(conditions.number(Comparison.LESS_OR_EQUAL, value, max_value), value, label)


def require_value_between(min_value, max_value, value, *, label: str | None = None):
    return _enforce(conditions.number(Comparison.BETWEEN, value, min_value, max_value), value, label)


def require_duration_equal_to(expected: timedelta | int, value, unit: DurationUnit | None = None, *,
                              label: str | None = None):
    return _enforce(conditions.duration(Comparison.EQUAL, value, expected, unit=unit), value, label)


def require_duration_greater_than(min_duration: timedelta | int, value, unit: DurationUnit | None = None, *,
                                  label: str | None = None):
    """Return a timedelta longer than ``min_duration``.

    Example message: ``Duration is 1m 5s, but must be greater than: 2m``
    """
    return _enforce(conditions.duration(Comparison.GREATER_THAN, value, min_duration, unit=unit), value, label)


def require_duration_greater_or_equal_to(min_duration: timedelta | int, value, unit: DurationUnit | None = None, *,
                                         label: str | None = None):
    return _enforce(conditions.duration(Comparison.GREATER_OR_EQUAL, value, min_duration, unit=unit), value, label)


def require_duration_less_than(max_duration: timedelta | int, value, unit: DurationUnit | None = None, *,
                               label: str | None = None):
    return _enforce(conditions.duration(Comparison.LESS_THAN, value, max_duration, unit=unit), value, label)


def require_duration_less_or_equal_to(max_duration: timedelta | int, value, unit: DurationUnit | None = None, *,
                                      label: str | None = None):
    return _enforce(conditions.duration(Comparison.LESS_OR_EQUAL, value, max_duration, unit=unit), value, label)


def require_duration_between(min_duration: timedelta | int, max_duration: timedelta | int, value,
                             unit: DurationUnit | None = None, *, label: str | None = None):
    return _enforce(
        conditions.duration(Comparison.BETWEEN, value, min_duration, max_duration, unit=unit), value, label
    )


def require_path_exists(path, *, label: str | None = None):
    """Return a path that exists on the filesystem.

    Raises:
        AbsentValueError: If ``path`` is None
        ArgumentViolationError: If the path does not exist or cannot be checked
    """
    return _enforce(conditions.path(PathExpectation.EXISTS, path), path, label)


def require_path_not_exists(path, *, label: str | None = None):
    return _enforce(conditions.path(PathExpectation.NOT_EXISTS, path), path, label)


def require_regular_file(path, *, label: str | None = None):
    return _enforce(conditions.path(PathExpectation.REGULAR_FILE, path), path, label)


def require_directory(path, *, label: str | None = None):
    return _enforce(conditions.path(PathExpectation.DIRECTORY, path), path, label)


def require_future(moment, *, label: str | None = None):
    """Return a datetime, date or time strictly after now."""
    return _enforce(conditions.moment(Timing.FUTURE, moment), moment, label)


def require_past(moment, *, label: str | None = None):
    return _enforce(conditions.moment(Timing.PAST, moment), moment, label)


def require_now_or_future(moment, *, label: str | None = None):
    return _enforce(conditions.moment(Timing.NOW_OR_FUTURE, moment), moment, label)


def require_now_or_past(moment, *, label: str | None = None):
    return _enforce(conditions.moment(Timing.NOW_OR_PAST, moment), moment, label)


def require_contains(needle, haystack, *, label: str | None = None):
    return _enforce(conditions.contains(needle, haystack), haystack, label)


def require_contains_regex(regex, value, *, label: str | None = None):
    return _enforce(conditions.regex(regex, value), value, label)


def require_matches_regex(regex, value, *, label: str | None = None):
    return _enforce(conditions.regex(regex, value, full_match=True), value, label)


def require_instance_of(class_type, value, *, label: str | None = None):
    return _enforce(conditions.instance_of(class_type, value), value, label)


def require_contains_key(key, mapping, *, label: str | None = None):
    return _enforce(conditions.mapping_key(key, mapping), mapping, label)


def require_not_contains_none(container, *, label: str | None = None):
    return _enforce(conditions.without_none(container), container, label)
