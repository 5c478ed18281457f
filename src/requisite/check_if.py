"""Checks that return the checked value, or None when the check fails.

Useful where a default follows::

    greeting = if_not_blank(name) or "(no name)"
    timeout = if_duration_greater_than(timedelta(0), configured) or DEFAULT_TIMEOUT

None is returned for None input, for a failed condition, and for a value the
condition does not apply to. Nothing here raises for the checked value.
"""

import logging
from datetime import date, datetime, time, timedelta

from . import conditions
from .conditions import Comparison, PathExpectation, TextFormat, Timing, Verdict
from .shapes import DurationUnit

logger = logging.getLogger(__name__)


def _value_if(verdict: Verdict, value):
    return verdict.result(value) if verdict.passed else None


def if_true(condition, value):
    """Return ``value`` when ``condition`` is truthy::

        retries = if_true(retries > 0, retries) or DEFAULT_RETRIES
    """
    return value if condition else None


def if_not_null(value):
    return value


def if_not_empty(value):
    return _value_if(conditions.not_empty(value), value)


def if_not_blank(value):
    return _value_if(conditions.not_blank(value), value)


def if_length(length: int, value):
    return _value_if(conditions.length(Comparison.EQUAL, value, length), value)


def if_length_greater_than(min_length: int, value):
    return _value_if(conditions.length(Comparison.GREATER_THAN, value, min_length), value)


def if_length_greater_or_equal_to(min_length: int, value):
    return _value_if(conditions.length(Comparison.GREATER_OR_EQUAL, value, min_length), value)


def if_length_less_than(max_length: int, value):
    return _value_if(conditions.length(Comparison.LESS_THAN, value, max_length), value)


def if_length_less_or_equal_to(max_length: int, value):
    return _value_if(conditions.length(Comparison.LESS_OR_EQUAL, value, max_length), value)


def if_length_between(min_length: int, max_length: int, value):
    return _value_if(conditions.length(Comparison.BETWEEN, value, min_length, max_length), value)


def if_size(size: int, value):
    return _value_if(conditions.size(Comparison.EQUAL, value, size), value)


def if_size_greater_than(min_size: int, value):
    return _value_if(conditions.size(Comparison.GREATER_THAN, value, min_size), value)


def if_size_greater_or_equal_to(min_size: int, value):
    return _value_if(conditions.size(Comparison.GREATER_OR_EQUAL, value, min_size), value)


def if_size_less_than(max_size: int, value):
    return _value_if(conditions.size(Comparison.LESS_THAN, value, max_size), value)


def if_size_less_or_equal_to(max_size: int, value):
    return _value_if(conditions.size(Comparison.LESS_OR_EQUAL, value, max_size), value)


def if_size_between(min_size: int, max_size: int, value):
    return _value_if(conditions.size(Comparison.BETWEEN, value, min_size, max_size), value)


def if_value_equal_to(expected, value):
    return _value_if(conditions.number(Comparison.EQUAL, value, expected), value)


def if_value_greater_than(min_value, value):
    return _value_if(conditions.number(Comparison.GREATER_THAN, value, min_value), value)


def if_value_greater_or_equal_to(min_value, value):
    return _value_if(conditions.number(Comparison.GREATER_OR_EQUAL, value, min_value), value)


def if_value_less_than(max_value, value):
    return _value_if(conditions.number(Comparison.LESS_THAN, value, max_value), value)


def if_value_less_or_equal_to(max_value, value):
    return _value_if(conditions.number(Comparison.LESS_OR_EQUAL, value, max_value), value)


def if_value_between(min_value, max_value, value):
    return _value_if(conditions.number(Comparison.BETWEEN, value, min_value, max_value), value)


def if_duration_equal_to(expected: timedelta | int, value, unit: DurationUnit | None = None):
    return _value_if(conditions.duration(Comparison.EQUAL, value, expected, unit=unit), value)


def if_duration_greater_than(min_duration: timedelta | int, value, unit: DurationUnit | None = None):
    return _value_if(conditions.duration(Comparison.GREATER_THAN, value, min_duration, unit=unit), value)


def if_duration_greater_or_equal_to(min_duration: timedelta | int, value, unit: DurationUnit | None = None):
    return _value_if(conditions.duration(Comparison.GREATER_OR_EQUAL, value, min_duration, unit=unit), value)


def if_duration_less_than(max_duration: timedelta | int, value, unit: DurationUnit | None = None):
    return _value_if(conditions.duration(Comparison.LESS_THAN, value, max_duration, unit=unit), value)


def if_duration_less_or_equal_to(max_duration: timedelta | int, value, unit: DurationUnit | None = None):
    return _value_if(conditions.duration(Comparison.LESS_OR_EQUAL, value, max_duration, unit=unit), value)


def if_duration_between(min_duration: timedelta | int, max_duration: timedelta | int, value,
                        unit: DurationUnit | None = None):
    return _value_if(
        conditions.duration(Comparison.BETWEEN, value, min_duration, max_duration, unit=unit), value
    )


def if_path_exists(path):
    return _value_if(conditions.path(PathExpectation.EXISTS, path), path)


def if_path_not_exists(path):
    return _value_if(conditions.path(PathExpectation.NOT_EXISTS, path), path)


def if_regular_file(path):
    return _value_if(conditions.path(PathExpectation.REGULAR_FILE, path), path)


def if_directory(path):
    return _value_if(conditions.path(PathExpectation.DIRECTORY, path), path)


def if_future(moment):
    return _value_if(conditions.moment(Timing.FUTURE, moment), moment)


def if_past(moment):
    return _value_if(conditions.moment(Timing.PAST, moment), moment)


def if_now_or_future(moment):
    return _value_if(conditions.moment(Timing.NOW_OR_FUTURE, moment), moment)


def if_now_or_past(moment):
    return _value_if(conditions.moment(Timing.NOW_OR_PAST, moment), moment)


def if_instance_of(class_type, value):
    return _value_if(conditions.instance_of(class_type, value), value)


def if_contains(needle, haystack):
    return _value_if(conditions.contains(needle, haystack), haystack)


def if_contains_element(predicate, haystack):
    return _value_if(conditions.contains_element(predicate, haystack), haystack)


def if_contains_regex(regex, value):
    return _value_if(conditions.regex(regex, value), value)


def if_matches_regex(regex, value):
    return _value_if(conditions.regex(regex, value, full_match=True), value)


def if_contains_key(key, mapping):
    return _value_if(conditions.mapping_key(key, mapping), mapping)


def if_contains_value(value, mapping):
    return _value_if(conditions.mapping_value(value, mapping), mapping)


def if_contains_unique_elements(collection):
    return _value_if(conditions.unique_elements(collection), collection)


def if_contains_none(container):
    return _value_if(conditions.with_none(container), container)


def if_not_contains_none(container):
    return _value_if(conditions.without_none(container), container)


def _text_if(kind: TextFormat, value):
    return _value_if(conditions.text_format(kind, value), value)


def if_numbers_only(value):
    return _text_if(TextFormat.NUMBERS_ONLY, value)


def if_alphas_only(value):
    return _text_if(TextFormat.ALPHAS_ONLY, value)


def if_alpha_numeric_only(value):
    return _text_if(TextFormat.ALPHA_NUMERIC_ONLY, value)


def if_email(value):
    return _text_if(TextFormat.EMAIL, value)


def if_url(value):
    return _text_if(TextFormat.URL, value)


def if_ip_address(value):
    return _text_if(TextFormat.IP_ADDRESS, value)


def if_ipv4_address(value):
    return _text_if(TextFormat.IPV4_ADDRESS, value)


def if_ipv6_address(value):
    return _text_if(TextFormat.IPV6_ADDRESS, value)


def if_uuid(value):
    return _text_if(TextFormat.UUID, value)


def if_json(value):
    return _text_if(TextFormat.JSON, value)


def if_xml(value):
    return _text_if(TextFormat.XML, value)


def _parse(text, fmt: str | None, parse_iso, parse_format):
    if not isinstance(text, str) or not text.strip():
        return None
    if fmt is not None and not isinstance(fmt, str):
        return None
    try:
        return parse_iso(text) if fmt is None else parse_format(text, fmt)
    except ValueError as e:
        logger.debug(f"Could not parse {text!r}: {e}")
        return None


def if_date_time(text, fmt: str | None = None) -> datetime | None:
    """Parse a datetime from ISO 8601 text, or with a ``strptime`` format.

    Returns:
        The parsed datetime, or None if ``text`` is missing or does not parse
    """
    return _parse(text, fmt, datetime.fromisoformat, datetime.strptime)


def if_date(text, fmt: str | None = None) -> date | None:
    return _parse(text, fmt, date.fromisoformat, _strptime_date)


def if_time(text, fmt: str | None = None) -> time | None:
    return _parse(text, fmt, time.fromisoformat, _strptime_time)


def _strptime_date(text: str, fmt: str) -> date:
    return datetime.strptime(text, fmt).date()


def _strptime_time(text: str, fmt: str) -> time:
    return datetime.strptime(text, fmt).time()
