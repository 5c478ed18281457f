"""Boolean checks.

Functions in this module never raise for the values they check; they return
True or False. Every positive check is False for None. The only checks that
are True for None are ``is_null``, ``is_null_or_empty`` and
``is_null_or_blank``. Negative ``not_*`` checks are also False for None, and
for values their positive check cannot apply to.

Bounds come first, the checked value last::

    is_length_between(1, 64, name)
    is_size_greater_than(0, users)

Checking a one-shot iterator here advances it. Use ``check_if`` or
``require`` to get back an iterator that still yields every element.
"""

from datetime import timedelta

from . import conditions
from .conditions import Comparison, PathExpectation, TextFormat, Timing
from .shapes import DurationUnit


def is_true(condition) -> bool:
    return bool(condition)


def is_false(condition) -> bool:
    return not condition


def is_null(value) -> bool:
    return value is None


def not_null(value) -> bool:
    return value is not None


def is_empty(value) -> bool:
    """True for a present value with no elements (``""``, ``[]``, ``{}``...)."""
    return conditions.not_empty(value).refuted


def is_null_or_empty(value) -> bool:
    return value is None or is_empty(value)


def not_empty(value) -> bool:
    return conditions.not_empty(value).passed


def is_blank(value) -> bool:
    """True for a present string that is empty or whitespace only."""
    return conditions.not_blank(value).refuted


def is_null_or_blank(value) -> bool:
    return value is None or is_blank(value)


def not_blank(value) -> bool:
    return conditions.not_blank(value).passed


def is_length(length: int, value) -> bool:
    return conditions.length(Comparison.EQUAL, value, length).passed


def is_length_greater_than(min_length: int, value) -> bool:
    return conditions.length(Comparison.GREATER_THAN, value, min_length).passed


def is_length_greater_or_equal_to(min_length: int, value) -> bool:
    return conditions.length(Comparison.GREATER_OR_EQUAL, value, min_length).passed


def is_length_less_than(max_length: int, value) -> bool:
    return conditions.length(Comparison.LESS_THAN, value, max_length).passed


def is_length_less_or_equal_to(max_length: int, value) -> bool:
    return conditions.length(Comparison.LESS_OR_EQUAL, value, max_length).passed


def is_length_between(min_length: int, max_length: int, value) -> bool:
    """Inclusive at both ends; False whenever ``min_length > max_length``."""
    return conditions.length(Comparison.BETWEEN, value, min_length, max_length).passed


def is_size(size: int, value) -> bool:
    return conditions.size(Comparison.EQUAL, value, size).passed


def is_size_greater_than(min_size: int, value) -> bool:
    return conditions.size(Comparison.GREATER_THAN, value, min_size).passed


def is_size_greater_or_equal_to(min_size: int, value) -> bool:
    return conditions.size(Comparison.GREATER_OR_EQUAL, value, min_size).passed


def is_size_less_than(max_size: int, value) -> bool:
    return conditions.size(Comparison.LESS_THAN, value, max_size).passed


def is_size_less_or_equal_to(max_size: int, value) -> bool:
    return conditions.size(Comparison.LESS_OR_EQUAL, value, max_size).passed


def is_size_between(min_size: int, max_size: int, value) -> bool:
    return conditions.size(Comparison.BETWEEN, value, min_size, max_size).passed


def is_value_equal_to(expected, value) -> bool:
    return conditions.number(Comparison.EQUAL, value, expected).passed


def is_value_greater_than(min_value, value) -> bool:
    return conditions.number(Comparison.GREATER_THAN, value, min_value).passed


def is_value_greater_or_equal_to(min_value, value) -> bool:
    return conditions.number(Comparison.GREATER_OR_EQUAL, value, min_value).passed


def is_value_less_than(max_value, value) -> bool:
    return conditions.number(Comparison.LESS_THAN, value, max_value).passed


def is_value_less_or_equal_to(max_value, value) -> bool:
    return conditions.number(Comparison.LESS_OR_EQUAL, value, max_value).passed


def is_value_between(min_value, max_value, value) -> bool:
    return conditions.number(Comparison.BETWEEN, value, min_value, max_value).passed


def not_value_greater_than(min_value, value) -> bool:
    return conditions.number(Comparison.GREATER_THAN, value, min_value).refuted


def not_value_greater_or_equal_to(min_value, value) -> bool:
    return conditions.number(Comparison.GREATER_OR_EQUAL, value, min_value).refuted


def not_value_less_than(max_value, value) -> bool:
    return conditions.number(Comparison.LESS_THAN, value, max_value).refuted


def not_value_less_or_equal_to(max_value, value) -> bool:
    return conditions.number(Comparison.LESS_OR_EQUAL, value, max_value).refuted


def not_value_between(min_value, max_value, value) -> bool:
    """True for a number outside ``[min_value, max_value]``; False for None."""
    return conditions.number(Comparison.BETWEEN, value, min_value, max_value).refuted


def is_duration_equal_to(expected: timedelta | int, value, unit: DurationUnit | None = None) -> bool:
    return conditions.duration(Comparison.EQUAL, value, expected, unit=unit).passed


def is_duration_greater_than(min_duration: timedelta | int, value, unit: DurationUnit | None = None) -> bool:
    """True if ``value`` is longer than ``min_duration``.

    ``min_duration`` is a timedelta, or a whole number of ``unit``::

        is_duration_greater_than(timedelta(seconds=10), elapsed)
        is_duration_greater_than(10, elapsed, unit=DurationUnit.SECONDS)
    """
    return conditions.duration(Comparison.GREATER_THAN, value, min_duration, unit=unit).passed


def is_duration_greater_or_equal_to(min_duration: timedelta | int, value,
                                    unit: DurationUnit | None = None) -> bool:
    return conditions.duration(Comparison.GREATER_OR_EQUAL, value, min_duration, unit=unit).passed


def is_duration_less_than(max_duration: timedelta | int, value, unit: DurationUnit | None = None) -> bool:
    return conditions.duration(Comparison.LESS_THAN, value, max_duration, unit=unit).passed


def is_duration_less_or_equal_to(max_duration: timedelta | int, value, unit: DurationUnit | None = None) -> bool:
    return conditions.duration(Comparison.LESS_OR_EQUAL, value, max_duration, unit=unit).passed


def is_duration_between(min_duration: timedelta | int, max_duration: timedelta | int, value,
                        unit: DurationUnit | None = None) -> bool:
    return conditions.duration(Comparison.BETWEEN, value, min_duration, max_duration, unit=unit).passed


def not_duration_greater_than(min_duration: timedelta | int, value, unit: DurationUnit | None = None) -> bool:
    return conditions.duration(Comparison.GREATER_THAN, value, min_duration, unit=unit).refuted


def not_duration_greater_or_equal_to(min_duration: timedelta | int, value,
                                     unit: DurationUnit | None = None) -> bool:
    return conditions.duration(Comparison.GREATER_OR_EQUAL, value, min_duration, unit=unit).refuted


def not_duration_less_than(max_duration: timedelta | int, value, unit: DurationUnit | None = None) -> bool:
    return conditions.duration(Comparison.LESS_THAN, value, max_duration, unit=unit).refuted


def not_duration_less_or_equal_to(max_duration: timedelta | int, value, unit: DurationUnit | None = None) -> bool:
    return conditions.duration(Comparison.LESS_OR_EQUAL, value, max_duration, unit=unit).refuted


def not_duration_between(min_duration: timedelta | int, max_duration: timedelta | int, value,
                         unit: DurationUnit | None = None) -> bool:
    return conditions.duration(Comparison.BETWEEN, value, min_duration, max_duration, unit=unit).refuted


def path_exists(path) -> bool:
    return conditions.path(PathExpectation.EXISTS, path).passed


def path_not_exists(path) -> bool:
    """True only when the path is known not to exist; False for None."""
    return conditions.path(PathExpectation.NOT_EXISTS, path).passed


def is_regular_file(path) -> bool:
    return conditions.path(PathExpectation.REGULAR_FILE, path).passed


def not_regular_file(path) -> bool:
    return conditions.path(PathExpectation.REGULAR_FILE, path).refuted


def is_directory(path) -> bool:
    return conditions.path(PathExpectation.DIRECTORY, path).passed


def not_directory(path) -> bool:
    return conditions.path(PathExpectation.DIRECTORY, path).refuted


def is_future(moment) -> bool:
    return conditions.moment(Timing.FUTURE, moment).passed


def is_past(moment) -> bool:
    return conditions.moment(Timing.PAST, moment).passed


def is_now_or_future(moment) -> bool:
    return conditions.moment(Timing.NOW_OR_FUTURE, moment).passed


def is_now_or_past(moment) -> bool:
    return conditions.moment(Timing.NOW_OR_PAST, moment).passed


def is_instance_of(class_type, value) -> bool:
    return conditions.instance_of(class_type, value).passed


def not_instance_of(class_type, value) -> bool:
    return conditions.instance_of(class_type, value).refuted


def contains(needle, haystack) -> bool:
    """Substring test for strings, membership test for other containers."""
    return conditions.contains(needle, haystack).passed


def not_contains(needle, haystack) -> bool:
    return conditions.contains(needle, haystack).refuted


def contains_element(predicate, haystack) -> bool:
    """True if any element satisfies ``predicate``, for example::

        contains_element(lambda u: u.is_admin, users)
    """
    return conditions.contains_element(predicate, haystack).passed


def not_contains_element(predicate, haystack) -> bool:
    return conditions.contains_element(predicate, haystack).refuted


def contains_regex(regex, value) -> bool:
    return conditions.regex(regex, value).passed


def matches_regex(regex, value) -> bool:
    return conditions.regex(regex, value, full_match=True).passed


def contains_key(key, mapping) -> bool:
    return conditions.mapping_key(key, mapping).passed


def contains_value(value, mapping) -> bool:
    return conditions.mapping_value(value, mapping).passed


def contains_unique_elements(collection) -> bool:
    return conditions.unique_elements(collection).passed


def contains_none(container) -> bool:
    """True if any element (or mapping key or value) is None."""
    return conditions.with_none(container).passed


def not_contains_none(container) -> bool:
    """True for a present container without None elements; empty ones pass."""
    return conditions.without_none(container).passed


def numbers_only(value) -> bool:
    """True for non-empty text made of decimal digits only.

    Examples:
        >>> numbers_only("123")
        True
        >>> numbers_only("123.0")
        False
        >>> numbers_only("")
        False
    """
    return conditions.text_format(TextFormat.NUMBERS_ONLY, value).passed


def not_numbers_only(value) -> bool:
    return conditions.text_format(TextFormat.NUMBERS_ONLY, value).refuted


def alphas_only(value) -> bool:
    return conditions.text_format(TextFormat.ALPHAS_ONLY, value).passed


def not_alphas_only(value) -> bool:
    return conditions.text_format(TextFormat.ALPHAS_ONLY, value).refuted


def alpha_numeric_only(value) -> bool:
    return conditions.text_format(TextFormat.ALPHA_NUMERIC_ONLY, value).passed


def not_alpha_numeric_only(value) -> bool:
    return conditions.text_format(TextFormat.ALPHA_NUMERIC_ONLY, value).refuted


def is_email(value) -> bool:
    return conditions.text_format(TextFormat.EMAIL, value).passed


def is_url(value) -> bool:
    """True for ``http://`` or ``https://`` followed by anything."""
    return conditions.text_format(TextFormat.URL, value).passed


def is_ip_address(value) -> bool:
    return conditions.text_format(TextFormat.IP_ADDRESS, value).passed


def is_ipv4_address(value) -> bool:
    return conditions.text_format(TextFormat.IPV4_ADDRESS, value).passed


def is_ipv6_address(value) -> bool:
    return conditions.text_format(TextFormat.IPV6_ADDRESS, value).passed


def is_uuid(value) -> bool:
    return conditions.text_format(TextFormat.UUID, value).passed


def is_json(value) -> bool:
    """True for text that parses as a JSON object or array."""
    return conditions.text_format(TextFormat.JSON, value).passed


def is_xml(value) -> bool:
    return conditions.text_format(TextFormat.XML, value).passed
