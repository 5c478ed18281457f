"""Pick the first usable value from a list of candidates.

    host = first_not_blank(cli_host, env_host, "localhost")
"""

from collections.abc import Mapping

from . import conditions
from .errors import AbsentValueError, ArgumentViolationError

ALL_PARAMETERS_ARE_NULL = "All parameters are null"
ALL_STRINGS_ARE_EMPTY = "All strings are empty"
ALL_COLLECTIONS_ARE_EMPTY = "All collections are empty"
ALL_MAPS_ARE_EMPTY = "All maps are empty"
ALL_STRINGS_ARE_BLANK = "All strings are blank"


def _first_passing(evaluate, values):
    for value in values:
        verdict = evaluate(value)
        if verdict.passed:
            return verdict.result(value), True
    return None, False


def first_not_none(*values):
    """Return the first value that is not None.

    Raises:
        AbsentValueError: If every value is None
    """
    found, ok = _first_passing(conditions.present, values)
    if not ok:
        raise AbsentValueError(ALL_PARAMETERS_ARE_NULL)
    return found


def _empty_message(values) -> str:
    sample = next(value for value in values if value is not None)
    if isinstance(sample, str):
        return ALL_STRINGS_ARE_EMPTY
    if isinstance(sample, Mapping):
        return ALL_MAPS_ARE_EMPTY
    return ALL_COLLECTIONS_ARE_EMPTY


def first_not_empty(*values):
    """Return the first string, collection or mapping that has elements.

    None values are skipped like empty ones. The error message names the
    kind of the first present value.

    Raises:
        AbsentValueError: If every value is None
        ArgumentViolationError: If every present value is empty
    """
    found, ok = _first_passing(conditions.not_empty, values)
    if ok:
        return found
    if all(value is None for value in values):
        raise AbsentValueError(ALL_PARAMETERS_ARE_NULL)
    raise ArgumentViolationError(_empty_message(values))


def first_not_blank(*values):
    found, ok = _first_passing(conditions.not_blank, values)
    if ok:
        return found
    if all(value is None for value in values):
        raise AbsentValueError(ALL_PARAMETERS_ARE_NULL)
    raise ArgumentViolationError(ALL_STRINGS_ARE_BLANK)
