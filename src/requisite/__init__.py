"""requisite - Argument validation in three result styles.

The same conditions are available as boolean checks, as checks that return
the value or None, and as checks that return the value or raise.

Basic usage:
    from requisite import check, check_if, require

    name = require.require_not_blank(name, label="Name")
    if check.is_size_greater_than(0, users):
        ...
    port = check_if.if_value_between(1, 65535, port) or 8080
"""

__version__ = "0.1.0"
__author__ = "requisite contributors"
__description__ = "Argument validation in three result styles"

from requisite import check, check_if, first, require
from requisite.config import RequisiteConfig, configure, get_config, load_config
from requisite.errors import (
    AbsentValueError,
    ArgumentViolationError,
    RequisiteError,
    StateViolationError,
)
from requisite.first import first_not_blank, first_not_empty, first_not_none
from requisite.formatter import format_message
from requisite.shapes import DurationUnit

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "check",
    "check_if",
    "first",
    "require",
    "RequisiteConfig",
    "configure",
    "get_config",
    "load_config",
    "RequisiteError",
    "AbsentValueError",
    "ArgumentViolationError",
    "StateViolationError",
    "first_not_none",
    "first_not_empty",
    "first_not_blank",
    "format_message",
    "DurationUnit",
]
