"""Devfile parsing and writing."""

from .context import DevfileCtx
from .reader import (
    DEFAULT_DEVFILE_NAME,
    DevfileObj,
    create_devfile,
    parse,
    parse_and_validate,
    parse_from_data,
    parse_from_dict,
)
from .variables import VariableWarning, validate_and_replace_global_variables
from .writer import DevfileWriter

__all__ = [
    "DevfileCtx",
    "DEFAULT_DEVFILE_NAME",
    "DevfileObj",
    "create_devfile",
    "parse",
    "parse_and_validate",
    "parse_from_data",
    "parse_from_dict",
    "VariableWarning",
    "validate_and_replace_global_variables",
    "DevfileWriter",
]
