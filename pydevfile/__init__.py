"""Devfile document model: parse, query, mutate and write devfiles."""

from .data import DevfileData, DevfileError, DevfileOptions, new_devfile_data
from .parser import DevfileObj, create_devfile, parse, parse_and_validate, parse_from_data

__all__ = [
    "DevfileData",
    "DevfileError",
    "DevfileObj",
    "DevfileOptions",
    "create_devfile",
    "new_devfile_data",
    "parse",
    "parse_and_validate",
    "parse_from_data",
]
