"""Validation of devfile documents."""

from .validate import validate_devfile_data

__all__ = ["validate_devfile_data"]
