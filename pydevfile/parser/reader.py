"""Read and parse devfile YAML or JSON into a document."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..data import (
    DevfileData,
    DevfileParseError,
    SchemaRegistry,
    UnsupportedBySchemaVersionError,
    new_devfile_data,
)
from ..validation import validate_devfile_data
from .context import DevfileCtx
from .variables import validate_and_replace_global_variables
from .writer import DevfileWriter

logger = logging.getLogger(__name__)

DEFAULT_DEVFILE_NAME = "devfile.yaml"
OUTPUT_DEVFILE_YAML = "devfile.yaml"
OUTPUT_DEVFILE_JSON = "devfile.json"


@dataclass
class DevfileObj:
    """A parsed devfile together with where it came from."""

    ctx: DevfileCtx
    data: DevfileData

    def _output_path(self, path: str | Path | None, default_name: str) -> Path:
        if path is not None:
            return Path(path)
        if self.ctx.path is not None:
            return self.ctx.path
        return self.ctx.dir() / default_name

    def write_yaml_devfile(self, path: str | Path | None = None) -> Path:
        """Write the document as YAML, to its source path by default."""
        output = self._output_path(path, OUTPUT_DEVFILE_YAML)
        DevfileWriter().write_yaml(self.data, output)
        return output

    def write_json_devfile(self, path: str | Path | None = None) -> Path:
        """Write the document as JSON, next to its source by default."""
        if path is None and self.ctx.path is not None:
            path = self.ctx.path.with_suffix(".json")
        output = self._output_path(path, OUTPUT_DEVFILE_JSON)
        DevfileWriter().write_json(self.data, output)
        return output


def parse_from_dict(
    raw: Mapping[str, Any],
    ctx: DevfileCtx | None = None,
    registry: SchemaRegistry | None = None,
) -> DevfileObj:
    """Build a document from an already decoded tree.

    Raises:
        DevfileParseError: if the tree has no schema version or does not
            match the document model.
    """
    if not isinstance(raw, Mapping):
        raise DevfileParseError(f"devfile must be a mapping, got {type(raw).__name__}")
    if not raw.get("schemaVersion"):
        raise DevfileParseError("schemaVersion not present in devfile")

    try:
        data = new_devfile_data(raw, registry)
    except ValidationError as e:
        raise DevfileParseError(f"failed to decode devfile content: {e}") from e

    logger.debug(f"Parsed devfile with schema version {data.get_schema_version()}")
    return DevfileObj(ctx=ctx or DevfileCtx(), data=data)


def create_devfile(
    name: str,
    schema_version: str = "2.1.0",
    registry: SchemaRegistry | None = None,
) -> DevfileObj:
    """Create an empty in-memory devfile."""
    return parse_from_dict(
        {"schemaVersion": schema_version, "metadata": {"name": name}},
        registry=registry,
    )


def parse_from_data(
    data: bytes | str,
    registry: SchemaRegistry | None = None,
) -> DevfileObj:
    """Parse YAML or JSON content.

    Raises:
        DevfileParseError: if the content is not valid YAML/JSON or not a devfile.
    """
    try:
        raw = yaml.safe_load(data)
    except yaml.YAMLError as e:
        raise DevfileParseError(f"failed to decode devfile: {e}") from e
    if raw is None:
        raise DevfileParseError("devfile is empty")
    return parse_from_dict(raw, registry=registry)


def parse(path: str | Path, registry: SchemaRegistry | None = None) -> DevfileObj:
    """Read and parse a devfile from disk.

    Raises:
        DevfileParseError: if the file cannot be read or parsed.
    """
    ctx = DevfileCtx.from_path(path)
    try:
        with open(ctx.path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        raise DevfileParseError(f"failed to read devfile from {ctx.path}: {e}") from e
    except yaml.YAMLError as e:
        raise DevfileParseError(f"failed to decode devfile {ctx.path}: {e}") from e
    if raw is None:
        raise DevfileParseError(f"devfile {ctx.path} is empty")

    devfile = parse_from_dict(raw, ctx=ctx, registry=registry)
    logger.info(f"Loaded devfile from: {ctx.path}")
    return devfile


def parse_and_validate(
    path: str | Path | None = None,
    data: bytes | str | None = None,
    substitute_variables: bool = True,
    registry: SchemaRegistry | None = None,
) -> DevfileObj:
    """Parse a devfile from ``path`` or ``data``, resolve variables and validate it.

    Variables are substituted on every schema version that supports them.

    Raises:
        DevfileParseError: if parsing fails.
        DevfileValidationError: if the document breaks a semantic rule.
    """
    if data is not None:
        devfile = parse_from_data(data, registry=registry)
    else:
        devfile = parse(path or DEFAULT_DEVFILE_NAME, registry=registry)

    if substitute_variables:
        try:
            warning = validate_and_replace_global_variables(devfile.data)
        except UnsupportedBySchemaVersionError as e:
            logger.debug(f"Skipping variable substitution: {e}")
        else:
            if not warning.is_empty():
                logger.warning("\n".join(warning.lines()))

    validate_devfile_data(devfile.data)
    return devfile
