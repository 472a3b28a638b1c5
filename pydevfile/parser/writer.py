"""Write devfile documents back to YAML or JSON."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from ..data import DevfileData

logger = logging.getLogger(__name__)


# User-owned mappings are copied as-is; only an empty one is dropped.
USER_MAPPINGS = {"attributes", "variables", "embeddedResource"}

# Mapping fields that default to empty; empty union members such as
# "volume: {}" must survive since they carry the variant.
DROPPABLE_MAPPINGS = USER_MAPPINGS | {"events"}


def _prune(value: Any) -> Any:
    """Drop empty lists and empty default mappings from a dumped tree."""
    if isinstance(value, dict):
        pruned = {
            key: item if key in USER_MAPPINGS else _prune(item)
            for key, item in value.items()
        }
        return {
            key: item
            for key, item in pruned.items()
            if item != [] and not (item == {} and key in DROPPABLE_MAPPINGS)
        }
    if isinstance(value, list):
        return [_prune(item) for item in value]
    return value


class DevfileWriter:
    """Serialize a devfile document to a raw tree, YAML or JSON."""

    def to_raw(self, data: DevfileData) -> dict[str, Any]:
        """Convert the document to a plain dict, keys in document order."""
        # mode="json" ensures Enums are serialized as strings
        raw = data.content.model_dump(exclude_none=True, mode="json")
        return _prune(raw)

    def write_yaml_str(self, data: DevfileData) -> str:
        """Convert the document to a YAML string."""
        return yaml.dump(
            self.to_raw(data),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )

    def write_json_str(self, data: DevfileData) -> str:
        """Convert the document to a JSON string."""
        return json.dumps(self.to_raw(data), indent=2, ensure_ascii=False)

    def write_yaml(self, data: DevfileData, path: Path) -> None:
        """Write the document to a YAML file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(
                self.to_raw(data),
                f,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
        logger.info(f"Wrote devfile to: {path}")

    def write_json(self, data: DevfileData, path: Path) -> None:
        """Write the document to a JSON file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.write_json_str(data))
        logger.info(f"Wrote devfile to: {path}")
