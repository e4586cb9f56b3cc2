"""
parts.py

Responsibility: Load the rocket parts catalogue into a typed, read-only model.

The catalogue is a YAML document bundled next to this module (`parts.yaml`).
Every entry is validated at load time so the renderer can treat the result as
the single source of truth for shapes and join widths.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml

from asciirocket.errors import PartsError

logger = logging.getLogger(__name__)

DEFAULT_CATALOGUE = Path(__file__).with_name("parts.yaml")

PART_KINDS = ("tip", "body", "engine", "exhaust")


@dataclass(frozen=True)
class Part:
    """A single stackable piece of the rocket."""

    name: str
    kind: str
    shape: tuple[str, ...]
    top_width: int
    bottom_width: int

    @property
    def height(self) -> int:
        return len(self.shape)


def _width(name: str, entry: dict[str, Any], key: str) -> int:
    value = entry.get(key, 0)
    # bool is an int subclass; `top: yes` is a typo, not a width.
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise PartsError(f"Part `{name}`: `{key}` must be a non-negative integer, got {value!r}.")
    return value


def _parse_part(name: str, entry: Any) -> Part:
    if not isinstance(entry, dict):
        raise PartsError(f"Part `{name}` must be a mapping.")

    kind = str(entry.get("kind") or "").strip()
    if kind not in PART_KINDS:
        raise PartsError(f"Part `{name}`: unknown kind {kind!r} (expected one of {', '.join(PART_KINDS)}).")

    shape_raw = entry.get("shape")
    if isinstance(shape_raw, str):
        shape_raw = shape_raw.splitlines()
    if not isinstance(shape_raw, list) or not shape_raw:
        raise PartsError(f"Part `{name}`: `shape` must be a non-empty list of rows.")
    shape = tuple(str(row) for row in shape_raw)
    if any(not row.strip() for row in shape):
        raise PartsError(f"Part `{name}`: shape rows must not be blank.")

    return Part(
        name=name,
        kind=kind,
        shape=shape,
        top_width=_width(name, entry, "top"),
        bottom_width=_width(name, entry, "bottom"),
    )


def load_parts(path: str | Path | None = None) -> dict[str, Part]:
    """
    Load a parts catalogue.

    Expected layout:

        parts:
          <name>:
            kind: tip | body | engine | exhaust
            shape: [<row>, ...]
            top: <int>
            bottom: <int>

    When `path` is None the bundled catalogue is used.
    """
    cat_path = Path(path) if path is not None else DEFAULT_CATALOGUE
    if not cat_path.exists():
        raise PartsError(f"Parts catalogue does not exist: {cat_path}")

    try:
        data = yaml.safe_load(cat_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise PartsError(f"Parts catalogue is not valid YAML: {cat_path}") from e
    if not isinstance(data, dict):
        raise PartsError("Parts catalogue must be a mapping/object at the top level.")

    parts_raw = data.get("parts")
    if not isinstance(parts_raw, dict) or not parts_raw:
        raise PartsError("Parts catalogue must define a non-empty `parts` mapping.")

    parts = {str(name): _parse_part(str(name), entry) for name, entry in parts_raw.items()}
    logger.debug("Loaded %d parts from %s", len(parts), cat_path)
    return parts


@lru_cache(maxsize=1)
def default_parts() -> Mapping[str, Part]:
    return MappingProxyType(load_parts())
