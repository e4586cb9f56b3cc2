"""
renderer.py

Responsibility: Deterministically turn a height into the rows of a rocket.

Rules:
- The height fixes a segment plan (how many rows of each segment to draw).
- The plan is assembled top to bottom from catalogue parts; stacked hull parts
  must agree on their join width.
- Rows are centred against the widest row with left padding only.
- The palette is accepted but has no effect on the output yet.

This module intentionally does NOT know about argument parsing or stdout.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Mapping

from asciirocket.errors import AssemblyError, InvalidInput
from asciirocket.parts import Part, default_parts

logger = logging.getLogger(__name__)

DEFAULT_PALETTE = "america"

# Nose cone and engine are always drawn.
MIN_HULL_HEIGHT = 2

# Below this many free rows there is no room for the wide cabin section.
WIDE_MIN_ROWS = 4
FINS_MIN_ROWS = 8

# Appended parts run in this order, top to bottom.
HULL_ORDER = ("body", "engine", "exhaust")

NOSE_BY_TIP = ("nose_cone", "nose_step", "nose_keel")
SHOULDERS = ("shoulder", "shoulder_step")
WIDE_TAILS = (
    (("wide_engine", "engine"), ("plume", "exhaust")),
    (("waist", "body"), ("engine", "engine")),
    (("waist_step", "body"), ("engine", "engine")),
)


@dataclass(frozen=True)
class Plan:
    """Row counts for each segment of the rocket."""

    tip: int
    nose: int
    fuselage: int
    shoulder: int
    cabin: int
    fins: int
    puffs: int

    @property
    def wide(self) -> bool:
        return self.cabin > 0


class Rocket:
    """
    An ordered stack of parts bounded by a row budget.

    Only tips are prepended; they sit above everything else. Every other part
    is appended, continues the hull downwards and must join the current bottom
    width. Appended parts run body, then engine, then exhaust.
    """

    def __init__(self, max_height: int) -> None:
        self.max_height = max_height
        self.height = 0
        self.bottom_width = 0
        self._sections: list[Part] = []
        self._last_kind = HULL_ORDER[0]

    @property
    def sections(self) -> tuple[Part, ...]:
        return tuple(self._sections)

    def remaining(self) -> int:
        return self.max_height - self.height

    def _check_fits(self, part: Part) -> None:
        if part.height > self.remaining():
            raise AssemblyError(
                f"Cannot add part `{part.name}` because it would make the rocket too tall "
                f"({self.height + part.height} > {self.max_height} rows)"
            )

    def append(self, part: Part) -> None:
        self._check_fits(part)
        if part.kind not in HULL_ORDER:
            raise AssemblyError(f"Part `{part.name}` is a {part.kind} part and can only be prepended")
        if HULL_ORDER.index(part.kind) < HULL_ORDER.index(self._last_kind):
            raise AssemblyError(f"Part `{part.name}` ({part.kind}) cannot follow a {self._last_kind} part")
        if part.top_width != self.bottom_width:
            raise AssemblyError(
                f"Part `{part.name}` does not join: top width {part.top_width}, "
                f"rocket bottom width {self.bottom_width}"
            )
        self._sections.append(part)
        self.height += part.height
        self.bottom_width = part.bottom_width
        self._last_kind = part.kind

    def prepend(self, part: Part) -> None:
        self._check_fits(part)
        if part.kind != "tip":
            raise AssemblyError(f"Part `{part.name}` is a {part.kind} part; only tip parts can be prepended")
        self._sections.insert(0, part)
        self.height += part.height

    def lines(self) -> list[str]:
        return [row for part in self._sections for row in part.shape]


def parse_height(value: Any) -> int:
    """
    Convert a user-supplied height (e.g. CLI text) into a positive int.
    Text must be plain ASCII decimal digits with an optional sign.
    """
    if isinstance(value, bool):
        raise InvalidInput(f"Height must be a positive integer, got {value!r}")
    if isinstance(value, int):
        height = value
    else:
        text = str(value).strip() if value is not None else ""
        if not text:
            raise InvalidInput("Height is required")
        if not (text.isascii() and text.lstrip("+-").isdigit()):
            raise InvalidInput(f"Height must be a positive integer, got {value!r}")
        try:
            height = int(text, 10)
        except ValueError as e:
            raise InvalidInput(f"Height must be a positive integer, got {value!r}") from e
    if height <= 0:
        raise InvalidInput(f"Height must be a positive integer, got {height}")
    return height


def plan_segments(height: int) -> Plan:
    """
    Split the hull height into segment sizes.

    The nose cone and the engine take one row each; tips grow with the first
    free rows, and once there is room the hull widens into a cabin with an
    exhaust plume or a waist below it. Short wide rockets use the two-row nose
    and skip the fuselage; taller ones get a fuselage and a shoulder. Fins and
    exhaust puffs come in as the rocket gets taller; whatever is left is split
    between the fuselage and the cabin.
    """
    extra = max(height, MIN_HULL_HEIGHT) - MIN_HULL_HEIGHT
    tip = min(2, extra // 4)
    rest = extra - tip

    if rest < WIDE_MIN_ROWS:
        return Plan(tip=tip, nose=1, fuselage=rest, shoulder=0, cabin=0, fins=0, puffs=0)

    fins = 2 if rest >= FINS_MIN_ROWS else 0
    puffs = rest // 8
    # Shoulder or second nose row, plus the second row of the tail.
    body = rest - 1 - 1 - fins - puffs
    if tip < 2:
        return Plan(tip=tip, nose=2, fuselage=0, shoulder=0, cabin=body, fins=fins, puffs=puffs)

    fuselage = body // 2
    return Plan(
        tip=tip,
        nose=1,
        fuselage=fuselage,
        shoulder=1,
        cabin=body - fuselage,
        fins=fins,
        puffs=puffs,
    )


def _pick(names: tuple[str, ...], key: int) -> str:
    return names[key % len(names)]


def _fuselage_row(i: int, plan: Plan) -> str:
    # Narrow rockets carry small fins on the last fuselage row.
    if not plan.wide and plan.fuselage >= 2 and i == plan.fuselage - 1:
        return "fuselage_fins"
    return _pick(("fuselage", "porthole"), i)


def _cabin_row(i: int, rows: int) -> str:
    if i == rows // 2:
        return "hatch"
    return _pick(("cabin", "windows"), i)


def _nose(plan: Plan) -> str:
    if plan.nose == 2:
        return "nose_wide"
    # A tip sits on the nose cone; a mast needs the double-barred keel.
    return NOSE_BY_TIP[plan.tip]


def _take(parts: Mapping[str, Part], name: str, kind: str) -> Part:
    try:
        part = parts[name]
    except KeyError as e:
        raise AssemblyError(f"Parts catalogue is missing part {name!r}") from e
    if part.kind != kind:
        raise AssemblyError(f"Part `{name}` is a {part.kind} part, expected {kind}")
    return part


def assemble(height: int, parts: Mapping[str, Part] | None = None) -> Rocket:
    """
    Build the rocket for a validated height.

    The hull always ends with a single exhaust trail row, so the rocket is one
    row taller than its hull. Shoulder and tail styles rotate with the height.
    """
    bin_ = default_parts() if parts is None else parts
    plan = plan_segments(height)
    logger.debug("Segment plan for height %d: %s", height, plan)

    rocket = Rocket(max(height, MIN_HULL_HEIGHT) + 1)
    rocket.append(_take(bin_, _nose(plan), "body"))
    for i in range(plan.fuselage):
        rocket.append(_take(bin_, _fuselage_row(i, plan), "body"))
    if plan.wide:
        if plan.shoulder:
            rocket.append(_take(bin_, _pick(SHOULDERS, height), "body"))
        for i in range(plan.cabin):
            rocket.append(_take(bin_, _cabin_row(i, plan.cabin), "body"))
        if plan.fins:
            rocket.append(_take(bin_, "fins", "body"))
        for name, kind in WIDE_TAILS[height % len(WIDE_TAILS)]:
            rocket.append(_take(bin_, name, kind))
    else:
        rocket.append(_take(bin_, "engine", "engine"))
    for i in range(plan.puffs):
        rocket.append(_take(bin_, _pick(("spark", "puff"), i), "exhaust"))
    rocket.append(_take(bin_, "trail", "exhaust"))

    # Tips go on last, above the nose cone.
    if plan.tip >= 2:
        rocket.prepend(_take(bin_, "mast", "tip"))
    if plan.tip >= 1:
        rocket.prepend(_take(bin_, "tip", "tip"))

    return rocket


def center_lines(rows: list[str]) -> list[str]:
    """
    Left-pad each row so rows sit centred under the widest one.
    Odd leftovers round towards the right.
    """
    width = max((len(row) for row in rows), default=0)
    return [" " * math.ceil((width - len(row)) / 2) + row for row in rows]


def render(height: int, palette: str = DEFAULT_PALETTE) -> list[str]:
    """
    Render a rocket `height` hull rows tall, top to bottom.

    `palette` is accepted for forward compatibility and does not change the
    output.
    """
    if isinstance(height, bool) or not isinstance(height, int):
        raise InvalidInput(f"Height must be a positive integer, got {height!r}")
    if height <= 0:
        raise InvalidInput(f"Height must be a positive integer, got {height}")

    logger.debug("Rendering height=%d palette=%s", height, palette)
    return center_lines(assemble(height).lines())
