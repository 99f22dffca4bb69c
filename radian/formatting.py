"""Text formatters for :class:`~radian.angle.Angle`.

``DisplayFormatter`` reproduces ``str(angle)``.  ``CompactFormatter`` is a
separate, fixed-precision rendering for small output sinks such as serial
consoles or status lines, where the full ``repr`` of a float is too long.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Type

from .angle import Angle


class DisplayFormatter:
    """Render ``"<value> radians"`` using the float's default text form."""

    name = "display"

    def format(self, angle: Angle) -> str:
        return str(angle)


@dataclass
class CompactFormatter:
    """Render the value with a fixed number of decimals (five by default)."""

    precision: int = 5
    name = "compact"

    def format(self, angle: Angle) -> str:
        return f"{angle.radians:.{self.precision}f} radians"


FORMATTERS: Dict[str, Type] = {
    DisplayFormatter.name: DisplayFormatter,
    CompactFormatter.name: CompactFormatter,
}


def get_formatter(name: str):
    cls = FORMATTERS.get(name)
    if cls is None:
        raise KeyError(f"Unknown formatter: {name}")
    return cls()
