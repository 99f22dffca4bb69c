"""Normalized angle value type.

An :class:`Angle` always stores its magnitude in radians within the half-open
interval ``(-pi, pi]``.  Every constructor and operator funnels its raw
result through :func:`normalize`, so callers never need to re-derive modulo
arithmetic or worry about taking the long way around the circle.

Conventions
-----------
* Increasing radian value is counterclockwise.
* ``-pi`` normalizes to ``pi``.  The only Angle holding ``-pi`` is the
  :attr:`Angle.NEG_PI` constant, which is built without normalization and
  therefore compares unequal to :attr:`Angle.PI`.
* An exact half-turn between two angles is reported as clockwise.
* Non-finite input yields a NaN-valued Angle; nothing is raised.
"""
from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import ClassVar, Optional, Tuple
import math

from .trig import get_provider

TWO_PI = 2.0 * math.pi


def _reduce(radians: float) -> float:
    if not math.isfinite(radians):
        return math.nan
    # fmod keeps the sign of the dividend, unlike the % operator
    reduced = math.fmod(radians, TWO_PI)
    if reduced > math.pi:
        reduced -= TWO_PI
    elif reduced <= -math.pi:
        reduced += TWO_PI
    return reduced


def _divide(x: float, y: float) -> float:
    try:
        return x / y
    except ZeroDivisionError:
        # IEEE-754 gives +-inf or NaN here, and both normalize to NaN
        return math.nan


def normalize(radians: float) -> "Angle":
    """Return the canonical :class:`Angle` for *radians*."""
    return Angle(radians)


@dataclass(frozen=True, eq=False)
class Angle:
    """An angle in radians that is always normalized to ``(-pi, pi]``."""

    radians: float = 0.0

    ZERO: ClassVar["Angle"]
    PI: ClassVar["Angle"]
    NEG_PI: ClassVar["Angle"]

    def __post_init__(self) -> None:
        object.__setattr__(self, "radians", _reduce(float(self.radians)))

    @classmethod
    def _unchecked(cls, radians: float) -> "Angle":
        angle = object.__new__(cls)
        object.__setattr__(angle, "radians", float(radians))
        return angle

    # ------------------------------------------------------------------
    # Constructors / conversions
    # ------------------------------------------------------------------
    @staticmethod
    def from_degrees(degrees: float) -> "Angle":
        return Angle(math.radians(degrees))

    @staticmethod
    def from_unit_vector(x: float, y: float) -> "Angle":
        """Create an angle from the direction of the vector ``(x, y)``.

        The vector does not need to be unit length.  ``atan2`` already lands
        in ``(-pi, pi]`` so normalization only confirms the result.
        """
        return Angle(get_provider().atan2(y, x))

    @property
    def degrees(self) -> float:
        """Return the angle in degrees."""
        return math.degrees(self.radians)

    def to_unit_vector(self) -> Tuple[float, float]:
        """Return ``(cos(theta), sin(theta))``."""
        trig = get_provider()
        return (trig.cos(self.radians), trig.sin(self.radians))

    def __float__(self) -> float:
        return self.radians

    # ------------------------------------------------------------------
    # Geometry helpers
    # ------------------------------------------------------------------
    def abs(self) -> "Angle":
        return Angle(get_provider().abs(self.radians))

    __abs__ = abs

    def difference(self, other: "Angle") -> "Angle":
        """Signed shortest rotation carrying this angle onto *other*."""
        return Angle(other.radians - self.radians)

    def distance(self, other: "Angle") -> "Angle":
        """Unsigned shortest separation, always within ``[0, pi]``."""
        return Angle(self.radians - other.radians).abs()

    def is_clockwise_to(self, other: "Angle") -> bool:
        """True when the shortest path from this angle to *other* turns clockwise.

        An exact half-turn has no shortest path; it counts as clockwise.
        """
        diff = self.difference(other).radians
        return diff < 0.0 or diff == math.pi

    def is_counterclockwise_to(self, other: "Angle") -> bool:
        diff = self.difference(other).radians
        return 0.0 < diff < math.pi

    def clamp(self, min: "Angle", max: "Angle") -> "Angle":
        """Clamp the stored value between *min* and *max*.

        This is a plain numeric clamp, not an arc test.  The caller must pass
        ``min.radians <= max.radians``.
        """
        if self.radians < min.radians:
            return min
        if self.radians > max.radians:
            return max
        return self

    def lerp(self, other: "Angle", t: float) -> "Angle":
        """Interpolate along the shortest arc towards *other*.

        ``t`` must lie in ``[0.0, 1.0]``; anything else raises
        :class:`ValueError` rather than being clamped.
        """
        if not 0.0 <= t <= 1.0:
            raise ValueError("t must be between 0.0 and 1.0")
        return Angle(self.radians + self.difference(other).radians * t)

    def midpoint(self, other: "Angle") -> "Angle":
        return Angle(self.radians + self.difference(other).radians / 2.0)

    def opposite(self) -> "Angle":
        return Angle(self.radians + math.pi)

    # ------------------------------------------------------------------
    # Operator overloads
    # ------------------------------------------------------------------
    @staticmethod
    def _operand(other) -> Optional[float]:
        """Return *other* as a float if it is an Angle or real number."""
        if isinstance(other, Angle):
            return other.radians
        if isinstance(other, Real):
            return float(other)
        return None

    def __add__(self, other) -> "Angle":
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return Angle(self.radians + value)

    __radd__ = __add__

    def __sub__(self, other) -> "Angle":
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return Angle(self.radians - value)

    def __rsub__(self, other) -> "Angle":
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return Angle(value - self.radians)

    def __mul__(self, other) -> "Angle":
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return Angle(self.radians * value)

    __rmul__ = __mul__

    def __truediv__(self, other) -> "Angle":
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return Angle(_divide(self.radians, value))

    def __neg__(self) -> "Angle":
        # renormalized so that -PI stays inside (-pi, pi]
        return Angle(-self.radians)

    # ------------------------------------------------------------------
    # Comparison and hashing support
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        value = self._operand(other)
        if value is None:
            return NotImplemented  # type: ignore[return-value]
        return self.radians == value

    def __lt__(self, other: "Angle") -> bool:
        value = self._operand(other)
        if value is None:
            return NotImplemented  # type: ignore[return-value]
        return self.radians < value

    def __le__(self, other: "Angle") -> bool:
        value = self._operand(other)
        if value is None:
            return NotImplemented  # type: ignore[return-value]
        return self.radians <= value

    def __gt__(self, other: "Angle") -> bool:
        value = self._operand(other)
        if value is None:
            return NotImplemented  # type: ignore[return-value]
        return self.radians > value

    def __ge__(self, other: "Angle") -> bool:
        value = self._operand(other)
        if value is None:
            return NotImplemented  # type: ignore[return-value]
        return self.radians >= value

    def __hash__(self) -> int:
        return hash(self.radians)

    # ------------------------------------------------------------------
    # Text representation
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        return f"{self.radians!r} radians"

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        return f"{format(self.radians, spec)} radians"

    def __repr__(self) -> str:
        return f"Angle(radians={self.radians!r})"


Angle.ZERO = Angle(0.0)
Angle.PI = Angle(math.pi)
Angle.NEG_PI = Angle._unchecked(-math.pi)
