"""Trigonometry providers used by :class:`~radian.angle.Angle`.

The angle core never calls :mod:`math` or :mod:`numpy` directly for
``sin``, ``cos``, ``atan2`` or ``abs``.  It asks the active provider instead,
so an application can choose a backend once at start-up (see
:mod:`radian.config`) and every angle computed afterwards uses it.

Three providers ship with the package:

``math``
    The interpreter's native C math library.  This is the default.
``numpy``
    numpy's ufuncs, for applications that already standardise on numpy's
    floating point behaviour.
``bare``
    No trigonometry at all.  ``abs`` is implemented by inspecting the sign
    bit; the other functions raise :class:`RuntimeError`.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Dict, Iterator, Type, Union
import logging
import math

import numpy as np

logger = logging.getLogger(__name__)


class TrigProvider(ABC):
    """Interface every trigonometry backend implements."""

    name = "abstract"

    @abstractmethod
    def sin(self, x: float) -> float:
        raise NotImplementedError

    @abstractmethod
    def cos(self, x: float) -> float:
        raise NotImplementedError

    @abstractmethod
    def atan2(self, y: float, x: float) -> float:
        raise NotImplementedError

    @abstractmethod
    def abs(self, x: float) -> float:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class MathTrig(TrigProvider):
    name = "math"

    def sin(self, x: float) -> float:
        return math.sin(x)

    def cos(self, x: float) -> float:
        return math.cos(x)

    def atan2(self, y: float, x: float) -> float:
        return math.atan2(y, x)

    def abs(self, x: float) -> float:
        return math.fabs(x)


class NumpyTrig(TrigProvider):
    """Provider backed by numpy ufuncs; results are returned as Python floats."""

    name = "numpy"

    def sin(self, x: float) -> float:
        return float(np.sin(x))

    def cos(self, x: float) -> float:
        return float(np.cos(x))

    def atan2(self, y: float, x: float) -> float:
        return float(np.arctan2(y, x))

    def abs(self, x: float) -> float:
        return float(np.fabs(x))


class BareTrig(TrigProvider):
    """Fallback used when no math backend is wanted.

    Only ``abs`` is available.  It flips the value when the sign bit is set,
    so ``-0.0`` becomes ``0.0`` and a negative NaN becomes a positive one.
    """

    name = "bare"

    def _unavailable(self, func: str) -> RuntimeError:
        return RuntimeError(f"{func} requires a trigonometry backend; the 'bare' provider has none")

    def sin(self, x: float) -> float:
        raise self._unavailable("sin")

    def cos(self, x: float) -> float:
        raise self._unavailable("cos")

    def atan2(self, y: float, x: float) -> float:
        raise self._unavailable("atan2")

    def abs(self, x: float) -> float:
        if math.copysign(1.0, x) < 0.0:
            return -x
        return x


TRIG_PROVIDERS: Dict[str, Type[TrigProvider]] = {
    MathTrig.name: MathTrig,
    NumpyTrig.name: NumpyTrig,
    BareTrig.name: BareTrig,
}

_active: TrigProvider = MathTrig()


def create_provider(name: str) -> TrigProvider:
    cls = TRIG_PROVIDERS.get(name)
    if cls is None:
        raise KeyError(f"Unknown trig provider: {name}")
    return cls()


def get_provider() -> TrigProvider:
    """Return the provider currently used by angle operations."""
    return _active


def set_provider(provider: Union[str, TrigProvider]) -> TrigProvider:
    """Install *provider* (an instance or a registered name).

    Returns the previously active provider so callers can restore it.
    """
    global _active
    if isinstance(provider, str):
        provider = create_provider(provider)
    elif not isinstance(provider, TrigProvider):
        raise TypeError(f"Expected a TrigProvider or provider name, got {type(provider).__name__}")
    previous = _active
    _active = provider
    logger.debug("trig provider switched from %s to %s", previous.name, provider.name)
    return previous


@contextmanager
def use_provider(provider: Union[str, TrigProvider]) -> Iterator[TrigProvider]:
    """Temporarily install *provider* for the duration of a ``with`` block."""
    previous = set_provider(provider)
    try:
        yield get_provider()
    finally:
        set_provider(previous)
