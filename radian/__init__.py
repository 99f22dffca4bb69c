"""Normalized angle arithmetic.

The package exposes :class:`Angle`, a value type whose magnitude is always
kept in ``(-pi, pi]``, along with the pluggable trigonometry providers and
text formatters it works with.
"""

from .angle import Angle, normalize
from .arrays import normalize_array
from .formatting import CompactFormatter, DisplayFormatter, get_formatter
from .trig import (
    BareTrig,
    MathTrig,
    NumpyTrig,
    TrigProvider,
    TRIG_PROVIDERS,
    get_provider,
    set_provider,
    use_provider,
)

__version__ = "0.1.0"
