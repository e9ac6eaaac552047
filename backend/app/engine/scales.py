"""
Scale primitives used to lay out the heatmap.

- BandScale: finite ordered domain -> equal-width contiguous slots
- LinearScale: continuous affine map with "nice" tick generation
- SequentialScale: continuous domain -> color via a sampled colormap ramp

All scales are immutable once built; calling them never changes state.
"""

import math
from functools import lru_cache
from typing import Callable, Hashable, Iterable, Optional, Sequence

import matplotlib
import numpy as np
from matplotlib.colors import to_hex


# Thresholds for picking 1, 2, 5 or 10 as the tick step factor
_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


class BandScale:
    """Discrete band scale with no padding."""

    def __init__(self, domain: Iterable[Hashable], range_: tuple[float, float]):
        seen: dict = {}
        for value in domain:
            if value not in seen:
                seen[value] = len(seen)
        self._index = seen
        self._domain = tuple(seen)
        self._range = (float(range_[0]), float(range_[1]))
        n = len(self._domain)
        self._step = (self._range[1] - self._range[0]) / n if n else 0.0

    def __call__(self, value: Hashable) -> Optional[float]:
        i = self._index.get(value)
        if i is None:
            return None
        return self._range[0] + i * self._step

    def __eq__(self, other):
        if not isinstance(other, BandScale):
            return NotImplemented
        return self._domain == other._domain and self._range == other._range

    @property
    def domain(self) -> tuple:
        return self._domain

    @property
    def range(self) -> tuple[float, float]:
        return self._range

    @property
    def bandwidth(self) -> float:
        return self._step

    def center(self, value: Hashable) -> Optional[float]:
        start = self(value)
        if start is None:
            return None
        return start + self._step / 2


def tick_step(start: float, stop: float, count: int) -> float:
    """
    Pick a tick spacing of 1, 2 or 5 times a power of ten so that roughly
    `count` ticks cover [start, stop].
    """
    step0 = abs(stop - start) / max(1, count)
    power = math.floor(math.log10(step0))
    error = step0 / 10 ** power
    if error >= _E10:
        factor = 10
    elif error >= _E5:
        factor = 5
    elif error >= _E2:
        factor = 2
    else:
        factor = 1
    return factor * 10 ** power


class LinearScale:
    """Continuous linear scale (unclamped)."""

    def __init__(self, domain: tuple[float, float], range_: tuple[float, float]):
        self._domain = (float(domain[0]), float(domain[1]))
        self._range = (float(range_[0]), float(range_[1]))

    def __call__(self, value: float) -> float:
        d0, d1 = self._domain
        r0, r1 = self._range
        if d1 == d0:
            return (r0 + r1) / 2
        return r0 + (value - d0) / (d1 - d0) * (r1 - r0)

    def __eq__(self, other):
        if not isinstance(other, LinearScale):
            return NotImplemented
        return self._domain == other._domain and self._range == other._range

    @property
    def domain(self) -> tuple[float, float]:
        return self._domain

    @property
    def range(self) -> tuple[float, float]:
        return self._range

    def ticks(self, count: int = 10) -> list[float]:
        lo, hi = sorted(self._domain)
        if lo == hi:
            return [lo]
        step = tick_step(lo, hi, count)
        # Work in integer multiples of the step to keep labels free of float noise
        power = math.floor(math.log10(step))
        if power < 0:
            inv = round(1 / step)
            i0, i1 = math.ceil(lo * inv), math.floor(hi * inv)
            return [i / inv for i in range(i0, i1 + 1)]
        i0, i1 = math.ceil(lo / step), math.floor(hi / step)
        return [float(i * step) for i in range(i0, i1 + 1)]

    def tick_format(self, count: int = 10) -> Callable[[float], str]:
        lo, hi = sorted(self._domain)
        step = tick_step(lo, hi, count) if lo != hi else 1.0
        decimals = max(0, -math.floor(math.log10(step)))
        return lambda v: f"{v:,.{decimals}f}"


@lru_cache(maxsize=None)
def colormap_interpolator(name: str) -> Callable[[float], str]:
    """
    Build t -> "#rrggbb" from a matplotlib colormap.

    t is clamped to [0, 1] and mapped onto the colormap's discrete entries
    (256 for inferno), so t = 0 and t = 1 hit the two ends of the ramp.
    """
    cmap = matplotlib.colormaps[name]
    n = cmap.N
    colors = [to_hex(cmap(i)) for i in range(n)]

    def interpolate(t: float) -> str:
        if t is None or math.isnan(t):
            t = 0.0
        i = int(math.floor(t * n))
        return colors[max(0, min(n - 1, i))]

    return interpolate


class SequentialScale:
    """Maps [d0, d1] onto an interpolator's [0, 1] input."""

    def __init__(
        self,
        interpolator: Callable[[float], str],
        domain: tuple[float, float],
    ):
        self._interpolator = interpolator
        self._domain = (float(domain[0]), float(domain[1]))

    def __call__(self, value: float) -> str:
        d0, d1 = self._domain
        # Degenerate domain: everything sits at the middle of the ramp
        if d1 == d0:
            return self._interpolator(0.5)
        return self._interpolator((value - d0) / (d1 - d0))

    def __eq__(self, other):
        if not isinstance(other, SequentialScale):
            return NotImplemented
        return (
            self._domain == other._domain
            and self._interpolator is other._interpolator
        )

    @property
    def domain(self) -> tuple[float, float]:
        return self._domain

    @property
    def interpolator(self) -> Callable[[float], str]:
        return self._interpolator


def extent(values: Sequence[float]) -> tuple[float, float]:
    """Return (min, max) of a non-empty sequence."""
    arr = np.asarray(values, dtype=float)
    return float(arr.min()), float(arr.max())


def sample_range(start: float, stop: float, steps: int) -> list[float]:
    """`steps` evenly spaced points from start, spacing (stop - start) / steps."""
    step = (stop - start) / steps
    return [float(v) for v in start + np.arange(steps) * step]
