"""
Range‑partitioned polynomial evaluation.
Only depends on NumPy; every converter in the package is one of these.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np
import numpy.polynomial.polynomial as poly


@dataclass(frozen=True)
class CoefficientSet:
    """
    One polynomial segment: sum(coefficients[i] * x**i) over [lower, upper),
    optionally plus the correction term a0 * exp(a1 * (x - a2)**2).
    """

    lower: float
    upper: float
    coefficients: Tuple[float, ...]
    exponential: Tuple[float, float, float] | None = None

    def __post_init__(self) -> None:
        if self.lower >= self.upper:
            raise ValueError("lower must be less than upper")
        if not self.coefficients:
            raise ValueError("a coefficient set needs at least one coefficient")

    def contains(self, x: float | np.ndarray) -> bool | np.ndarray:
        return (self.lower <= x) & (x < self.upper)

    def apply(self, x: float | np.ndarray) -> float | np.ndarray:
        value = poly.polyval(x, self.coefficients)
        if self.exponential is not None:
            a0, a1, a2 = self.exponential
            value = value + a0 * np.exp(a1 * np.square(x - a2))
        return value


def _verify_contiguous(segments: Sequence[CoefficientSet]) -> None:
    if not segments:
        raise ValueError("At least one segment is required")
    prev_upper = None
    for segment in segments:
        if prev_upper is not None and segment.lower != prev_upper:
            raise ValueError("Segment ranges must be contiguous")
        prev_upper = segment.upper


class PiecewisePolynomial:
    """
    Contiguous CoefficientSets covering [lower, upper].

    Segment ranges include their lower bound and exclude their upper bound,
    except the last one which also owns `upper`. Inputs beyond either end
    are evaluated with the nearest segment.
    """

    def __init__(self, segments: Sequence[CoefficientSet]) -> None:
        _verify_contiguous(segments)
        self.segments: Tuple[CoefficientSet, ...] = tuple(segments)
        self.lower = self.segments[0].lower
        self.upper = self.segments[-1].upper
        self.breakpoints = np.array([s.upper for s in self.segments[:-1]], dtype=float)

    def __len__(self) -> int:
        return len(self.segments)

    def __repr__(self) -> str:
        return f"PiecewisePolynomial([{self.lower:g}, {self.upper:g}], segments={len(self)})"

    def index(self, x: float | np.ndarray) -> int | np.ndarray:
        """Index of the segment that evaluates `x`."""
        return np.searchsorted(self.breakpoints, x, side="right")

    def select(self, x: float) -> CoefficientSet:
        return self.segments[int(self.index(x))]

    def __call__(self, x: float | np.ndarray) -> float | np.ndarray:
        values = np.asarray(x, dtype=float)
        flat = np.atleast_1d(values)
        indices = self.index(flat)
        result = np.empty_like(flat)
        for i, segment in enumerate(self.segments):
            mask = indices == i
            if mask.any():
                result[mask] = segment.apply(flat[mask])
        if values.ndim == 0:
            return float(result[0])
        return result.reshape(values.shape)
