"""
Structure Model Interface
=========================

The atmosphere layer needs exactly two things from a stellar-structure
model:

    model.coeff(index, pt) -> float   dimensionless structure coefficient
    pt.x                   -> float   fractional radius of the point

StructureModel and GridPoint describe that contract. TabulatedModel is a
concrete implementation over a radial grid, used by the tests and by
callers who already hold coefficient profiles as arrays.

Coefficient indices:
    V_2      V/x²  (homology invariant V divided by x², regular at the centre)
    AS       A*    (buoyancy coefficient)
    C_1      c₁    (inverse mean density, normalised)
    GAMMA_1  Γ₁    (first adiabatic exponent)

Oct 2026
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Mapping, Protocol

import numpy as np
from scipy.interpolate import CubicSpline


class Coeff(IntEnum):
    """Indices of the structure coefficients the atmosphere layer reads."""
    V_2 = 0
    AS = 1
    C_1 = 2
    GAMMA_1 = 3


class GridPoint(Protocol):
    x: float


class StructureModel(Protocol):
    def coeff(self, index: int, pt: GridPoint) -> float:
        ...


@dataclass(frozen=True)
class Point:
    """Location on a model grid: segment index s, fractional radius x."""
    s: int
    x: float


class TabulatedModel:
    """
    Structure model from tabulated coefficient profiles.

    Each coefficient is interpolated in x with a cubic spline
    (not-a-knot ends). Values at grid nodes are reproduced to rounding.

    Args:
        x: (N,) strictly increasing fractional radii, N >= 2
        coeffs: mapping Coeff -> (N,) array of values at x

    Raises:
        ValueError: on mismatched lengths or non-increasing x
    """

    def __init__(self, x: np.ndarray, coeffs: Mapping[Coeff, np.ndarray]):
        x = np.asarray(x, dtype=float)
        if x.ndim != 1 or len(x) < 2:
            raise ValueError(f"x must be 1-D with at least 2 points, got shape {x.shape}")
        if np.any(np.diff(x) <= 0):
            raise ValueError("x must be strictly increasing")

        self.x = x
        self._splines: Dict[Coeff, CubicSpline] = {}
        for index, values in coeffs.items():
            values = np.asarray(values, dtype=float)
            if values.shape != x.shape:
                raise ValueError(
                    f"Coefficient {Coeff(index).name} has shape {values.shape}, "
                    f"expected {x.shape}"
                )
            self._splines[Coeff(index)] = CubicSpline(x, values)

    @property
    def x_outer(self) -> float:
        return float(self.x[-1])

    def outer_point(self) -> Point:
        """Point at the outer edge of the grid (where the atmosphere attaches)."""
        return Point(s=0, x=self.x_outer)

    def coeff(self, index: int, pt: GridPoint) -> float:
        """
        Value of coefficient `index` at pt.x.

        Raises:
            KeyError: if the model does not tabulate `index`
        """
        try:
            spline = self._splines[Coeff(index)]
        except (KeyError, ValueError):
            raise KeyError(f"Coefficient {index!r} not tabulated in model") from None
        return float(spline(pt.x))

    def __repr__(self) -> str:
        names = ", ".join(c.name for c in self._splines)
        return f"TabulatedModel(N={len(self.x)}, coeffs=[{names}])"
