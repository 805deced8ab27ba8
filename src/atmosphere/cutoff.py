"""
Atmospheric Cutoff Frequencies
==============================

Low and high cutoff frequencies of an isothermal atmosphere, bounding the
band of frequencies that separates propagating from evanescent waves.
They are the roots of a quadratic in ω²:

    a ω⁴ + b ω² + c = 0

    a = -4 (V/Γ₁) c₁²
    b = ((A_s - V/Γ₁ - 4)² + 4 (V/Γ₁) A_s + 4λ) c₁
    c = -4 λ A_s

    ω_lo = sqrt((-b + sqrt(b² - 4ac)) / 2a)
    ω_hi = sqrt((-b - sqrt(b² - 4ac)) / 2a)

For V/Γ₁ > 0, c₁ > 0, A_s ≥ 0, λ ≥ 0 both roots are real and
non-negative with ω_hi ≥ ω_lo. Other inputs can reverse the order or
produce NaN; that is reported as CutoffOrderingError rather than
returned.

Oct 2026
"""

from typing import Tuple

import numpy as np

from .constants import CUTOFF_FACTOR, CUTOFF_SHIFT
from .errors import CutoffOrderingError


def cutoff_quadratic(V, As, c_1, Gamma_1, lambda_) -> Tuple:
    """Coefficients (a, b, c) of the cutoff quadratic in ω²."""
    V_g = V / Gamma_1

    a = -CUTOFF_FACTOR * V_g * c_1**2
    b = ((As - V_g - CUTOFF_SHIFT)**2 + CUTOFF_FACTOR * V_g * As
         + CUTOFF_FACTOR * lambda_) * c_1
    c = -CUTOFF_FACTOR * lambda_ * As

    return a, b, c


def cutoff_frequencies(V, As, c_1, Gamma_1, lambda_):
    """
    Low and high atmospheric cutoff frequencies.

    Args:
        V, As, c_1, Gamma_1: structure coefficients at the boundary
        lambda_: horizontal eigenvalue (real)

    Returns:
        (omega_lo, omega_hi): floats, or ndarrays for array input

    Raises:
        CutoffOrderingError: if omega_hi < omega_lo (or either is NaN)
            for any element
    """
    V, As, c_1, Gamma_1, lambda_ = (
        np.asarray(q, dtype=float) for q in (V, As, c_1, Gamma_1, lambda_)
    )

    a, b, c = cutoff_quadratic(V, As, c_1, Gamma_1, lambda_)

    with np.errstate(divide='ignore', invalid='ignore'):
        sqrt_disc = np.sqrt(b**2 - 4.0 * a * c)
        omega_lo = np.sqrt((-b + sqrt_disc) / (2.0 * a))
        omega_hi = np.sqrt((-b - sqrt_disc) / (2.0 * a))

    # Negated >= so NaN counts as a violation
    bad = ~(omega_hi >= omega_lo)
    if np.any(bad):
        idx = np.flatnonzero(bad)[0]
        lo = np.ravel(omega_lo)[idx]
        hi = np.ravel(omega_hi)[idx]
        raise CutoffOrderingError(
            f"Atmospheric cutoff frequencies out of order: "
            f"omega_lo={lo}, omega_hi={hi} (check sign of V/Gamma_1 and c_1)"
        )

    if np.ndim(omega_lo) == 0:
        return float(omega_lo), float(omega_hi)
    return omega_lo, omega_hi
