"""
Atmospheric Radial Wavenumber
=============================

Radial wavenumber χ of the outer-boundary wave solution, from the 2×2
characteristic system of the adiabatic oscillation equations in a
plane-parallel atmosphere with constant coefficients.

CHARACTERISTIC SYSTEM:
    a11 = V/Γ₁ - 3          a12 = λ/(c₁ω²) - V/Γ₁
    a21 = c₁ω² - A_s        a22 = A_s + 1

    χ² + bχ + c = 0,   b = -(a11 + a22),   c = a11·a22 - a12·a21

    χ = (-b ± psi)/2,  psi² = b² - 4c

REAL FREQUENCY (wavenumber_real):
    psi² ≥ 0  root (-b - psi)/2, evaluated in whichever of the two
              algebraically equal forms avoids cancellation:
                  b ≥ 0:  (-b - psi)/2
                  b < 0:  2c/(-b + psi)
    psi² < 0  no real root (wave propagates into the atmosphere). The
              imaginary part is discarded, χ = -b/2, and a one-shot notice
              is emitted.

COMPLEX FREQUENCY (wavenumber_complex):
    psi = principal sqrt(b² - 4c), then its sign is fixed by the Branch
    criterion (see enums.Branch). The root is again taken in the
    cancellation-free form:
        sign(Re psi) == sign(Re b):  χ = -2c/(b + psi)
        otherwise:                   χ = (-b + psi)/2

All functions broadcast over numpy arrays; scalar input gives scalar output.

Oct 2026
"""

from typing import Optional, Tuple

import numpy as np

from .constants import A11_OFFSET, A22_OFFSET
from .diagnostics import REAL_DISCRIMINANT_NOTICE, OneShotNotice
from .enums import DEFAULT_BRANCH, Branch


def _scalar_or_array(a: np.ndarray):
    return a.item() if np.ndim(a) == 0 else a


def characteristic_coeffs(V, As, c_1, Gamma_1, omega, lambda_) -> Tuple:
    """
    Coefficients of the characteristic quadratic χ² + bχ + c = 0.

    Works for real or complex omega/lambda_ (arithmetic follows the
    input dtype).

    Returns:
        a_11: (1,1) element of the characteristic matrix (needed by the
              flux branch criterion)
        b, c: quadratic coefficients
    """
    a_11 = V / Gamma_1 - A11_OFFSET
    a_12 = lambda_ / (c_1 * omega**2) - V / Gamma_1
    a_21 = c_1 * omega**2 - As
    a_22 = As + A22_OFFSET

    b = -(a_11 + a_22)
    c = a_11 * a_22 - a_12 * a_21

    return a_11, b, c


def discriminant(V, As, c_1, Gamma_1, omega, lambda_):
    """
    psi² = b² - 4c for real omega, lambda_.

    psi² ≥ 0: evanescent (real χ)
    psi² < 0: propagating (χ would be complex)

    Expanded, c₁ω²·psi² = -4(V/Γ₁)c₁²ω⁴
        + ((A_s - V/Γ₁ + 4)² + 4(V/Γ₁)A_s + 4λ)c₁ω² - 4λA_s.
    The squared term differs from the one in cutoff_quadratic, so the
    zeros of psi² are not the cutoff frequencies.
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        _, b, c = characteristic_coeffs(
            np.asarray(V, dtype=float), np.asarray(As, dtype=float),
            np.asarray(c_1, dtype=float), np.asarray(Gamma_1, dtype=float),
            np.asarray(omega, dtype=float), np.asarray(lambda_, dtype=float),
        )
        psi2 = b**2 - 4.0 * c
    return _scalar_or_array(np.asarray(psi2))


def is_evanescent(V, As, c_1, Gamma_1, omega, lambda_):
    """True where the real-frequency quadratic has real roots."""
    psi2 = np.asarray(discriminant(V, As, c_1, Gamma_1, omega, lambda_))
    return _scalar_or_array(psi2 >= 0.0)


def wavenumber_real(V, As, c_1, Gamma_1, omega, lambda_,
                    notice: Optional[OneShotNotice] = None):
    """
    Radial wavenumber χ for real frequency.

    Args:
        V, As, c_1, Gamma_1: structure coefficients at the boundary
        omega: dimensionless frequency (rotating frame)
        lambda_: horizontal eigenvalue, ℓ(ℓ+1) for non-rotating stars
        notice: one-shot notice for the psi² < 0 fallback
                (default: process-wide REAL_DISCRIMINANT_NOTICE)

    Returns:
        χ (float, or ndarray for array input)
    """
    if notice is None:
        notice = REAL_DISCRIMINANT_NOTICE

    V, As, c_1, Gamma_1, omega, lambda_ = (
        np.asarray(q, dtype=float) for q in (V, As, c_1, Gamma_1, omega, lambda_)
    )

    # omega = 0 is a pole of a12
    with np.errstate(divide='ignore', invalid='ignore'):
        _, b, c = characteristic_coeffs(V, As, c_1, Gamma_1, omega, lambda_)
        psi2 = b**2 - 4.0 * c

        no_real_root = psi2 < 0.0
        psi = np.sqrt(np.where(no_real_root, 0.0, psi2))
        chi = np.where(b >= 0.0, (-b - psi) / 2.0, 2.0 * c / (-b + psi))
        chi = np.where(no_real_root, -b / 2.0, chi)

    if np.any(no_real_root):
        notice.emit(stacklevel=2)

    return _scalar_or_array(chi)


def _flip_mask(branch: Branch, psi, a_11, omega):
    """Where psi must be negated to satisfy the branch criterion."""
    if branch is Branch.OUTWARD_GROWING_ENERGY:
        return psi.real < 0.0
    if branch is Branch.OUTWARD_DECAYING_ENERGY:
        return psi.real > 0.0
    if branch is Branch.OUTWARD_FLUX:
        return ((psi - a_11) * np.conj(omega)).imag < 0.0
    if branch is Branch.INWARD_FLUX:
        return ((psi - a_11) * np.conj(omega)).imag > 0.0
    if branch is Branch.OUTWARD_PHASE_VELOCITY:
        return psi.imag / omega.real < 0.0
    if branch is Branch.INWARD_PHASE_VELOCITY:
        return psi.imag / omega.real > 0.0
    raise AssertionError(f"Unhandled branch {branch!r}")


def select_branch(psi, a_11, omega, branch=DEFAULT_BRANCH):
    """
    Fix the sign of psi by the physical branch criterion.

    Comparisons are strict, so a criterion that evaluates to zero or NaN
    leaves psi unchanged. For the phase-velocity branches with Re ω = 0
    the criterion is NaN only when Im psi is also 0; otherwise it is ±inf
    and psi is flipped by the sign of Im psi as usual.

    Returns:
        psi (complex, or ndarray for array input)

    Raises:
        InvalidBranchError: if branch is not recognised
    """
    branch = Branch.parse(branch)
    psi = np.asarray(psi, dtype=complex)
    omega = np.asarray(omega, dtype=complex)

    with np.errstate(divide='ignore', invalid='ignore'):
        flip = _flip_mask(branch, psi, a_11, omega)

    return _scalar_or_array(np.where(flip, -psi, psi))


def wavenumber_complex(V, As, c_1, Gamma_1, omega, lambda_,
                       branch=DEFAULT_BRANCH):
    """
    Radial wavenumber χ for complex frequency.

    Args:
        V, As, c_1, Gamma_1: structure coefficients at the boundary
        omega: complex dimensionless frequency
        lambda_: complex horizontal eigenvalue
        branch: Branch member, or its name / config name
                (default OUTWARD_DECAYING_ENERGY)

    Returns:
        χ (complex, or ndarray for array input)

    Raises:
        InvalidBranchError: if branch is not recognised (before any arithmetic)
    """
    branch = Branch.parse(branch)

    V, As, c_1, Gamma_1 = (
        np.asarray(q, dtype=float) for q in (V, As, c_1, Gamma_1)
    )
    omega = np.asarray(omega, dtype=complex)
    lambda_ = np.asarray(lambda_, dtype=complex)

    with np.errstate(divide='ignore', invalid='ignore'):
        a_11, b, c = characteristic_coeffs(V, As, c_1, Gamma_1, omega, lambda_)
        b = np.asarray(b, dtype=complex)

        psi = np.asarray(select_branch(np.sqrt(b**2 - 4.0 * c), a_11, omega, branch))

        # copysign distinguishes ±0, matching a sign-bit comparison
        same_sign = np.copysign(1.0, psi.real) == np.copysign(1.0, b.real)
        chi = np.where(same_sign, -2.0 * c / (b + psi), (-b + psi) / 2.0)

    return _scalar_or_array(chi)
