"""
Tests for atmospheric cutoff frequencies
========================================

Validates:
    - Ordering ω_hi ≥ ω_lo ≥ 0 over random physical coefficient sets
    - Cutoffs solve the quadratic in ω² they are defined by
    - Invalid inputs raise CutoffOrderingError instead of returning

Run with:
    python3 -m pytest tests/atmosphere/test_cutoff.py -v

Date: Oct 2026
"""

import math

import numpy as np
import pytest

from atmosphere import (
    CutoffOrderingError,
    cutoff_frequencies,
    cutoff_quadratic,
)


def random_physical_coeffs(rng, n):
    """V, c₁, Γ₁ > 0; A_s, λ ≥ 0: always a valid cutoff pair."""
    V = rng.uniform(0.01, 50.0, n)
    As = rng.uniform(0.0, 20.0, n)
    c_1 = rng.uniform(0.01, 5.0, n)
    Gamma_1 = rng.uniform(1.01, 2.0, n)
    lambda_ = rng.uniform(0.0, 200.0, n)
    return V, As, c_1, Gamma_1, lambda_


# ============================================================================
# Reference case
# ============================================================================

class TestReferenceCase:

    LAMBDA = 2.0

    def test_values(self, reference_coeffs):
        """V=2, A_s=0.5, c₁=1, Γ₁=1.6667, λ=2 → ω_lo ≈ 0.354, ω_hi ≈ 2.577."""
        V, As, c_1, Gamma_1 = reference_coeffs
        omega_lo, omega_hi = cutoff_frequencies(V, As, c_1, Gamma_1, self.LAMBDA)

        u = V / Gamma_1
        a = -4 * u * c_1**2
        b = ((As - u - 4)**2 + 4 * u * As + 4 * self.LAMBDA) * c_1
        c = -4 * self.LAMBDA * As
        disc = math.sqrt(b**2 - 4 * a * c)

        assert omega_lo == pytest.approx(math.sqrt((-b + disc) / (2 * a)), rel=1e-12)
        assert omega_hi == pytest.approx(math.sqrt((-b - disc) / (2 * a)), rel=1e-12)
        assert omega_lo == pytest.approx(0.354, abs=1e-3)
        assert omega_hi == pytest.approx(2.577, abs=1e-3)
        assert isinstance(omega_lo, float) and isinstance(omega_hi, float)

    def test_quadratic_coefficients(self, reference_coeffs):
        a, b, c = cutoff_quadratic(*reference_coeffs, self.LAMBDA)
        assert a == pytest.approx(-4.8, abs=1e-3)
        assert b == pytest.approx(32.49, abs=1e-2)
        assert c == pytest.approx(-4.0)

    def test_cutoffs_are_roots(self, reference_coeffs):
        a, b, c = cutoff_quadratic(*reference_coeffs, self.LAMBDA)
        omega_lo, omega_hi = cutoff_frequencies(*reference_coeffs, self.LAMBDA)
        for omega in (omega_lo, omega_hi):
            w2 = omega**2
            value = a * w2**2 + b * w2 + c
            assert abs(value) < 1e-10 * (abs(a * w2**2) + abs(b * w2) + abs(c))


# ============================================================================
# Property tests
# ============================================================================

def test_ordering_random_vectorised():
    """ω_hi ≥ ω_lo ≥ 0 and finite for physical coefficient sets."""
    rng = np.random.default_rng(2026)
    omega_lo, omega_hi = cutoff_frequencies(*random_physical_coeffs(rng, 2000))

    assert omega_lo.shape == (2000,)
    assert np.all(np.isfinite(omega_lo)) and np.all(np.isfinite(omega_hi))
    assert np.all(omega_lo >= 0.0)
    assert np.all(omega_hi >= omega_lo)


def test_ordering_random_scalar():
    """Scalar calls agree with the vectorised call."""
    rng = np.random.default_rng(99)
    coeffs = random_physical_coeffs(rng, 50)
    lo_vec, hi_vec = cutoff_frequencies(*coeffs)

    for i, args in enumerate(zip(*coeffs)):
        lo, hi = cutoff_frequencies(*args)
        assert hi >= lo
        assert lo == pytest.approx(lo_vec[i], rel=1e-14, abs=1e-300)
        assert hi == pytest.approx(hi_vec[i], rel=1e-14)


def test_roots_random():
    """ω_lo², ω_hi² solve a ω⁴ + b ω² + c = 0 (λ, A_s > 0)."""
    rng = np.random.default_rng(5)
    V, As, c_1, Gamma_1, lambda_ = random_physical_coeffs(rng, 200)
    As = As + 0.1
    lambda_ = lambda_ + 1.0

    a, b, c = cutoff_quadratic(V, As, c_1, Gamma_1, lambda_)
    omega_lo, omega_hi = cutoff_frequencies(V, As, c_1, Gamma_1, lambda_)

    for omega in (omega_lo, omega_hi):
        w2 = omega**2
        scale = np.abs(a * w2**2) + np.abs(b * w2) + np.abs(c)
        assert np.all(np.abs(a * w2**2 + b * w2 + c) <= 1e-8 * scale)

    # product of the roots in ω² is c/a
    np.testing.assert_allclose(omega_lo**2 * omega_hi**2, c / a, rtol=1e-7)


def test_zero_lambda_gives_zero_lower_cutoff():
    omega_lo, omega_hi = cutoff_frequencies(2.0, 0.5, 1.0, 5 / 3, 0.0)
    assert omega_lo == 0.0
    assert omega_hi > 0.0


# ============================================================================
# Guards
# ============================================================================

def test_negative_V_raises():
    """V/Γ₁ < 0 flips the sign of a: one root negative → abort."""
    with pytest.raises(CutoffOrderingError, match="out of order"):
        cutoff_frequencies(-2.0, 0.5, 1.0, 5 / 3, 2.0)


def test_negative_gamma_raises():
    with pytest.raises(ArithmeticError):
        cutoff_frequencies(2.0, 0.5, 1.0, -5 / 3, 2.0)


def test_single_bad_element_raises():
    """One invalid element in an array aborts the whole call."""
    V = np.array([2.0, 2.0, -2.0, 2.0])
    with pytest.raises(CutoffOrderingError):
        cutoff_frequencies(V, 0.5, 1.0, 5 / 3, 2.0)
