"""
Outer Boundary Evaluator
========================

Binds a structure model to the atmosphere solvers, so the boundary
condition code of an eigenvalue solver can ask for χ or the cutoff
frequencies at the outer point without handling coefficients itself.

    bound = OuterBoundary(model, AtmosphereParams(formulation='ISOTHRM'))
    pt = model.outer_point()

    chi = bound.chi(pt, omega=2.5, lambda_=6.0)            # real path
    chi = bound.chi(pt, omega=2.5 + 0.01j, lambda_=6.0)    # complex path
    omega_lo, omega_hi = bound.cutoffs(pt, lambda_=6.0)

Oct 2026
"""

from typing import Optional

import numpy as np

from .coeffs import AtmosphereCoeffs, evaluate_coefficients
from .config import AtmosphereParams
from .cutoff import cutoff_frequencies
from .diagnostics import OneShotNotice
from .model import GridPoint, StructureModel
from .wavenumber import wavenumber_complex, wavenumber_real


class OuterBoundary:
    """
    Atmosphere quantities at the outer boundary of a structure model.

    Args:
        model: structure model providing coeff(index, pt)
        params: formulation and branch choices (default AtmosphereParams())
        notice: one-shot notice for the real-frequency fallback
                (default: process-wide notice)
    """

    def __init__(self, model: StructureModel,
                 params: Optional[AtmosphereParams] = None,
                 notice: Optional[OneShotNotice] = None):
        self.model = model
        self.params = params if params is not None else AtmosphereParams()
        self.notice = notice

    def coeffs(self, pt: GridPoint) -> AtmosphereCoeffs:
        return evaluate_coefficients(self.model, pt, self.params.formulation)

    def chi(self, pt: GridPoint, omega, lambda_):
        """
        Radial wavenumber at pt.

        Uses the complex solver (with params.branch) if omega or lambda_
        is complex, the real solver otherwise.
        """
        V, As, c_1, Gamma_1 = self.coeffs(pt)

        if np.iscomplexobj(omega) or np.iscomplexobj(lambda_):
            return wavenumber_complex(V, As, c_1, Gamma_1, omega, lambda_,
                                      branch=self.params.branch)

        return wavenumber_real(V, As, c_1, Gamma_1, omega, lambda_,
                               notice=self.notice)

    def cutoffs(self, pt: GridPoint, lambda_):
        """(omega_lo, omega_hi) at pt."""
        V, As, c_1, Gamma_1 = self.coeffs(pt)
        return cutoff_frequencies(V, As, c_1, Gamma_1, lambda_)

    def __repr__(self) -> str:
        return (f"OuterBoundary(model={self.model!r}, "
                f"formulation={self.params.formulation.value}, "
                f"branch={self.params.branch.value})")
