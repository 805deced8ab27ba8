"""
Atmosphere Structure Coefficients
=================================

Evaluates (V, A_s, c₁, Γ₁) at a model point under one of two
formulations:

    UNNO        V = V_2·x², A_s, c₁, Γ₁ taken straight from the model
    ISOTHERMAL  as UNNO, but A_s = V (1 - 1/Γ₁), the buoyancy implied by an
                isothermal, massless outer layer

No error handling here: whatever the model raises propagates unchanged.

Oct 2026
"""

from typing import NamedTuple

from .enums import DEFAULT_FORMULATION, Formulation
from .model import Coeff, GridPoint, StructureModel


class AtmosphereCoeffs(NamedTuple):
    """Dimensionless structure coefficients at the outer boundary."""
    V: float
    As: float
    c_1: float
    Gamma_1: float


def eval_coeffs_unno(model: StructureModel, pt: GridPoint) -> AtmosphereCoeffs:
    """General (Unno et al.) atmosphere coefficients."""
    V = model.coeff(Coeff.V_2, pt) * pt.x**2
    As = model.coeff(Coeff.AS, pt)
    c_1 = model.coeff(Coeff.C_1, pt)
    Gamma_1 = model.coeff(Coeff.GAMMA_1, pt)

    return AtmosphereCoeffs(V, As, c_1, Gamma_1)


def eval_coeffs_isothermal(model: StructureModel, pt: GridPoint) -> AtmosphereCoeffs:
    """Isothermal, massless atmosphere coefficients."""
    V = model.coeff(Coeff.V_2, pt) * pt.x**2
    c_1 = model.coeff(Coeff.C_1, pt)
    Gamma_1 = model.coeff(Coeff.GAMMA_1, pt)

    # Model's A_s is ignored
    As = V * (1.0 - 1.0 / Gamma_1)

    return AtmosphereCoeffs(V, As, c_1, Gamma_1)


_EVALUATORS = {
    Formulation.UNNO: eval_coeffs_unno,
    Formulation.ISOTHERMAL: eval_coeffs_isothermal,
}


def evaluate_coefficients(model: StructureModel, pt: GridPoint,
                          formulation=DEFAULT_FORMULATION) -> AtmosphereCoeffs:
    """
    Atmosphere coefficients at pt.

    Args:
        model: structure model providing coeff(index, pt)
        pt: point with fractional radius pt.x
        formulation: Formulation member, or its name / config name

    Returns:
        AtmosphereCoeffs(V, As, c_1, Gamma_1)

    Raises:
        InvalidFormulationError: if formulation is not recognised
    """
    return _EVALUATORS[Formulation.parse(formulation)](model, pt)
