"""
Atmosphere Layer
================

Outer-boundary quantities for stellar oscillation calculations.

Modules:
    constants   - Fixed numbers and configuration defaults
    enums       - Branch and Formulation selectors
    model       - Structure model interface, TabulatedModel
    coeffs      - (V, A_s, c₁, Γ₁) at a point, Unno / isothermal
    wavenumber  - Radial wavenumber χ, real and complex frequency
    cutoff      - Low/high cutoff frequencies
    diagnostics - One-shot notices (warnings-based)
    config      - AtmosphereParams, INI loading
    boundary    - OuterBoundary convenience evaluator

Data flow:
    model → coeffs → {wavenumber, cutoff}

Oct 2026
"""

# Errors (import first, used by other modules)
from .errors import (
    AtmosphereError,
    InvalidBranchError,
    InvalidFormulationError,
    AtmosphereConfigError,
    CutoffOrderingError,
)

from .enums import (
    Branch,
    Formulation,
    DEFAULT_BRANCH,
    DEFAULT_FORMULATION,
)

# Diagnostics
from .diagnostics import (
    AtmosphereWarning,
    OneShotNotice,
    REAL_DISCRIMINANT_NOTICE,
)

# Structure model interface
from .model import (
    Coeff,
    Point,
    GridPoint,
    StructureModel,
    TabulatedModel,
)

# Coefficient evaluator
from .coeffs import (
    AtmosphereCoeffs,
    eval_coeffs_unno,
    eval_coeffs_isothermal,
    evaluate_coefficients,
)

# Wavenumber solver
from .wavenumber import (
    characteristic_coeffs,
    discriminant,
    is_evanescent,
    select_branch,
    wavenumber_real,
    wavenumber_complex,
)

# Cutoff frequencies
from .cutoff import (
    cutoff_quadratic,
    cutoff_frequencies,
)

# Configuration and convenience evaluator
from .config import AtmosphereParams, load_atmosphere_config
from .boundary import OuterBoundary

__version__ = "0.1.0"
