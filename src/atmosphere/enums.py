"""
Selector enums for the atmosphere layer.

Both enums resolve from a member, a member name, or the short config name
used in input files (case-insensitive). Anything else is an error; there is
no silent fallback to the default.
"""

from enum import Enum

from .constants import DEFAULT_BRANCH_NAME, DEFAULT_FORMULATION_NAME
from .errors import InvalidBranchError, InvalidFormulationError


class _ConfigEnum(Enum):

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            for member in cls:
                if key in (member.name, member.value):
                    return member
        error, label = _PARSE_ERRORS[cls]
        raise error(
            f"Invalid {label}: {value!r} "
            f"(expected one of {[m.value for m in cls]})"
        )


class Branch(_ConfigEnum):
    """
    Root selection for the complex-frequency wavenumber.

    Each member fixes the sign of psi = ±sqrt(b² - 4c) by a physical
    criterion evaluated at the boundary:

        E_POS / E_NEG   energy density grows / decays outward    (Re psi)
        F_POS / F_NEG   energy flux directed outward / inward     (Im((psi - a11) ω*))
        V_POS / V_NEG   phase velocity directed outward / inward  (Im psi / Re ω)
    """
    OUTWARD_GROWING_ENERGY = "E_POS"
    OUTWARD_DECAYING_ENERGY = "E_NEG"
    OUTWARD_FLUX = "F_POS"
    INWARD_FLUX = "F_NEG"
    OUTWARD_PHASE_VELOCITY = "V_POS"
    INWARD_PHASE_VELOCITY = "V_NEG"


class Formulation(_ConfigEnum):
    """Which structure coefficients feed the atmosphere solve."""
    UNNO = "UNNO"
    ISOTHERMAL = "ISOTHRM"


_PARSE_ERRORS = {
    Branch: (InvalidBranchError, "atmosphere branch"),
    Formulation: (InvalidFormulationError, "atmosphere formulation"),
}

DEFAULT_BRANCH = Branch.parse(DEFAULT_BRANCH_NAME)
DEFAULT_FORMULATION = Formulation.parse(DEFAULT_FORMULATION_NAME)
