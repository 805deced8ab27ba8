"""
Atmosphere Layer Constants
==========================

Defaults and fixed numbers used across the atmosphere modules.
Centralizing these keeps the solver modules free of magic values.

Oct 2026
"""

# ---------------------------------------------------------------------
# CHARACTERISTIC SYSTEM
# ---------------------------------------------------------------------

# Offsets in the diagonal of the 2x2 characteristic matrix
#   a11 = V/Γ₁ - 3,   a22 = A_s + 1
A11_OFFSET = 3.0
A22_OFFSET = 1.0

# Cutoff quadratic (in ω²) constants
#   a = -4 (V/Γ₁) c₁²
#   b = ((A_s - V/Γ₁ - 4)² + 4 (V/Γ₁) A_s + 4λ) c₁
#   c = -4 λ A_s
CUTOFF_SHIFT = 4.0
CUTOFF_FACTOR = 4.0

# ---------------------------------------------------------------------
# DIAGNOSTICS
# ---------------------------------------------------------------------

# Emitted (once) when the real-frequency quadratic has no real root
# and the imaginary part of χ is discarded.
REAL_DISCRIMINANT_MESSAGE = (
    "Discarding imaginary part of atmospheric radial wavenumber "
    "(negative discriminant in real-frequency solve)"
)

# ---------------------------------------------------------------------
# CONFIGURATION DEFAULTS
# ---------------------------------------------------------------------

# Names as they appear in INI files and keyword mappings.
# Resolved to enum members in config.py / wavenumber.py.
DEFAULT_BRANCH_NAME = "E_NEG"
DEFAULT_FORMULATION_NAME = "UNNO"

# INI section read by load_atmosphere_config
CONFIG_SECTION = "Atmosphere"
