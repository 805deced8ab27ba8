"""
Atmosphere configuration.

AtmosphereParams holds the two user choices (coefficient formulation and
complex-frequency branch). It can be built from a plain mapping or read
from the [Atmosphere] section of an INI file:

    [Atmosphere]
    formulation = ISOTHRM   ; UNNO | ISOTHRM
    branch = E_NEG          ; E_POS | E_NEG | F_POS | F_NEG | V_POS | V_NEG

Unknown keys or values are errors; they are never replaced by defaults.
"""

import configparser
import os
from dataclasses import dataclass, field
from typing import Any, Mapping

from .constants import CONFIG_SECTION
from .enums import DEFAULT_BRANCH, DEFAULT_FORMULATION, Branch, Formulation
from .errors import AtmosphereConfigError

_KNOWN_KEYS = frozenset({'formulation', 'branch'})


@dataclass(frozen=True)
class AtmosphereParams:
    formulation: Formulation = field(default=DEFAULT_FORMULATION)
    branch: Branch = field(default=DEFAULT_BRANCH)

    def __post_init__(self):
        # Accept names as well as members
        object.__setattr__(self, 'formulation', Formulation.parse(self.formulation))
        object.__setattr__(self, 'branch', Branch.parse(self.branch))

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "AtmosphereParams":
        """
        Build from a mapping with optional 'formulation' and 'branch' keys.

        Raises:
            AtmosphereConfigError: on unknown keys
            InvalidFormulationError, InvalidBranchError: on unknown values
        """
        unknown = set(values) - _KNOWN_KEYS
        if unknown:
            raise AtmosphereConfigError(
                f"Unknown atmosphere parameter(s): {sorted(unknown)} "
                f"(expected {sorted(_KNOWN_KEYS)})"
            )
        return cls(**dict(values))


def _strip_inline_comment(value: str) -> str:
    for marker in ('#', ';'):
        if marker in value:
            value = value.split(marker, 1)[0]
    return value.strip()


def load_atmosphere_config(filepath: str) -> AtmosphereParams:
    """
    Read AtmosphereParams from the [Atmosphere] section of an INI file.

    A file without the section gives the defaults. Keys from a shared
    [DEFAULT] section apply only if they are atmosphere parameters; other
    [DEFAULT] keys belong to other sections and are ignored here.

    Raises:
        FileNotFoundError: if filepath does not exist
        AtmosphereConfigError: if the file cannot be parsed or has unknown keys
        InvalidFormulationError, InvalidBranchError: on unknown values
    """
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"Atmosphere configuration file not found: '{filepath}'")

    config = configparser.ConfigParser()
    try:
        config.read(filepath)
    except configparser.Error as e:
        raise AtmosphereConfigError(
            f"Error parsing configuration file '{filepath}': {e}"
        ) from e

    if CONFIG_SECTION not in config:
        return AtmosphereParams()

    # [DEFAULT] keys are inherited by every section; only ours are checked
    inherited = config.defaults()
    values = {key: _strip_inline_comment(value)
              for key, value in config.items(CONFIG_SECTION)
              if key in _KNOWN_KEYS or key not in inherited}
    return AtmosphereParams.from_mapping(values)
