"""Standard conditions, model switches and input validation for RBC-O2."""

from dataclasses import dataclass
from enum import Enum

import numpy as np


@dataclass(frozen=True, slots=True)
class StandardConditions:
    """Literature defaults shared by every equation (Dash et al. 2016, Table 1)."""

    po2_mmhg: float = 100.0
    pco2_mmhg: float = 40.0
    # Plasma and erythrocyte pH are different compartments: 0.795 * 7.4 + 1.357 = 7.24.
    ph_plasma: float = 7.4
    ph_rbc: float = 7.24
    dpg_rbc_mol_l: float = 4.65e-3
    temperature_c: float = 37.0
    p50_mmhg: float = 26.8
    hill_coefficient_fixed: float = 2.7
    k4_prime_fixed: float = 2.03e5
    water_fraction_plasma: float = 0.94
    water_fraction_rbc: float = 0.65
    hematocrit: float = 0.45
    hb_blood_g_l: float = 150.0
    o2_binding_capacity_ml_g: float = 1.39
    cardiac_output_l_min: float = 5.0
    tortuosity: float = 1.2


STANDARD_CONDITIONS = StandardConditions()


class HillCoefficientMode(str, Enum):
    FIXED = "fixed"
    PO2_DEPENDENT = "po2_dependent"


class P50Mode(str, Enum):
    STANDARD = "standard"
    COMPUTED = "computed"


class K4PrimeMode(str, Enum):
    FIXED = "fixed"
    COMPUTED = "computed"


def coerce_mode(mode, enum_type):
    """Return ``mode`` as a member of ``enum_type``, accepting its string value."""

    if isinstance(mode, enum_type):
        return mode
    allowed = ", ".join(repr(m.value) for m in enum_type)
    if isinstance(mode, bool):
        raise ValueError(f"{enum_type.__name__} must be one of {allowed}, not a bool")
    # str-valued members of another switch compare equal to our values
    if isinstance(mode, Enum):
        raise ValueError(f"{enum_type.__name__} must be one of {allowed}, got {mode!r}")
    try:
        return enum_type(mode)
    except ValueError:
        raise ValueError(f"{enum_type.__name__} must be one of {allowed}, got {mode!r}") from None


@dataclass(frozen=True, slots=True)
class PhysiologicalInputs:
    po2_mmhg: float = STANDARD_CONDITIONS.po2_mmhg
    pco2_mmhg: float = STANDARD_CONDITIONS.pco2_mmhg
    ph_plasma: float = STANDARD_CONDITIONS.ph_plasma
    dpg_rbc_mol_l: float = STANDARD_CONDITIONS.dpg_rbc_mol_l
    temperature_c: float = STANDARD_CONDITIONS.temperature_c
    hematocrit: float = STANDARD_CONDITIONS.hematocrit
    hb_blood_g_l: float = STANDARD_CONDITIONS.hb_blood_g_l
    cardiac_output_l_min: float = STANDARD_CONDITIONS.cardiac_output_l_min
    water_fraction_plasma: float = STANDARD_CONDITIONS.water_fraction_plasma
    water_fraction_rbc: float = STANDARD_CONDITIONS.water_fraction_rbc


def _as_array(value) -> np.ndarray:
    return np.asarray(value, dtype=float)


def require_non_negative(name: str, value) -> None:
    """Raise ValueError unless every element of ``value`` is finite and >= 0."""

    arr = _as_array(value)
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{name} must be finite")
    if np.any(arr < 0.0):
        raise ValueError(f"{name} must be >= 0")


def require_positive(name: str, value) -> None:
    """Raise ValueError unless every element of ``value`` is finite and > 0."""

    arr = _as_array(value)
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{name} must be finite")
    if np.any(arr <= 0.0):
        raise ValueError(f"{name} must be > 0")


def require_finite(name: str, value) -> None:
    if not np.all(np.isfinite(_as_array(value))):
        raise ValueError(f"{name} must be finite")


def require_ph(name: str, value) -> None:
    arr = _as_array(value)
    if not np.all((arr >= 0.0) & (arr <= 14.0)):
        raise ValueError(f"{name} must be between 0 and 14")


def require_fraction(name: str, value, allow_zero: bool = False) -> None:
    """Raise ValueError unless ``value`` lies in (0, 1], or [0, 1] with ``allow_zero``."""

    arr = _as_array(value)
    lower_ok = arr >= 0.0 if allow_zero else arr > 0.0
    if not np.all(lower_ok & (arr <= 1.0)):
        bound = "[0, 1]" if allow_zero else "(0, 1]"
        raise ValueError(f"{name} must be within {bound}")


def validate_inputs(inputs: PhysiologicalInputs) -> None:
    """Validate physiological inputs and raise ValueError on failures.

    Fields may be scalars or numpy arrays; every element is checked.
    """

    errors: list[str] = []

    po2 = _as_array(inputs.po2_mmhg)
    pco2 = _as_array(inputs.pco2_mmhg)
    ph = _as_array(inputs.ph_plasma)
    dpg = _as_array(inputs.dpg_rbc_mol_l)
    hct = _as_array(inputs.hematocrit)
    hb = _as_array(inputs.hb_blood_g_l)
    cardiac_output = _as_array(inputs.cardiac_output_l_min)
    water_plasma = _as_array(inputs.water_fraction_plasma)
    water_rbc = _as_array(inputs.water_fraction_rbc)

    if not np.all(np.isfinite(po2) & (po2 >= 0.0)):
        errors.append("po2_mmhg must be >= 0")
    if not np.all(np.isfinite(pco2) & (pco2 >= 0.0)):
        errors.append("pco2_mmhg must be >= 0")
    if not np.all((ph >= 0.0) & (ph <= 14.0)):
        errors.append("ph_plasma must be between 0 and 14")
    if not np.all(np.isfinite(dpg) & (dpg >= 0.0)):
        errors.append("dpg_rbc_mol_l must be >= 0")
    if not np.all(np.isfinite(_as_array(inputs.temperature_c))):
        errors.append("temperature_c must be finite")
    if not np.all((hct > 0.0) & (hct < 1.0)):
        errors.append("hematocrit must be between 0 and 1 (exclusive)")
    if not np.all(np.isfinite(hb) & (hb >= 0.0)):
        errors.append("hb_blood_g_l must be >= 0")
    if not np.all(np.isfinite(cardiac_output) & (cardiac_output >= 0.0)):
        errors.append("cardiac_output_l_min must be >= 0")
    if not np.all((water_plasma > 0.0) & (water_plasma <= 1.0)):
        errors.append("water_fraction_plasma must be within (0, 1]")
    if not np.all((water_rbc > 0.0) & (water_rbc <= 1.0)):
        errors.append("water_fraction_rbc must be within (0, 1]")

    if errors:
        raise ValueError("; ".join(errors))


def unwrap_scalar(value):
    """Return a plain float for 0-d results, the numpy array otherwise."""

    arr = np.asarray(value, dtype=float)
    if arr.ndim == 0:
        return float(arr)
    return arr
