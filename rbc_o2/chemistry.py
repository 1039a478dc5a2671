"""Primitive physical-chemistry helpers (Dash et al. 2016, equations 2a-2b, 4a-4d)."""

from typing import NamedTuple

import numpy as np

from .params import STANDARD_CONDITIONS, require_finite, require_fraction, require_non_negative, require_ph


class SolubilityCoefficients(NamedTuple):
    """Quadratic in (T - 37) giving solubility in M/mmHg before the water correction."""

    c0: float
    c1: float
    c2: float
    scale: float


O2_SOLUBILITY = SolubilityCoefficients(c0=1.37, c1=-0.0137, c2=0.00058, scale=1e-6)
CO2_SOLUBILITY = SolubilityCoefficients(c0=3.07, c1=-0.057, c2=0.002, scale=1e-5)

# Ionization constants of the oxy/deoxy hemoglobin amino groups (M).
K2_DOUBLE_PRIME = 1e-6
K3_DOUBLE_PRIME = 1e-6
K5_DOUBLE_PRIME = 2.4e-8
K6_DOUBLE_PRIME = 1.2e-8


class BufferFactors(NamedTuple):
    f1: float
    f2: float
    f3: float
    f4: float


def erythrocyte_ph(ph_plasma=STANDARD_CONDITIONS.ph_plasma):
    """Erythrocyte pH from plasma pH (Siggaard-Andersen et al. 1971)."""

    require_ph("ph_plasma", ph_plasma)
    return 0.795 * ph_plasma + 1.357


def gas_solubility(
    coefficients: SolubilityCoefficients,
    temperature_c=STANDARD_CONDITIONS.temperature_c,
    water_fraction: float = STANDARD_CONDITIONS.water_fraction_plasma,
):
    """Solubility of a gas in the water space, in M/mmHg."""

    require_finite("temperature_c", temperature_c)
    require_fraction("water_fraction", water_fraction)
    dt = temperature_c - 37.0
    return (coefficients.c0 + coefficients.c1 * dt + coefficients.c2 * dt**2) * (coefficients.scale / water_fraction)


def dissolved_gas(
    partial_pressure_mmhg,
    coefficients: SolubilityCoefficients,
    temperature_c=STANDARD_CONDITIONS.temperature_c,
    water_fraction: float = STANDARD_CONDITIONS.water_fraction_plasma,
):
    """Free dissolved gas concentration (M) at the given partial pressure."""

    require_non_negative("partial_pressure_mmhg", partial_pressure_mmhg)
    return gas_solubility(coefficients, temperature_c, water_fraction) * partial_pressure_mmhg


def free_oxygen(
    po2_mmhg=STANDARD_CONDITIONS.po2_mmhg,
    temperature_c=STANDARD_CONDITIONS.temperature_c,
    water_fraction: float = STANDARD_CONDITIONS.water_fraction_plasma,
):
    return dissolved_gas(po2_mmhg, O2_SOLUBILITY, temperature_c, water_fraction)


def free_carbon_dioxide(
    pco2_mmhg=STANDARD_CONDITIONS.pco2_mmhg,
    temperature_c=STANDARD_CONDITIONS.temperature_c,
    water_fraction: float = STANDARD_CONDITIONS.water_fraction_plasma,
):
    return dissolved_gas(pco2_mmhg, CO2_SOLUBILITY, temperature_c, water_fraction)


def buffer_factors(ph_plasma=STANDARD_CONDITIONS.ph_plasma) -> BufferFactors:
    """Compute F1-F4 from the erythrocyte hydrogen ion concentration."""

    hydrogen_m = np.power(10.0, -erythrocyte_ph(ph_plasma))
    return BufferFactors(
        f1=1.0 + K2_DOUBLE_PRIME / hydrogen_m,
        f2=1.0 + K3_DOUBLE_PRIME / hydrogen_m,
        f3=1.0 + hydrogen_m / K5_DOUBLE_PRIME,
        f4=1.0 + hydrogen_m / K6_DOUBLE_PRIME,
    )
