"""Hemoglobin oxygen saturation models."""

from dataclasses import dataclass

import numpy as np

from .affinity import hill_coefficient, p50_adjusted
from .chemistry import (
    CO2_SOLUBILITY,
    O2_SOLUBILITY,
    buffer_factors,
    erythrocyte_ph,
    gas_solubility,
)
from .params import (
    STANDARD_CONDITIONS,
    HillCoefficientMode,
    K4PrimeMode,
    P50Mode,
    PhysiologicalInputs,
    coerce_mode,
    require_non_negative,
    require_positive,
    unwrap_scalar,
    validate_inputs,
)

# Equilibrium constants for CO2 binding to oxy/deoxy hemoglobin (1/M).
K2_PRIME = 21.5
K3_PRIME = 11.3


@dataclass(frozen=True, slots=True)
class DashSaturation:
    saturation: float | np.ndarray
    k4_prime: float | np.ndarray
    khbo2: float | np.ndarray
    p50_mmhg: float


def model_hill(
    po2_mmhg=STANDARD_CONDITIONS.po2_mmhg,
    p50_mmhg: float = STANDARD_CONDITIONS.p50_mmhg,
    hill_mode: HillCoefficientMode | str = HillCoefficientMode.PO2_DEPENDENT,
    fixed_hill_coefficient: float = STANDARD_CONDITIONS.hill_coefficient_fixed,
):
    """Simplified Hill saturation, S = (PO2/p50)^nH / (1 + (PO2/p50)^nH).

    ``po2_mmhg`` may be a scalar or any sequence; a sequence returns a numpy
    array of the same length, e.g. ``model_hill(np.arange(101))`` traces the
    whole dissociation curve.
    """

    hill_mode = coerce_mode(hill_mode, HillCoefficientMode)
    require_non_negative("po2_mmhg", po2_mmhg)
    require_positive("p50_mmhg", p50_mmhg)

    po2 = np.asarray(po2_mmhg, dtype=float)
    if hill_mode is HillCoefficientMode.PO2_DEPENDENT:
        n_h = hill_coefficient(po2)
    else:
        require_positive("fixed_hill_coefficient", fixed_hill_coefficient)
        n_h = fixed_hill_coefficient

    # S = 1 / (1 + (p50/PO2)^nH) stays within [0, 1] where (PO2/p50)^nH overflows.
    inverse_ratio = np.divide(p50_mmhg, po2, out=np.full_like(po2, np.inf), where=po2 > 0.0)
    with np.errstate(over="ignore"):
        inverse_n = np.power(inverse_ratio, n_h)
    return unwrap_scalar(1.0 / (1.0 + inverse_n))


def model_dash(
    dpg_rbc_mol_l: float = STANDARD_CONDITIONS.dpg_rbc_mol_l,
    po2_mmhg=STANDARD_CONDITIONS.po2_mmhg,
    pco2_mmhg: float = STANDARD_CONDITIONS.pco2_mmhg,
    ph_plasma: float = STANDARD_CONDITIONS.ph_plasma,
    temperature_c: float = STANDARD_CONDITIONS.temperature_c,
    water_fraction_plasma: float = STANDARD_CONDITIONS.water_fraction_plasma,
    p50_mode: P50Mode | str = P50Mode.COMPUTED,
    k4_mode: K4PrimeMode | str = K4PrimeMode.COMPUTED,
) -> DashSaturation:
    """Mechanistic HbO2 saturation of Dash et al. 2016 (equations 1a, 3a, 7).

    PO2 must be strictly positive: the computed K4' raises ``[O2]`` to the
    power ``nH - 1`` and is undefined at zero. With both switches set to
    ``COMPUTED`` the result coincides with :func:`model_hill` evaluated at the
    adjusted p50.
    """

    p50_mode = coerce_mode(p50_mode, P50Mode)
    k4_mode = coerce_mode(k4_mode, K4PrimeMode)
    require_positive("po2_mmhg", po2_mmhg)
    require_non_negative("pco2_mmhg", pco2_mmhg)
    require_non_negative("dpg_rbc_mol_l", dpg_rbc_mol_l)

    po2 = np.asarray(po2_mmhg, dtype=float)
    ao2 = gas_solubility(O2_SOLUBILITY, temperature_c, water_fraction_plasma)
    aco2 = gas_solubility(CO2_SOLUBILITY, temperature_c, water_fraction_plasma)
    free_o2 = ao2 * po2
    free_co2 = aco2 * pco2_mmhg

    factors = buffer_factors(ph_plasma)

    if p50_mode is P50Mode.COMPUTED:
        p50 = p50_adjusted(
            ph_rbc=erythrocyte_ph(ph_plasma),
            pco2_mmhg=pco2_mmhg,
            dpg_rbc_mol_l=dpg_rbc_mol_l,
            temperature_c=temperature_c,
        )
    else:
        p50 = STANDARD_CONDITIONS.p50_mmhg

    oxy_term = K2_PRIME * free_co2 * factors.f1 + factors.f3
    deoxy_term = K3_PRIME * free_co2 * factors.f2 + factors.f4

    if k4_mode is K4PrimeMode.COMPUTED:
        n_h = hill_coefficient(po2)
        with np.errstate(over="ignore"):
            k4_prime = (np.power(free_o2, n_h - 1.0) * oxy_term) / (np.power(ao2 * p50, n_h) * deoxy_term)
    else:
        k4_prime = np.full_like(po2, STANDARD_CONDITIONS.k4_prime_fixed)

    khbo2 = k4_prime * deoxy_term / oxy_term
    with np.errstate(over="ignore", divide="ignore"):
        saturation = 1.0 / (1.0 + 1.0 / (khbo2 * free_o2))

    return DashSaturation(
        saturation=unwrap_scalar(saturation),
        k4_prime=unwrap_scalar(k4_prime),
        khbo2=unwrap_scalar(khbo2),
        p50_mmhg=float(p50),
    )


def model_dash_from_inputs(
    inputs: PhysiologicalInputs,
    p50_mode: P50Mode | str = P50Mode.COMPUTED,
    k4_mode: K4PrimeMode | str = K4PrimeMode.COMPUTED,
) -> DashSaturation:
    validate_inputs(inputs)
    return model_dash(
        dpg_rbc_mol_l=inputs.dpg_rbc_mol_l,
        po2_mmhg=inputs.po2_mmhg,
        pco2_mmhg=inputs.pco2_mmhg,
        ph_plasma=inputs.ph_plasma,
        temperature_c=inputs.temperature_c,
        water_fraction_plasma=inputs.water_fraction_plasma,
        p50_mode=p50_mode,
        k4_mode=k4_mode,
    )
