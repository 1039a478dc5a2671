"""Hill coefficient and p50 adjustment (Dash et al. 2016, equations 9a-9d, 10, 11)."""

from typing import NamedTuple

import numpy as np

from .params import STANDARD_CONDITIONS, require_finite, require_non_negative, require_ph, require_positive

HILL_ALPHA = 2.82
HILL_BETA = 1.20
HILL_GAMMA = 29.25


class P50ShiftTerms(NamedTuple):
    """p50 (mmHg) shifted along a single axis, all others held at standard."""

    ph: float
    pco2: float
    dpg: float
    temperature: float


def hill_coefficient(po2_mmhg=STANDARD_CONDITIONS.po2_mmhg):
    """PO2-dependent Hill coefficient, nH = alpha - beta * 10^(-PO2/gamma)."""

    require_non_negative("po2_mmhg", po2_mmhg)
    return HILL_ALPHA - HILL_BETA * np.power(10.0, -(np.asarray(po2_mmhg, dtype=float) / HILL_GAMMA))


def p50_shift_terms(
    ph_rbc: float = STANDARD_CONDITIONS.ph_rbc,
    pco2_mmhg: float = STANDARD_CONDITIONS.pco2_mmhg,
    dpg_rbc_mol_l: float = STANDARD_CONDITIONS.dpg_rbc_mol_l,
    temperature_c: float = STANDARD_CONDITIONS.temperature_c,
    p50_s: float = STANDARD_CONDITIONS.p50_mmhg,
    ph_s: float = STANDARD_CONDITIONS.ph_rbc,
    pco2_s: float = STANDARD_CONDITIONS.pco2_mmhg,
    dpg_s: float = STANDARD_CONDITIONS.dpg_rbc_mol_l,
    temperature_s: float = STANDARD_CONDITIONS.temperature_c,
) -> P50ShiftTerms:
    """Evaluate equations 9a-9d."""

    require_ph("ph_rbc", ph_rbc)
    require_ph("ph_s", ph_s)
    require_non_negative("pco2_mmhg", pco2_mmhg)
    require_non_negative("pco2_s", pco2_s)
    require_non_negative("dpg_rbc_mol_l", dpg_rbc_mol_l)
    require_non_negative("dpg_s", dpg_s)
    require_finite("temperature_c", temperature_c)
    require_finite("temperature_s", temperature_s)
    require_positive("p50_s", p50_s)

    d_ph = ph_rbc - ph_s
    d_pco2 = pco2_mmhg - pco2_s
    d_dpg = dpg_rbc_mol_l - dpg_s
    d_temp = temperature_c - temperature_s

    return P50ShiftTerms(
        ph=p50_s - 25.535 * d_ph + 10.646 * d_ph**2 - 1.764 * d_ph**3,
        pco2=p50_s + 0.1273 * d_pco2 + 1.083e-4 * d_pco2**2,
        dpg=p50_s + 795.63 * d_dpg - 19660.89 * d_dpg**2,
        temperature=p50_s + 1.435 * d_temp + 4.163e-2 * d_temp**2 + 6.86e-4 * d_temp**3,
    )


def p50_adjusted(
    ph_rbc: float = STANDARD_CONDITIONS.ph_rbc,
    pco2_mmhg: float = STANDARD_CONDITIONS.pco2_mmhg,
    dpg_rbc_mol_l: float = STANDARD_CONDITIONS.dpg_rbc_mol_l,
    temperature_c: float = STANDARD_CONDITIONS.temperature_c,
    p50_s: float = STANDARD_CONDITIONS.p50_mmhg,
    ph_s: float = STANDARD_CONDITIONS.ph_rbc,
    pco2_s: float = STANDARD_CONDITIONS.pco2_mmhg,
    dpg_s: float = STANDARD_CONDITIONS.dpg_rbc_mol_l,
    temperature_s: float = STANDARD_CONDITIONS.temperature_c,
) -> float:
    """p50 (mmHg) as the product of the four fractional shifts (equation 10).

    ``ph_rbc`` is the erythrocyte pH, not plasma pH; convert with
    :func:`rbc_o2.chemistry.erythrocyte_ph` first. At the standard values every
    shift term equals ``p50_s`` and the result is exactly ``p50_s``.
    """

    terms = p50_shift_terms(
        ph_rbc=ph_rbc,
        pco2_mmhg=pco2_mmhg,
        dpg_rbc_mol_l=dpg_rbc_mol_l,
        temperature_c=temperature_c,
        p50_s=p50_s,
        ph_s=ph_s,
        pco2_s=pco2_s,
        dpg_s=dpg_s,
        temperature_s=temperature_s,
    )
    p50 = p50_s * (terms.ph / p50_s) * (terms.pco2 / p50_s) * (terms.dpg / p50_s) * (terms.temperature / p50_s)
    if not np.all(np.asarray(p50) > 0.0):
        raise ValueError("p50 is not positive for these inputs; values are outside the fitted range")
    return p50
