"""Blood oxygen content and oxygen delivery."""

import numpy as np

from .chemistry import O2_SOLUBILITY, gas_solubility
from .params import (
    STANDARD_CONDITIONS,
    require_fraction,
    require_non_negative,
    require_positive,
    unwrap_scalar,
)

MMHG_PER_KPA = 7.50062
DISSOLVED_O2_ML_PER_KPA = 0.0225
HB_MOLECULAR_WEIGHT_G_MOL = 64458.0
O2_MOLAR_VOLUME_L_MOL = 22.256
O2_SITES_PER_HB = 4


def theoretical_binding_capacity() -> float:
    """mL O2 bound per g of fully saturated hemoglobin implied by the molar constants."""

    return O2_SITES_PER_HB * O2_MOLAR_VOLUME_L_MOL * 1000.0 / HB_MOLECULAR_WEIGHT_G_MOL


def total_oxygen_content_simple(
    bind: float = STANDARD_CONDITIONS.o2_binding_capacity_ml_g,
    hb_g_l: float = STANDARD_CONDITIONS.hb_blood_g_l,
    sat=0.972,
    po2_mmhg=STANDARD_CONDITIONS.po2_mmhg,
):
    """Oxygen content as bound plus dissolved oxygen (Dunn 2016).

    ``bind`` is the binding capacity in mL O2/g (1.30, 1.34 and 1.39 are all in
    use) and ``hb_g_l`` the blood hemoglobin in g/L, so the bound term is in
    mL O2 per L of blood. The dissolved term keeps the published coefficient of
    0.0225 per kPa.
    """

    require_positive("bind", bind)
    require_non_negative("hb_g_l", hb_g_l)
    require_fraction("sat", sat, allow_zero=True)
    require_non_negative("po2_mmhg", po2_mmhg)
    bound = bind * np.asarray(hb_g_l, dtype=float) * np.asarray(sat, dtype=float)
    dissolved = DISSOLVED_O2_ML_PER_KPA * (np.asarray(po2_mmhg, dtype=float) / MMHG_PER_KPA)
    return unwrap_scalar(bound + dissolved)


def total_oxygen_content_mechanistic(
    po2_mmhg=STANDARD_CONDITIONS.po2_mmhg,
    hct: float = STANDARD_CONDITIONS.hematocrit,
    sat=0.972,
    hb_blood_g_l: float = STANDARD_CONDITIONS.hb_blood_g_l,
    temperature_c: float = STANDARD_CONDITIONS.temperature_c,
    water_plasma: float = STANDARD_CONDITIONS.water_fraction_plasma,
    water_rbc: float = STANDARD_CONDITIONS.water_fraction_rbc,
):
    """Total blood oxygen in mL O2 per 100 mL blood (Dash et al. 2016, Table 1).

    Dissolved and hemoglobin-bound oxygen are summed in mol/L. Hemoglobin is
    converted to molar units with the tetramer molecular weight (64458 g/mol)
    and four binding sites per tetramer.
    """

    require_non_negative("po2_mmhg", po2_mmhg)
    require_fraction("hct", hct)
    require_fraction("sat", sat, allow_zero=True)
    require_non_negative("hb_blood_g_l", hb_blood_g_l)
    require_fraction("water_plasma", water_plasma)
    require_fraction("water_rbc", water_rbc)
    if hct >= 1.0:
        raise ValueError("hct must be < 1")

    water_blood = (1.0 - hct) * water_plasma + hct * water_rbc
    ao2 = gas_solubility(O2_SOLUBILITY, temperature_c, water_plasma)

    hb_blood_m = np.asarray(hb_blood_g_l, dtype=float) / HB_MOLECULAR_WEIGHT_G_MOL
    hb_rbc_m = hb_blood_m / hct

    total_o2_m = (
        water_blood * ao2 * np.asarray(po2_mmhg, dtype=float)
        + O2_SITES_PER_HB * hct * hb_rbc_m * np.asarray(sat, dtype=float)
    )
    return unwrap_scalar(total_o2_m * O2_MOLAR_VOLUME_L_MOL * 100.0)


def oxygen_delivery(cardiac_output, total_oxygen_content):
    """Oxygen delivery as cardiac output times content.

    No unit conversion happens here: L/min times mL O2/L gives mL O2/min.
    """

    require_non_negative("cardiac_output", cardiac_output)
    require_non_negative("total_oxygen_content", total_oxygen_content)
    return unwrap_scalar(np.asarray(cardiac_output, dtype=float) * np.asarray(total_oxygen_content, dtype=float))
