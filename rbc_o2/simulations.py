"""Parameter sets from the publication and the tables they produce."""

from collections.abc import Sequence
from dataclasses import dataclass
import logging

import numpy as np
import pandas as pd

from .affinity import p50_adjusted
from .content import oxygen_delivery, total_oxygen_content_mechanistic, total_oxygen_content_simple
from .params import STANDARD_CONDITIONS, HillCoefficientMode, coerce_mode
from .results import DissociationCurve
from .saturation import model_hill
from .transit import capillary_area, mass_specific_blood_flow, transit_time

logger = logging.getLogger(__name__)

DEFAULT_PO2_RANGE_MMHG = np.arange(0, 101, dtype=float)

# Figure 7: 2,3-BPG (M) during circulation.
DPG_TOTAL_MOL_L = 5e-3
DPG_BOUND_LUNGS_MOL_L = 0.9e-3
DPG_BOUND_MUSCLE_MOL_L = 4.65e-3

# Exercise experiment: mean 2,3-BPG (M), hematocrit and hemoglobin (g/L).
DPG_CONTROL = {"rest": 5.05e-3, "pre": 5.11e-3, "post": 5.81e-3}
DPG_OXIDATIVE_STRESS = {"rest": 5.08e-3, "pre": 5.15e-3, "post": 6.28e-3}
HEMATOCRIT_CONTROL = 0.429
HEMATOCRIT_OXIDATIVE_STRESS = 0.434
HEMOGLOBIN_CONTROL_G_L = 149.15
HEMOGLOBIN_OXIDATIVE_STRESS_G_L = 149.95

# Richardson et al. 1993, Table 1: 9.10 L/min leg flow at 100% work over 2.36 kg quadriceps.
LEG_BLOOD_FLOW_L_MIN_KG = 3.85


@dataclass(frozen=True, slots=True)
class ExperimentResult:
    summary: pd.DataFrame
    curves: dict[str, DissociationCurve]


def dissociation_curve(
    p50_mmhg: float = STANDARD_CONDITIONS.p50_mmhg,
    po2_mmhg: Sequence[float] | np.ndarray | None = None,
    hill_mode: HillCoefficientMode | str = HillCoefficientMode.PO2_DEPENDENT,
    label: str = "standard",
    metadata: dict | None = None,
) -> DissociationCurve:
    """Trace the Hill dissociation curve over ``po2_mmhg`` (0-100 mmHg by default)."""

    hill_mode = coerce_mode(hill_mode, HillCoefficientMode)
    po2 = DEFAULT_PO2_RANGE_MMHG.copy() if po2_mmhg is None else np.asarray(po2_mmhg, dtype=float)
    saturation = np.atleast_1d(model_hill(po2, p50_mmhg, hill_mode=hill_mode))
    curve_metadata = {"model": "hill", "hill_mode": hill_mode.value}
    if metadata:
        curve_metadata.update(metadata)
    return DissociationCurve(
        label=label,
        po2_mmhg=np.atleast_1d(po2),
        saturation=saturation,
        p50_mmhg=float(p50_mmhg),
        metadata=curve_metadata,
    )


def erythrocyte_cycle(po2_mmhg: Sequence[float] | np.ndarray | None = None) -> dict[str, DissociationCurve]:
    """Lungs vs skeletal muscle curves relative to the total erythrocyte 2,3-BPG."""

    curves = {}
    for site, dpg in (("lungs", DPG_BOUND_LUNGS_MOL_L), ("muscle", DPG_BOUND_MUSCLE_MOL_L)):
        p50 = p50_adjusted(dpg_rbc_mol_l=dpg, dpg_s=DPG_TOTAL_MOL_L)
        logger.debug("%s p50 %.3f mmHg (2,3-BPG %.3g M)", site, p50, dpg)
        curves[site] = dissociation_curve(
            p50,
            po2_mmhg,
            label=site,
            metadata={"dpg_rbc_mol_l": dpg, "dpg_s_mol_l": DPG_TOTAL_MOL_L},
        )
    return curves


def oxidative_stress_experiment(
    po2_mmhg: Sequence[float] | np.ndarray | None = None,
    arterial_po2_mmhg: float = STANDARD_CONDITIONS.po2_mmhg,
    per_condition_blood: bool = False,
) -> ExperimentResult:
    """Post-exercise p50, arterial saturation and oxygen content per condition.

    The standard 2,3-BPG is the mean of the two resting values. By default both
    conditions use the control hematocrit and hemoglobin for the content, as in
    the published computation; ``per_condition_blood`` uses each group's own.
    """

    dpg_standard = (DPG_CONTROL["rest"] + DPG_OXIDATIVE_STRESS["rest"]) / 2.0
    rows = []
    curves = {}
    conditions = (
        ("control", DPG_CONTROL, HEMATOCRIT_CONTROL, HEMOGLOBIN_CONTROL_G_L),
        ("oxidative_stress", DPG_OXIDATIVE_STRESS, HEMATOCRIT_OXIDATIVE_STRESS, HEMOGLOBIN_OXIDATIVE_STRESS_G_L),
    )
    for condition, dpg_levels, hct, hb in conditions:
        if not per_condition_blood:
            hct, hb = HEMATOCRIT_CONTROL, HEMOGLOBIN_CONTROL_G_L
        p50 = p50_adjusted(dpg_rbc_mol_l=dpg_levels["post"], dpg_s=dpg_standard)
        sat = model_hill(arterial_po2_mmhg, p50)
        content = total_oxygen_content_mechanistic(
            po2_mmhg=arterial_po2_mmhg,
            hct=hct,
            sat=sat,
            hb_blood_g_l=hb,
        )
        logger.debug("%s post-exercise p50 %.3f mmHg, saturation %.4f", condition, p50, sat)
        rows.append(
            {
                "condition": condition,
                "dpg_post_mol_l": dpg_levels["post"],
                "hematocrit": hct,
                "hb_blood_g_l": hb,
                "p50_mmhg": p50,
                "saturation": sat,
                "oxygen_content_ml_dl": content,
            }
        )
        curves[condition] = dissociation_curve(
            p50,
            po2_mmhg,
            label=condition,
            metadata={"dpg_rbc_mol_l": dpg_levels["post"], "dpg_s_mol_l": dpg_standard},
        )

    return ExperimentResult(summary=pd.DataFrame(rows), curves=curves)


def oxygen_delivery_grid(
    cardiac_outputs_l_min: Sequence[float] = (5.0, 30.0),
    hemoglobins_g_l: Sequence[float] = (150.0, 160.0),
    bind: float = 1.34,
    sat: float = 0.97,
) -> pd.DataFrame:
    """Oxygen delivery (mL O2/min) at rest and maximal exercise for two hemoglobin levels."""

    rows = []
    for cardiac_output in cardiac_outputs_l_min:
        for hb in hemoglobins_g_l:
            content = total_oxygen_content_simple(bind=bind, hb_g_l=hb, sat=sat)
            rows.append(
                {
                    "cardiac_output_l_min": float(cardiac_output),
                    "hb_g_l": float(hb),
                    "oxygen_content_ml_l": content,
                    "oxygen_delivery_ml_min": oxygen_delivery(cardiac_output, content),
                }
            )
    return pd.DataFrame(rows)


def richardson_transit_times() -> dict[str, float]:
    """Transit times (s) for a 6 um capillary at 300/mm^2 and the 1994 reference set."""

    blood_flow = mass_specific_blood_flow(LEG_BLOOD_FLOW_L_MIN_KG)
    return {
        "derived": transit_time(capillary_area(6.0), 300.0, blood_flow),
        "reference": transit_time(28.3, 200.0, 0.0641667),
    }


def curves_to_frame(curves: Sequence[DissociationCurve] | dict[str, DissociationCurve], wide: bool = False) -> pd.DataFrame:
    """Tabulate curves in long form ``(condition, po2_mmhg, saturation)`` or wide form."""

    if isinstance(curves, dict):
        curves = list(curves.values())
    if not curves:
        raise ValueError("at least one curve is required")

    long_frame = pd.concat(
        [
            pd.DataFrame(
                {
                    "condition": curve.label,
                    "po2_mmhg": curve.po2_mmhg,
                    "saturation": curve.saturation,
                }
            )
            for curve in curves
        ],
        ignore_index=True,
    )
    if not wide:
        return long_frame
    wide_frame = long_frame.pivot(index="po2_mmhg", columns="condition", values="saturation")
    wide_frame = wide_frame[[curve.label for curve in curves]]
    wide_frame.columns.name = None
    return wide_frame.reset_index()
