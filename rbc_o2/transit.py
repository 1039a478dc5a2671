"""Erythrocyte capillary transit time (Richardson et al. 1994)."""

import math

from .params import STANDARD_CONDITIONS, require_positive

FIBER_AREA_UM2 = 1_000_000.0


def capillary_area(cap_diameter_um: float) -> float:
    """Cross-sectional area (um^2) of a single capillary."""

    require_positive("cap_diameter_um", cap_diameter_um)
    return math.pi * (cap_diameter_um / 2.0) ** 2


def mass_specific_blood_flow(flow_l_min: float, muscle_mass_kg: float = 1.0) -> float:
    """Convert a limb blood flow in L/min over a muscle mass in kg to mL/s per g."""

    require_positive("flow_l_min", flow_l_min)
    require_positive("muscle_mass_kg", muscle_mass_kg)
    flow_ml_min_per_kg = (flow_l_min / muscle_mass_kg) * 1000.0
    return flow_ml_min_per_kg / 60.0 / 1000.0


def transit_time(
    cap_area_um2: float,
    cap_density_per_mm2: float,
    blood_flow_ml_s_g: float,
    tortuosity: float = STANDARD_CONDITIONS.tortuosity,
) -> float:
    """Mean red cell capillary transit time in seconds.

    ``blood_flow_ml_s_g`` must be a mass-specific flow in mL/s per g. A flow in
    L/min per kg is 1000/60 times larger in magnitude and yields a transit time
    too short by the same factor; convert with :func:`mass_specific_blood_flow`.
    Leg blood flow is assumed to be homogeneously distributed within and between
    capillaries. ``tortuosity`` is 1.0 for perfectly aligned capillaries and 2.0
    for random orientation.
    """

    require_positive("cap_area_um2", cap_area_um2)
    require_positive("cap_density_per_mm2", cap_density_per_mm2)
    require_positive("blood_flow_ml_s_g", blood_flow_ml_s_g)
    require_positive("tortuosity", tortuosity)

    total_cap_area_um2 = cap_area_um2 * cap_density_per_mm2
    fractional_area = total_cap_area_um2 / FIBER_AREA_UM2
    adjusted_area = fractional_area * tortuosity
    return adjusted_area / blood_flow_ml_s_g
