"""Erythrocyte oxygen transport equations."""

from .params import (
    STANDARD_CONDITIONS,
    HillCoefficientMode,
    K4PrimeMode,
    P50Mode,
    PhysiologicalInputs,
    StandardConditions,
    validate_inputs,
)
from .chemistry import (
    BufferFactors,
    CO2_SOLUBILITY,
    O2_SOLUBILITY,
    buffer_factors,
    dissolved_gas,
    erythrocyte_ph,
    free_carbon_dioxide,
    free_oxygen,
    gas_solubility,
)
from .affinity import P50ShiftTerms, hill_coefficient, p50_adjusted, p50_shift_terms
from .saturation import DashSaturation, model_dash, model_dash_from_inputs, model_hill
from .content import (
    oxygen_delivery,
    theoretical_binding_capacity,
    total_oxygen_content_mechanistic,
    total_oxygen_content_simple,
)
from .transit import capillary_area, mass_specific_blood_flow, transit_time
from .results import DissociationCurve, export_curve_csv, export_metadata_json
from .simulations import (
    ExperimentResult,
    curves_to_frame,
    dissociation_curve,
    erythrocyte_cycle,
    oxidative_stress_experiment,
    oxygen_delivery_grid,
    richardson_transit_times,
)

__all__ = [
    "STANDARD_CONDITIONS",
    "StandardConditions",
    "HillCoefficientMode",
    "P50Mode",
    "K4PrimeMode",
    "PhysiologicalInputs",
    "validate_inputs",
    "BufferFactors",
    "O2_SOLUBILITY",
    "CO2_SOLUBILITY",
    "erythrocyte_ph",
    "gas_solubility",
    "dissolved_gas",
    "free_oxygen",
    "free_carbon_dioxide",
    "buffer_factors",
    "P50ShiftTerms",
    "hill_coefficient",
    "p50_shift_terms",
    "p50_adjusted",
    "DashSaturation",
    "model_hill",
    "model_dash",
    "model_dash_from_inputs",
    "theoretical_binding_capacity",
    "total_oxygen_content_simple",
    "total_oxygen_content_mechanistic",
    "oxygen_delivery",
    "capillary_area",
    "mass_specific_blood_flow",
    "transit_time",
    "DissociationCurve",
    "export_curve_csv",
    "export_metadata_json",
    "ExperimentResult",
    "dissociation_curve",
    "erythrocyte_cycle",
    "oxidative_stress_experiment",
    "oxygen_delivery_grid",
    "richardson_transit_times",
    "curves_to_frame",
]
