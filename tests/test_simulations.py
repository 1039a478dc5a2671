import numpy as np
import pytest

from rbc_o2.results import DissociationCurve
from rbc_o2.simulations import (
    curves_to_frame,
    dissociation_curve,
    erythrocyte_cycle,
    oxidative_stress_experiment,
    oxygen_delivery_grid,
    richardson_transit_times,
)


def test_dissociation_curve_default_grid() -> None:
    curve = dissociation_curve()
    assert isinstance(curve, DissociationCurve)
    assert len(curve.po2_mmhg) == 101
    assert curve.po2_mmhg[0] == 0.0
    assert curve.po2_mmhg[-1] == 100.0
    assert curve.saturation[27] > 0.5 > curve.saturation[26]
    assert curve.metadata["hill_mode"] == "po2_dependent"


def test_dissociation_curve_rejects_invalid_p50() -> None:
    with pytest.raises(ValueError):
        dissociation_curve(p50_mmhg=-1.0)


def test_erythrocyte_cycle_lungs_left_shifted_relative_to_muscle() -> None:
    curves = erythrocyte_cycle()
    lungs = curves["lungs"]
    muscle = curves["muscle"]
    assert lungs.p50_mmhg == pytest.approx(23.207, abs=1e-2)
    assert muscle.p50_mmhg == pytest.approx(26.517, abs=1e-2)
    assert np.all(lungs.saturation[1:] > muscle.saturation[1:])


def test_oxidative_stress_experiment_summary() -> None:
    result = oxidative_stress_experiment()
    summary = result.summary.set_index("condition")
    assert list(summary.index) == ["control", "oxidative_stress"]
    assert summary.loc["control", "p50_mmhg"] == pytest.approx(27.3818, abs=1e-3)
    assert summary.loc["oxidative_stress", "p50_mmhg"] == pytest.approx(27.7377, abs=1e-3)
    assert summary.loc["oxidative_stress", "saturation"] < summary.loc["control", "saturation"]
    assert summary.loc["control", "hematocrit"] == summary.loc["oxidative_stress", "hematocrit"]
    assert 15.0 < summary.loc["control", "oxygen_content_ml_dl"] < 25.0
    assert set(result.curves) == {"control", "oxidative_stress"}


def test_oxidative_stress_experiment_per_condition_blood() -> None:
    shared = oxidative_stress_experiment().summary.set_index("condition")
    own = oxidative_stress_experiment(per_condition_blood=True).summary.set_index("condition")
    assert own.loc["control", "oxygen_content_ml_dl"] == shared.loc["control", "oxygen_content_ml_dl"]
    assert own.loc["oxidative_stress", "hb_blood_g_l"] == 149.95
    assert own.loc["oxidative_stress", "oxygen_content_ml_dl"] > shared.loc["oxidative_stress", "oxygen_content_ml_dl"]


def test_oxygen_delivery_grid_rest_and_exercise() -> None:
    grid = oxygen_delivery_grid()
    assert len(grid) == 4
    rest = grid[(grid["cardiac_output_l_min"] == 5.0) & (grid["hb_g_l"] == 150.0)].iloc[0]
    exercise = grid[(grid["cardiac_output_l_min"] == 30.0) & (grid["hb_g_l"] == 160.0)].iloc[0]
    assert rest["oxygen_delivery_ml_min"] == pytest.approx(976.35, abs=1e-2)
    assert exercise["oxygen_delivery_ml_min"] == pytest.approx(6248.04, abs=1e-2)


def test_richardson_transit_times() -> None:
    times = richardson_transit_times()
    assert times["derived"] == pytest.approx(0.15863, abs=1e-5)
    assert times["reference"] == pytest.approx(0.10585, abs=1e-4)


def test_curves_to_frame_long_and_wide() -> None:
    curves = erythrocyte_cycle()
    long_frame = curves_to_frame(curves)
    assert list(long_frame.columns) == ["condition", "po2_mmhg", "saturation"]
    assert len(long_frame) == 202

    wide_frame = curves_to_frame(curves, wide=True)
    assert list(wide_frame.columns) == ["po2_mmhg", "lungs", "muscle"]
    assert len(wide_frame) == 101
    assert wide_frame["lungs"].iloc[50] == pytest.approx(curves["lungs"].saturation[50])


def test_curves_to_frame_rejects_empty_input() -> None:
    with pytest.raises(ValueError):
        curves_to_frame([])
