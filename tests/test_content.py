import numpy as np
import pytest

from rbc_o2.content import (
    oxygen_delivery,
    theoretical_binding_capacity,
    total_oxygen_content_mechanistic,
    total_oxygen_content_simple,
)

# Relative disagreement accepted between the two content formulas at bind=1.34.
CONTENT_CROSS_CHECK_TOLERANCE = 0.05


def test_simple_content_reference_value() -> None:
    # 1.34 * 150 * 0.97 + 0.0225 * 100 / 7.50062 (mL O2 per L blood)
    content = total_oxygen_content_simple(bind=1.34, hb_g_l=150.0, sat=0.97, po2_mmhg=100.0)
    assert content == pytest.approx(195.26998, abs=1e-4)


def test_simple_content_binding_capacity_is_configurable() -> None:
    low = total_oxygen_content_simple(bind=1.30, hb_g_l=150.0, sat=0.97)
    mid = total_oxygen_content_simple(bind=1.34, hb_g_l=150.0, sat=0.97)
    high = total_oxygen_content_simple(bind=1.39, hb_g_l=150.0, sat=0.97)
    assert low < mid < high
    assert high - low == pytest.approx(0.09 * 150.0 * 0.97)


def test_simple_content_rejects_invalid_inputs() -> None:
    with pytest.raises(ValueError) as exc:
        total_oxygen_content_simple(sat=1.2)
    assert "sat must be within [0, 1]" in str(exc.value)
    with pytest.raises(ValueError):
        total_oxygen_content_simple(bind=0.0)
    with pytest.raises(ValueError):
        total_oxygen_content_simple(po2_mmhg=-5.0)


def test_mechanistic_content_reference_value() -> None:
    content = total_oxygen_content_mechanistic(po2_mmhg=100.0, hct=0.45, sat=0.97, hb_blood_g_l=150.0)
    assert content == pytest.approx(20.3578, abs=1e-3)


def test_mechanistic_bound_oxygen_is_independent_of_hematocrit() -> None:
    low = total_oxygen_content_mechanistic(po2_mmhg=0.0, hct=0.3, sat=0.97, hb_blood_g_l=150.0)
    high = total_oxygen_content_mechanistic(po2_mmhg=0.0, hct=0.5, sat=0.97, hb_blood_g_l=150.0)
    assert low == pytest.approx(high, rel=1e-12)


def test_mechanistic_content_rises_with_po2_and_saturation() -> None:
    base = total_oxygen_content_mechanistic(po2_mmhg=40.0, sat=0.75)
    assert total_oxygen_content_mechanistic(po2_mmhg=100.0, sat=0.75) > base
    assert total_oxygen_content_mechanistic(po2_mmhg=40.0, sat=0.97) > base


def test_mechanistic_content_rejects_invalid_hematocrit() -> None:
    with pytest.raises(ValueError):
        total_oxygen_content_mechanistic(hct=0.0)
    with pytest.raises(ValueError) as exc:
        total_oxygen_content_mechanistic(hct=1.0)
    assert "hct must be < 1" in str(exc.value)


def test_theoretical_binding_capacity_from_molar_constants() -> None:
    assert theoretical_binding_capacity() == pytest.approx(4 * 22256 / 64458)
    assert 1.34 < theoretical_binding_capacity() < 1.39


def test_content_formulas_agree_on_bound_oxygen_units() -> None:
    # mL/L from the simple formula is ten times mL/dL from the mechanistic one.
    simple_ml_l = total_oxygen_content_simple(
        bind=theoretical_binding_capacity(), hb_g_l=150.0, sat=0.97, po2_mmhg=0.0
    )
    mechanistic_ml_dl = total_oxygen_content_mechanistic(po2_mmhg=0.0, hct=0.45, sat=0.97, hb_blood_g_l=150.0)
    assert simple_ml_l / 10.0 == pytest.approx(mechanistic_ml_dl, rel=1e-12)


def test_content_formulas_cross_check_within_tolerance() -> None:
    simple_ml_dl = total_oxygen_content_simple(bind=1.34, hb_g_l=150.0, sat=0.97, po2_mmhg=100.0) / 10.0
    mechanistic_ml_dl = total_oxygen_content_mechanistic(po2_mmhg=100.0, hct=0.45, sat=0.97, hb_blood_g_l=150.0)
    rel_diff = abs(mechanistic_ml_dl - simple_ml_dl) / mechanistic_ml_dl
    assert rel_diff < CONTENT_CROSS_CHECK_TOLERANCE
    # A g/L vs g/dL mix-up would be off by an order of magnitude.
    assert 0.5 < simple_ml_dl / mechanistic_ml_dl < 2.0


def test_oxygen_delivery_is_plain_product() -> None:
    assert oxygen_delivery(5.0, 195.27) == pytest.approx(976.35)
    assert oxygen_delivery(0.0, 195.27) == 0.0


def test_oxygen_delivery_accepts_vectors() -> None:
    delivery = oxygen_delivery(np.array([5.0, 30.0]), 200.0)
    assert np.allclose(delivery, [1000.0, 6000.0])


def test_oxygen_delivery_rejects_negative_inputs() -> None:
    with pytest.raises(ValueError) as exc:
        oxygen_delivery(-1.0, 200.0)
    assert "cardiac_output must be >= 0" in str(exc.value)
