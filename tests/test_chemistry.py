import numpy as np
import pytest

from rbc_o2.chemistry import (
    CO2_SOLUBILITY,
    K2_DOUBLE_PRIME,
    K5_DOUBLE_PRIME,
    O2_SOLUBILITY,
    BufferFactors,
    buffer_factors,
    dissolved_gas,
    erythrocyte_ph,
    free_carbon_dioxide,
    free_oxygen,
    gas_solubility,
)


def test_erythrocyte_ph_of_standard_plasma_is_standard_rbc_ph() -> None:
    assert erythrocyte_ph(7.4) == pytest.approx(7.24, abs=1e-12)


def test_erythrocyte_ph_is_linear() -> None:
    assert erythrocyte_ph(7.5) - erythrocyte_ph(7.4) == pytest.approx(0.0795)


def test_erythrocyte_ph_rejects_out_of_range_ph() -> None:
    with pytest.raises(ValueError) as exc:
        erythrocyte_ph(14.5)
    assert "ph_plasma must be between 0 and 14" in str(exc.value)


def test_oxygen_solubility_at_37c() -> None:
    assert gas_solubility(O2_SOLUBILITY) == pytest.approx(1.37e-6 / 0.94)
    assert gas_solubility(CO2_SOLUBILITY) == pytest.approx(3.07e-5 / 0.94)


def test_oxygen_solubility_falls_with_temperature() -> None:
    assert gas_solubility(O2_SOLUBILITY, 40.0) < gas_solubility(O2_SOLUBILITY, 37.0)
    assert gas_solubility(CO2_SOLUBILITY, 40.0) < gas_solubility(CO2_SOLUBILITY, 37.0)


def test_free_gas_concentrations_at_standard_conditions() -> None:
    assert free_oxygen(100.0) == pytest.approx(1.457446809e-4, rel=1e-8)
    assert free_carbon_dioxide(40.0) == pytest.approx(1.306383e-3, rel=1e-6)


def test_dissolved_gas_shares_one_formula_for_both_gases() -> None:
    assert dissolved_gas(100.0, O2_SOLUBILITY) == free_oxygen(100.0)
    assert dissolved_gas(40.0, CO2_SOLUBILITY, 30.0, 0.9) == free_carbon_dioxide(40.0, 30.0, 0.9)


def test_dissolved_gas_accepts_vectors() -> None:
    conc = dissolved_gas(np.array([0.0, 50.0, 100.0]), O2_SOLUBILITY)
    assert conc.shape == (3,)
    assert conc[0] == 0.0
    assert conc[2] == pytest.approx(2.0 * conc[1])


def test_dissolved_gas_rejects_negative_pressure() -> None:
    with pytest.raises(ValueError) as exc:
        dissolved_gas(-1.0, O2_SOLUBILITY)
    assert "partial_pressure_mmhg must be >= 0" in str(exc.value)


def test_dissolved_gas_rejects_zero_water_fraction() -> None:
    with pytest.raises(ValueError):
        dissolved_gas(100.0, O2_SOLUBILITY, water_fraction=0.0)


def test_buffer_factors_are_named() -> None:
    factors = buffer_factors(7.4)
    assert isinstance(factors, BufferFactors)
    assert factors._fields == ("f1", "f2", "f3", "f4")


def test_buffer_factors_at_standard_plasma_ph() -> None:
    factors = buffer_factors(7.4)
    assert factors.f1 == pytest.approx(18.378, abs=1e-2)
    assert factors.f2 == pytest.approx(factors.f1)
    assert factors.f3 == pytest.approx(3.3977, abs=1e-3)
    assert factors.f4 == pytest.approx(5.7953, abs=1e-3)


def test_buffer_factor_products_are_ph_independent() -> None:
    for ph in (7.0, 7.4, 7.8):
        factors = buffer_factors(ph)
        assert (factors.f1 - 1.0) * (factors.f3 - 1.0) == pytest.approx(K2_DOUBLE_PRIME / K5_DOUBLE_PRIME)
        assert factors.f4 - 1.0 == pytest.approx(2.0 * (factors.f3 - 1.0))


def test_acidosis_raises_protonation_factors() -> None:
    acid = buffer_factors(7.1)
    base = buffer_factors(7.6)
    assert acid.f3 > base.f3
    assert acid.f1 < base.f1
