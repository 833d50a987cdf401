import pickle

import numpy as np
import pint
import pytest

from floccus import units
from floccus.errors import OutOfRange
from floccus.quantities import (
    ALL_QUANTITIES,
    AtmosphericPressure,
    DewPointTemperature,
    DryBulbTemperature,
    MixingRatio,
    RelativeHumidity,
    SpecificHumidity,
    VapourPressure,
)


class TestConstruction:
    """Values are normalised to SI whatever unit they arrive in"""

    def test_si_by_default(self):
        assert DryBulbTemperature(300.0).get_si_value() == 300.0
        assert isinstance(DryBulbTemperature(300).get_si_value(), float)

    @pytest.mark.parametrize(
        "quantity, value, unit, expected",
        [
            (DryBulbTemperature, 26.85, "degC", 300.0),
            (DryBulbTemperature, 80.33, "degF", 300.0),
            (DewPointTemperature, 290.0, "K", 290.0),
            (AtmosphericPressure, 1013.25, "hPa", 101325.0),
            (AtmosphericPressure, 101.325, "kPa", 101325.0),
            (AtmosphericPressure, 14.6959488, "psi", 101325.0),
            (RelativeHumidity, 50.0, "percent", 0.5),
            (MixingRatio, 12.0, "permille", 0.012),
            (SpecificHumidity, 0.02, "dimensionless", 0.02),
        ],
    )
    def test_units(self, quantity, value, unit, expected):
        result = quantity(value, unit).get_si_value()
        assert result == pytest.approx(expected, rel=1e-8)

    def test_wrong_family(self):
        with pytest.raises(pint.DimensionalityError):
            AtmosphericPressure(20.0, "degC")

    @pytest.mark.parametrize(
        "quantity, value, unit",
        [
            (AtmosphericPressure, 1.0, "bar"),
            (DryBulbTemperature, 540.0, "degR"),
            (RelativeHumidity, 1.0, "ppm"),
        ],
    )
    def test_unit_outside_family(self, quantity, value, unit):
        """Same dimension, but not one of the family's units"""
        with pytest.raises(ValueError):
            quantity(value, unit)

    def test_get_unit_outside_family(self):
        with pytest.raises(ValueError):
            AtmosphericPressure(101325.0).get("bar")
        with pytest.raises(pint.DimensionalityError):
            AtmosphericPressure(101325.0).get("kelvin")

    def test_get_other_unit(self):
        T = DryBulbTemperature(300.0)
        assert T.get("degC") == pytest.approx(26.85)
        assert T.get("kelvin") == 300.0
        assert VapourPressure(1500.0).get("hPa") == pytest.approx(15.0)

    def test_imperial_round_trip(self):
        for quantity in ALL_QUANTITIES:
            q = quantity.default()
            imperial = q.to_imperial()
            assert type(imperial) is quantity
            assert imperial.get_si_value() == pytest.approx(q.get_si_value(), rel=1e-12)

    def test_imperial_units(self):
        assert RelativeHumidity(0.5).get(RelativeHumidity.imperial_unit) == pytest.approx(50.0)
        assert MixingRatio(0.012).get(MixingRatio.imperial_unit) == pytest.approx(12.0)
        assert DryBulbTemperature(273.15).get(DryBulbTemperature.imperial_unit) == pytest.approx(32.0)

    def test_array(self):
        values = [280.0, 290.0, 300.0]
        T = DryBulbTemperature(values, "kelvin")
        assert T.is_array
        assert T.shape == (3,)
        assert len(T) == 3
        assert T[1] == DryBulbTemperature(290.0)
        np.testing.assert_allclose(DryBulbTemperature([0.0, 10.0], "degC").get_si_value(), [273.15, 283.15])

    def test_defaults(self):
        assert DryBulbTemperature.default().get_si_value() == 300.0
        assert DewPointTemperature.default().get_si_value() == 290.0
        assert AtmosphericPressure.default().get_si_value() == 101325.0
        assert RelativeHumidity.default().get_si_value() == 0.5

    def test_name_tokens(self):
        names = [quantity.name for quantity in ALL_QUANTITIES]
        assert len(set(names)) == len(names)
        assert DryBulbTemperature.name == "temperature"
        assert DewPointTemperature.name == "dewpoint"
        assert AtmosphericPressure.name == "pressure"


class TestImmutability:

    def test_no_assignment(self):
        T = DryBulbTemperature(300.0)
        with pytest.raises(AttributeError):
            T._value = 200.0
        with pytest.raises(AttributeError):
            T.other = 1
        assert T.get_si_value() == 300.0

    def test_array_is_read_only(self):
        values = np.array([280.0, 290.0])
        T = DryBulbTemperature(values)
        with pytest.raises(ValueError):
            T.get_si_value()[0] = 0.0
        values[0] = 0.0
        assert T.get_si_value()[0] == 280.0

    def test_pickle(self):
        T = DryBulbTemperature(300.0)
        assert pickle.loads(pickle.dumps(T)) == T


class TestComparison:

    def test_exact_equality(self):
        assert DryBulbTemperature(300.0) == DryBulbTemperature(300.0)
        assert DryBulbTemperature(300.0) != DryBulbTemperature(np.nextafter(300.0, 400.0))

    def test_nominal_types(self):
        """Same value, different quantity: never equal, never ordered"""
        assert DryBulbTemperature(300.0) != DewPointTemperature(300.0)
        with pytest.raises(TypeError):
            DryBulbTemperature(300.0) < DewPointTemperature(310.0)

    def test_ordering(self):
        assert DryBulbTemperature(290.0) < DryBulbTemperature(300.0)
        assert DryBulbTemperature(300.0) >= DryBulbTemperature(300.0)
        assert max(VapourPressure(1.0), VapourPressure(2.0)) == VapourPressure(2.0)

    def test_hash(self):
        assert len({DryBulbTemperature(300.0), DryBulbTemperature(300.0)}) == 1
        with pytest.raises(TypeError):
            hash(DryBulbTemperature([300.0, 301.0]))


class TestCheckRange:

    def test_inside(self):
        assert DryBulbTemperature(300.0).check_range_si(253.0, 324.0) is None
        assert DryBulbTemperature(253.0).check_range_si(253.0, 324.0) is None

    def test_outside(self):
        with pytest.raises(OutOfRange) as info:
            DewPointTemperature(200.0).check_range_si(253.0, 324.0)
        assert info.value.name == "dewpoint"

    def test_nan(self):
        with pytest.raises(OutOfRange):
            DryBulbTemperature(np.nan).check_range_si(253.0, 324.0)

    def test_array(self):
        DryBulbTemperature([260.0, 300.0]).check_range_si(253.0, 324.0)
        with pytest.raises(OutOfRange):
            DryBulbTemperature([260.0, 400.0]).check_range_si(253.0, 324.0)


class TestConvert:

    def test_same_unit(self):
        values = np.array([1.0, 2.0])
        assert units.convert(values, "Pa", "Pa") is values

    def test_scalar_stays_float(self):
        result = units.convert(0.0, "degC", "kelvin")
        assert isinstance(result, float)
        assert result == pytest.approx(273.15)

    def test_array(self):
        np.testing.assert_allclose(units.convert([1.0, 2.0], "kPa", "Pa"), [1000.0, 2000.0])

    def test_registry_has_ratio_units(self):
        assert "percent" in units.ureg
        assert "permille" in units.ureg
