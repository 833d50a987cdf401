import pytest

from floccus import vapour_pressure
from floccus.errors import OutOfRange
from floccus.quantities import (
    AtmosphericPressure,
    DewPointTemperature,
    RelativeHumidity,
    SaturationVapourPressure,
    SpecificHumidity,
)
from floccus.testing import Argument, ReferenceAtmosphere, check_formula

NORMAL = ReferenceAtmosphere.NORMAL
FREEZING = ReferenceAtmosphere.FREEZING

PRESSURE = Argument(AtmosphericPressure, 100.0, 150000.0)

CASES = [
    (
        vapour_pressure.Definition1,
        [Argument(SpecificHumidity, 0.00001, 2.0), PRESSURE],
        NORMAL,
        1e-8,
    ),
    (
        vapour_pressure.Definition2,
        [Argument(SaturationVapourPressure, 0.0, 50000.0), Argument(RelativeHumidity, 0.0, 2.0)],
        NORMAL,
        1e-8,
    ),
    (vapour_pressure.Buck1, [Argument(DewPointTemperature, 232.0, 324.0), PRESSURE], NORMAL, 1e1),
    (vapour_pressure.Buck2, [Argument(DewPointTemperature, 193.0, 274.0), PRESSURE], FREEZING, 1e0),
    (vapour_pressure.Buck3, [Argument(DewPointTemperature, 253.0, 324.0), PRESSURE], NORMAL, 1e1),
    (vapour_pressure.Buck3Simplified, [Argument(DewPointTemperature, 253.0, 324.0)], NORMAL, 2e0),
    (vapour_pressure.Buck4, [Argument(DewPointTemperature, 223.0, 274.0), PRESSURE], FREEZING, 1e0),
    (vapour_pressure.Buck4Simplified, [Argument(DewPointTemperature, 223.0, 274.0)], FREEZING, 1e-1),
    (vapour_pressure.Tetens1, [Argument(DewPointTemperature, 273.0, 353.0)], NORMAL, 1e0),
    (vapour_pressure.Wexler1, [Argument(DewPointTemperature, 273.0, 374.0)], NORMAL, 1e-8),
    (vapour_pressure.Wexler2, [Argument(DewPointTemperature, 173.0, 274.0)], FREEZING, 1e-8),
    (vapour_pressure.Wmo1, [Argument(DewPointTemperature, 228.0, 333.0), PRESSURE], NORMAL, 1e1),
    (vapour_pressure.Wmo2, [Argument(DewPointTemperature, 208.0, 274.0), PRESSURE], FREEZING, 1e0),
]


class TestVapourPressure:
    """Every vapour pressure formula against the common checks"""

    @pytest.mark.parametrize(
        "formula, arguments, atmosphere, tolerance",
        CASES,
        ids=[case[0].__name__ for case in CASES],
    )
    def test_formula(self, formula, arguments, atmosphere, tolerance):
        check_formula(formula, arguments, atmosphere, tolerance)

    def test_dewpoint_token(self):
        """Dew point formulas report the dew point by its own name"""
        with pytest.raises(OutOfRange) as info:
            vapour_pressure.Tetens1.compute(DewPointTemperature(200.0))
        assert info.value == OutOfRange("dewpoint")
        assert str(info.value) == "Value of dewpoint out of a reasonable range."

    def test_buck_water_formulas_agree(self):
        """Buck formulas over water stay within 1% of Wexler at 20°C"""
        dewpoint = DewPointTemperature(20.0, "degC")
        pressure = AtmosphericPressure(1013.25, "hPa")
        wexler = vapour_pressure.Wexler1.compute(dewpoint).get_si_value()
        for formula in (vapour_pressure.Buck1, vapour_pressure.Buck3):
            result = formula.compute(dewpoint, pressure).get_si_value()
            assert abs(result - wexler) / wexler < 0.01
