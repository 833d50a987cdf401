import pytest

from floccus import vapour_pressure_deficit
from floccus.quantities import (
    AtmosphericPressure,
    DewPointTemperature,
    DryBulbTemperature,
    RelativeHumidity,
    SaturationVapourPressure,
    VapourPressure,
    VapourPressureDeficit,
)
from floccus.testing import Argument, ReferenceAtmosphere, check_formula

NORMAL = ReferenceAtmosphere.NORMAL

PRESSURE = Argument(AtmosphericPressure, 100.0, 150000.0)

CASES = [
    (
        vapour_pressure_deficit.General1,
        [Argument(VapourPressure, 0.0, 50000.0), Argument(SaturationVapourPressure, 0.0, 50000.0)],
        1e-8,
    ),
    (
        vapour_pressure_deficit.General2,
        [
            Argument(DryBulbTemperature, 253.0, 324.0),
            Argument(DewPointTemperature, 253.0, 324.0),
            PRESSURE,
        ],
        1e1,
    ),
    (
        vapour_pressure_deficit.General3,
        [
            Argument(DryBulbTemperature, 253.0, 324.0),
            Argument(RelativeHumidity, 0.0, 2.0),
            PRESSURE,
        ],
        1e1,
    ),
]


class TestVapourPressureDeficit:

    @pytest.mark.parametrize(
        "formula, arguments, tolerance", CASES, ids=[case[0].__name__ for case in CASES]
    )
    def test_formula(self, formula, arguments, tolerance):
        check_formula(formula, arguments, NORMAL, tolerance)

    def test_simple_difference(self):
        """Exactly the difference of the two pressures"""
        result = vapour_pressure_deficit.General1.compute(
            VapourPressure(3000.0), SaturationVapourPressure(3550.0)
        )
        assert type(result) is VapourPressureDeficit
        assert result.get_si_value() == 550.0

    def test_saturated_air(self):
        result = vapour_pressure_deficit.General3.compute(
            DryBulbTemperature(300.0), RelativeHumidity(1.0), AtmosphericPressure(101325.0)
        )
        assert result.get_si_value() == 0.0
