import numpy as np
import pytest

from floccus import mixing_ratio, saturation_mixing_ratio
from floccus.errors import IncorrectArgumentSet
from floccus.quantities import (
    AtmosphericPressure,
    DewPointTemperature,
    MixingRatio,
    RelativeHumidity,
    SaturationVapourPressure,
    VapourPressure,
)
from floccus.testing import Argument, ReferenceAtmosphere, check_formula

NORMAL = ReferenceAtmosphere.NORMAL

PRESSURE = Argument(AtmosphericPressure, 100.0, 150000.0)

CASES = [
    (mixing_ratio.Definition1, [PRESSURE, Argument(VapourPressure, 0.0, 50000.0)], 1e-12),
    (mixing_ratio.Performance1, [Argument(DewPointTemperature, 273.0, 353.0), PRESSURE], 1e-5),
    (mixing_ratio.Accuracy1, [Argument(DewPointTemperature, 232.0, 324.0), PRESSURE], 1e-4),
    (
        saturation_mixing_ratio.Definition1,
        [PRESSURE, Argument(SaturationVapourPressure, 0.0, 50000.0)],
        1e-3,
    ),
    (
        saturation_mixing_ratio.Definition2,
        [Argument(MixingRatio, 1e-10, 1.0), Argument(RelativeHumidity, 1e-10, 2.0)],
        1e-12,
    ),
]


class TestMixingRatio:
    """Mixing ratio and saturation mixing ratio formulas"""

    @pytest.mark.parametrize(
        "formula, arguments, tolerance",
        CASES,
        ids=[case[0].__module__.split(".")[-1] + "." + case[0].__name__ for case in CASES],
    )
    def test_formula(self, formula, arguments, tolerance):
        check_formula(formula, arguments, NORMAL, tolerance)

    def test_standard_atmosphere(self):
        """
        Sea level standard pressure with the reference vapour pressure.
        The often quoted 0.01217 belongs to 100000 Pa, see below.
        """
        result = mixing_ratio.Definition1.compute(
            AtmosphericPressure(101325.0), VapourPressure(1919.43)
        )
        assert result.get_si_value() == pytest.approx(0.0120098648, rel=1e-8)

    def test_reference_atmosphere(self):
        result = mixing_ratio.Definition1.compute(
            AtmosphericPressure(100000.0), VapourPressure(1919.4253257541593)
        )
        assert result.get_si_value() == pytest.approx(0.012172079452423202, rel=1e-12)

    def test_equal_pressures(self):
        """Vapour pressure equal to pressure would divide by zero"""
        with pytest.raises(IncorrectArgumentSet):
            mixing_ratio.Definition1.compute(
                AtmosphericPressure(30000.0), VapourPressure(30000.0)
            )

    def test_nearly_equal_pressures(self):
        p = 30000.0
        with pytest.raises(IncorrectArgumentSet):
            mixing_ratio.Definition1.compute(
                AtmosphericPressure(p), VapourPressure(np.nextafter(p, 0.0))
            )

    def test_vapour_pressure_above_pressure(self):
        with pytest.raises(IncorrectArgumentSet):
            mixing_ratio.Definition1.compute(
                AtmosphericPressure(20000.0), VapourPressure(30000.0)
            )

    def test_saturated_dewpoint_at_low_pressure(self):
        """Vapour pressure at a hot dew point exceeds a low total pressure"""
        with pytest.raises(IncorrectArgumentSet):
            mixing_ratio.Performance1.compute(
                DewPointTemperature(350.0), AtmosphericPressure(1000.0)
            )
        with pytest.raises(IncorrectArgumentSet):
            mixing_ratio.Accuracy1.compute(
                DewPointTemperature(320.0), AtmosphericPressure(1000.0)
            )

    def test_saturation_above_pressure(self):
        with pytest.raises(IncorrectArgumentSet):
            saturation_mixing_ratio.Definition1.compute(
                AtmosphericPressure(1000.0), SaturationVapourPressure(1000.0)
            )

    def test_array_with_one_bad_combination(self):
        """One degenerate element rejects the whole array"""
        p = AtmosphericPressure([100000.0, 50000.0, 1000.0])
        e = VapourPressure([2000.0, 2000.0, 2000.0])
        with pytest.raises(IncorrectArgumentSet):
            mixing_ratio.Definition1.compute(p, e)
