# -*- coding: utf-8 -*-
#
# Copyright 2019 Klimaat

"""
Relative humidity (-), as a ratio rather than a percentage
"""

from floccus import mixing_ratio, saturation_vapour_pressure, vapour_pressure
from floccus.formula import Formula2, Formula3, require_below
from floccus.quantities import (
    AtmosphericPressure,
    DewPointTemperature,
    DryBulbTemperature,
    MixingRatio,
    RelativeHumidity,
    SaturationMixingRatio,
    SaturationVapourPressure,
    VapourPressure,
)


class Definition1(Formula2):
    """
    Mixing ratio over saturation mixing ratio
    """

    inputs = (MixingRatio, SaturationMixingRatio)
    output = RelativeHumidity

    @staticmethod
    def validate_inputs(mixing_ratio, saturation_mixing_ratio):
        mixing_ratio.check_range_si(0.00001, 10.0)
        saturation_mixing_ratio.check_range_si(0.00001, 10.0)

    @staticmethod
    def compute_unchecked(mixing_ratio, saturation_mixing_ratio):
        return RelativeHumidity(
            mixing_ratio.get_si_value() / saturation_mixing_ratio.get_si_value()
        )


class Definition2(Formula2):
    """
    Vapour pressure over saturation vapour pressure
    """

    inputs = (VapourPressure, SaturationVapourPressure)
    output = RelativeHumidity

    @staticmethod
    def validate_inputs(vapour_pressure, saturation_vapour_pressure):
        vapour_pressure.check_range_si(0.0, 50000.0)
        saturation_vapour_pressure.check_range_si(0.1, 50000.0)

    @staticmethod
    def compute_unchecked(vapour_pressure, saturation_vapour_pressure):
        return RelativeHumidity(
            vapour_pressure.get_si_value() / saturation_vapour_pressure.get_si_value()
        )


class General3(Formula2):
    """
    Both pressures from Tetens (1930); temperature and dew point 273-353 K
    """

    inputs = (DryBulbTemperature, DewPointTemperature)
    output = RelativeHumidity

    @staticmethod
    def validate_inputs(temperature, dewpoint):
        temperature.check_range_si(273.0, 353.0)
        dewpoint.check_range_si(273.0, 353.0)

    @staticmethod
    def compute_unchecked(temperature, dewpoint):
        e = vapour_pressure.Tetens1.compute_unchecked(dewpoint)
        es = saturation_vapour_pressure.Tetens1.compute_unchecked(temperature)
        return Definition2.compute_unchecked(e, es)


class General4(Formula3):
    """
    Both pressures from Buck (1981) ew3; temperature and dew point 253-324 K
    """

    inputs = (DryBulbTemperature, DewPointTemperature, AtmosphericPressure)
    output = RelativeHumidity

    @staticmethod
    def validate_inputs(temperature, dewpoint, pressure):
        temperature.check_range_si(253.0, 324.0)
        dewpoint.check_range_si(253.0, 324.0)
        pressure.check_range_si(100.0, 150000.0)

    @staticmethod
    def compute_unchecked(temperature, dewpoint, pressure):
        e = vapour_pressure.Buck3.compute_unchecked(dewpoint, pressure)
        es = saturation_vapour_pressure.Buck3.compute_unchecked(temperature, pressure)
        return Definition2.compute_unchecked(e, es)


class General5(Formula3):
    """
    Ratio of mixing ratios at the dew point and at the temperature, both from
    Buck (1981) ew1; temperature and dew point 232-314 K, pressure above 10 kPa
    """

    inputs = (DryBulbTemperature, DewPointTemperature, AtmosphericPressure)
    output = RelativeHumidity

    @staticmethod
    def validate_inputs(temperature, dewpoint, pressure):
        temperature.check_range_si(232.0, 314.0)
        dewpoint.check_range_si(232.0, 314.0)
        pressure.check_range_si(10000.0, 150000.0)
        require_below(
            saturation_vapour_pressure.Buck1.compute_unchecked(
                temperature, pressure
            ).get_si_value(),
            pressure.get_si_value(),
            "saturation vapour pressure at temperature must be lower than pressure",
        )

    @staticmethod
    def compute_unchecked(temperature, dewpoint, pressure):
        r = mixing_ratio.Accuracy1.compute_unchecked(dewpoint, pressure)
        rs = mixing_ratio.Accuracy1.compute_unchecked(
            DewPointTemperature(temperature.get_si_value()), pressure
        )
        return RelativeHumidity(r.get_si_value() / rs.get_si_value())
