# -*- coding: utf-8 -*-
#
# Copyright 2019 Klimaat

"""
Saturation vapour pressure: vapour pressure of air saturated with respect
to a plane surface of water or ice at the dry bulb temperature.

The empirical formulas share their kernels with floccus.vapour_pressure
but take the dry bulb temperature, reported as "temperature" when out of
range.
"""

from floccus import psychro
from floccus.formula import Formula1, Formula2
from floccus.quantities import (
    AtmosphericPressure,
    DryBulbTemperature,
    RelativeHumidity,
    SaturationVapourPressure,
    VapourPressure,
)


class Definition1(Formula2):
    """
    From vapour pressure and relative humidity
    """

    inputs = (VapourPressure, RelativeHumidity)
    output = SaturationVapourPressure

    @staticmethod
    def validate_inputs(vapour_pressure, relative_humidity):
        vapour_pressure.check_range_si(0.0, 50000.0)
        relative_humidity.check_range_si(0.00001, 2.0)

    @staticmethod
    def compute_unchecked(vapour_pressure, relative_humidity):
        return SaturationVapourPressure(
            vapour_pressure.get_si_value() / relative_humidity.get_si_value()
        )


class Buck1(Formula2):
    """
    Buck (1981) over water with enhancement factor, temperature 232-324 K.
    Most accurate of the Buck water formulas.
    """

    inputs = (DryBulbTemperature, AtmosphericPressure)
    output = SaturationVapourPressure

    @staticmethod
    def validate_inputs(temperature, pressure):
        temperature.check_range_si(232.0, 324.0)
        pressure.check_range_si(100.0, 150000.0)

    @staticmethod
    def compute_unchecked(temperature, pressure):
        return SaturationVapourPressure(
            psychro.calc_buck1(temperature.get_si_value(), pressure.get_si_value())
        )


class Buck2(Formula2):
    """
    Buck (1981) over ice with enhancement factor, temperature 193-274 K
    """

    inputs = (DryBulbTemperature, AtmosphericPressure)
    output = SaturationVapourPressure

    @staticmethod
    def validate_inputs(temperature, pressure):
        temperature.check_range_si(193.0, 274.0)
        pressure.check_range_si(100.0, 150000.0)

    @staticmethod
    def compute_unchecked(temperature, pressure):
        return SaturationVapourPressure(
            psychro.calc_buck2(temperature.get_si_value(), pressure.get_si_value())
        )


class Buck3(Formula2):
    """
    Buck (1981) over water with simple enhancement factor, temperature 253-324 K
    """

    inputs = (DryBulbTemperature, AtmosphericPressure)
    output = SaturationVapourPressure

    @staticmethod
    def validate_inputs(temperature, pressure):
        temperature.check_range_si(253.0, 324.0)
        pressure.check_range_si(100.0, 150000.0)

    @staticmethod
    def compute_unchecked(temperature, pressure):
        return SaturationVapourPressure(
            psychro.calc_buck3(temperature.get_si_value(), pressure.get_si_value())
        )


class Buck3Simplified(Formula1):
    inputs = (DryBulbTemperature,)
    output = SaturationVapourPressure

    @staticmethod
    def validate_inputs(temperature):
        temperature.check_range_si(253.0, 324.0)

    @staticmethod
    def compute_unchecked(temperature):
        return SaturationVapourPressure(psychro.calc_buck3_simplified(temperature.get_si_value()))


class Buck4(Formula2):
    """
    Buck (1981) over ice with simple enhancement factor, temperature 223-274 K
    """

    inputs = (DryBulbTemperature, AtmosphericPressure)
    output = SaturationVapourPressure

    @staticmethod
    def validate_inputs(temperature, pressure):
        temperature.check_range_si(223.0, 274.0)
        pressure.check_range_si(100.0, 150000.0)

    @staticmethod
    def compute_unchecked(temperature, pressure):
        return SaturationVapourPressure(
            psychro.calc_buck4(temperature.get_si_value(), pressure.get_si_value())
        )


class Buck4Simplified(Formula1):
    inputs = (DryBulbTemperature,)
    output = SaturationVapourPressure

    @staticmethod
    def validate_inputs(temperature):
        temperature.check_range_si(223.0, 274.0)

    @staticmethod
    def compute_unchecked(temperature):
        return SaturationVapourPressure(psychro.calc_buck4_simplified(temperature.get_si_value()))


class Tetens1(Formula1):
    """
    Tetens (1930), temperature 273-353 K.  Fast, less accurate.
    """

    inputs = (DryBulbTemperature,)
    output = SaturationVapourPressure

    @staticmethod
    def validate_inputs(temperature):
        temperature.check_range_si(273.0, 353.0)

    @staticmethod
    def compute_unchecked(temperature):
        return SaturationVapourPressure(psychro.calc_tetens1(temperature.get_si_value()))


class Wexler1(Formula1):
    """
    Wexler (1976) over water, temperature 273-374 K
    """

    inputs = (DryBulbTemperature,)
    output = SaturationVapourPressure

    @staticmethod
    def validate_inputs(temperature):
        temperature.check_range_si(273.0, 374.0)

    @staticmethod
    def compute_unchecked(temperature):
        return SaturationVapourPressure(psychro.calc_wexler1(temperature.get_si_value()))


class Wexler2(Formula1):
    """
    Wexler (1977) over ice, temperature 173-274 K
    """

    inputs = (DryBulbTemperature,)
    output = SaturationVapourPressure

    @staticmethod
    def validate_inputs(temperature):
        temperature.check_range_si(173.0, 274.0)

    @staticmethod
    def compute_unchecked(temperature):
        return SaturationVapourPressure(psychro.calc_wexler2(temperature.get_si_value()))


class Wmo1(Formula2):
    """
    WMO No. 8 over water with pressure enhancement factor, temperature 228-333 K
    """

    inputs = (DryBulbTemperature, AtmosphericPressure)
    output = SaturationVapourPressure

    @staticmethod
    def validate_inputs(temperature, pressure):
        temperature.check_range_si(228.0, 333.0)
        pressure.check_range_si(100.0, 150000.0)

    @staticmethod
    def compute_unchecked(temperature, pressure):
        return SaturationVapourPressure(
            psychro.calc_wmo1(temperature.get_si_value(), pressure.get_si_value())
        )


class Wmo2(Formula2):
    """
    WMO No. 8 over ice with pressure enhancement factor, temperature 208-274 K
    """

    inputs = (DryBulbTemperature, AtmosphericPressure)
    output = SaturationVapourPressure

    @staticmethod
    def validate_inputs(temperature, pressure):
        temperature.check_range_si(208.0, 274.0)
        pressure.check_range_si(100.0, 150000.0)

    @staticmethod
    def compute_unchecked(temperature, pressure):
        return SaturationVapourPressure(
            psychro.calc_wmo2(temperature.get_si_value(), pressure.get_si_value())
        )
