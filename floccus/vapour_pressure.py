# -*- coding: utf-8 -*-
#
# Copyright 2019 Klimaat

"""
Vapour pressure: partial pressure of water vapour in moist air.

Empirical formulas are evaluated at the dew point, i.e. they give the
saturation vapour pressure of the parcel once cooled to saturation.
"""

from floccus import psychro
from floccus.constants import EPSILON
from floccus.formula import Formula1, Formula2
from floccus.quantities import (
    AtmosphericPressure,
    DewPointTemperature,
    RelativeHumidity,
    SaturationVapourPressure,
    SpecificHumidity,
    VapourPressure,
)


class Definition1(Formula2):
    """
    From specific humidity q (-) and pressure p (Pa):

        e = p q / (ε + q (1 - ε))
    """

    inputs = (SpecificHumidity, AtmosphericPressure)
    output = VapourPressure

    @staticmethod
    def validate_inputs(specific_humidity, pressure):
        specific_humidity.check_range_si(0.00001, 2.0)
        pressure.check_range_si(100.0, 150000.0)

    @staticmethod
    def compute_unchecked(specific_humidity, pressure):
        q = specific_humidity.get_si_value()
        p = pressure.get_si_value()
        return VapourPressure(p * q / (EPSILON + q * (1.0 - EPSILON)))


class Definition2(Formula2):
    """
    From saturation vapour pressure and relative humidity
    """

    inputs = (SaturationVapourPressure, RelativeHumidity)
    output = VapourPressure

    @staticmethod
    def validate_inputs(saturation_vapour_pressure, relative_humidity):
        saturation_vapour_pressure.check_range_si(0.0, 50000.0)
        relative_humidity.check_range_si(0.0, 2.0)

    @staticmethod
    def compute_unchecked(saturation_vapour_pressure, relative_humidity):
        return VapourPressure(
            saturation_vapour_pressure.get_si_value() * relative_humidity.get_si_value()
        )


class Buck1(Formula2):
    """
    Buck (1981) over water with enhancement factor, dew point 232-324 K.
    Most accurate of the Buck water formulas.
    """

    inputs = (DewPointTemperature, AtmosphericPressure)
    output = VapourPressure

    @staticmethod
    def validate_inputs(dewpoint, pressure):
        dewpoint.check_range_si(232.0, 324.0)
        pressure.check_range_si(100.0, 150000.0)

    @staticmethod
    def compute_unchecked(dewpoint, pressure):
        return VapourPressure(
            psychro.calc_buck1(dewpoint.get_si_value(), pressure.get_si_value())
        )


class Buck2(Formula2):
    """
    Buck (1981) over ice with enhancement factor, dew point 193-274 K
    """

    inputs = (DewPointTemperature, AtmosphericPressure)
    output = VapourPressure

    @staticmethod
    def validate_inputs(dewpoint, pressure):
        dewpoint.check_range_si(193.0, 274.0)
        pressure.check_range_si(100.0, 150000.0)

    @staticmethod
    def compute_unchecked(dewpoint, pressure):
        return VapourPressure(
            psychro.calc_buck2(dewpoint.get_si_value(), pressure.get_si_value())
        )


class Buck3(Formula2):
    """
    Buck (1981) over water with simple enhancement factor, dew point 253-324 K
    """

    inputs = (DewPointTemperature, AtmosphericPressure)
    output = VapourPressure

    @staticmethod
    def validate_inputs(dewpoint, pressure):
        dewpoint.check_range_si(253.0, 324.0)
        pressure.check_range_si(100.0, 150000.0)

    @staticmethod
    def compute_unchecked(dewpoint, pressure):
        return VapourPressure(
            psychro.calc_buck3(dewpoint.get_si_value(), pressure.get_si_value())
        )


class Buck3Simplified(Formula1):
    inputs = (DewPointTemperature,)
    output = VapourPressure

    @staticmethod
    def validate_inputs(dewpoint):
        dewpoint.check_range_si(253.0, 324.0)

    @staticmethod
    def compute_unchecked(dewpoint):
        return VapourPressure(psychro.calc_buck3_simplified(dewpoint.get_si_value()))


class Buck4(Formula2):
    """
    Buck (1981) over ice with simple enhancement factor, dew point 223-274 K
    """

    inputs = (DewPointTemperature, AtmosphericPressure)
    output = VapourPressure

    @staticmethod
    def validate_inputs(dewpoint, pressure):
        dewpoint.check_range_si(223.0, 274.0)
        pressure.check_range_si(100.0, 150000.0)

    @staticmethod
    def compute_unchecked(dewpoint, pressure):
        return VapourPressure(
            psychro.calc_buck4(dewpoint.get_si_value(), pressure.get_si_value())
        )


class Buck4Simplified(Formula1):
    inputs = (DewPointTemperature,)
    output = VapourPressure

    @staticmethod
    def validate_inputs(dewpoint):
        dewpoint.check_range_si(223.0, 274.0)

    @staticmethod
    def compute_unchecked(dewpoint):
        return VapourPressure(psychro.calc_buck4_simplified(dewpoint.get_si_value()))


class Tetens1(Formula1):
    """
    Tetens (1930), dew point 273-353 K.  Fast, less accurate.
    """

    inputs = (DewPointTemperature,)
    output = VapourPressure

    @staticmethod
    def validate_inputs(dewpoint):
        dewpoint.check_range_si(273.0, 353.0)

    @staticmethod
    def compute_unchecked(dewpoint):
        return VapourPressure(psychro.calc_tetens1(dewpoint.get_si_value()))


class Wexler1(Formula1):
    """
    Wexler (1976) over water, dew point 273-374 K
    """

    inputs = (DewPointTemperature,)
    output = VapourPressure

    @staticmethod
    def validate_inputs(dewpoint):
        dewpoint.check_range_si(273.0, 374.0)

    @staticmethod
    def compute_unchecked(dewpoint):
        return VapourPressure(psychro.calc_wexler1(dewpoint.get_si_value()))


class Wexler2(Formula1):
    """
    Wexler (1977) over ice, dew point 173-274 K
    """

    inputs = (DewPointTemperature,)
    output = VapourPressure

    @staticmethod
    def validate_inputs(dewpoint):
        dewpoint.check_range_si(173.0, 274.0)

    @staticmethod
    def compute_unchecked(dewpoint):
        return VapourPressure(psychro.calc_wexler2(dewpoint.get_si_value()))


class Wmo1(Formula2):
    """
    WMO No. 8 over water with pressure enhancement factor, dew point 228-333 K
    """

    inputs = (DewPointTemperature, AtmosphericPressure)
    output = VapourPressure

    @staticmethod
    def validate_inputs(dewpoint, pressure):
        dewpoint.check_range_si(228.0, 333.0)
        pressure.check_range_si(100.0, 150000.0)

    @staticmethod
    def compute_unchecked(dewpoint, pressure):
        return VapourPressure(
            psychro.calc_wmo1(dewpoint.get_si_value(), pressure.get_si_value())
        )


class Wmo2(Formula2):
    """
    WMO No. 8 over ice with pressure enhancement factor, dew point 208-274 K
    """

    inputs = (DewPointTemperature, AtmosphericPressure)
    output = VapourPressure

    @staticmethod
    def validate_inputs(dewpoint, pressure):
        dewpoint.check_range_si(208.0, 274.0)
        pressure.check_range_si(100.0, 150000.0)

    @staticmethod
    def compute_unchecked(dewpoint, pressure):
        return VapourPressure(
            psychro.calc_wmo2(dewpoint.get_si_value(), pressure.get_si_value())
        )
