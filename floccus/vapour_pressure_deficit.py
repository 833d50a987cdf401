# -*- coding: utf-8 -*-
#
# Copyright 2019 Klimaat

"""
Vapour pressure deficit: how much more water vapour the air could hold at
saturation, expressed as a pressure (Pa)
"""

from floccus import saturation_vapour_pressure, vapour_pressure
from floccus.formula import Formula2, Formula3
from floccus.quantities import (
    AtmosphericPressure,
    DewPointTemperature,
    DryBulbTemperature,
    RelativeHumidity,
    SaturationVapourPressure,
    VapourPressure,
    VapourPressureDeficit,
)


class General1(Formula2):
    """
    es - e
    """

    inputs = (VapourPressure, SaturationVapourPressure)
    output = VapourPressureDeficit

    @staticmethod
    def validate_inputs(vapour_pressure, saturation_vapour_pressure):
        vapour_pressure.check_range_si(0.0, 50000.0)
        saturation_vapour_pressure.check_range_si(0.0, 50000.0)

    @staticmethod
    def compute_unchecked(vapour_pressure, saturation_vapour_pressure):
        return VapourPressureDeficit(
            saturation_vapour_pressure.get_si_value() - vapour_pressure.get_si_value()
        )


class General2(Formula3):
    """
    Both pressures from Buck (1981) ew3 at the temperature and dew point
    """

    inputs = (DryBulbTemperature, DewPointTemperature, AtmosphericPressure)
    output = VapourPressureDeficit

    @staticmethod
    def validate_inputs(temperature, dewpoint, pressure):
        temperature.check_range_si(253.0, 324.0)
        dewpoint.check_range_si(253.0, 324.0)
        pressure.check_range_si(100.0, 150000.0)

    @staticmethod
    def compute_unchecked(temperature, dewpoint, pressure):
        e = vapour_pressure.Buck3.compute_unchecked(dewpoint, pressure)
        es = saturation_vapour_pressure.Buck3.compute_unchecked(temperature, pressure)
        return General1.compute_unchecked(e, es)


class General3(Formula3):
    """
    es (1 - RH), es from Buck (1981) ew3
    """

    inputs = (DryBulbTemperature, RelativeHumidity, AtmosphericPressure)
    output = VapourPressureDeficit

    @staticmethod
    def validate_inputs(temperature, relative_humidity, pressure):
        temperature.check_range_si(253.0, 324.0)
        relative_humidity.check_range_si(0.0, 2.0)
        pressure.check_range_si(100.0, 150000.0)

    @staticmethod
    def compute_unchecked(temperature, relative_humidity, pressure):
        es = saturation_vapour_pressure.Buck3.compute_unchecked(temperature, pressure)
        rh = relative_humidity.get_si_value()
        return VapourPressureDeficit(es.get_si_value() * (1.0 - rh))
