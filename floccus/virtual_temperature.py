# -*- coding: utf-8 -*-
#
# Copyright 2019 Klimaat

"""
Virtual temperature: temperature dry air would need to have the same
density as the moist air at the same pressure
"""

from floccus.constants import EPSILON
from floccus.formula import Formula2, Formula3, require_below
from floccus.quantities import (
    AtmosphericPressure,
    DryBulbTemperature,
    MixingRatio,
    SpecificHumidity,
    VapourPressure,
    VirtualTemperature,
)


class Definition1(Formula2):
    """
    T (r + ε) / (ε (1 + r))
    """

    inputs = (DryBulbTemperature, MixingRatio)
    output = VirtualTemperature

    @staticmethod
    def validate_inputs(temperature, mixing_ratio):
        temperature.check_range_si(173.0, 354.0)
        mixing_ratio.check_range_si(1e-10, 0.5)

    @staticmethod
    def compute_unchecked(temperature, mixing_ratio):
        T = temperature.get_si_value()
        r = mixing_ratio.get_si_value()
        return VirtualTemperature(T * (r + EPSILON) / (EPSILON * (1.0 + r)))


class Definition2(Formula3):
    """
    T / (1 - e/p (1 - ε)), vapour pressure e below pressure p
    """

    inputs = (DryBulbTemperature, AtmosphericPressure, VapourPressure)
    output = VirtualTemperature

    @staticmethod
    def validate_inputs(temperature, pressure, vapour_pressure):
        temperature.check_range_si(173.0, 354.0)
        pressure.check_range_si(100.0, 150000.0)
        vapour_pressure.check_range_si(0.0, 10000.0)
        require_below(
            vapour_pressure.get_si_value(),
            pressure.get_si_value(),
            "vapour_pressure must be lower than pressure",
        )

    @staticmethod
    def compute_unchecked(temperature, pressure, vapour_pressure):
        T = temperature.get_si_value()
        p = pressure.get_si_value()
        e = vapour_pressure.get_si_value()
        return VirtualTemperature(T / (1.0 - (e / p) * (1.0 - EPSILON)))


class Definition3(Formula2):
    """
    T (1 + q (1/ε - 1))
    """

    inputs = (DryBulbTemperature, SpecificHumidity)
    output = VirtualTemperature

    @staticmethod
    def validate_inputs(temperature, specific_humidity):
        temperature.check_range_si(173.0, 354.0)
        specific_humidity.check_range_si(1e-9, 2.0)

    @staticmethod
    def compute_unchecked(temperature, specific_humidity):
        T = temperature.get_si_value()
        q = specific_humidity.get_si_value()
        return VirtualTemperature(T * (1.0 + q * (1.0 / EPSILON - 1.0)))
