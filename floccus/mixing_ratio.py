# -*- coding: utf-8 -*-
#
# Copyright 2019 Klimaat

"""
Mixing ratio: mass of water vapour per unit mass of dry air (kg/kg)
"""

from floccus import vapour_pressure
from floccus.constants import EPSILON
from floccus.formula import Formula2, require_below
from floccus.quantities import (
    AtmosphericPressure,
    DewPointTemperature,
    MixingRatio,
    VapourPressure,
)


class Definition1(Formula2):
    """
    From pressure p (Pa) and vapour pressure e (Pa):

        r = ε e / (p - e)

    Vapour pressure must stay below pressure.
    """

    inputs = (AtmosphericPressure, VapourPressure)
    output = MixingRatio

    @staticmethod
    def validate_inputs(pressure, vapour_pressure):
        pressure.check_range_si(100.0, 150000.0)
        vapour_pressure.check_range_si(0.0, 50000.0)
        require_below(
            vapour_pressure.get_si_value(),
            pressure.get_si_value(),
            "vapour_pressure must be lower than pressure",
        )

    @staticmethod
    def compute_unchecked(pressure, vapour_pressure):
        p = pressure.get_si_value()
        e = vapour_pressure.get_si_value()
        return MixingRatio(EPSILON * e / (p - e))


class Performance1(Formula2):
    """
    Fast: vapour pressure from the dew point with Tetens (1930)
    """

    inputs = (DewPointTemperature, AtmosphericPressure)
    output = MixingRatio

    @staticmethod
    def validate_inputs(dewpoint, pressure):
        dewpoint.check_range_si(273.0, 353.0)
        pressure.check_range_si(100.0, 150000.0)
        require_below(
            vapour_pressure.Tetens1.compute_unchecked(dewpoint).get_si_value(),
            pressure.get_si_value(),
            "vapour pressure at dewpoint must be lower than pressure",
        )

    @staticmethod
    def compute_unchecked(dewpoint, pressure):
        e = vapour_pressure.Tetens1.compute_unchecked(dewpoint)
        return Definition1.compute_unchecked(pressure, e)


class Accuracy1(Formula2):
    """
    Accurate: vapour pressure from the dew point with Buck (1981)
    """

    inputs = (DewPointTemperature, AtmosphericPressure)
    output = MixingRatio

    @staticmethod
    def validate_inputs(dewpoint, pressure):
        dewpoint.check_range_si(232.0, 324.0)
        pressure.check_range_si(100.0, 150000.0)
        require_below(
            vapour_pressure.Buck1.compute_unchecked(dewpoint, pressure).get_si_value(),
            pressure.get_si_value(),
            "vapour pressure at dewpoint must be lower than pressure",
        )

    @staticmethod
    def compute_unchecked(dewpoint, pressure):
        e = vapour_pressure.Buck1.compute_unchecked(dewpoint, pressure)
        return Definition1.compute_unchecked(pressure, e)
