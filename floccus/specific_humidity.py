# -*- coding: utf-8 -*-
#
# Copyright 2019 Klimaat

"""
Specific humidity: mass of water vapour per unit mass of moist air (kg/kg)
"""

from floccus.constants import EPSILON
from floccus.formula import Formula1, Formula2, require_below
from floccus.quantities import (
    AtmosphericPressure,
    MixingRatio,
    SpecificHumidity,
    VapourPressure,
)


class Definition1(Formula2):
    """
    From vapour pressure e (Pa) and pressure p (Pa):

        q = ε e / (p - e (1 - ε))
    """

    inputs = (VapourPressure, AtmosphericPressure)
    output = SpecificHumidity

    @staticmethod
    def validate_inputs(vapour_pressure, pressure):
        vapour_pressure.check_range_si(0.0, 50000.0)
        pressure.check_range_si(100.0, 150000.0)
        require_below(
            vapour_pressure.get_si_value(),
            pressure.get_si_value(),
            "vapour_pressure must be lower than pressure",
        )

    @staticmethod
    def compute_unchecked(vapour_pressure, pressure):
        e = vapour_pressure.get_si_value()
        p = pressure.get_si_value()
        return SpecificHumidity(EPSILON * e / (p - e * (1.0 - EPSILON)))


class Definition2(Formula1):
    """
    From mixing ratio w: q = w / (1 + w)
    """

    inputs = (MixingRatio,)
    output = SpecificHumidity

    @staticmethod
    def validate_inputs(mixing_ratio):
        mixing_ratio.check_range_si(0.00001, 2.0)

    @staticmethod
    def compute_unchecked(mixing_ratio):
        w = mixing_ratio.get_si_value()
        return SpecificHumidity(w / (1.0 + w))
