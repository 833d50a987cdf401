# -*- coding: utf-8 -*-
#
# Copyright 2019 Klimaat

"""
Saturation mixing ratio: mixing ratio of air saturated at its temperature
"""

from floccus.constants import EPSILON
from floccus.formula import Formula2, require_below
from floccus.quantities import (
    AtmosphericPressure,
    MixingRatio,
    RelativeHumidity,
    SaturationMixingRatio,
    SaturationVapourPressure,
)


class Definition1(Formula2):
    """
    ε es / (p - es), with es below p
    """

    inputs = (AtmosphericPressure, SaturationVapourPressure)
    output = SaturationMixingRatio

    @staticmethod
    def validate_inputs(pressure, saturation_vapour_pressure):
        pressure.check_range_si(100.0, 150000.0)
        saturation_vapour_pressure.check_range_si(0.0, 50000.0)
        require_below(
            saturation_vapour_pressure.get_si_value(),
            pressure.get_si_value(),
            "saturation_vapour_pressure must be lower than pressure",
        )

    @staticmethod
    def compute_unchecked(pressure, saturation_vapour_pressure):
        p = pressure.get_si_value()
        es = saturation_vapour_pressure.get_si_value()
        return SaturationMixingRatio(EPSILON * es / (p - es))


class Definition2(Formula2):
    inputs = (MixingRatio, RelativeHumidity)
    output = SaturationMixingRatio

    @staticmethod
    def validate_inputs(mixing_ratio, relative_humidity):
        mixing_ratio.check_range_si(1e-10, 1.0)
        relative_humidity.check_range_si(1e-10, 2.0)

    @staticmethod
    def compute_unchecked(mixing_ratio, relative_humidity):
        return SaturationMixingRatio(
            mixing_ratio.get_si_value() / relative_humidity.get_si_value()
        )
