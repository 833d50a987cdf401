# -*- coding: utf-8 -*-
#
# Copyright 2019 Klimaat

"""
Potential temperature: temperature of a parcel brought adiabatically to
the reference pressure P0 (100 kPa)
"""

from floccus.constants import KAPPA, P0
from floccus.formula import Formula3, require_below
from floccus.quantities import (
    AtmosphericPressure,
    DryBulbTemperature,
    PotentialTemperature,
    VapourPressure,
)


class Definition1(Formula3):
    """
    Dry air potential temperature of moist air, using the partial pressure
    of dry air p - e:

        θ = T (P0 / (p - e)) ^ κ
    """

    inputs = (DryBulbTemperature, AtmosphericPressure, VapourPressure)
    output = PotentialTemperature

    @staticmethod
    def validate_inputs(temperature, pressure, vapour_pressure):
        temperature.check_range_si(253.0, 324.0)
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
        return PotentialTemperature(T * (P0 / (p - e)) ** KAPPA)
