# -*- coding: utf-8 -*-
#
# Copyright 2019 Klimaat

"""
Wet bulb temperature
"""

import numpy as np

from floccus.constants import ZERO_CELSIUS
from floccus.formula import Formula2
from floccus.quantities import DryBulbTemperature, RelativeHumidity, WetBulbTemperature


class Stull1(Formula2):
    """
    Stull (2011), doi:10.1175/JAMC-D-11-0143.1, an empirical fit at
    standard sea level pressure.  Temperature 253-324 K, relative humidity
    5% to 99%.
    """

    inputs = (DryBulbTemperature, RelativeHumidity)
    output = WetBulbTemperature

    @staticmethod
    def validate_inputs(temperature, relative_humidity):
        temperature.check_range_si(253.0, 324.0)
        relative_humidity.check_range_si(0.05, 0.99)

    @staticmethod
    def compute_unchecked(temperature, relative_humidity):
        # Fit uses °C and %
        t = temperature.get_si_value() - ZERO_CELSIUS
        rh = relative_humidity.get_si_value() * 100.0

        tw = (
            t * np.arctan(0.151977 * np.sqrt(rh + 8.313659))
            + np.arctan(t + rh)
            - np.arctan(rh - 1.676331)
            + 0.00391838 * rh ** 1.5 * np.arctan(0.023101 * rh)
            - 4.686035
        )
        return WetBulbTemperature(tw + ZERO_CELSIUS)
