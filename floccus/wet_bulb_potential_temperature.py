# -*- coding: utf-8 -*-
#
# Copyright 2019 Klimaat

"""
Wet bulb potential temperature
"""

from floccus.constants import C_P, R_D, ZERO_CELSIUS
from floccus.formula import Formula1
from floccus.quantities import EquivalentPotentialTemperature, WetBulbPotentialTemperature


class DaviesJones1(Formula1):
    """
    Davies-Jones (2008), doi:10.1175/2007MWR2224.1, from the equivalent
    potential temperature (257-377 K)
    """

    inputs = (EquivalentPotentialTemperature,)
    output = WetBulbPotentialTemperature

    @staticmethod
    def validate_inputs(equivalent_potential_temperature):
        equivalent_potential_temperature.check_range_si(257.0, 377.0)

    @staticmethod
    def compute_unchecked(equivalent_potential_temperature):
        theta_e = equivalent_potential_temperature.get_si_value()
        lambda_ = C_P / R_D
        theta_w = 45.114 - 51.489 * (ZERO_CELSIUS / theta_e) ** lambda_
        return WetBulbPotentialTemperature(theta_w + ZERO_CELSIUS)
