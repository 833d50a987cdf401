# -*- coding: utf-8 -*-
#
# Copyright 2019 Klimaat

"""
Equivalent potential temperature: conserved in reversible moist adiabatic
processes; its logarithm is proportional to the entropy of moist air.

All formulas assume no liquid or solid water in the parcel.
"""

import numpy as np

from floccus import mixing_ratio
from floccus.constants import C_L, C_P, EPSILON, KAPPA, L_V, P0, R_D, R_V
from floccus.errors import IncorrectArgumentSet
from floccus.formula import Formula4, require_below
from floccus.quantities import (
    AtmosphericPressure,
    DewPointTemperature,
    DryBulbTemperature,
    EquivalentPotentialTemperature,
    MixingRatio,
    PotentialTemperature,
    RelativeHumidity,
    VapourPressure,
)


class Paluch1(Formula4):
    """
    Paluch (1979), as given by Emanuel (1994) Atmospheric Convection.
    The most accurate of the three.
    """

    inputs = (DryBulbTemperature, AtmosphericPressure, MixingRatio, RelativeHumidity)
    output = EquivalentPotentialTemperature

    @staticmethod
    def validate_inputs(temperature, pressure, mixing_ratio, relative_humidity):
        temperature.check_range_si(253.0, 324.0)
        pressure.check_range_si(100.0, 150000.0)
        mixing_ratio.check_range_si(1e-7, 2.0)
        relative_humidity.check_range_si(1e-7, 2.0)

    @staticmethod
    def compute_unchecked(temperature, pressure, mixing_ratio, relative_humidity):
        T = temperature.get_si_value()
        p = pressure.get_si_value()
        r = mixing_ratio.get_si_value()
        rh = relative_humidity.get_si_value()

        c = C_P + r * C_L
        theta_e = (
            T
            * (P0 / p) ** (R_D / c)
            * rh ** (-r * R_V / c)
            * np.exp(L_V * r / (T * c))
        )
        return EquivalentPotentialTemperature(theta_e)


class Bryan1(Formula4):
    """
    Bryan (2008), doi:10.1175/2008MWR2593.1
    """

    inputs = (DryBulbTemperature, MixingRatio, RelativeHumidity, PotentialTemperature)
    output = EquivalentPotentialTemperature

    @staticmethod
    def validate_inputs(temperature, mixing_ratio, relative_humidity, potential_temperature):
        temperature.check_range_si(253.0, 324.0)
        mixing_ratio.check_range_si(1e-7, 2.0)
        relative_humidity.check_range_si(1e-7, 2.0)
        potential_temperature.check_range_si(253.0, 324.0)

    @staticmethod
    def compute_unchecked(temperature, mixing_ratio, relative_humidity, potential_temperature):
        T = temperature.get_si_value()
        r = mixing_ratio.get_si_value()
        rh = relative_humidity.get_si_value()
        theta = potential_temperature.get_si_value()

        theta_e = theta * rh ** (-KAPPA * r / EPSILON) * np.exp(L_V * r / (C_P * T))
        return EquivalentPotentialTemperature(theta_e)


class Bolton1(Formula4):
    """
    Bolton (1980) equations 22, 24 and 39, via the temperature at the
    lifting condensation level.  The mixing ratio implied by pressure and
    vapour pressure must lie within 1e-7 - 2.
    """

    inputs = (AtmosphericPressure, DryBulbTemperature, DewPointTemperature, VapourPressure)
    output = EquivalentPotentialTemperature

    @staticmethod
    def validate_inputs(pressure, temperature, dewpoint, vapour_pressure):
        pressure.check_range_si(100.0, 150000.0)
        temperature.check_range_si(253.0, 324.0)
        dewpoint.check_range_si(253.0, 324.0)
        vapour_pressure.check_range_si(0.0, 50000.0)

        require_below(
            vapour_pressure.get_si_value(),
            pressure.get_si_value(),
            "vapour_pressure must be lower than pressure",
        )

        if np.any(dewpoint.get_si_value() > temperature.get_si_value()):
            raise IncorrectArgumentSet("dewpoint must not be higher than temperature")

        r = mixing_ratio.Definition1.compute_unchecked(pressure, vapour_pressure)
        r = r.get_si_value()
        inside = np.logical_and(r >= 1e-7, r <= 2.0)
        if not np.all(inside):
            raise IncorrectArgumentSet(
                "mixing ratio from pressure and vapour_pressure out of range"
            )

    @staticmethod
    def compute_unchecked(pressure, temperature, dewpoint, vapour_pressure):
        T = temperature.get_si_value()
        Td = dewpoint.get_si_value()
        p = pressure.get_si_value()
        e = vapour_pressure.get_si_value()
        r = mixing_ratio.Definition1.compute_unchecked(pressure, vapour_pressure).get_si_value()

        # Temperature at the lifting condensation level, eq. 15
        T_l = 1.0 / (1.0 / (Td - 56.0) + np.log(T / Td) / 800.0) + 56.0

        theta_dl = T * (P0 / (p - e)) ** KAPPA * (T / T_l) ** (0.28 * r)

        theta_e = theta_dl * np.exp((3036.0 / T_l - 1.78) * r * (1.0 + 0.448 * r))
        return EquivalentPotentialTemperature(theta_e)
