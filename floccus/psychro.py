# -*- coding: utf-8 -*-
#
# Copyright 2019 Klimaat

"""
Saturation vapour pressure kernels shared by the vapour pressure
(dew point in) and saturation vapour pressure (dry bulb in) formulas.

All functions take temperature T (K) and pressure p (Pa) as floats or
numpy arrays and return pressure in Pa.  No validation is done here.
"""

import numpy as np

from floccus.constants import ZERO_CELSIUS


def calc_buck1(T, p):
    """
    Buck (1981) ew1, water, with enhancement factor fw5.
    Accurate between -40°C and 50°C.
    """
    t = T - ZERO_CELSIUS
    p = p / 100.0
    e = 6.1121 * np.exp((18.729 - t / 227.3) * t / (t + 257.87))
    f = 1.0 + 0.00072 + p * (3.2e-6 + 5.9e-10 * t ** 2)
    return e * f * 100.0


def calc_buck2(T, p):
    """
    Buck (1981) ei2, ice, with enhancement factor fi5.
    Accurate between -80°C and 0°C.
    """
    t = T - ZERO_CELSIUS
    p = p / 100.0
    e = 6.1115 * np.exp((23.036 - t / 333.7) * t / (t + 279.82))
    f = 1.0 + 0.00022 + p * (3.83e-6 + 6.4e-10 * t ** 2)
    return e * f * 100.0


def calc_buck3(T, p):
    """
    Buck (1981) ew3, water, with enhancement factor fw3
    """
    return calc_buck3_simplified(T) * (1.0 + 0.0007 + p / 100.0 * 3.46e-6)


def calc_buck3_simplified(T):
    """
    Buck (1981) ew3 without enhancement factor (i.e. the Magnus form)
    """
    t = T - ZERO_CELSIUS
    return 6.1121 * np.exp(17.502 * t / (t + 240.97)) * 100.0


def calc_buck4(T, p):
    """
    Buck (1981) ei3, ice, with enhancement factor fi3
    """
    return calc_buck4_simplified(T) * (1.0 + 0.0003 + p / 100.0 * 4.18e-6)


def calc_buck4_simplified(T):
    t = T - ZERO_CELSIUS
    return 6.1115 * np.exp(22.452 * t / (t + 272.55)) * 100.0


def calc_tetens1(T):
    """
    Tetens (1930) in the form given by Monteith & Unsworth (2008)
    """
    t = T - ZERO_CELSIUS
    return 0.61078 * np.exp(17.27 * t / (t + 237.3)) * 1000.0


# Wexler (1976) over water
WEXLER1 = (
    -2.9912729e3,
    -6.0170128e3,
    1.887643854e1,
    -2.8354721e-2,
    1.78383e-5,
    -8.4150417e-10,
    4.4412543e-13,
)
WEXLER1_LOG = 2.858487


def calc_wexler1(T):
    """
    Wexler (1976) saturation over water, 0°C to 100°C
    """
    ln_p = WEXLER1_LOG * np.log(T)
    for i, g in enumerate(WEXLER1):
        ln_p = ln_p + g * T ** (i - 2.0)
    return np.exp(ln_p)


# Wexler (1977) over ice
WEXLER2 = (
    -5.8653696e3,
    2.2241033e1,
    1.3749042e-2,
    -3.403177e-5,
    2.6967687e-8,
)
WEXLER2_LOG = 0.6918651


def calc_wexler2(T):
    """
    Wexler (1977) saturation over ice, -100°C to 0°C
    """
    ln_p = WEXLER2_LOG * np.log(T)
    for j, k in enumerate(WEXLER2):
        ln_p = ln_p + k * T ** (j - 1.0)
    return np.exp(ln_p)


def calc_p_factor(p):
    """
    Pressure enhancement factor, WMO No. 8 (2008) Annex 4.B
    """
    return 1.0016 + 3.15e-8 * p - 7.4 / p


def calc_wmo1(T, p):
    """
    WMO No. 8 (2008) saturation over water, -45°C to 60°C
    """
    t = T - ZERO_CELSIUS
    return calc_p_factor(p) * 611.2 * np.exp(17.62 * t / (243.12 + t))


def calc_wmo2(T, p):
    """
    WMO No. 8 (2008) saturation over ice, -65°C to 0.01°C
    """
    t = T - ZERO_CELSIUS
    return calc_p_factor(p) * 611.2 * np.exp(22.46 * t / (272.62 + t))
