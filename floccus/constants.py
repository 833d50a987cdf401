# -*- coding: utf-8 -*-
#
# Copyright 2019 Klimaat

"""
Physical constants (SI) shared by all formulas
"""

# Universal gas constant (J/mol/K)
R = 8.31446261815324

# Dry air molar mass (kg/mol)
M_D = 0.0289644

# Water vapour molar mass (kg/mol)
M_V = 0.0180152833

# Dry air specific heat at constant pressure and volume (J/kg/K)
C_P = 1004.709
C_V = 717.6493

# Water vapour specific heat at constant pressure and volume (J/kg/K)
C_PV = 1846.1
C_VV = 1384.575

# Liquid water and ice specific heat (J/kg/K)
C_L = 4218.0
C_S = 2106.0

# Latent heat of vapourisation at 0°C (J/kg)
L_V = 2500800.0

# Standard gravity (m/s2)
G = 9.80665

# Freezing point of water (K)
ZERO_CELSIUS = 273.15

# Reference pressure for potential temperatures (Pa)
P0 = 100000.0

# Ratio of molar masses
EPSILON = M_V / M_D

# Dry air gas constant (J/kg/K)
R_D = R / M_D

# Water vapour gas constant (J/kg/K)
R_V = R / M_V

# Poisson constant
KAPPA = R_D / C_P
