# -*- coding: utf-8 -*-
#
# Copyright 2019 Klimaat

"""
Meteorological thermodynamic formulas with unit-checked, validated and
bulk (sequence, grid, parallel) evaluation.
"""

__version__ = "0.3.7"

from floccus.errors import InputError, OutOfRange, IncorrectArgumentSet
from floccus.formula import Formula1, Formula2, Formula3, Formula4

__all__ = [
    "InputError",
    "OutOfRange",
    "IncorrectArgumentSet",
    "Formula1",
    "Formula2",
    "Formula3",
    "Formula4",
]
