# -*- coding: utf-8 -*-
#
# Copyright 2019 Klimaat

"""
Shared unit registry.  All quantities are stored in SI; pint is only
consulted when a value arrives in, or is requested in, another unit.
"""

import numpy as np
import pint

ureg = pint.UnitRegistry()

# Older registries lack one or both of these
if "percent" not in ureg:
    ureg.define("percent = 0.01 = %")
if "permille" not in ureg:
    ureg.define("permille = 0.001 = ‰")

# Unit families: (SI unit, imperial unit, accepted units)
TEMPERATURE = ("kelvin", "degF", ("kelvin", "K", "degC", "degF"))
PRESSURE = ("pascal", "psi", ("pascal", "Pa", "hPa", "kPa", "psi"))
RATIO = ("dimensionless", "permille", ("dimensionless", "percent", "permille"))


def check_unit(unit, family):
    """
    Raise pint's DimensionalityError for a unit of another dimension and
    ValueError for a unit of the right dimension the family does not accept
    """
    if unit in family[2]:
        return
    si = family[0]
    if ureg.Unit(unit).dimensionality != ureg.Unit(si).dimensionality:
        raise pint.DimensionalityError(unit, si)
    raise ValueError("unit %s not accepted, use one of %s" % (unit, ", ".join(family[2])))


def convert(value, from_unit, to_unit):
    """
    Convert value (float or array) from from_unit to to_unit.
    Offset units (°C, °F) are handled by pint.
    """
    if from_unit == to_unit:
        return value
    q = ureg.Quantity(np.asarray(value, dtype=float), from_unit)
    magnitude = q.to(to_unit).magnitude
    if np.ndim(magnitude) == 0:
        return float(magnitude)
    return magnitude


def main():
    for value, unit, family in [
        (300.0, "kelvin", TEMPERATURE),
        (101325.0, "pascal", PRESSURE),
        (0.012, "dimensionless", RATIO),
    ]:
        for other in family[2]:
            print("%12g %-14s = %12g %s" % (value, unit, convert(value, unit, other), other))


if __name__ == "__main__":
    main()
