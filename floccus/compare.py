# -*- coding: utf-8 -*-
#
# Copyright 2019 Klimaat

"""
Compare the saturation vapour pressure formulas against Wexler over their
common range.  Run with

    python -m floccus.compare
"""

import numpy as np

from floccus import saturation_vapour_pressure as svp
from floccus.quantities import AtmosphericPressure, DryBulbTemperature

# Formula, lowest and highest valid temperature (K)
WATER = [
    (svp.Buck1, 273.0, 324.0),
    (svp.Buck3, 273.0, 324.0),
    (svp.Buck3Simplified, 273.0, 324.0),
    (svp.Tetens1, 273.0, 324.0),
    (svp.Wmo1, 273.0, 324.0),
]
ICE = [
    (svp.Buck2, 193.0, 273.0),
    (svp.Buck4, 223.0, 273.0),
    (svp.Buck4Simplified, 223.0, 273.0),
    (svp.Wmo2, 208.0, 273.0),
]


def calc_errors(reference, formulas, p=101325.0, n=101):
    """
    Relative error (%) of each formula against reference, as a list of
    (name, T, error) tuples
    """
    errors = []
    for formula, lo, hi in formulas:
        T = DryBulbTemperature(np.linspace(lo, hi, n))
        args = [T]
        if len(formula.inputs) == 2:
            args.append(AtmosphericPressure(np.full(n, p)))
        es = formula.compute_grid(*args).get_si_value()
        es_ref = reference.compute_grid(T).get_si_value()
        errors.append((formula.__name__, T.get_si_value(), 100 * (es - es_ref) / es_ref))
    return errors


def test(reference, formulas, title):

    errors = calc_errors(reference, formulas)

    for name, T, error in errors:
        print("%-16s max |error| %.3f%%" % (name, np.max(np.abs(error))))

    import matplotlib.pyplot as plt

    plt.figure()
    for name, T, error in errors:
        plt.plot(T - 273.15, error, label=name)
    plt.xlabel("Temperature (°C)")
    plt.ylabel("Error vs %s (%%)" % reference.__name__)
    plt.title(title)
    plt.legend(loc=0)


def main():
    test(svp.Wexler1, WATER, "Over water")
    test(svp.Wexler2, ICE, "Over ice")

    import matplotlib.pyplot as plt

    plt.show()


if __name__ == "__main__":
    main()
