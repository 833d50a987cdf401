# -*- coding: utf-8 -*-
#
# Copyright 2019 Klimaat

"""
Reusable checks for formulas.

check_formula() exercises any Formula1..Formula4 against the guarantees
every formula in the package makes:

    1. the reference atmosphere gives the reference result
    2. valid inputs give a finite result or IncorrectArgumentSet, and
       garbage inputs never give NaN or infinity
    3. an argument just outside its range raises OutOfRange naming it
    4. scalar, sequence, grid (sequential and threaded) and imperial-unit
       evaluations agree
    5. an invalid call produces exactly one diagnostics ERROR record
"""

import enum
import logging
import itertools
import collections

import numpy as np
from numpy.testing import assert_allclose

from floccus import diagnostics
from floccus.errors import InputError, OutOfRange, IncorrectArgumentSet
from floccus.quantities import (
    AtmosphericPressure,
    DewPointTemperature,
    DryBulbTemperature,
    EquivalentPotentialTemperature,
    MixingRatio,
    PotentialTemperature,
    RelativeHumidity,
    SaturationMixingRatio,
    SaturationVapourPressure,
    SpecificHumidity,
    VapourPressure,
    VapourPressureDeficit,
    VirtualTemperature,
    WetBulbPotentialTemperature,
    WetBulbTemperature,
)


class ReferenceAtmosphere(enum.Enum):
    NORMAL = "normal"
    FREEZING = "freezing"


# Mutually consistent SI values for each atmosphere
REFERENCE_VALUES = {
    ReferenceAtmosphere.NORMAL: {
        DryBulbTemperature: 300.0,
        DewPointTemperature: 290.0,
        AtmosphericPressure: 100000.0,
        VapourPressure: 1919.4253257541593,
        SaturationVapourPressure: 3535.4235919263083,
        RelativeHumidity: 0.5429124052171476,
        MixingRatio: 0.012172079452423202,
        SaturationMixingRatio: 0.022419969290542845,
        VapourPressureDeficit: 1615.998266172149,
        SpecificHumidity: 0.012025701656390478,
        EquivalentPotentialTemperature: 331.33678499482323,
        PotentialTemperature: 301.66581400702955,
        WetBulbPotentialTemperature: 292.0717306393948,
        WetBulbTemperature: 293.42728654340516,
        VirtualTemperature: 302.1926517941886,
    },
    ReferenceAtmosphere.FREEZING: {
        DryBulbTemperature: 260.0,
        DewPointTemperature: 255.0,
        AtmosphericPressure: 100000.0,
        VapourPressure: 123.17937690212507,
        SaturationVapourPressure: 195.84980045970696,
        RelativeHumidity: 0.6289481868911442,
        MixingRatio: 0.0007670962389744638,
        SaturationMixingRatio: 0.0012196493367222787,
        VapourPressureDeficit: 72.67042355758188,
        SpecificHumidity: 0.000766508253376156,
        EquivalentPotentialTemperature: 261.96507880792007,
        PotentialTemperature: 260.0915766593588,
        WetBulbPotentialTemperature: 258.6611332391296,
        WetBulbTemperature: 258.40501060754224,
        VirtualTemperature: 260.12112343315795,
    },
}

# Grid points per axis for the finiteness sweep, by number of arguments
GRID_POINTS = {1: 101, 2: 101, 3: 21, 4: 21}

# Relative distance outside the valid range used to test rejection
BOUNDARY_STEP = 1e-6

# Value no formula accepts
GARBAGE = -9999.0

# Relative tolerance between evaluation paths
PATH_RTOL = 1e-13

# Relative tolerance between SI and imperial inputs
IMPERIAL_RTOL = 1e-12


Argument = collections.namedtuple("Argument", ["quantity", "lo", "hi"])


def reference_value(quantity, atmosphere):
    return quantity(REFERENCE_VALUES[atmosphere][quantity])


class _Capture(logging.Handler):
    def __init__(self):
        super().__init__(logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)


def check_reference(formula, arguments, atmosphere, tolerance):
    args = [reference_value(arg.quantity, atmosphere) for arg in arguments]
    result = formula.compute(*args)
    expected = REFERENCE_VALUES[atmosphere][formula.output]
    assert type(result) is formula.output
    assert abs(result.get_si_value() - expected) <= tolerance, (
        "%s: got %r, expected %r within %g"
        % (formula.__name__, result.get_si_value(), expected, tolerance)
    )
    return result


def check_garbage(formula, arguments, atmosphere):
    """
    Every mix of reference and garbage inputs is finite or an error
    """
    for mask in itertools.product([False, True], repeat=len(arguments)):
        args = [
            arg.quantity(GARBAGE) if bad else reference_value(arg.quantity, atmosphere)
            for arg, bad in zip(arguments, mask)
        ]
        try:
            result = formula.compute(*args)
        except InputError:
            continue
        assert np.isfinite(result.get_si_value()), (formula.__name__, args)


def check_finite(formula, arguments):
    """
    Sweep a dense grid over the valid ranges
    """
    n = GRID_POINTS[len(arguments)]
    axes = [np.linspace(arg.lo, arg.hi, n) for arg in arguments]
    for values in itertools.product(*axes):
        args = [arg.quantity(value) for arg, value in zip(arguments, values)]
        try:
            result = formula.compute(*args)
        except IncorrectArgumentSet:
            continue
        assert np.isfinite(result.get_si_value()), (formula.__name__, args)


def outside(bound, lo, hi, sign):
    """
    Value just beyond bound, scaled to the bound itself so that a lower
    bound of 1e-7 is probed at a small positive value and not below zero
    """
    step = BOUNDARY_STEP * (abs(bound) or (hi - lo))
    return bound + sign * step


def check_boundaries(formula, arguments, atmosphere):
    reference = [reference_value(arg.quantity, atmosphere) for arg in arguments]
    for i, arg in enumerate(arguments):
        expected = OutOfRange(arg.quantity.name)
        for value in (outside(arg.lo, arg.lo, arg.hi, -1), outside(arg.hi, arg.lo, arg.hi, 1)):
            args = list(reference)
            args[i] = arg.quantity(value)
            try:
                formula.compute(*args)
            except OutOfRange as error:
                assert error == expected, (
                    "%s: %s=%r reported %r" % (formula.__name__, arg.quantity.name, value, error)
                )
            else:
                raise AssertionError(
                    "%s accepted %s=%r" % (formula.__name__, arg.quantity.name, value)
                )


def check_paths(formula, arguments, atmosphere, scalar):
    """
    Compare bulk evaluations of 21 points around the reference with the
    scalar result at its centre
    """
    offsets = np.arange(-10, 11) / 1000.0
    columns = [
        reference_value(arg.quantity, atmosphere).get_si_value() + offsets
        for arg in arguments
    ]
    sequences = [[arg.quantity(v) for v in column] for arg, column in zip(arguments, columns)]
    grids = [arg.quantity(column) for arg, column in zip(arguments, columns)]

    expected = scalar.get_si_value()

    many = formula.compute_many(*sequences)
    assert len(many) == len(offsets)
    assert_allclose(many[10].get_si_value(), expected, rtol=PATH_RTOL)

    many = formula.compute_many_parallel(*sequences, workers=3)
    assert len(many) == len(offsets)
    assert_allclose(many[10].get_si_value(), expected, rtol=PATH_RTOL)

    grid = formula.compute_grid(*grids)
    assert grid.shape == offsets.shape
    assert_allclose(grid.get_si_value()[10], expected, rtol=PATH_RTOL)

    parallel = formula.compute_grid_parallel(*grids, workers=3)
    assert parallel.shape == offsets.shape
    assert_allclose(parallel.get_si_value(), grid.get_si_value(), rtol=PATH_RTOL)

    assert_allclose(
        [q.get_si_value() for q in many], grid.get_si_value(), rtol=PATH_RTOL
    )


def check_imperial(formula, arguments, atmosphere, scalar):
    args = [reference_value(arg.quantity, atmosphere).to_imperial() for arg in arguments]
    result = formula.compute(*args)
    assert_allclose(result.get_si_value(), scalar.get_si_value(), rtol=IMPERIAL_RTOL)


def check_diagnostics(formula, arguments):
    """
    One ERROR record per rejected call
    """
    logger = logging.getLogger(diagnostics.__name__)
    handler = _Capture()
    was_enabled = diagnostics.is_enabled()

    diagnostics.enable()
    logger.addHandler(handler)
    try:
        try:
            formula.compute(*[arg.quantity(GARBAGE) for arg in arguments])
        except InputError:
            pass
        else:
            raise AssertionError("%s accepted garbage inputs" % formula.__name__)
    finally:
        logger.removeHandler(handler)
        if not was_enabled:
            diagnostics.disable()

    assert len(handler.records) == 1, handler.records
    record = handler.records[0]
    assert record.levelno == logging.ERROR
    message = record.getMessage()
    for word in ("Formula", "calculating", "from", "inputs", "returned error:"):
        assert word in message, message


def check_formula(formula, arguments, atmosphere=ReferenceAtmosphere.NORMAL, tolerance=1e-12):
    """
    Run every check on formula.

    arguments: one Argument(quantity, lo, hi) per input, in order
    tolerance: absolute SI tolerance against the reference atmosphere
    """
    assert tuple(arg.quantity for arg in arguments) == formula.inputs, (
        "%s takes %r" % (formula.__name__, formula.inputs)
    )

    scalar = check_reference(formula, arguments, atmosphere, tolerance)
    check_garbage(formula, arguments, atmosphere)
    check_finite(formula, arguments)
    check_boundaries(formula, arguments, atmosphere)
    check_paths(formula, arguments, atmosphere, scalar)
    check_imperial(formula, arguments, atmosphere, scalar)
    check_diagnostics(formula, arguments)
    return scalar
