# -*- coding: utf-8 -*-
#
# Copyright 2019 Klimaat

"""
Formula base classes.

A concrete formula subclasses FormulaN, declares its input and output
quantity classes and supplies two static methods:

    validate_inputs(*args)      raise OutOfRange/IncorrectArgumentSet
    compute_unchecked(*args)    numpy kernel, finite wherever validation passes

Everything else (scalar compute, sequence and grid evaluation, sequential
or threaded) is provided here and in floccus.bulk.
"""

import numpy as np

from floccus import bulk
from floccus import diagnostics
from floccus.errors import InputError, IncorrectArgumentSet


class Formula(object):
    # Number of inputs, fixed by Formula1..Formula4
    arity = None

    # Input quantity classes, in argument order
    inputs = ()

    # Output quantity class
    output = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.arity is not None and cls.inputs and len(cls.inputs) != cls.arity:
            raise TypeError(
                "%s declares %d inputs but is a %d-argument formula"
                % (cls.__name__, len(cls.inputs), cls.arity)
            )

    def __init__(self):
        raise TypeError("Formulas are used through their class methods, e.g. %s.compute()"
                        % type(self).__name__)

    @staticmethod
    def validate_inputs(*args):
        raise NotImplementedError

    @staticmethod
    def compute_unchecked(*args):
        raise NotImplementedError

    @classmethod
    def check_arguments(cls, args):
        """
        Raise TypeError unless args match the declared input quantities
        """
        if len(args) != len(cls.inputs):
            raise TypeError(
                "%s takes %d arguments (%d given)"
                % (cls.__name__, len(cls.inputs), len(args))
            )
        for i, (arg, kind) in enumerate(zip(args, cls.inputs)):
            if type(arg) is not kind:
                raise TypeError(
                    "Argument %d of %s must be %s, not %s"
                    % (i + 1, cls.__name__, kind.__name__, type(arg).__name__)
                )

    @classmethod
    def compute(cls, *args):
        """
        Validate args and return the output quantity.
        Array-valued quantities are computed element-wise.
        """
        cls.check_arguments(args)
        try:
            cls.validate_inputs(*args)
        except InputError as error:
            diagnostics.notify(cls, error, args)
            raise
        return cls.compute_unchecked(*args)

    @classmethod
    def compute_many(cls, *sequences):
        return bulk.compute_many(cls, *sequences)

    @classmethod
    def compute_many_parallel(cls, *sequences, workers=None):
        return bulk.compute_many_parallel(cls, *sequences, workers=workers)

    @classmethod
    def compute_grid(cls, *grids):
        return bulk.compute_grid(cls, *grids)

    @classmethod
    def compute_grid_parallel(cls, *grids, workers=None):
        return bulk.compute_grid_parallel(cls, *grids, workers=workers)


class Formula1(Formula):
    arity = 1


class Formula2(Formula):
    arity = 2


class Formula3(Formula):
    arity = 3


class Formula4(Formula):
    arity = 4


def approx_eq(a, b, ulps=2):
    """
    Element-wise equality within ulps units in the last place
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    margin = ulps * np.spacing(np.maximum(np.abs(a), np.abs(b)))
    return np.abs(a - b) <= np.maximum(margin, np.finfo(float).eps)


def require_below(lower, upper, message):
    """
    Raise IncorrectArgumentSet unless lower < upper everywhere,
    treating values within a couple of ulps as equal
    """
    if np.any(lower >= upper) or np.any(approx_eq(lower, upper)):
        raise IncorrectArgumentSet(message)
