# -*- coding: utf-8 -*-
#
# Copyright 2019 Klimaat

"""
Typed physical quantities.

Every quantity wraps a single SI value (float) or a read-only float64 array
of SI values.  Distinct quantities never compare equal even when they share
a unit family, so a dew point cannot be passed where a dry bulb temperature
is expected.
"""

import operator

import numpy as np

from floccus import units
from floccus.errors import OutOfRange


def _freeze(value):
    if np.ndim(value) == 0:
        return float(value)
    value = np.array(value, dtype=float)
    value.flags.writeable = False
    return value


class Quantity(object):
    """
    Base class for all quantities.

    Subclasses set:
        name: argument token reported in OutOfRange
        family: (SI unit, imperial unit, accepted units) from floccus.units
        imperial_unit: unit used by to_imperial()
        default_value: SI value used when testing formulas
    """

    __slots__ = ("_value",)

    name = None
    family = None
    imperial_unit = None
    default_value = None

    def __init__(self, value, unit=None):
        if unit is not None:
            units.check_unit(unit, self.family)
            value = units.convert(value, unit, self.family[0])
        object.__setattr__(self, "_value", _freeze(value))

    def __setattr__(self, attr, value):
        raise AttributeError("%s is immutable" % type(self).__name__)

    def __delattr__(self, attr):
        raise AttributeError("%s is immutable" % type(self).__name__)

    def __reduce__(self):
        return (type(self), (self._value,))

    @classmethod
    def from_si(cls, value):
        return cls(value)

    @classmethod
    def default(cls):
        return cls(cls.default_value)

    @classmethod
    def si_unit(cls):
        return cls.family[0]

    def get_si_value(self):
        return self._value

    def get(self, unit):
        """
        Return value expressed in unit, one the family accepts
        """
        units.check_unit(unit, self.family)
        return units.convert(self._value, self.family[0], unit)

    def to_imperial(self):
        """
        Same quantity, constructed again from its imperial representation
        """
        return type(self)(self.get(self.imperial_unit), self.imperial_unit)

    @property
    def shape(self):
        return np.shape(self._value)

    @property
    def is_array(self):
        return np.ndim(self._value) > 0

    def check_range_si(self, lo, hi):
        """
        Raise OutOfRange unless every value lies within [lo, hi].
        NaN is never within range.
        """
        with np.errstate(invalid="ignore"):
            inside = np.logical_and(self._value >= lo, self._value <= hi)
        if not np.all(inside):
            raise OutOfRange(self.name)

    def __getitem__(self, index):
        if not self.is_array:
            raise TypeError("scalar %s is not subscriptable" % type(self).__name__)
        return type(self)(self._value[index])

    def __len__(self):
        if not self.is_array:
            raise TypeError("scalar %s has no len()" % type(self).__name__)
        return len(self._value)

    def __float__(self):
        return float(self._value)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        if self.is_array or other.is_array:
            return bool(np.array_equal(self._value, other._value))
        return self._value == other._value

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        if self.is_array:
            raise TypeError("unhashable type: array-valued %s" % type(self).__name__)
        return hash((type(self), self._value))

    def _compare(self, other, op):
        if type(other) is not type(self):
            return NotImplemented
        return op(self._value, other._value)

    def __lt__(self, other):
        return self._compare(other, operator.lt)

    def __le__(self, other):
        return self._compare(other, operator.le)

    def __gt__(self, other):
        return self._compare(other, operator.gt)

    def __ge__(self, other):
        return self._compare(other, operator.ge)

    def __repr__(self):
        return "%s(%r %s)" % (type(self).__name__, self._value, self.family[0])


# Temperatures (K)


class DryBulbTemperature(Quantity):
    __slots__ = ()
    name = "temperature"
    family = units.TEMPERATURE
    imperial_unit = "degF"
    default_value = 300.0


class DewPointTemperature(Quantity):
    __slots__ = ()
    name = "dewpoint"
    family = units.TEMPERATURE
    imperial_unit = "degF"
    default_value = 290.0


class WetBulbTemperature(Quantity):
    __slots__ = ()
    name = "wet_bulb_temperature"
    family = units.TEMPERATURE
    imperial_unit = "degF"
    default_value = 293.0


class VirtualTemperature(Quantity):
    __slots__ = ()
    name = "virtual_temperature"
    family = units.TEMPERATURE
    imperial_unit = "degF"
    default_value = 302.0


class PotentialTemperature(Quantity):
    __slots__ = ()
    name = "potential_temperature"
    family = units.TEMPERATURE
    imperial_unit = "degF"
    default_value = 301.0


class EquivalentPotentialTemperature(Quantity):
    __slots__ = ()
    name = "equivalent_potential_temperature"
    family = units.TEMPERATURE
    imperial_unit = "degF"
    default_value = 300.0


class WetBulbPotentialTemperature(Quantity):
    __slots__ = ()
    name = "wet_bulb_potential_temperature"
    family = units.TEMPERATURE
    imperial_unit = "degF"
    default_value = 292.0


# Pressures (Pa)


class AtmosphericPressure(Quantity):
    __slots__ = ()
    name = "pressure"
    family = units.PRESSURE
    imperial_unit = "psi"
    default_value = 101325.0


class VapourPressure(Quantity):
    __slots__ = ()
    name = "vapour_pressure"
    family = units.PRESSURE
    imperial_unit = "psi"
    default_value = 1920.0


class SaturationVapourPressure(Quantity):
    __slots__ = ()
    name = "saturation_vapour_pressure"
    family = units.PRESSURE
    imperial_unit = "psi"
    default_value = 3535.0


class VapourPressureDeficit(Quantity):
    __slots__ = ()
    name = "vapour_pressure_deficit"
    family = units.PRESSURE
    imperial_unit = "psi"
    default_value = 1616.0


# Ratios (-)


class MixingRatio(Quantity):
    __slots__ = ()
    name = "mixing_ratio"
    family = units.RATIO
    imperial_unit = "permille"
    default_value = 0.012


class SaturationMixingRatio(Quantity):
    __slots__ = ()
    name = "saturation_mixing_ratio"
    family = units.RATIO
    imperial_unit = "permille"
    default_value = 0.022


class RelativeHumidity(Quantity):
    __slots__ = ()
    name = "relative_humidity"
    family = units.RATIO
    imperial_unit = "percent"
    default_value = 0.5


class SpecificHumidity(Quantity):
    __slots__ = ()
    name = "specific_humidity"
    family = units.RATIO
    imperial_unit = "permille"
    default_value = 0.022


ALL_QUANTITIES = (
    DryBulbTemperature,
    DewPointTemperature,
    WetBulbTemperature,
    VirtualTemperature,
    PotentialTemperature,
    EquivalentPotentialTemperature,
    WetBulbPotentialTemperature,
    AtmosphericPressure,
    VapourPressure,
    SaturationVapourPressure,
    VapourPressureDeficit,
    MixingRatio,
    SaturationMixingRatio,
    RelativeHumidity,
    SpecificHumidity,
)
