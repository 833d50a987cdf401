# -*- coding: utf-8 -*-
#
# Copyright 2019 Klimaat

"""
Validation errors raised by formulas.

OutOfRange names the single argument outside a formula's domain;
IncorrectArgumentSet flags individually valid arguments whose combination
the formula cannot handle (e.g. vapour pressure above total pressure).
"""


class InputError(ValueError):
    """
    Base class of all formula validation errors.
    """

    def __eq__(self, other):
        return type(self) is type(other) and self.args == other.args

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self), self.args))


class OutOfRange(InputError):
    def __init__(self, name):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return "Value of %s out of a reasonable range." % self.name


class IncorrectArgumentSet(InputError):
    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return "Incorrect set of arguments: %s" % self.message
