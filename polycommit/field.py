# Copyright 2019 Decentralized Systems Lab
#
# This file (field.py) began as a modification of a file from
# Viff, the copyright notice for which is posted below.
# See https://viff.dk/
#
# Copyright 2007, 2008 VIFF Development Team.
#
# This file is part of VIFF, the Virtual Ideal Functionality Framework.
#
# VIFF is free software: you can redistribute it and/or modify it
# under the terms of the GNU Lesser General Public License (LGPL) as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# VIFF is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY
# or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Lesser General
# Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with VIFF. If not, see <http://www.gnu.org/licenses/>.
from gmpy2 import invert, is_prime, mpz
from random import Random, SystemRandom


class FieldsNotIdentical(Exception):
    pass


class FieldElement(object):
    """Common base class for elements."""

    def __int__(self):
        return self.value

    __index__ = __int__


class GF(object):
    # Class is implemented following the 'multiton' design pattern
    # When the constructor is called with a value that's been used
    # before, it returns the previously created field, such that all
    # fields with the same modulus are the same object
    _field_cache = {}

    def __new__(cls, modulus):
        # Creates a new field if not present in the cache
        return GF._field_cache.setdefault(modulus, super(GF, cls).__new__(cls))

    def __init__(self, modulus):
        if not is_prime(mpz(modulus)):
            raise ValueError(f"{modulus} is not a prime")

        self.modulus = modulus
        self.byte_length = (modulus.bit_length() + 7) // 8

    def __call__(self, value):
        return GFElement(value, self)

    def __reduce__(self):
        return (GF, (self.modulus,))

    def __repr__(self):
        return f"GF({self.modulus})"

    def random(self, seed=None):
        """Uniform element. Without a seed the system CSPRNG is used."""
        rng = SystemRandom() if seed is None else Random(seed)
        return GFElement(rng.randint(0, self.modulus - 1), self)

    def random_nonzero(self, seed=None):
        rng = SystemRandom() if seed is None else Random(seed)
        return GFElement(rng.randint(1, self.modulus - 1), self)

    def from_bytes(self, data):
        return GFElement(int.from_bytes(data, "little"), self)


class GFElement(FieldElement):
    def __init__(self, value, gf):
        self.modulus = gf.modulus
        self.field = gf
        self.value = int(value) % self.modulus

    def __add__(self, other):
        """Addition."""
        if not isinstance(other, (GFElement, int)):
            return NotImplemented
        try:
            # We can do a quick test using 'is' here since
            # there will only be one class representing this
            # field.
            if self.field is not other.field:
                raise FieldsNotIdentical
            return GFElement(self.value + other.value, self.field)
        except AttributeError:
            return GFElement(self.value + other, self.field)

    __radd__ = __add__

    def __sub__(self, other):
        """Subtraction."""
        if not isinstance(other, (GFElement, int)):
            return NotImplemented
        try:
            if self.field is not other.field:
                raise FieldsNotIdentical
            return GFElement(self.value - other.value, self.field)
        except AttributeError:
            return GFElement(self.value - other, self.field)

    def __rsub__(self, other):
        """Subtraction (reflected argument version)."""
        return GFElement(other - self.value, self.field)

    def __mul__(self, other):
        """Multiplication."""
        if not isinstance(other, (GFElement, int)):
            return NotImplemented
        try:
            if self.field is not other.field:
                raise FieldsNotIdentical
            return GFElement(self.value * other.value, self.field)
        except AttributeError:
            return GFElement(self.value * other, self.field)

    __rmul__ = __mul__

    def __pow__(self, exponent):
        """Exponentiation. Negative exponents invert first."""
        exponent = int(exponent)
        if exponent < 0:
            return (~self) ** (-exponent)
        return GFElement(pow(self.value, exponent, self.modulus), self.field)

    def __neg__(self):
        """Negation."""
        return GFElement(-self.value, self.field)

    def __invert__(self):
        """Inversion.

        Note that zero cannot be inverted, trying to do so
        will raise a ZeroDivisionError.
        """
        if self.value == 0:
            raise ZeroDivisionError("Cannot invert zero")
        return GFElement(int(invert(self.value, self.modulus)), self.field)

    def __truediv__(self, other):
        """Division."""
        try:
            if self.field is not other.field:
                raise FieldsNotIdentical
            return self * ~other
        except AttributeError:
            return self * ~GFElement(other, self.field)

    __floordiv__ = __truediv__

    def __rtruediv__(self, other):
        """Division (reflected argument version)."""
        return GFElement(other, self.field) / self

    __rfloordiv__ = __rtruediv__

    def representative(self):
        """Canonical integer representative in ``[0, modulus)``."""
        return self.value

    def to_bytes(self):
        """Fixed-width little-endian encoding of the representative."""
        return self.value.to_bytes(self.field.byte_length, "little")

    def __repr__(self):
        return "{%d}" % self.value

    def __str__(self):
        """Informal string representation.

        This is simply the value enclosed in curly braces.
        """
        return "{%d}" % self.value

    def __eq__(self, other):
        """Equality test."""
        try:
            if self.field is not other.field:
                raise FieldsNotIdentical
            return self.value == other.value
        except AttributeError:
            return self.value == other

    def __ne__(self, other):
        """Inequality test."""
        return not self == other

    def __hash__(self):
        """Hash value."""
        return hash((self.field, self.value))

    def __bool__(self):
        """Truth value testing.

        Returns False if this element is zero, True otherwise.
        """
        return self.value != 0
