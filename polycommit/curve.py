import random

from py_ecc.fields import optimized_bls12_381_FQ as Fq
from py_ecc.optimized_bls12_381 import (
    G1 as BLS_G1,
    Z1,
    add,
    b,
    curve_order,
    eq,
    field_modulus,
    is_on_curve,
    multiply,
    neg,
    normalize,
)

from .exceptions import DeserializationError
from .field import GF, GFElement

# Order of BLS group
bls12_381_r = curve_order
# Characteristic of the base field the coordinates live in
bls12_381_q = field_modulus

FQ_BYTES = 48
G1_RECORD_BYTES = 3 * FQ_BYTES


def scalar_field():
    return GF(bls12_381_r)


class G1:
    """Point of the BLS12-381 G1 group in homogeneous projective coordinates.

    The group is written multiplicatively: ``a * b`` composes two points,
    ``a / b`` composes with the inverse of ``b`` and ``a ** s`` is the scalar
    multiplication of ``a`` by ``s``.
    """

    def __init__(self, other=None):
        if other is None:
            self.point = Z1
        elif type(other) is tuple:
            assert len(other) == 3
            self.point = tuple(c if type(c) is Fq else Fq(c) for c in other)
        else:
            raise TypeError(str(type(other)))

    def __str__(self):
        if self.is_identity():
            return "(inf)"
        x, y = normalize(self.point)
        return "(" + str(x.n) + ", " + str(y.n) + ")"

    def __repr__(self):
        return str(self)

    def __mul__(self, other):
        if type(other) is G1:
            return G1(add(self.point, other.point))
        raise TypeError(
            "Invalid multiplication param. Expected G1. Got " + str(type(other))
        )

    def __imul__(self, other):
        if type(other) is G1:
            self.point = add(self.point, other.point)
            return self
        raise TypeError(
            "Invalid multiplication param. Expected G1. Got " + str(type(other))
        )

    def __truediv__(self, other):
        if type(other) is G1:
            return G1(add(self.point, neg(other.point)))
        raise TypeError("Invalid division param. Expected G1. Got " + str(type(other)))

    def __pow__(self, other):
        if type(other) is GFElement:
            exponent = other.value
        else:
            try:
                exponent = int(other)
            except (TypeError, ValueError):
                raise TypeError(
                    "Invalid exponentiation param. Expected GFElement or int. Got "
                    + str(type(other))
                )
        exponent %= bls12_381_r
        if exponent == 0:
            return G1.one()
        return G1(multiply(self.point, exponent))

    def __eq__(self, other):
        if type(other) is not G1:
            return False
        return eq(self.point, other.point)

    def __hash__(self):
        if self.is_identity():
            return hash(None)
        return hash(tuple(c.n for c in normalize(self.point)))

    def __getstate__(self):
        point = Z1 if self.is_identity() else self.point
        return b"".join(c.n.to_bytes(FQ_BYTES, "little") for c in point)

    def __setstate__(self, d):
        self.__init__(G1.from_bytes(d).point)

    def to_bytes(self):
        """x, y and z as little-endian base field blocks."""
        return self.__getstate__()

    @staticmethod
    def from_bytes(data):
        if len(data) != G1_RECORD_BYTES:
            raise DeserializationError(
                f"G1 record must be {G1_RECORD_BYTES} bytes, got {len(data)}"
            )
        coords = [
            int.from_bytes(data[i : i + FQ_BYTES], "little")
            for i in range(0, G1_RECORD_BYTES, FQ_BYTES)
        ]
        if any(c >= bls12_381_q for c in coords):
            raise DeserializationError("Coordinate is not a canonical Fq element")
        if coords[2] == 0:
            # the identity only decodes from the record to_bytes writes
            if coords != [1, 1, 0]:
                raise DeserializationError("Non-canonical encoding of the identity")
            return G1.one()
        point = tuple(Fq(c) for c in coords)
        if not is_on_curve(point, b):
            raise DeserializationError("Point is not on the BLS12-381 curve")
        if not eq(multiply(point, bls12_381_r - 1), neg(point)):
            raise DeserializationError("Point is not in the order r subgroup")
        return G1(point)

    def is_identity(self):
        return self.point[2] == 0

    def invert(self):
        self.point = neg(self.point)

    def duplicate(self):
        return G1(self.point)

    def projective(self):
        return self.point

    @staticmethod
    def one():
        return G1(Z1)

    @staticmethod
    def generator():
        return G1(BLS_G1)

    @staticmethod
    def rand(seed=None):
        if seed is None:
            r = random.SystemRandom().randint(1, bls12_381_r - 1)
        else:
            r = random.Random(seed).randint(1, bls12_381_r - 1)
        return G1.generator() ** r
