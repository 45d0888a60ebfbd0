from random import randint

from pytest import mark, raises

from polycommit.curve import G1, bls12_381_r
from polycommit.exceptions import LengthMismatch
from polycommit.msm import msm, msm_pippenger

MSMS = [msm, msm_pippenger]


@mark.parametrize("func", MSMS)
def test_msm_identities(func):
    p1 = G1.rand()
    p2 = G1.rand()
    s1 = randint(0, bls12_381_r - 1)
    s2 = randint(0, bls12_381_r - 1)
    assert func([], []) == G1.one()
    assert func([1], [p1]) == p1
    assert func([0], [p1]) == G1.one()
    assert func([s1, s2], [p1, p2]) == (p1 ** s1) * (p2 ** s2)


@mark.parametrize("func", MSMS)
def test_msm_length_mismatch(func):
    with raises(LengthMismatch):
        func([1, 2], [G1.generator()])
    with raises(LengthMismatch):
        func([], [G1.generator()])


@mark.parametrize("window", [None, 1, 3, 8])
def test_pippenger_matches_naive(galois_field, window):
    n = 6
    points = [G1.rand() for _ in range(n)]
    scalars = [galois_field.random() for _ in range(n)]
    scalars[2] = galois_field(0)
    scalars[4] = galois_field(-1)
    assert msm_pippenger(scalars, points, window=window) == msm(scalars, points)


def test_msm_is_order_independent(galois_field):
    points = [G1.rand() for _ in range(4)]
    scalars = [galois_field.random().value for _ in range(4)]
    assert msm(scalars, points) == msm(scalars[::-1], points[::-1])
