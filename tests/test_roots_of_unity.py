from pytest import mark, raises

from polycommit.exceptions import FieldEvaluationError, UnsupportedSize
from polycommit.roots_of_unity import (
    get_primitive_root,
    is_power_of_two,
    next_power_of_two,
    roots_of_unity,
)


@mark.parametrize("degree", [2 ** i for i in range(1, 11)])
def test_roots_of_unity(galois_field, degree):
    roots = roots_of_unity(galois_field, degree)
    assert len(roots) == degree
    assert len(set(roots)) == degree
    assert roots[0] == 1
    for i, root in enumerate(roots):
        assert root == roots[1] ** i
    assert roots[1] ** degree == 1


def test_single_root(galois_field):
    assert roots_of_unity(galois_field, 1) == [galois_field(1)]


def test_roots_are_nested(galois_field):
    for log_n in (1, 5, 16, 32):
        n = 2 ** log_n
        assert get_primitive_root(galois_field, n) ** 2 == get_primitive_root(
            galois_field, n // 2
        )


def test_largest_root_is_primitive(galois_field):
    omega = get_primitive_root(galois_field, 2 ** 32)
    assert omega ** (2 ** 32) == 1
    assert omega ** (2 ** 31) == galois_field(-1)


@mark.parametrize("degree", [0, 3, 12, 2 ** 33])
def test_unsupported_size(galois_field, degree):
    with raises(UnsupportedSize):
        roots_of_unity(galois_field, degree)


def test_unsupported_size_is_a_field_evaluation_error(galois_field):
    with raises(FieldEvaluationError):
        get_primitive_root(galois_field, 2 ** 40)
    with raises(UnsupportedSize):
        roots_of_unity(galois_field, 8, max_order_log=2)


def test_power_of_two_helpers():
    assert is_power_of_two(1)
    assert is_power_of_two(1024)
    assert not is_power_of_two(0)
    assert not is_power_of_two(6)
    assert next_power_of_two(5) == 8
    assert next_power_of_two(8) == 8
    assert next_power_of_two(1) == 1
