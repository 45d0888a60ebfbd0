"""
Roots of unity of the BLS12-381 scalar field.

``r - 1 = 2^32 * m`` with ``m`` odd, so the multiplicative group holds
primitive roots of every power-of-two order up to ``2^32``. Every root handed
out here is derived from the same primitive ``2^32``-th root, so domains of
different sizes are nested: the ``n``-th roots are the even powers of the
``2n``-th roots.
"""
import logging

from .exceptions import UnsupportedSize

# Order of the largest power-of-two subgroup of Fr^*
MAX_ROOT_ORDER_LOG = 32
# Generator of Fr^* used to derive the primitive roots
MULTIPLICATIVE_GENERATOR = 7


def is_power_of_two(n):
    return n > 0 and n & (n - 1) == 0


def next_power_of_two(n):
    assert n > 0
    return n if is_power_of_two(n) else 2 ** n.bit_length()


def _check_size(field, n, max_order_log):
    if not is_power_of_two(n):
        raise UnsupportedSize(f"domain size {n} is not a power of two")
    if n > 2 ** max_order_log:
        raise UnsupportedSize(
            f"domain size {n} exceeds the maximum root order 2^{max_order_log}"
        )
    if (field.modulus - 1) % n != 0:
        raise UnsupportedSize(f"{field} has no root of unity of order {n}")


def get_primitive_root(field, n, max_order_log=MAX_ROOT_ORDER_LOG):
    """
    Returns a primitive n'th root of unity.

    The root is the (2^max_order_log / n)'th power of the fixed primitive
    2^max_order_log'th root, so the answer is deterministic.
    """
    _check_size(field, n, max_order_log)
    max_order = 2 ** max_order_log
    if (field.modulus - 1) % max_order != 0:
        raise UnsupportedSize(f"{field} has no root of unity of order 2^{max_order_log}")
    top = field(MULTIPLICATIVE_GENERATOR) ** ((field.modulus - 1) // max_order)
    omega = top ** (max_order // n)
    assert omega ** n == 1, "omega must be an n'th root of unity"
    assert n == 1 or omega ** (n // 2) != 1, "omega must be a primitive n'th root of unity"
    return omega


def roots_of_unity(field, degree, max_order_log=MAX_ROOT_ORDER_LOG):
    """
    Returns [1, omega, omega^2, ..., omega^(degree-1)] for a primitive
    degree'th root omega, in natural order.

    Raises UnsupportedSize when degree is not a power of two or is larger
    than 2^max_order_log.
    """
    omega = get_primitive_root(field, degree, max_order_log)
    logging.debug(f'Computing {degree} roots of unity')
    roots = [field(1)] * degree
    for i in range(1, degree):
        roots[i] = roots[i - 1] * omega
    return roots
