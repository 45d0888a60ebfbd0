"""
Transforms over G1 elements.

The SRS in monomial basis is ``A[j] = g ** alpha^j``. Its Lagrange form over
the domain ``{omega^i}`` is ``L[i] = prod_j A[j] ** (omega^(i*j))``, which is
``g ** f(omega^i)`` for ``f(X) = sum_j alpha^j X^j``. Both transforms below
compute ``L`` from the published points and the public roots only. A single
table of root powers (the evaluation table) takes the place of a pass over
pairwise inverses of root differences.
"""
import logging

from .curve import G1
from .exceptions import DimensionMismatch
from .polynomial import polynomials_over
from .roots_of_unity import get_primitive_root, roots_of_unity
from .worker_pool import run_ranges

NAIVE = "naive"
FFT = "fft"
METHODS = (NAIVE, FFT)


def monomial_to_lagrange(srs_monomial, degree, field, method=NAIVE, workers=None):
    if len(srs_monomial) != degree:
        raise DimensionMismatch(
            f"monomial SRS has {len(srs_monomial)} points, expected {degree}"
        )
    if method == NAIVE:
        return _monomial_to_lagrange_naive(srs_monomial, degree, field, workers)
    elif method == FFT:
        omega = get_primitive_root(field, degree)
        return group_fft(srs_monomial, omega)
    raise ValueError(f"unknown method {method}, expected one of {METHODS}")


def _monomial_to_lagrange_naive(a, degree, field, workers):
    # omega^(i*j) only depends on i*j mod degree, so one table of root powers
    # serves every (i, j) pair
    roots = roots_of_unity(field, degree)
    srs_lagrange = [None] * degree

    def _accumulate(start, stop):
        for i in range(start, stop):
            acc = G1.one()
            for j in range(degree):
                acc *= a[j] ** roots[(i * j) % degree]
            srs_lagrange[i] = acc

    logging.debug(f'Converting {degree} SRS points to Lagrange basis')
    run_ranges(_accumulate, degree, workers)
    return srs_lagrange


def group_fft(values, omega):
    """
    Radix-2 FFT over G1: returns out[i] = prod_j values[j] ** (omega^(i*j)).
    omega must be a primitive len(values)'th root of unity.
    """
    n = len(values)
    assert n & (n - 1) == 0, "n must be a power of 2"
    if n == 1:
        return [values[0].duplicate()]

    evens = group_fft(values[0::2], omega * omega)
    odds = group_fft(values[1::2], omega * omega)
    half = n // 2
    out = [None] * n
    w = omega.field(1)
    for k in range(half):
        t = odds[k] ** w
        out[k] = evens[k] * t
        out[k + half] = evens[k] / t
        w = w * omega
    return out


def fft_over_group(values, generator, field, workers=None):
    """
    Interpolates `values` (read as evaluations over the roots of unity of
    order len(values)) into coefficients, then raises `generator` to each
    coefficient.
    """
    n = len(values)
    omega = get_primitive_root(field, n)
    poly = polynomials_over(field).interpolate_fft(values, omega)
    coeffs = poly.pad(n)
    out = [None] * n

    def _raise(start, stop):
        for i in range(start, stop):
            out[i] = generator ** coeffs[i]

    run_ranges(_raise, n, workers)
    return out
