import random
import logging
from itertools import zip_longest

from .field import GFElement


def strip_trailing_zeros(a):
    if len(a) == 0:
        return []
    for i in range(len(a), 0, -1):
        if a[i-1] != 0:
            break
    else:
        return []
    return a[:i]


_poly_cache = {}


def polynomials_over(field):
    if field in _poly_cache:
        return _poly_cache[field]

    logging.debug(f'Building polynomial class over {field}')

    class Polynomial(object):
        def __init__(self, coeffs):
            self.coeffs = list(strip_trailing_zeros(coeffs))
            for i in range(len(self.coeffs)):
                if type(self.coeffs[i]) is int:
                    self.coeffs[i] = field(self.coeffs[i])
            self.field = field

        def is_zero(self):
            return self.coeffs == [] or (len(self.coeffs) == 1 and self.coeffs[0] == 0)

        def __repr__(self):
            if self.is_zero():
                return '0'
            return ' + '.join(['%s x^%d' % (a, i) if i > 0 else '%s' % a
                               for i, a in enumerate(self.coeffs)])

        def __call__(self, x):
            # Horner
            y = field(0)
            for coeff in reversed(self.coeffs):
                y = y * x + coeff
            return y

        def __eq__(self, other):
            return type(other) is type(self) and self.coeffs == other.coeffs

        def __hash__(self):
            return hash(tuple(self.coeffs))

        def pad(self, length):
            """
            Returns the coefficient list extended with zeros up to `length`.
            The polynomial itself keeps its stripped coefficients.
            """
            assert length >= len(self.coeffs), "cannot pad to a shorter length"
            return self.coeffs + [field(0)] * (length - len(self.coeffs))

        @classmethod
        def interpolate_fft(cls, ys, omega):
            """
            Returns a polynoial f of given degree,
            such that f(omega^i) == ys[i]
            """
            n = len(ys)
            assert n & (n-1) == 0, "n must be power of two"
            assert type(omega) is GFElement
            assert omega ** n == 1, "must be an n'th root of unity"
            assert n == 1 or omega ** (n // 2) != 1, \
                "must be a primitive n'th root of unity"
            n_inv = ~field(n)
            coeffs = [b * n_inv for b in fft_helper(ys, ~omega, field)]
            return cls(coeffs)

        def evaluate_fft(self, omega, n):
            assert n & (n-1) == 0, "n must be power of two"
            assert type(omega) is GFElement
            assert omega ** n == 1, "must be an n'th root of unity"
            assert n == 1 or omega ** (n // 2) != 1, \
                "must be a primitive n'th root of unity"
            return fft(self, omega, n)

        @classmethod
        def random(cls, degree, seed=None):
            rng = random.SystemRandom() if seed is None else random.Random(seed)
            coeffs = [field(rng.randint(0, field.modulus-1))
                      for _ in range(degree+1)]
            return cls(coeffs)

        # the valuation only gives 0 to the zero polynomial, i.e. 1+degree
        def __abs__(self): return len(self.coeffs)

        def __iter__(self): return iter(self.coeffs)

        def __sub__(self, other): return self + (-other)

        def __neg__(self): return Polynomial([-a for a in self])

        def __len__(self): return len(self.coeffs)

        def __add__(self, other):
            new_coefficients = [sum(x, field(0)) for x in zip_longest(
                self, other, fillvalue=self.field(0))]
            return Polynomial(new_coefficients)

        def __mul__(self, other):
            if self.is_zero() or other.is_zero():
                return zero()

            new_coeffs = [self.field(0)
                          for _ in range(len(self) + len(other) - 1)]

            for i, a in enumerate(self):
                for j, b in enumerate(other):
                    new_coeffs[i+j] += a*b
            return Polynomial(new_coeffs)

        def degree(self): return abs(self) - 1

    def zero():
        return Polynomial([])

    _poly_cache[field] = Polynomial
    return Polynomial


def fft_helper(a, omega, field):
    """
    Given coefficients A of polynomial this method does FFT and returns
    the evaluation of the polynomial at [omega^0, omega^(n-1)]

    If the polynomial is a0*x^0 + a1*x^1 + ... + an*x^n then the coefficients
    list is of the form [a0, a1, ... , an].
    """
    n = len(a)
    assert not (n & (n-1)), "n must be a power of 2"

    if n == 1:
        return list(a)

    b, c = a[0::2], a[1::2]
    omega_sq = omega * omega
    b_bar = fft_helper(b, omega_sq, field)
    c_bar = fft_helper(c, omega_sq, field)
    a_bar = [field(0)] * n
    half = n // 2
    w = field(1)
    for k in range(half):
        t = w * c_bar[k]
        a_bar[k] = b_bar[k] + t
        a_bar[k + half] = b_bar[k] - t
        w = w * omega
    return a_bar


def fft(poly, omega, n):
    assert n & n-1 == 0, "n must be a power of 2"
    assert len(poly.coeffs) <= n
    return fft_helper(poly.pad(n), omega, poly.field)
