from pytest import raises

from polycommit.curve import G1
from polycommit.exceptions import DimensionMismatch, UnsupportedSize
from polycommit.group_fft import FFT, fft_over_group, group_fft, monomial_to_lagrange
from polycommit.roots_of_unity import get_primitive_root, roots_of_unity


def test_monomial_to_lagrange_matches_direct_evaluation(
        galois_field, polynomial, known_alpha_srs):
    srs_lagrange, alpha = known_alpha_srs
    f = polynomial([alpha ** j for j in range(4)])
    g = G1.generator()
    for i, root in enumerate(roots_of_unity(galois_field, 4)):
        assert srs_lagrange[i] == g ** f(root)


def test_fft_method_matches_naive(galois_field, known_alpha_srs):
    srs_lagrange, alpha = known_alpha_srs
    g = G1.generator()
    srs_monomial = [g ** (alpha ** j) for j in range(4)]
    assert monomial_to_lagrange(srs_monomial, 4, galois_field, method=FFT) == srs_lagrange


def test_worker_count_does_not_change_result(galois_field, known_alpha_srs):
    srs_lagrange, alpha = known_alpha_srs
    g = G1.generator()
    srs_monomial = [g ** (alpha ** j) for j in range(4)]
    for workers in (1, 3, 8):
        out = monomial_to_lagrange(srs_monomial, 4, galois_field, workers=workers)
        assert out == srs_lagrange


def test_group_fft_of_random_points(galois_field):
    points = [G1.rand() for _ in range(8)]
    omega = get_primitive_root(galois_field, 8)
    out = group_fft(points, omega)
    for i in (0, 3, 6):
        expected = G1.one()
        for j, p in enumerate(points):
            expected *= p ** (omega ** (i * j))
        assert out[i] == expected


def test_monomial_to_lagrange_errors(galois_field):
    points = [G1.rand() for _ in range(3)]
    with raises(DimensionMismatch):
        monomial_to_lagrange(points, 4, galois_field)
    with raises(UnsupportedSize):
        monomial_to_lagrange(points, 3, galois_field)
    with raises(ValueError):
        monomial_to_lagrange(points, 3, galois_field, method="karatsuba")


def test_fft_over_group(galois_field, polynomial):
    values = [galois_field.random() for _ in range(4)]
    g = G1.rand()
    out = fft_over_group(values, g, galois_field, workers=2)
    omega = get_primitive_root(galois_field, 4)
    coeffs = polynomial.interpolate_fft(values, omega).pad(4)
    assert len(out) == 4
    for point, coeff in zip(out, coeffs):
        assert point == g ** coeff
