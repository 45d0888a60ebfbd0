from pytest import fixture


@fixture
def galois_field():
    from polycommit.curve import scalar_field
    return scalar_field()


@fixture
def polynomial(galois_field):
    from polycommit.polynomial import polynomials_over
    return polynomials_over(galois_field)


@fixture(scope="session")
def known_alpha_srs():
    """Degree 4 Lagrange SRS built from a fixed alpha and the plain generator.

    Returns (srs_lagrange, alpha) so tests can check results in the exponent.
    """
    from polycommit.curve import G1, scalar_field
    from polycommit.group_fft import monomial_to_lagrange

    field = scalar_field()
    alpha = field(1234567)
    g = G1.generator()
    srs_monomial = [g ** (alpha ** j) for j in range(4)]
    return monomial_to_lagrange(srs_monomial, 4, field, workers=2), alpha


@fixture(scope="session")
def small_srs():
    from polycommit.srs import SRSManager
    return SRSManager(workers=2).generate(4)
