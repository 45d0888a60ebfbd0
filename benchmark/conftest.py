from pytest import fixture


@fixture
def galois_field():
    from polycommit.curve import scalar_field
    return scalar_field()


@fixture
def polynomial(galois_field):
    from polycommit.polynomial import polynomials_over
    return polynomials_over(galois_field)
