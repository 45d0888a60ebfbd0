from pytest import mark
from polycommit.curve import G1
from polycommit.msm import msm, msm_pippenger


@mark.parametrize("n", [2 ** i for i in range(2, 7, 2)])
def test_benchmark_msm_naive(benchmark, n, galois_field):
    points = [G1.rand() for _ in range(n)]
    scalars = [galois_field.random() for _ in range(n)]
    benchmark(msm, scalars, points)


@mark.parametrize("n", [2 ** i for i in range(2, 7, 2)])
def test_benchmark_msm_pippenger(benchmark, n, galois_field):
    points = [G1.rand() for _ in range(n)]
    scalars = [galois_field.random() for _ in range(n)]
    benchmark(msm_pippenger, scalars, points)
