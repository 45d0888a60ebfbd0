import logging

from .exceptions import DimensionMismatch
from .msm import msm, msm_pippenger
from .polynomial import fft_helper
from .roots_of_unity import get_primitive_root
from .worker_pool import parallel_map, run_ranges

MSM_METHODS = {"naive": msm, "pippenger": msm_pippenger}


def hadamard_product(a, b, workers=None):
    """Elementwise product of two equal-length sequences of field elements."""
    if len(a) != len(b):
        raise DimensionMismatch(
            f"Hadamard product of sequences of length {len(a)} and {len(b)}"
        )
    out = [None] * len(a)

    def _mul(start, stop):
        for i in range(start, stop):
            out[i] = a[i] * b[i]

    run_ranges(_mul, len(a), workers)
    return out


class CommitmentEngine(object):
    """Commits to witness polynomials against one Lagrange basis SRS.

    A witness holds at most half as many coefficients as the SRS has points.
    It is padded with zeros to the SRS length and evaluated over the roots of
    unity of that order.
    """

    def __init__(self, srs, msm_method="naive", workers=None):
        if msm_method not in MSM_METHODS:
            raise ValueError(
                f"unknown msm method {msm_method}, expected one of {list(MSM_METHODS)}"
            )
        self.srs = srs
        self.msm = MSM_METHODS[msm_method]
        self.workers = workers

    def evaluate(self, witness):
        n = len(self.srs)
        half = n // 2
        if len(witness.coeffs) > half:
            raise DimensionMismatch(
                f"witness has {len(witness.coeffs)} coefficients but an SRS of "
                f"{n} points takes at most {half}"
            )
        omega = get_primitive_root(witness.field, n)
        return fft_helper(witness.pad(n), omega, witness.field)

    def compute_commitment(self, witness):
        evals = self.evaluate(witness)
        blinded = hadamard_product(
            self.srs.random_poly.coeffs, evals, workers=self.workers
        )
        scalars = parallel_map(
            lambda e: e.representative(), blinded, workers=self.workers
        )
        logging.debug(f'Folding {len(scalars)} terms into the commitment')
        return self.msm(scalars, self.srs.srs_lagrange)


def compute_commitment(witness, srs, msm_method="naive", workers=None):
    return CommitmentEngine(srs, msm_method, workers).compute_commitment(witness)
