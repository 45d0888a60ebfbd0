import logging
import os

from .commitment import CommitmentEngine
from .logger import BenchmarkLogger, timed
from .polynomial import polynomials_over
from .srs import SRSManager, srs_filename


def run(config):
    """Loads or builds the SRS described by `config`, commits to a fresh
    random witness and returns the commitment. Phase timings go to the
    benchmark log.
    """
    benchmark_logger = BenchmarkLogger.get(config.benchmark_tag)
    manager = SRSManager(method=config.method, workers=config.workers)
    path = os.path.join(config.srs_dir, srs_filename(config.degree))

    with timed(benchmark_logger, "lagrange"):
        srs = manager.load_or_generate(config.degree, path)

    witness = polynomials_over(manager.field).random(config.degree // 2 - 1)

    engine = CommitmentEngine(srs, msm_method=config.msm_method, workers=config.workers)
    with timed(benchmark_logger, "commitment"):
        commitment = engine.compute_commitment(witness)
    logging.info(f"Commitment: {commitment}")
    return commitment
