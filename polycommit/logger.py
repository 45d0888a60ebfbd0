import logging
import os
import time
from contextlib import contextmanager


def setup_logger(tag, name, log_file, level=logging.INFO):
    handler = logging.FileHandler(log_file)
    formatter = logging.Formatter(
        f"[{tag}]:" +
        '%(asctime)s:[%(filename)s:%(lineno)s]:[%(levelname)s]:%(message)s')
    handler.setFormatter(formatter)
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.addHandler(handler)

    return logger


class BenchmarkLogger(object):
    logger = None

    @staticmethod
    def get(tag, directory="benchmark"):
        log_file_path = os.path.join(directory, f"benchmark_{tag}.log")
        os.makedirs(os.path.dirname(log_file_path), exist_ok=True)
        if BenchmarkLogger.logger is None:
            BenchmarkLogger.logger = setup_logger(tag, "BenchmarkLogger", log_file_path)
        BenchmarkLogger.logger.info(f"{'#'*10} RUN: {tag} {'#'*10}")
        return BenchmarkLogger.logger


@contextmanager
def timed(logger, phase):
    """Logs `Time to compute <phase>: <seconds>s` once the block finishes."""
    start = time.perf_counter()
    yield
    logger.info(f"Time to compute {phase}: {time.perf_counter() - start:.6f}s")
