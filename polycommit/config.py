"""
Module for ``polycommit``'s configuration.

This module can be used to:

* define default configuration settings
* load a configuration from the command line and an optional JSON file
* validate a configuration
"""

from argparse import ArgumentParser
import json

from polycommit.commitment import MSM_METHODS
from polycommit.exceptions import ConfigurationError
from polycommit.group_fft import METHODS
from polycommit.roots_of_unity import MAX_ROOT_ORDER_LOG, is_power_of_two


class ConfigVars(object):
    Degree = "degree"
    SrsDir = "srs_dir"
    Workers = "workers"
    Method = "method"
    MsmMethod = "msm_method"
    BenchmarkTag = "benchmark_tag"


class ProverConfig(object):
    degree = 8
    srs_dir = "."
    workers = None
    method = "naive"
    msm_method = "naive"
    benchmark_tag = "prover"

    _defaults = {
        ConfigVars.Degree: 8,
        ConfigVars.SrsDir: ".",
        ConfigVars.Workers: None,
        ConfigVars.Method: "naive",
        ConfigVars.MsmMethod: "naive",
        ConfigVars.BenchmarkTag: "prover",
    }

    @staticmethod
    def reset():
        for key, value in ProverConfig._defaults.items():
            setattr(ProverConfig, key, value)

    @staticmethod
    def from_json(json_config):
        unknown = set(json_config) - set(ProverConfig._defaults)
        if unknown:
            raise ConfigurationError(f"unknown config keys: {sorted(unknown)}")
        for key in ProverConfig._defaults:
            if key in json_config:
                setattr(ProverConfig, key, json_config[key])
        ProverConfig.validate()

    @staticmethod
    def validate():
        degree = ProverConfig.degree
        if type(degree) is not int or not is_power_of_two(degree) or degree < 2:
            raise ConfigurationError(f"degree must be a power of two >= 2: {degree}")
        if degree > 2 ** MAX_ROOT_ORDER_LOG:
            raise ConfigurationError(f"degree must be at most 2^{MAX_ROOT_ORDER_LOG}")
        workers = ProverConfig.workers
        if workers is not None and (type(workers) is not int or workers < 1):
            raise ConfigurationError(f"workers must be a positive integer: {workers}")
        if ProverConfig.method not in METHODS:
            raise ConfigurationError(f"method must be in {METHODS}")
        if ProverConfig.msm_method not in MSM_METHODS:
            raise ConfigurationError(f"msm_method must be in {list(MSM_METHODS)}")

    @staticmethod
    def load_config(argv=None):
        parser = ArgumentParser(description="Commits to a random witness polynomial.")

        parser.add_argument(
            "-f",
            "--config-file",
            type=str,
            dest="config_file_path",
            help="Path from where to load a JSON config file. \
                Command line values override the file.",
        )
        parser.add_argument(
            "-d", "--degree", type=int, dest="degree", help="Size of the SRS."
        )
        parser.add_argument(
            "-o",
            "--srs-dir",
            type=str,
            dest="srs_dir",
            help="Directory holding srs_<degree>.dat files.",
        )
        parser.add_argument(
            "-w", "--workers", type=int, dest="workers", help="Worker pool size."
        )
        parser.add_argument(
            "--method",
            choices=METHODS,
            dest="method",
            help="Monomial to Lagrange conversion.",
        )
        parser.add_argument(
            "--msm", choices=list(MSM_METHODS), dest="msm_method", help="MSM algorithm."
        )

        args = parser.parse_args(argv)

        if args.config_file_path is not None:
            try:
                with open(args.config_file_path) as f:
                    config = json.load(f)
            except (OSError, ValueError) as e:
                raise ConfigurationError(
                    f"could not load {args.config_file_path}: {e}"
                ) from e
            ProverConfig.from_json(config)

        overrides = {
            k: v
            for k, v in vars(args).items()
            if k != "config_file_path" and v is not None
        }
        ProverConfig.from_json(overrides)
        return ProverConfig
