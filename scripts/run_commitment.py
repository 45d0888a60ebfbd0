from polycommit.config import ProverConfig
from polycommit.driver import run


if __name__ == "__main__":
    config = ProverConfig.load_config()
    commitment = run(config)
    print(commitment.to_bytes().hex())
