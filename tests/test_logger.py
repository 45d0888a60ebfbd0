import logging

from polycommit.logger import BenchmarkLogger, setup_logger, timed


def test_timed_logs_phase(mocker):
    logger = mocker.Mock()
    with timed(logger, "lagrange"):
        pass
    logger.info.assert_called_once()
    message = logger.info.call_args[0][0]
    assert message.startswith("Time to compute lagrange: ")
    assert message.endswith("s")


def test_setup_logger_writes_file(tmp_path):
    log_file = tmp_path / "run.log"
    logger = setup_logger("t", "polycommit.test_setup_logger", str(log_file))
    logger.info("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "[t]:" in log_file.read_text()
    assert "hello" in log_file.read_text()
    assert logger.level == logging.INFO


def test_benchmark_logger_is_shared(tmp_path, monkeypatch):
    monkeypatch.setattr(BenchmarkLogger, "logger", None)
    first = BenchmarkLogger.get("a", directory=str(tmp_path))
    second = BenchmarkLogger.get("b", directory=str(tmp_path))
    assert first is second
    assert (tmp_path / "benchmark_a.log").exists()
