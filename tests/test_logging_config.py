import logging

from inputsview.logging_config import setup_logging


def test_repeated_setup_keeps_single_console_handler(tmp_path):
    log_file = tmp_path / "inputsview.log"

    setup_logging("DEBUG")
    setup_logging("INFO", str(log_file))

    logger = logging.getLogger("inputsview")
    assert logger.level == logging.INFO
    assert [type(h) for h in logger.handlers] == [logging.StreamHandler, logging.FileHandler]

    logging.getLogger("inputsview.core").info("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "inputsview.core - INFO - hello" in log_file.read_text(encoding="utf-8")

    setup_logging()
