import logging

from serverconf.logging_config import setup_logging


def test_setup_logging_sets_level_and_handler():
    setup_logging("debug")
    root_logger = logging.getLogger()
    assert root_logger.level == logging.DEBUG
    assert len(root_logger.handlers) == 1
    assert isinstance(root_logger.handlers[0], logging.StreamHandler)


def test_setup_logging_replaces_handlers():
    """Test that calling setup twice does not duplicate handlers."""
    setup_logging("INFO")
    setup_logging("WARNING")
    assert len(logging.getLogger().handlers) == 1


def test_setup_logging_with_file(tmp_path):
    log_file = tmp_path / "logs" / "serverconf.log"
    setup_logging("INFO", log_file)
    logging.getLogger("serverconf.test").info("hello")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "hello" in log_file.read_text()
