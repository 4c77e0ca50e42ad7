"""
Тесты для setup_logging и DEBUG-логирования конвертера
"""

import logging

import pytest

from anybase import Converter, InvalidDigit, setup_logging
from anybase.core.domain import BIN, DEC


@pytest.fixture
def restore_anybase_logger():
    """Восстановление логгера 'anybase' после теста."""
    logger = logging.getLogger("anybase")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers = handlers
    logger.setLevel(level)


class TestSetupLogging:
    """Тесты setup_logging"""

    def test_console_handler(self, restore_anybase_logger):
        logger = setup_logging(logging.DEBUG)
        assert logger is logging.getLogger("anybase")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_rerun_does_not_duplicate(self, restore_anybase_logger):
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_file_handler(self, restore_anybase_logger, tmp_path):
        log_file = tmp_path / "anybase.log"
        logger = setup_logging(logging.DEBUG, str(log_file))
        assert len(logger.handlers) == 2

        Converter(DEC, BIN).convert("10")
        for handler in logger.handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "anybase.converter.converter" in content
        assert "DEBUG" in content


class TestConverterLogging:
    """DEBUG-сообщения конвертера"""

    def test_conversion_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="anybase"):
            Converter(DEC, BIN).convert("12")
        assert "Converter ready" in caplog.text
        assert "Parsed 2 digits" in caplog.text

    def test_invalid_digit_logged_and_raised(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="anybase"):
            with pytest.raises(InvalidDigit):
                Converter(BIN, DEC).convert("12")
        assert "Invalid digit '2' at position 1" in caplog.text
