"""Tests for package logging setup."""

import logging

from src.raytracer.core.log import LOG_LEVEL_ENV, PACKAGE_LOGGER, setup_logging


def installed_handlers(logger):
    return [h for h in logger.handlers if getattr(h, "_raytracer_handler", False)]


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_explicit_level(self, restore_logging):
        logger = setup_logging("debug")
        assert logger is restore_logging
        assert logger.level == logging.DEBUG
        assert len(installed_handlers(logger)) == 1

    def test_level_from_environment(self, restore_logging, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "WARNING")
        assert setup_logging().level == logging.WARNING

    def test_default_level_is_info(self, restore_logging, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        assert setup_logging().level == logging.INFO

    def test_repeated_setup_replaces_handler(self, restore_logging):
        setup_logging("INFO")
        logger = setup_logging("ERROR")
        handlers = installed_handlers(logger)
        assert len(handlers) == 1
        assert handlers[0].level == logging.ERROR

    def test_module_loggers_are_children(self):
        from src.raytracer.core import renderer

        assert renderer.logger.name.startswith(PACKAGE_LOGGER + ".")
