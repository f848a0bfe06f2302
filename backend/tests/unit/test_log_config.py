"""Unit tests for the logging setup."""

import logging

from business_site.config import get_settings
from business_site.infrastructure.logging.log_config import _parse_level, setup_logging


def test_parse_level_defaults_to_info():
    assert _parse_level("debug") == logging.DEBUG
    assert _parse_level("nonsense") == logging.INFO


def test_setup_logging_applies_category_levels(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL_SQL", "ERROR")
    monkeypatch.setenv("LOG_LEVEL_INTAKE", "DEBUG")
    get_settings.cache_clear()
    try:
        setup_logging()

        assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
        assert (
            logging.getLogger(
                "business_site.application.services.contact_intake_service"
            ).level
            == logging.DEBUG
        )
    finally:
        get_settings.cache_clear()
        for name in ("sqlalchemy.engine", "business_site.application.services.contact_intake_service"):
            logging.getLogger(name).setLevel(logging.NOTSET)
