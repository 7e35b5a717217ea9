"""Shared pytest configuration and fixtures."""
import pytest
from datetime import date
from pathlib import Path
from loguru import logger

from fluentdt.config import FluentConfig
from fluentdt.logging import setup_logging

@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """Set up logging for tests."""
    log_dir = Path(__file__).parent / "logs"
    log_dir.mkdir(exist_ok=True)
    setup_logging(log_dir / "test.log")
    logger.info("Starting test session")
    yield
    logger.info("Test session completed")

@pytest.fixture(autouse=True)
def reset_config():
    """Keep config changes from leaking between tests."""
    FluentConfig.reset()
    yield
    FluentConfig.reset()

@pytest.fixture
def monday_table():
    """Known (year, week) -> Monday pairs."""
    return [
        ((2012, 41), date(2012, 10, 8)),
        ((2016, 20), date(2016, 5, 16)),
        ((2015, 3), date(2015, 1, 12)),
        ((1992, 52), date(1992, 12, 21)),
        ((2016, 1), date(2016, 1, 4)),
        ((2016, 52), date(2016, 12, 26)),
        ((2014, 1), date(2013, 12, 30)),
    ]
