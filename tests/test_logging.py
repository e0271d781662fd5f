"""Tests for the package logging helpers."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
from typer.testing import CliRunner

from datagen.cli import app
from datagen.utils.logging import ROOT_LOGGER, configure_logging, get_logger


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger(ROOT_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


def _stream_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if type(h) is logging.StreamHandler]


def test_configure_logging_is_idempotent(package_logger: logging.Logger) -> None:
    before = len(_stream_handlers(package_logger))
    configure_logging("INFO")
    configure_logging("INFO")
    configure_logging(logging.ERROR)
    assert len(_stream_handlers(package_logger)) == before + 1
    assert package_logger.level == logging.ERROR


def test_verbose_forces_debug(package_logger: logging.Logger) -> None:
    configure_logging("ERROR", verbose=True)
    assert package_logger.level == logging.DEBUG


def test_library_logger_has_null_handler() -> None:
    handlers = logging.getLogger(ROOT_LOGGER).handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_get_logger_names() -> None:
    assert get_logger("cli").name == "datagen.cli"
    assert get_logger("datagen.x").name == "datagen.x"
    assert get_logger("datagen").name == "datagen"
    assert get_logger("datagenerator").name == "datagen.datagenerator"


def test_cli_verbose(package_logger: logging.Logger) -> None:
    result = CliRunner().invoke(app, ["generate", "--length", "3", "--verbose"])
    assert result.exit_code == 0
    assert package_logger.level == logging.DEBUG
