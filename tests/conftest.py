from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from datagen.config import reset_default_config
from datagen.utils.logging import ROOT_LOGGER


@pytest.fixture(autouse=True)
def _isolated_default_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("DATAGEN_SPECIAL_SYMBOLS", raising=False)
    reset_default_config()
    yield
    reset_default_config()


@pytest.fixture(autouse=True)
def _isolated_package_logger() -> Iterator[None]:
    logger = logging.getLogger(ROOT_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)
