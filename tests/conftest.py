from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from tests._fixtures.html_builder import HtmlDirBuilder


@pytest.fixture
def html_builder(tmp_path: Path) -> HtmlDirBuilder:
    """Provide a reusable HTML directory builder rooted at the pytest tmp_path."""
    return HtmlDirBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_bdedox_logger() -> Iterator[None]:
    """Undo CLI logging configuration so caplog keeps seeing bdedox records."""
    yield
    logger = logging.getLogger("bdedox")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
