"""テスト共通フィクスチャ"""

import logging
from collections.abc import Generator

import pytest
import structlog

from gcmseal.logger import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """new_logger によるグローバル設定をテストごとに元に戻す。"""
    yield
    logging.getLogger(LOGGER_NAME).setLevel(logging.NOTSET)
    structlog.reset_defaults()
