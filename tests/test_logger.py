"""ロガー設定のユニットテスト"""

from __future__ import annotations

import json
import logging

import pytest

from gcmseal import new_logger
from gcmseal.logger import LOGGER_NAME, get_logger


def gcmseal_messages(caplog: pytest.LogCaptureFixture) -> list[str]:
    return [r.getMessage() for r in caplog.records if r.name == LOGGER_NAME]


def test_new_logger_json_format(caplog: pytest.LogCaptureFixture) -> None:
    """JSON 形式で出力されること。"""
    logger = new_logger(level="WARNING", format="json")
    logger.warning("message authentication failed", nonce="00" * 12)

    messages = gcmseal_messages(caplog)
    assert len(messages) == 1
    payload = json.loads(messages[0])
    assert payload["event"] == "message authentication failed"
    assert payload["level"] == "warning"
    assert payload["nonce"] == "00" * 12
    assert "timestamp" in payload


def test_new_logger_filters_below_level(caplog: pytest.LogCaptureFixture) -> None:
    """設定レベル未満のイベントは出力されないこと。"""
    logger = new_logger(level="WARNING", format="json")
    logger.debug("message sealed")
    logger.info("message opened")
    logger.error("nonce source failure")

    events = [json.loads(m)["event"] for m in gcmseal_messages(caplog)]
    assert events == ["nonce source failure"]
    assert logging.getLogger(LOGGER_NAME).level == logging.WARNING


def test_new_logger_text_format(caplog: pytest.LogCaptureFixture) -> None:
    """テキスト形式ではキー=値で出力されること。"""
    logger = new_logger(level="DEBUG", format="text")
    logger.debug("message sealed", plaintext_length=11)

    messages = gcmseal_messages(caplog)
    assert len(messages) == 1
    assert "message sealed" in messages[0]
    assert "plaintext_length=11" in messages[0]
    with pytest.raises(json.JSONDecodeError):
        json.loads(messages[0])


def test_new_logger_unknown_level_defaults_to_info() -> None:
    new_logger(level="verbose")
    assert logging.getLogger(LOGGER_NAME).level == logging.INFO


def test_library_logger_has_null_handler() -> None:
    """未設定時は NullHandler により何も出力しないこと。"""
    handlers = logging.getLogger(LOGGER_NAME).handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_get_logger_routes_through_stdlib(caplog: pytest.LogCaptureFixture) -> None:
    """ライブラリのイベントは stdlib の gcmseal ロガーに届くこと。"""
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    get_logger().debug("message opened", plaintext_length=3)

    messages = gcmseal_messages(caplog)
    assert len(messages) == 1
    assert "message opened" in messages[0]
