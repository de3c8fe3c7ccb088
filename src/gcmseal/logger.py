"""structlog ベースのロガー設定"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "gcmseal"

# ライブラリは呼び出し側がログを設定するまで何も出力しない
logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger() -> structlog.stdlib.BoundLogger:
    """stdlib の ``gcmseal`` ロガーをラップした structlog ロガーを返す。

    出力先とレベルは stdlib logging の設定に従う。
    """
    return structlog.wrap_logger(
        logging.getLogger(LOGGER_NAME),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def new_logger(level: str = "INFO", format: str = "json") -> structlog.stdlib.BoundLogger:
    """structlog を設定し、``gcmseal`` ロガーを返す。

    Args:
        level: ``gcmseal`` ロガーのレベル ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        format: 出力形式 ("json" or "text")
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )
    logging.getLogger(LOGGER_NAME).setLevel(log_level)

    renderer: structlog.types.Processor
    if format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    return structlog.stdlib.get_logger(LOGGER_NAME)
