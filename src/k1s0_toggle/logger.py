"""structlog によるトグル判定ログの設定"""

from __future__ import annotations

import logging
import sys

import structlog

from .settings import LogSection

LOGGER_NAME = "k1s0_toggle"


def _renderer(format: str) -> list[structlog.types.Processor]:
    if format == "json":
        return [
            structlog.processors.StackInfoRenderer(),
            structlog.processors.JSONRenderer(),
        ]
    return [structlog.dev.ConsoleRenderer()]


def configure_logging(section: LogSection) -> structlog.stdlib.BoundLogger:
    """LogSection に従って判定ログの出力を設定する。

    ルートロガーのレベルを section.level に合わせる。判定モジュールの
    ロガーは呼び出しごとに設定を参照するので、設定後に出力先が切り替わる。

    Returns:
        k1s0_toggle 名のロガー
    """
    log_level = getattr(logging, section.level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    logging.getLogger().setLevel(log_level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            *_renderer(section.format),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    return structlog.stdlib.get_logger(LOGGER_NAME)
