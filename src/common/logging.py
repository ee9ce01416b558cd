"""構造化ロギングの設定.

structlog を標準 logging の上に構成する。プロセス起動時に一度だけ
``setup_logging()`` を呼び、各モジュールは ``get_logger(__name__)`` で
ロガーを取得する。
"""

from __future__ import annotations

import logging
import sys

from typing import Any

import structlog


_configured = False


def setup_logging(level: str = "INFO", log_format: str = "console") -> None:
    """structlog と標準 logging を構成する.

    Args:
        level: ログレベル名（例: "INFO"）
        log_format: "console"（人間向け）または "json"
    """
    global _configured

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    renderer: Any
    if log_format == "json":
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    # Streamlitの再実行で二重にハンドラが付かないよう置き換える
    root.handlers = [handler]
    root.setLevel(level.upper())

    # httpxのリクエストログはDEBUG時のみ
    logging.getLogger("httpx").setLevel(
        logging.DEBUG if level.upper() == "DEBUG" else logging.WARNING
    )

    _configured = True


def is_configured() -> bool:
    """setup_logging() 済みかどうか."""
    return _configured


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """モジュール用のロガーを取得する."""
    return structlog.stdlib.get_logger(name)
