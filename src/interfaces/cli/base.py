"""CLIコマンド共通処理."""

from __future__ import annotations

import functools
import sys

from collections.abc import Callable
from typing import Any, TypeVar

import click

from src.common.logging import get_logger
from src.domain.exceptions import ExternalServiceException


F = TypeVar("F", bound=Callable[..., Any])

logger = get_logger(__name__)


def with_error_handling(func: F) -> F:
    """コマンドの例外を利用者向けメッセージにして終了コード1で終える."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except click.ClickException:
            raise
        except ExternalServiceException as e:
            click.echo(f"エラー: {e.reason}", err=True)
            sys.exit(1)
        except ValueError as e:
            click.echo(f"エラー: {e}", err=True)
            sys.exit(1)
        except Exception as e:
            logger.exception("コマンド実行中に予期しないエラーが発生しました")
            click.echo(f"予期しないエラー: {e}", err=True)
            sys.exit(1)

    return wrapper  # type: ignore[return-value]
