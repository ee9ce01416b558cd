"""Streamlit用Presenterの基底クラス."""

from __future__ import annotations

import asyncio
import threading

from abc import ABC, abstractmethod
from collections.abc import Coroutine
from typing import Any, Generic, TypeVar

from src.common.logging import get_logger
from src.infrastructure.di.container import Container


T = TypeVar("T")
R = TypeVar("R")

logger = get_logger(__name__)

# 専用バックグラウンドスレッドのevent loop
_dedicated_loop: asyncio.AbstractEventLoop | None = None
_dedicated_loop_lock = threading.Lock()


def _get_dedicated_loop() -> asyncio.AbstractEventLoop:
    """非同期処理用の専用event loopを取得する（なければ起動する）."""
    global _dedicated_loop
    with _dedicated_loop_lock:
        if _dedicated_loop is None or _dedicated_loop.is_closed():
            _dedicated_loop = asyncio.new_event_loop()
            thread = threading.Thread(
                target=_dedicated_loop.run_forever,
                daemon=True,
                name="presenter-async",
            )
            thread.start()
        return _dedicated_loop


class BasePresenter(ABC, Generic[T]):
    """Presenterの基底クラス.

    DIコンテナの保持と、同期的なStreamlitコードから非同期ユースケースを
    呼ぶための ``_run_async`` を提供する。
    """

    def __init__(self, container: Container | None = None) -> None:
        self.container = container or Container.create_for_environment()
        self.logger = get_logger(self.__class__.__module__)

    @abstractmethod
    def load_data(self) -> T:
        """画面表示用のデータを読み込む."""

    @abstractmethod
    def handle_action(self, action: str, **kwargs: Any) -> Any:
        """画面操作を処理する."""

    def _run_async(self, coro: Coroutine[Any, Any, R]) -> R:
        """Run an async coroutine from sync context.

        専用バックグラウンドスレッドのevent loopでコルーチンを実行する。
        Streamlit/TornadoのメインEvent Loopには一切触れない。
        """
        try:
            loop = _get_dedicated_loop()
            future = asyncio.run_coroutine_threadsafe(coro, loop)
            return future.result()
        except Exception as e:
            logger.error(f"Failed to run async operation: {e}")
            raise
