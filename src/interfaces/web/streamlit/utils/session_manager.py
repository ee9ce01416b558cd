"""st.session_state の薄いラッパー."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import streamlit as st


T = TypeVar("T")


class SessionManager:
    """名前空間付きで st.session_state を読み書きする."""

    def __init__(self, namespace: str | None = None) -> None:
        self._namespace = namespace

    def _key(self, key: str) -> str:
        return f"{self._namespace}.{key}" if self._namespace else key

    def get(self, key: str, default: Any = None) -> Any:
        return st.session_state.get(self._key(key), default)

    def set(self, key: str, value: Any) -> None:
        st.session_state[self._key(key)] = value

    def get_or_create(self, key: str, default: T | Callable[[], T]) -> T:
        """値がなければ default（callableなら呼び出し結果）を保存して返す."""
        full_key = self._key(key)
        if full_key not in st.session_state:
            st.session_state[full_key] = default() if callable(default) else default
        value: T = st.session_state[full_key]
        return value
