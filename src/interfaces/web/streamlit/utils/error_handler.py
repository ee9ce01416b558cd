"""Streamlit画面のエラー表示."""

from __future__ import annotations

import streamlit as st

from src.common.logging import get_logger
from src.domain.exceptions import ExternalServiceException


logger = get_logger(__name__)


def handle_ui_error(error: Exception, context: str) -> None:
    """例外をログに残し、利用者向けのメッセージを表示する."""
    logger.exception("UI処理でエラーが発生しました", context=context)
    if isinstance(error, ExternalServiceException):
        st.error(f"エラー: {error.reason}")
    else:
        st.error(f"{context}中にエラーが発生しました: {error}")
