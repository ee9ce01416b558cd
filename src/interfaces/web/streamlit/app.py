"""Streamlitアプリのエントリーポイント.

    streamlit run src/interfaces/web/streamlit/app.py
"""

import streamlit as st

from src.common.logging import is_configured, setup_logging
from src.infrastructure.config.settings import get_settings
from src.interfaces.web.streamlit.views.earthquake_template_view import (
    render_earthquake_template_page,
)


def main() -> None:
    settings = get_settings()
    if not is_configured():
        setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

    st.set_page_config(page_title="地震情報テンプレート生成", page_icon="🌏")
    render_earthquake_template_page()


if __name__ == "__main__":
    main()
