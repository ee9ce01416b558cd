"""地震情報テンプレート生成ページ."""

from __future__ import annotations

import streamlit as st

from src.application.services.earthquake_template_session import (
    EarthquakeTemplateSession,
    SessionStatus,
)
from src.domain.services.template_renderer import PlaceholderToken
from src.interfaces.web.streamlit.components.clipboard_button import (
    copy_to_clipboard_button,
)
from src.interfaces.web.streamlit.presenters.earthquake_template_presenter import (
    EarthquakeTemplatePresenter,
)
from src.interfaces.web.streamlit.utils.error_handler import handle_ui_error


NO_EARTHQUAKE_OPTION = "該当する地震なし"


def render_earthquake_template_page() -> None:
    """地震情報テンプレート生成ページを描画する."""
    st.title("地震情報テンプレート生成")

    presenter = EarthquakeTemplatePresenter()

    prefectures = presenter.get_prefecture_options()
    session = presenter.load_data()
    prefecture = st.selectbox(
        "都道府県",
        options=prefectures,
        index=prefectures.index(session.prefecture),
        key="quake_prefecture",
    )

    if prefecture is not None and presenter.needs_fetch(prefecture):
        with st.spinner("読み込み中..."):
            try:
                session = presenter.change_prefecture(prefecture)
            except Exception as e:
                handle_ui_error(e, "地震情報の取得")
                return

    if session.status is SessionStatus.ERROR:
        st.error(f"エラー: {session.error_message}")
        if st.button("再取得", key="quake_reload"):
            with st.spinner("読み込み中..."):
                presenter.reload()
            st.rerun()
        return

    render_earthquake_select(presenter, session)
    render_template_editor(presenter, session)
    render_result(presenter)


def render_earthquake_select(
    presenter: EarthquakeTemplatePresenter, session: EarthquakeTemplateSession
) -> None:
    """地震選択プルダウンを描画する."""
    options = presenter.get_earthquake_options()
    if not options:
        st.selectbox(
            "地震を選択",
            options=[NO_EARTHQUAKE_OPTION],
            disabled=True,
            key="quake_earthquake_empty",
        )
        return

    labels = {o.earthquake_id: o.label for o in options}
    ids = list(labels)
    selected_id = session.selected.id if session.selected is not None else ids[0]
    chosen = st.selectbox(
        "地震を選択",
        options=ids,
        index=ids.index(selected_id) if selected_id in labels else 0,
        format_func=lambda eid: labels.get(eid, eid),
        # 都道府県ごとに別ウィジェットにして前の選択を持ち越さない
        key=f"quake_earthquake_{session.prefecture}",
    )
    if chosen is not None and chosen != selected_id:
        presenter.select_earthquake(chosen)


def render_template_editor(
    presenter: EarthquakeTemplatePresenter, session: EarthquakeTemplateSession
) -> None:
    """テンプレート編集欄を描画する."""
    st.subheader("テンプレート (編集可能)")
    tokens = " ".join(t.literal for t in PlaceholderToken)
    template = st.text_area(
        "テンプレート",
        value=session.template,
        height=100,
        key="quake_template",
        label_visibility="collapsed",
        help=f"使用できるプレースホルダー: {tokens}",
    )
    if template != session.template:
        presenter.update_template(template)


def render_result(presenter: EarthquakeTemplatePresenter) -> None:
    """生成結果とコピーボタンを描画する."""
    st.subheader("生成結果")
    rendered = presenter.get_rendered_text()
    st.code(rendered, language=None)
    copy_to_clipboard_button(rendered, label="コピー", key="quake_copy")
