"""クリップボードコピーボタンのテスト"""

import json

from unittest.mock import patch

from src.interfaces.web.streamlit.components.clipboard_button import (
    COPY_FAILED_MESSAGE,
    COPY_SUCCEEDED_MESSAGE,
    build_copy_script,
    copy_to_clipboard_button,
)


_MODULE = "src.interfaces.web.streamlit.components.clipboard_button"


class TestBuildCopyScript:
    def test_text_is_json_escaped(self):
        text = "【地震情報】\"引用\"\n改行"
        script = build_copy_script(text)
        assert f"writeText({json.dumps(text, ensure_ascii=False)})" in script

    def test_closing_script_tag_in_text_is_escaped(self):
        script = build_copy_script("a</script>b")
        assert script.count("</script>") == 1
        assert "a<\\/script>b" in script

    def test_reports_success_and_failure(self):
        script = build_copy_script("x")
        assert json.dumps(COPY_SUCCEEDED_MESSAGE, ensure_ascii=False) in script
        assert json.dumps(COPY_FAILED_MESSAGE, ensure_ascii=False) in script
        assert "catch" in script

    def test_messages(self):
        assert COPY_SUCCEEDED_MESSAGE == "クリップボードにコピーしました！"
        assert COPY_FAILED_MESSAGE == "コピーに失敗しました"


class TestCopyToClipboardButton:
    @patch(f"{_MODULE}.components")
    @patch(f"{_MODULE}.st")
    def test_not_clicked(self, mock_st, mock_components):
        mock_st.button.return_value = False

        assert copy_to_clipboard_button("text") is False
        mock_components.html.assert_not_called()

    @patch(f"{_MODULE}.components")
    @patch(f"{_MODULE}.st")
    def test_clicked(self, mock_st, mock_components):
        mock_st.button.return_value = True

        assert copy_to_clipboard_button("text", label="コピー", key="k") is True
        mock_st.button.assert_called_once_with("コピー", key="k")
        mock_components.html.assert_called_once_with(
            build_copy_script("text"), height=0, width=0
        )
