"""クリップボードへのコピーボタン.

コピー自体はブラウザ側（navigator.clipboard）で行い、
成否は alert で利用者に通知する。
"""

from __future__ import annotations

import json

import streamlit as st
import streamlit.components.v1 as components


COPY_SUCCEEDED_MESSAGE = "クリップボードにコピーしました！"
COPY_FAILED_MESSAGE = "コピーに失敗しました"


def build_copy_script(text: str) -> str:
    """text をクリップボードに書き込むスクリプトを組み立てる."""
    # 本文中の "</script>" でタグが閉じないようにする
    payload = json.dumps(text, ensure_ascii=False).replace("</", "<\\/")
    ok = json.dumps(COPY_SUCCEEDED_MESSAGE, ensure_ascii=False)
    ng = json.dumps(COPY_FAILED_MESSAGE, ensure_ascii=False)
    # iframe内からは親ウィンドウのclipboardを使う
    return (
        "<script>\n"
        "(async () => {\n"
        "  const w = window.parent || window;\n"
        "  try {\n"
        f"    await w.navigator.clipboard.writeText({payload});\n"
        f"    w.alert({ok});\n"
        "  } catch (e) {\n"
        f"    w.alert({ng});\n"
        "  }\n"
        "})();\n"
        "</script>"
    )


def copy_to_clipboard_button(
    text: str, label: str = "コピー", key: str = "copy_btn"
) -> bool:
    """ボタンが押されたら text をコピーする. 押されたかどうかを返す."""
    if not st.button(label, key=key):
        return False
    components.html(build_copy_script(text), height=0, width=0)
    return True
