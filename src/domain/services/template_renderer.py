"""地震情報テンプレートの差し込み処理.

認識するプレースホルダーは ``PlaceholderToken`` の5種類に限定する。
置換は単純な文字列の置き換えで、エスケープ記法・再帰展開・条件分岐は持たない。
"""

from __future__ import annotations

import re

from enum import Enum
from typing import Final

from src.domain.value_objects.field_map import FieldMap


NO_MATCH_SENTINEL: Final[str] = "該当する地震がありません"

DEFAULT_TEMPLATE: Final[str] = (
    "【地震情報】{time} 発生。震源地は {epicenter}、{magnitude}、"
    "最大震度 {maxIntensity}。（{prefecture}県庁所在地）"
)


class PlaceholderToken(Enum):
    """プレースホルダーと FieldMap 属性の対応表."""

    TIME = ("{time}", "time")
    EPICENTER = ("{epicenter}", "epicenter")
    MAGNITUDE = ("{magnitude}", "magnitude")
    MAX_INTENSITY = ("{maxIntensity}", "max_intensity")
    PREFECTURE = ("{prefecture}", "prefecture")

    def __init__(self, literal: str, field_name: str) -> None:
        self.literal = literal
        self.field_name = field_name

    def value_from(self, fields: FieldMap) -> str:
        value: str = getattr(fields, self.field_name)
        return value


_TOKENS_BY_LITERAL: Final[dict[str, PlaceholderToken]] = {
    token.literal: token for token in PlaceholderToken
}

# 1パスで走査するため、差し込んだ値の中のトークンは再展開されない
_TOKEN_PATTERN: Final[re.Pattern[str]] = re.compile(
    "|".join(re.escape(literal) for literal in _TOKENS_BY_LITERAL)
)


def token_values(fields: FieldMap) -> dict[str, str]:
    """プレースホルダー文字列 → 差し込み値の辞書を返す."""
    return {token.literal: token.value_from(fields) for token in PlaceholderToken}


def render(template: str, fields: FieldMap) -> str:
    """テンプレート中の全プレースホルダーを置換する.

    Args:
        template: 利用者が編集したテンプレート
        fields: 差し込む値

    Returns:
        置換後の文字列。未知の ``{...}`` や閉じていない括弧はそのまま残る。
    """
    values = token_values(fields)
    return _TOKEN_PATTERN.sub(lambda m: values[m.group(0)], template)


def render_or_sentinel(template: str, fields: FieldMap | None) -> str:
    """選択中の地震がなければ固定文言を返し、あれば render() する."""
    if fields is None:
        return NO_MATCH_SENTINEL
    return render(template, fields)
