"""気象庁 地震情報一覧APIのレスポンス型定義."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class QuakeListRecord:
    """地震情報一覧レスポンスの個別レコード.

    スキーマ検証は行わず、値はJSONのまま保持する。欠損・不正値の扱いは
    コンバーター側で決める。
    """

    id: Any = None
    time: Any = None
    pref: Any = None
    name: Any = None
    mag: Any = None
    max_int: Any = None
