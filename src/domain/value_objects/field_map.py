"""テンプレートに差し込む項目の値オブジェクト."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldMap:
    """1回の描画で使う5項目の表示用文字列."""

    time: str
    epicenter: str
    magnitude: str
    max_intensity: str
    prefecture: str
