"""地震情報一覧レスポンスをドメインエンティティに変換するコンバーター.

スキーマ検証は行わない。欠損・不正な項目は None（不明）に落とし、
レコード全体を捨てることはしない。
"""

from __future__ import annotations

import math

from datetime import datetime, tzinfo
from typing import Any

from .types import QuakeListRecord

from src.domain.entities.earthquake import Earthquake


class JmaQuakeConverter:
    """地震情報一覧レスポンスの純粋変換ロジック."""

    def __init__(self, source_tz: tzinfo) -> None:
        self._source_tz = source_tz

    def to_entity(self, record: QuakeListRecord, fallback_id: str = "") -> Earthquake:
        """QuakeListRecord → Earthquake エンティティに変換する."""
        return Earthquake(
            id=self.parse_id(record.id) or fallback_id,
            occurred_at=self.parse_time(record.time, self._source_tz),
            prefectures=self.parse_prefectures(record.pref),
            epicenter=self.parse_text(record.name),
            magnitude=self.parse_magnitude(record.mag),
            max_intensity=self.parse_text(record.max_int),
        )

    @staticmethod
    def parse_id(value: Any) -> str:
        if value is None or isinstance(value, bool):
            return ""
        return str(value)

    @staticmethod
    def parse_time(value: Any, source_tz: tzinfo) -> datetime | None:
        """ISO形式の時刻文字列を aware な datetime に変換する.

        オフセットのない時刻は ``source_tz`` の時刻とみなす。
        """
        if not isinstance(value, str) or not value.strip():
            return None
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=source_tz)
        return parsed

    @staticmethod
    def parse_prefectures(value: Any) -> tuple[str, ...]:
        """影響都道府県の配列を文字列タプルにする.

        文字列単体の場合は1要素として扱う。
        """
        if isinstance(value, str):
            return (value,) if value else ()
        if isinstance(value, list | tuple):
            return tuple(p for p in value if isinstance(p, str))
        return ()

    @staticmethod
    def parse_text(value: Any) -> str | None:
        if isinstance(value, bool) or value is None:
            return None
        if isinstance(value, int | float):
            return str(value)
        if isinstance(value, str) and value.strip():
            return value.strip()
        return None

    @staticmethod
    def parse_magnitude(value: Any) -> float | None:
        if isinstance(value, bool) or value is None:
            return None
        if isinstance(value, int | float):
            number = float(value)
        elif isinstance(value, str):
            try:
                number = float(value.strip())
            except ValueError:
                return None
        else:
            return None
        return number if math.isfinite(number) else None
