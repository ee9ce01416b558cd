"""地震情報エンティティ."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Earthquake:
    """地震情報一覧の1件.

    取得のたびに丸ごと置き換えられ、個別に更新されることはない。
    不明な項目は None で保持する。
    """

    id: str
    occurred_at: datetime | None
    prefectures: tuple[str, ...] = field(default_factory=tuple)
    epicenter: str | None = None
    magnitude: float | None = None
    max_intensity: str | None = None

    def affects(self, prefecture: str) -> bool:
        """指定都道府県が影響範囲に含まれるか（完全一致）."""
        return prefecture in self.prefectures
