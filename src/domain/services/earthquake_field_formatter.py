"""地震情報をテンプレート差し込み用の表示文字列に変換する."""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Final

from src.domain.entities.earthquake import Earthquake
from src.domain.value_objects.field_map import FieldMap


UNKNOWN: Final[str] = "不明"
UNKNOWN_MAGNITUDE: Final[str] = "M不明"


def format_occurred_at(occurred_at: datetime | None, tz: tzinfo) -> str:
    """発生時刻を「2025年3月15日 14:30」形式にする.

    月・日・時はゼロ埋めせず、分のみ2桁にする。
    """
    if occurred_at is None:
        return UNKNOWN
    local = occurred_at.astimezone(tz)
    return f"{local.year}年{local.month}月{local.day}日 {local.hour}:{local.minute:02d}"


def format_magnitude_value(magnitude: float | None) -> str | None:
    """マグニチュードの数値部分（6.0 → "6"、6.1 → "6.1"）."""
    if magnitude is None:
        return None
    if float(magnitude).is_integer():
        return str(int(magnitude))
    return repr(float(magnitude))


def format_magnitude(magnitude: float | None) -> str:
    value = format_magnitude_value(magnitude)
    return f"M{value}" if value is not None else UNKNOWN_MAGNITUDE


def format_fields(record: Earthquake, prefecture: str, tz: tzinfo) -> FieldMap:
    """地震1件を FieldMap に変換する.

    ``prefecture`` はレコードからではなく、選択中の都道府県をそのまま使う。
    選択なしの場合は呼び出さないこと（render_or_sentinel を使う）。
    """
    return FieldMap(
        time=format_occurred_at(record.occurred_at, tz),
        epicenter=record.epicenter or UNKNOWN,
        magnitude=format_magnitude(record.magnitude),
        max_intensity=record.max_intensity or UNKNOWN,
        prefecture=prefecture,
    )


def format_option_label(record: Earthquake, tz: tzinfo) -> str:
    """地震選択プルダウンの表示ラベル（例: "3/15 14:30 - 千葉県北西部 (M6.1)"）."""
    if record.occurred_at is None:
        when = UNKNOWN
    else:
        local = record.occurred_at.astimezone(tz)
        when = f"{local.month}/{local.day} {local.hour:02d}:{local.minute:02d}"
    magnitude = format_magnitude_value(record.magnitude) or UNKNOWN
    return f"{when} - {record.epicenter or UNKNOWN} (M{magnitude})"
