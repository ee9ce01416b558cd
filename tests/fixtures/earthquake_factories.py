from datetime import datetime, timedelta, timezone
from typing import Any

from src.domain.entities.earthquake import Earthquake


JST = timezone(timedelta(hours=9))


def make_earthquake(
    id: str = "20250315143000",
    occurred_at: datetime | None = datetime(2025, 3, 15, 14, 30, tzinfo=JST),
    prefectures: tuple[str, ...] = ("東京",),
    epicenter: str | None = "千葉県北西部",
    magnitude: float | None = 6.1,
    max_intensity: str | None = "5弱",
) -> Earthquake:
    return Earthquake(
        id=id,
        occurred_at=occurred_at,
        prefectures=prefectures,
        epicenter=epicenter,
        magnitude=magnitude,
        max_intensity=max_intensity,
    )


def make_list_item(**overrides: Any) -> dict[str, Any]:
    """地震情報一覧APIの1件分のJSON."""
    defaults: dict[str, Any] = {
        "id": "20250315143000",
        "time": "2025-03-15T14:30:00+09:00",
        "pref": ["東京", "千葉"],
        "name": "千葉県北西部",
        "mag": 6.1,
        "maxInt": "5弱",
    }
    defaults.update(overrides)
    return defaults
