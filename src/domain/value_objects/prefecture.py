"""都道府県の値オブジェクト.

表記は気象庁の地震情報一覧（list.json）の ``pref`` に合わせ、
「都」「府」「県」を付けない（北海道のみそのまま）。
"""

from __future__ import annotations

from typing import Final


PREFECTURES: Final[tuple[str, ...]] = (
    "北海道", "青森", "岩手", "宮城", "秋田", "山形", "福島",
    "茨城", "栃木", "群馬", "埼玉", "千葉", "東京", "神奈川",
    "新潟", "富山", "石川", "福井", "山梨", "長野", "岐阜",
    "静岡", "愛知", "三重", "滋賀", "京都", "大阪", "兵庫",
    "奈良", "和歌山", "鳥取", "島根", "岡山", "広島", "山口",
    "徳島", "香川", "愛媛", "高知", "福岡", "佐賀", "長崎",
    "熊本", "大分", "宮崎", "鹿児島", "沖縄",
)  # fmt: skip

DEFAULT_PREFECTURE: Final[str] = PREFECTURES[0]


def is_prefecture(name: str) -> bool:
    """既知の都道府県名かどうかを判定する."""
    return name in PREFECTURES


def validate_prefecture(name: str) -> str:
    """既知の都道府県名であることを検証して返す.

    Raises:
        ValueError: 未知の都道府県名
    """
    if not is_prefecture(name):
        raise ValueError(f"不明な都道府県です: '{name}'")
    return name
