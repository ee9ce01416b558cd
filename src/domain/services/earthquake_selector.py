"""都道府県で地震情報を絞り込み、新しい順に並べる."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from src.domain.entities.earthquake import Earthquake


def _sort_key(record: Earthquake) -> tuple[int, float]:
    # 発生時刻不明のものは末尾へ
    if record.occurred_at is None:
        return (1, 0.0)
    return (0, -record.occurred_at.timestamp())


def select_candidates(
    records: Iterable[Earthquake], prefecture: str
) -> list[Earthquake]:
    """指定都道府県を含む地震を新しい順に返す.

    同時刻のものは元の順序を保つ（安定ソート）。該当なしは空リスト。
    """
    matched = [r for r in records if r.affects(prefecture)]
    return sorted(matched, key=_sort_key)


def default_selection(candidates: Sequence[Earthquake]) -> Earthquake | None:
    """既定の選択（先頭＝最新）。候補がなければ None."""
    return candidates[0] if candidates else None


def find_candidate(
    candidates: Sequence[Earthquake], earthquake_id: str
) -> Earthquake | None:
    """候補の中からIDで検索する."""
    return next((c for c in candidates if c.id == earthquake_id), None)
