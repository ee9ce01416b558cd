"""地震の絞り込み・並べ替えのテスト."""

from datetime import datetime

from src.domain.services.earthquake_selector import (
    default_selection,
    find_candidate,
    select_candidates,
)
from tests.fixtures.earthquake_factories import JST, make_earthquake


def _at(hour: int, minute: int = 0) -> datetime:
    return datetime(2025, 3, 15, hour, minute, tzinfo=JST)


class TestSelectCandidates:
    """select_candidates のテスト."""

    def test_filters_by_exact_prefecture(self) -> None:
        tokyo = make_earthquake(id="a", prefectures=("東京", "千葉"))
        kyoto = make_earthquake(id="b", prefectures=("京都",))
        result = select_candidates([tokyo, kyoto], "京都")
        assert [r.id for r in result] == ["b"]

    def test_no_substring_match(self) -> None:
        # 要素の完全一致のみ
        record = make_earthquake(id="a", prefectures=("東京都",))
        assert select_candidates([record], "東京") == []

    def test_sorted_newest_first(self) -> None:
        old = make_earthquake(id="old", occurred_at=_at(9))
        new = make_earthquake(id="new", occurred_at=_at(18))
        mid = make_earthquake(id="mid", occurred_at=_at(12))
        result = select_candidates([old, new, mid], "東京")
        assert [r.id for r in result] == ["new", "mid", "old"]

    def test_equal_times_keep_input_order(self) -> None:
        first = make_earthquake(id="first", occurred_at=_at(10))
        second = make_earthquake(id="second", occurred_at=_at(10))
        result = select_candidates([first, second], "東京")
        assert [r.id for r in result] == ["first", "second"]

    def test_unknown_time_sorted_last(self) -> None:
        unknown = make_earthquake(id="unknown", occurred_at=None)
        dated = make_earthquake(id="dated", occurred_at=_at(1))
        result = select_candidates([unknown, dated], "東京")
        assert [r.id for r in result] == ["dated", "unknown"]

    def test_compares_across_offsets(self) -> None:
        from datetime import timezone

        utc_later = make_earthquake(
            id="utc", occurred_at=datetime(2025, 3, 15, 6, 0, tzinfo=timezone.utc)
        )
        jst_earlier = make_earthquake(id="jst", occurred_at=_at(14, 59))
        result = select_candidates([jst_earlier, utc_later], "東京")
        assert [r.id for r in result] == ["utc", "jst"]

    def test_empty_input(self) -> None:
        assert select_candidates([], "沖縄") == []

    def test_record_without_prefectures_never_matches(self) -> None:
        record = make_earthquake(prefectures=())
        assert select_candidates([record], "東京") == []


class TestDefaultSelection:
    """default_selection のテスト."""

    def test_first_candidate(self) -> None:
        a = make_earthquake(id="a")
        b = make_earthquake(id="b")
        assert default_selection([a, b]) is a

    def test_empty_is_none(self) -> None:
        assert default_selection([]) is None


class TestFindCandidate:
    """find_candidate のテスト."""

    def test_found(self) -> None:
        a = make_earthquake(id="a")
        b = make_earthquake(id="b")
        assert find_candidate([a, b], "b") is b

    def test_not_found(self) -> None:
        assert find_candidate([make_earthquake(id="a")], "zzz") is None
