"""EarthquakeTemplateSession のテスト."""

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from src.application.services.earthquake_template_session import (
    EarthquakeTemplateSession,
    FetchTicket,
    SessionStatus,
)
from src.domain.services.template_renderer import DEFAULT_TEMPLATE, NO_MATCH_SENTINEL
from tests.fixtures.earthquake_factories import JST, make_earthquake


TOKYO = ZoneInfo("Asia/Tokyo")


@pytest.fixture
def records():
    return [
        make_earthquake(
            id="tokyo-old",
            occurred_at=datetime(2025, 3, 14, 8, 0, tzinfo=JST),
            prefectures=("東京",),
        ),
        make_earthquake(
            id="tokyo-new",
            occurred_at=datetime(2025, 3, 15, 14, 30, tzinfo=JST),
            prefectures=("東京", "千葉"),
        ),
        make_earthquake(
            id="hokkaido",
            occurred_at=datetime(2025, 3, 16, 1, 0, tzinfo=JST),
            prefectures=("北海道",),
            epicenter="釧路沖",
        ),
    ]


class TestInitialState:
    def test_defaults(self) -> None:
        session = EarthquakeTemplateSession()
        assert session.status is SessionStatus.IDLE
        assert session.prefecture == "北海道"
        assert session.template == DEFAULT_TEMPLATE
        assert session.selected is None
        assert session.candidates == ()
        assert session.pending_ticket is None


class TestChangePrefecture:
    def test_enters_loading_and_clears(self, records) -> None:
        session = EarthquakeTemplateSession()
        session.apply_fetch_result(session.change_prefecture("東京"), records)
        assert session.selected is not None

        ticket = session.change_prefecture("千葉")

        assert ticket == FetchTicket(2, "千葉")
        assert session.status is SessionStatus.LOADING
        assert session.is_loading
        assert session.candidates == ()
        assert session.selected is None
        assert session.error_message is None

    def test_unknown_prefecture_rejected(self) -> None:
        session = EarthquakeTemplateSession()
        with pytest.raises(ValueError):
            session.change_prefecture("東京都")
        assert session.status is SessionStatus.IDLE


class TestApplyFetchResult:
    def test_loaded_with_newest_selected(self, records) -> None:
        session = EarthquakeTemplateSession()
        ticket = session.change_prefecture("東京")

        assert session.apply_fetch_result(ticket, records) is True

        assert session.status is SessionStatus.LOADED
        assert [c.id for c in session.candidates] == ["tokyo-new", "tokyo-old"]
        assert session.selected is not None
        assert session.selected.id == "tokyo-new"
        assert session.pending_ticket is None

    def test_empty_state(self, records) -> None:
        session = EarthquakeTemplateSession()
        ticket = session.change_prefecture("沖縄")

        session.apply_fetch_result(ticket, records)

        assert session.status is SessionStatus.EMPTY
        assert session.selected is None
        assert session.rendered_text(TOKYO) == NO_MATCH_SENTINEL

    def test_selection_never_crosses_prefecture(self, records) -> None:
        session = EarthquakeTemplateSession()
        session.apply_fetch_result(session.change_prefecture("北海道"), records)
        assert session.selected is not None
        assert session.selected.id == "hokkaido"

        session.apply_fetch_result(session.change_prefecture("東京"), records)

        assert session.selected is not None
        assert "東京" in session.selected.prefectures
        assert session.selected in session.candidates

    def test_stale_result_discarded(self, records) -> None:
        session = EarthquakeTemplateSession()
        stale = session.change_prefecture("北海道")
        current = session.change_prefecture("東京")

        assert session.apply_fetch_result(stale, records) is False
        assert session.status is SessionStatus.LOADING
        assert session.candidates == ()

        assert session.apply_fetch_result(current, records) is True
        assert session.selected is not None
        assert session.selected.id == "tokyo-new"

    def test_same_prefecture_reissued_ticket_wins(self, records) -> None:
        session = EarthquakeTemplateSession()
        first = session.change_prefecture("東京")
        second = session.change_prefecture("東京")

        assert session.apply_fetch_result(first, records) is False
        assert session.apply_fetch_result(second, records) is True

    def test_completed_ticket_cannot_be_reapplied(self, records) -> None:
        session = EarthquakeTemplateSession()
        ticket = session.change_prefecture("東京")
        session.apply_fetch_result(ticket, records)

        assert session.apply_fetch_error(ticket, "late") is False
        assert session.status is SessionStatus.LOADED


class TestApplyFetchError:
    def test_error_message_verbatim(self) -> None:
        session = EarthquakeTemplateSession()
        ticket = session.change_prefecture("東京")

        assert session.apply_fetch_error(ticket, "API接続エラー") is True

        assert session.status is SessionStatus.ERROR
        assert session.error_message == "API接続エラー"
        assert session.selected is None

    def test_stale_error_discarded(self, records) -> None:
        session = EarthquakeTemplateSession()
        stale = session.change_prefecture("北海道")
        current = session.change_prefecture("東京")
        session.apply_fetch_result(current, records)

        assert session.apply_fetch_error(stale, "API接続エラー") is False
        assert session.status is SessionStatus.LOADED
        assert session.error_message is None


class TestSelectionAndTemplate:
    def test_select_candidate(self, records) -> None:
        session = EarthquakeTemplateSession()
        session.apply_fetch_result(session.change_prefecture("東京"), records)

        chosen = session.select_earthquake("tokyo-old")

        assert chosen.id == "tokyo-old"
        assert session.selected is chosen

    def test_select_outside_candidates_rejected(self, records) -> None:
        session = EarthquakeTemplateSession()
        session.apply_fetch_result(session.change_prefecture("東京"), records)

        with pytest.raises(ValueError, match="候補にない"):
            session.select_earthquake("hokkaido")
        assert session.selected is not None
        assert session.selected.id == "tokyo-new"

    def test_rendered_text_follows_template_and_selection(self, records) -> None:
        session = EarthquakeTemplateSession()
        session.apply_fetch_result(session.change_prefecture("東京"), records)
        session.update_template("{time} {magnitude} {prefecture}")

        assert session.rendered_text(TOKYO) == "2025年3月15日 14:30 M6.1 東京"

        session.select_earthquake("tokyo-old")
        assert session.rendered_text(TOKYO) == "2025年3月14日 8:00 M6.1 東京"

    def test_current_fields_none_without_selection(self) -> None:
        assert EarthquakeTemplateSession().current_fields(TOKYO) is None
