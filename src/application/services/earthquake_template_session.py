"""地震情報テンプレート画面の状態.

UIフレームワークに依存しない状態オブジェクトで、状態遷移と
取得リクエストの追い越し対策（チケット照合）を担う。
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import tzinfo
from enum import Enum

from src.common.logging import get_logger
from src.domain.entities.earthquake import Earthquake
from src.domain.services.earthquake_field_formatter import format_fields
from src.domain.services.earthquake_selector import (
    default_selection,
    find_candidate,
    select_candidates,
)
from src.domain.services.template_renderer import (
    DEFAULT_TEMPLATE,
    render_or_sentinel,
)
from src.domain.value_objects.field_map import FieldMap
from src.domain.value_objects.prefecture import DEFAULT_PREFECTURE, validate_prefecture


logger = get_logger(__name__)


class SessionStatus(Enum):
    """画面の状態."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    EMPTY = "empty"
    ERROR = "error"


@dataclass(frozen=True)
class FetchTicket:
    """1回の取得リクエストの識別子."""

    sequence: int
    prefecture: str


@dataclass
class EarthquakeTemplateSession:
    """地震情報テンプレート画面の状態.

    選択中の地震は常に現在の都道府県の候補に含まれる。都道府県を変えると
    候補と選択は同時にクリアされ、取得完了時に同時に再計算される。
    """

    prefecture: str = DEFAULT_PREFECTURE
    template: str = DEFAULT_TEMPLATE
    status: SessionStatus = SessionStatus.IDLE
    candidates: tuple[Earthquake, ...] = ()
    selected: Earthquake | None = None
    error_message: str | None = None
    _sequence: int = field(default=0, repr=False)
    _pending: FetchTicket | None = field(default=None, repr=False)

    @property
    def pending_ticket(self) -> FetchTicket | None:
        return self._pending

    @property
    def is_loading(self) -> bool:
        return self.status is SessionStatus.LOADING

    def change_prefecture(self, prefecture: str) -> FetchTicket:
        """都道府県を変更し、新しい取得チケットを発行する."""
        self.prefecture = validate_prefecture(prefecture)
        self._sequence += 1
        self._pending = FetchTicket(self._sequence, self.prefecture)
        self.status = SessionStatus.LOADING
        self.candidates = ()
        self.selected = None
        self.error_message = None
        return self._pending

    def _accepts(self, ticket: FetchTicket) -> bool:
        if ticket != self._pending or ticket.prefecture != self.prefecture:
            logger.info(
                "古い取得結果を破棄しました",
                ticket_sequence=ticket.sequence,
                ticket_prefecture=ticket.prefecture,
                current_prefecture=self.prefecture,
            )
            return False
        return True

    def apply_fetch_result(
        self, ticket: FetchTicket, records: Iterable[Earthquake]
    ) -> bool:
        """取得結果を反映する. チケットが古ければ何もせず False を返す."""
        if not self._accepts(ticket):
            return False
        candidates = select_candidates(records, self.prefecture)
        self.candidates = tuple(candidates)
        self.selected = default_selection(candidates)
        self.status = SessionStatus.LOADED if candidates else SessionStatus.EMPTY
        self._pending = None
        return True

    def apply_fetch_error(self, ticket: FetchTicket, message: str) -> bool:
        """取得失敗を反映する. チケットが古ければ何もせず False を返す."""
        if not self._accepts(ticket):
            return False
        self.status = SessionStatus.ERROR
        self.error_message = message
        self._pending = None
        return True

    def select_earthquake(self, earthquake_id: str) -> Earthquake:
        """候補の中から地震を選択する.

        Raises:
            ValueError: 現在の候補に含まれないID
        """
        found = find_candidate(self.candidates, earthquake_id)
        if found is None:
            raise ValueError(f"候補にない地震IDです: '{earthquake_id}'")
        self.selected = found
        return found

    def update_template(self, template: str) -> None:
        self.template = template

    def current_fields(self, tz: tzinfo) -> FieldMap | None:
        if self.selected is None:
            return None
        return format_fields(self.selected, self.prefecture, tz)

    def rendered_text(self, tz: tzinfo) -> str:
        """現在のテンプレートと選択から生成結果を返す."""
        return render_or_sentinel(self.template, self.current_fields(tz))
