"""地震情報テンプレート生成ユースケース.

地震情報一覧を取得し、都道府県で絞り込んだ候補から1件を選んで
テンプレートに差し込む。
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import tzinfo

from src.application.dtos.earthquake_template_dto import (
    EarthquakeOptionDTO,
    GenerateEarthquakeTextInputDTO,
    GenerateEarthquakeTextOutputDTO,
)
from src.application.services.earthquake_template_session import (
    EarthquakeTemplateSession,
)
from src.common.logging import get_logger
from src.domain.entities.earthquake import Earthquake
from src.domain.exceptions import ExternalServiceException
from src.domain.services.earthquake_field_formatter import (
    format_fields,
    format_option_label,
)
from src.domain.services.earthquake_selector import (
    default_selection,
    find_candidate,
    select_candidates,
)
from src.domain.services.interfaces.earthquake_list_service import (
    IEarthquakeListService,
)
from src.domain.services.template_renderer import render_or_sentinel
from src.domain.value_objects.prefecture import validate_prefecture


logger = get_logger(__name__)


class GenerateEarthquakeTextUseCase:
    """地震情報を取得してテンプレートを生成するユースケース."""

    def __init__(
        self,
        earthquake_list_service: IEarthquakeListService,
        display_tz: tzinfo,
    ) -> None:
        self._service = earthquake_list_service
        self._display_tz = display_tz

    @property
    def display_tz(self) -> tzinfo:
        return self._display_tz

    async def load_into_session(
        self, session: EarthquakeTemplateSession, prefecture: str
    ) -> bool:
        """都道府県を切り替えて地震一覧を取得し、セッションに反映する.

        Returns:
            結果がセッションに反映されたか（古い取得結果なら False）

        Raises:
            Exception: 想定外のエラー. セッションはエラー状態にしてから再送出する
        """
        ticket = session.change_prefecture(prefecture)
        logger.info("地震情報一覧の取得を開始します", prefecture=prefecture)
        try:
            records = await self._service.fetch_earthquakes()
        except ExternalServiceException as e:
            return session.apply_fetch_error(ticket, e.reason)
        except Exception as e:
            logger.warning(
                "地震情報一覧の取得で予期しないエラー", prefecture=prefecture, error=str(e)
            )
            session.apply_fetch_error(ticket, str(e) or type(e).__name__)
            raise
        return session.apply_fetch_result(ticket, records)

    async def list_candidates(self, prefecture: str) -> list[Earthquake]:
        """指定都道府県の候補を新しい順に返す."""
        validate_prefecture(prefecture)
        records = await self._service.fetch_earthquakes()
        return select_candidates(records, prefecture)

    async def execute(
        self, input_dto: GenerateEarthquakeTextInputDTO
    ) -> GenerateEarthquakeTextOutputDTO:
        """1回分のテンプレート生成を実行する.

        Raises:
            ExternalServiceException: 地震情報の取得に失敗した場合
            ValueError: 未知の都道府県、または候補にない地震ID
        """
        candidates = await self.list_candidates(input_dto.prefecture)

        if input_dto.earthquake_id is None:
            selected = default_selection(candidates)
        else:
            selected = find_candidate(candidates, input_dto.earthquake_id)
            if selected is None:
                raise ValueError(f"候補にない地震IDです: '{input_dto.earthquake_id}'")

        fields = (
            format_fields(selected, input_dto.prefecture, self._display_tz)
            if selected is not None
            else None
        )
        return GenerateEarthquakeTextOutputDTO(
            prefecture=input_dto.prefecture,
            rendered_text=render_or_sentinel(input_dto.template, fields),
            candidates=candidates,
            selected=selected,
        )

    def to_options(
        self, candidates: Sequence[Earthquake]
    ) -> list[EarthquakeOptionDTO]:
        """候補をプルダウン用の選択肢に変換する."""
        return [
            EarthquakeOptionDTO(
                earthquake_id=c.id,
                label=format_option_label(c, self._display_tz),
            )
            for c in candidates
        ]
