"""IEarthquakeListService のインフラストラクチャ実装.

JmaQuakeApiClient をラップし、APIレスポンスをドメインエンティティに変換する。
"""

from __future__ import annotations

from src.common.logging import get_logger
from src.domain.entities.earthquake import Earthquake
from src.domain.exceptions import ExternalServiceException
from src.infrastructure.external.jma_quake_api.client import (
    JmaQuakeApiClient,
    JmaQuakeApiError,
)
from src.infrastructure.external.jma_quake_api.converter import JmaQuakeConverter


logger = get_logger(__name__)


class JmaEarthquakeListServiceImpl:
    """IEarthquakeListService の具象実装."""

    SERVICE_NAME = "気象庁地震情報"

    def __init__(
        self,
        client: JmaQuakeApiClient,
        converter: JmaQuakeConverter,
    ) -> None:
        self._client = client
        self._converter = converter

    async def fetch_earthquakes(self) -> list[Earthquake]:
        """地震情報一覧を取得しエンティティに変換して返す."""
        try:
            records = await self._client.fetch_list()
        except JmaQuakeApiError as e:
            logger.warning(
                "地震情報一覧の取得に失敗しました",
                reason=str(e),
                status_code=e.status_code,
            )
            raise ExternalServiceException(
                service_name=self.SERVICE_NAME,
                operation="fetch_earthquakes",
                reason=str(e),
            ) from e

        # IDのないレコードは一覧内の位置で識別する
        return [
            self._converter.to_entity(r, fallback_id=f"#{i}")
            for i, r in enumerate(records)
        ]
