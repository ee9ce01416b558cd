"""地震情報一覧取得サービスのインターフェース."""

from __future__ import annotations

from typing import Protocol

from src.domain.entities.earthquake import Earthquake


class IEarthquakeListService(Protocol):
    """最近の地震情報一覧を取得するサービスのインターフェース."""

    async def fetch_earthquakes(self) -> list[Earthquake]:
        """地震情報一覧を取得する.

        Raises:
            ExternalServiceException: 取得に失敗した場合。``reason`` は
                利用者にそのまま表示できるメッセージ。
        """
        ...
