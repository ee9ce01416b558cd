"""気象庁 地震情報一覧APIクライアント.

httpx asyncベースのHTTPクライアントで、固定URLへの GET を1回だけ行う。
リトライ・ページネーションは持たない。
"""

from __future__ import annotations

from typing import Any

import httpx

from .types import QuakeListRecord

from src.common.logging import get_logger


logger = get_logger(__name__)


class JmaQuakeApiError(Exception):
    """地震情報一覧APIクライアントのエラー."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class JmaQuakeApiClient:
    """気象庁 地震情報一覧APIクライアント (httpx async)."""

    DEFAULT_URL = "https://www.jma.go.jp/bosai/quake/data/list.json"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self._external_client = client
        self._owns_client = client is None
        self._url = url or self.DEFAULT_URL
        self._timeout = timeout if timeout is not None else self.DEFAULT_TIMEOUT

    @property
    def url(self) -> str:
        return self._url

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTPクライアントを取得（外部注入 or 自動生成）."""
        if self._external_client is not None:
            return self._external_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def fetch_list(self) -> list[QuakeListRecord]:
        """地震情報一覧を取得する."""
        data = await self._request()
        records = self._parse_list_response(data)
        logger.info("地震情報一覧を取得しました", url=self._url, count=len(records))
        return records

    async def _request(self) -> Any:
        """APIリクエスト実行."""
        client = await self._get_client()

        try:
            response = await client.get(self._url)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise JmaQuakeApiError(
                "API接続エラー",
                status_code=e.response.status_code,
            ) from e
        except httpx.TimeoutException as e:
            raise JmaQuakeApiError("APIリクエストタイムアウト") from e
        except httpx.HTTPError as e:
            raise JmaQuakeApiError(f"HTTPエラー: {e}") from e
        except ValueError as e:
            # JSONDecodeError と本文の文字コード不正 (UnicodeDecodeError) の両方
            raise JmaQuakeApiError("APIレスポンスの形式が不正です") from e
        finally:
            if self._owns_client:
                await client.aclose()

    @staticmethod
    def _parse_list_response(data: Any) -> list[QuakeListRecord]:
        """APIレスポンスJSONをQuakeListRecordのリストに変換."""
        if not isinstance(data, list):
            raise JmaQuakeApiError("APIレスポンスの形式が不正です")

        records: list[QuakeListRecord] = []
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                logger.warning("不正なレコードをスキップしました", index=index)
                continue
            records.append(
                QuakeListRecord(
                    id=item.get("id"),
                    time=item.get("time"),
                    pref=item.get("pref"),
                    name=item.get("name"),
                    mag=item.get("mag"),
                    max_int=item.get("maxInt"),
                )
            )
        return records
