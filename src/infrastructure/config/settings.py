"""アプリケーション設定.

環境変数と .env ファイルから設定を読み込む。設定値の参照は
``get_settings()`` を経由する。
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def find_env_file(start: Path | None = None) -> Path | None:
    """カレントディレクトリから親方向に .env を探す."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


ENV_FILE_PATH = find_env_file()


class Settings(BaseSettings):
    """アプリケーション設定."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE_PATH,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 気象庁 地震情報一覧
    JMA_QUAKE_LIST_URL: str = "https://www.jma.go.jp/bosai/quake/data/list.json"
    HTTP_TIMEOUT_SECONDS: float = 30.0

    # 表示用タイムゾーンと、オフセットなし時刻の解釈に使うタイムゾーン
    DISPLAY_TIMEZONE: str = "Asia/Tokyo"
    SOURCE_TIMEZONE: str = "Asia/Tokyo"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"

    @field_validator("DISPLAY_TIMEZONE", "SOURCE_TIMEZONE")
    @classmethod
    def _validate_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"不明なタイムゾーンです: {value}") from e
        return value

    @field_validator("LOG_FORMAT")
    @classmethod
    def _validate_log_format(cls, value: str) -> str:
        if value not in ("console", "json"):
            raise ValueError(f"LOG_FORMAT は console か json を指定してください: {value}")
        return value

    @property
    def display_tz(self) -> ZoneInfo:
        return ZoneInfo(self.DISPLAY_TIMEZONE)

    @property
    def source_tz(self) -> ZoneInfo:
        return ZoneInfo(self.SOURCE_TIMEZONE)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """設定のシングルトンを取得する."""
    return Settings()


def reload_settings() -> Settings:
    """キャッシュを破棄して設定を読み直す."""
    get_settings.cache_clear()
    return get_settings()


settings = get_settings()
