"""気象庁 地震情報一覧APIクライアントパッケージ."""

from .client import JmaQuakeApiClient, JmaQuakeApiError
from .converter import JmaQuakeConverter
from .service import JmaEarthquakeListServiceImpl
from .types import QuakeListRecord


__all__ = [
    "JmaEarthquakeListServiceImpl",
    "JmaQuakeApiClient",
    "JmaQuakeApiError",
    "JmaQuakeConverter",
    "QuakeListRecord",
]
