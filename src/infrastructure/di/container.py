"""DIコンテナ.

設定 → 外部サービス → ユースケースの順に依存関係を組み立てる。
"""

from __future__ import annotations

from dependency_injector import containers, providers

from src.application.usecases.generate_earthquake_text_usecase import (
    GenerateEarthquakeTextUseCase,
)
from src.infrastructure.config.settings import Settings, get_settings
from src.infrastructure.external.jma_quake_api.client import JmaQuakeApiClient
from src.infrastructure.external.jma_quake_api.converter import JmaQuakeConverter
from src.infrastructure.external.jma_quake_api.service import (
    JmaEarthquakeListServiceImpl,
)


class ServiceContainer(containers.DeclarativeContainer):
    """外部サービスのプロバイダ."""

    settings = providers.Dependency(instance_of=Settings)

    jma_quake_api_client = providers.Factory(
        JmaQuakeApiClient,
        url=settings.provided.JMA_QUAKE_LIST_URL,
        timeout=settings.provided.HTTP_TIMEOUT_SECONDS,
    )

    jma_quake_converter = providers.Factory(
        JmaQuakeConverter,
        source_tz=settings.provided.source_tz,
    )

    earthquake_list_service = providers.Factory(
        JmaEarthquakeListServiceImpl,
        client=jma_quake_api_client,
        converter=jma_quake_converter,
    )


class UseCaseContainer(containers.DeclarativeContainer):
    """ユースケースのプロバイダ."""

    settings = providers.Dependency(instance_of=Settings)
    services = providers.DependenciesContainer()

    generate_earthquake_text_usecase = providers.Factory(
        GenerateEarthquakeTextUseCase,
        earthquake_list_service=services.earthquake_list_service,
        display_tz=settings.provided.display_tz,
    )


class Container(containers.DeclarativeContainer):
    """アプリケーション全体のコンテナ."""

    settings = providers.Dependency(instance_of=Settings)

    services = providers.Container(ServiceContainer, settings=settings)
    use_cases = providers.Container(
        UseCaseContainer,
        settings=settings,
        services=services,
    )

    @classmethod
    def create_for_environment(cls, settings: Settings | None = None) -> Container:
        """環境の設定からコンテナを生成する."""
        return cls(settings=providers.Object(settings or get_settings()))


_container: Container | None = None


def init_container(settings: Settings | None = None) -> Container:
    """グローバルコンテナを初期化する."""
    global _container
    _container = Container.create_for_environment(settings)
    return _container


def get_container() -> Container:
    """初期化済みのグローバルコンテナを取得する.

    Raises:
        RuntimeError: init_container() 前に呼ばれた場合
    """
    if _container is None:
        raise RuntimeError("DIコンテナが初期化されていません")
    return _container
