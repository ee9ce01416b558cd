"""地震情報テンプレート生成のPresenter."""

from __future__ import annotations

from typing import Any

from src.application.dtos.earthquake_template_dto import EarthquakeOptionDTO
from src.application.services.earthquake_template_session import (
    EarthquakeTemplateSession,
    SessionStatus,
)
from src.domain.value_objects.prefecture import PREFECTURES
from src.infrastructure.di.container import Container
from src.interfaces.web.streamlit.presenters.base import BasePresenter
from src.interfaces.web.streamlit.utils.session_manager import SessionManager


_SESSION_KEY = "session"


class EarthquakeTemplatePresenter(BasePresenter[EarthquakeTemplateSession]):
    """地震情報テンプレート生成のPresenter.

    画面状態は EarthquakeTemplateSession に集約し、st.session_state に保持する。
    """

    def __init__(self, container: Container | None = None) -> None:
        super().__init__(container)
        self._usecase = self.container.use_cases.generate_earthquake_text_usecase()
        self.session_manager = SessionManager(namespace="earthquake_template")

    @property
    def session(self) -> EarthquakeTemplateSession:
        return self.session_manager.get_or_create(
            _SESSION_KEY, EarthquakeTemplateSession
        )

    def load_data(self) -> EarthquakeTemplateSession:
        """現在の画面状態を返す."""
        return self.session

    def handle_action(self, action: str, **kwargs: Any) -> Any:
        """画面操作を処理する."""
        if action == "change_prefecture":
            return self.change_prefecture(kwargs["prefecture"])
        if action == "reload":
            return self.reload()
        if action == "select_earthquake":
            return self.select_earthquake(kwargs["earthquake_id"])
        if action == "update_template":
            return self.update_template(kwargs["template"])
        raise ValueError(f"Unknown action: {action}")

    def get_prefecture_options(self) -> list[str]:
        return list(PREFECTURES)

    def needs_fetch(self, prefecture: str) -> bool:
        """地震一覧の(再)取得が必要なら True."""
        session = self.session
        # スクリプト実行の開始時点で LOADING なら前回の取得は中断されている
        if session.status in (SessionStatus.IDLE, SessionStatus.LOADING):
            return True
        return session.prefecture != prefecture

    def change_prefecture(self, prefecture: str) -> EarthquakeTemplateSession:
        """都道府県を切り替えて地震一覧を取得する."""
        session = self.session
        applied = self._run_async(self._usecase.load_into_session(session, prefecture))
        if not applied:
            self.logger.info("取得結果は反映されませんでした", prefecture=prefecture)
        self.session_manager.set(_SESSION_KEY, session)
        return session

    def reload(self) -> EarthquakeTemplateSession:
        """現在の都道府県で再取得する."""
        return self.change_prefecture(self.session.prefecture)

    def select_earthquake(self, earthquake_id: str) -> EarthquakeTemplateSession:
        session = self.session
        session.select_earthquake(earthquake_id)
        self.session_manager.set(_SESSION_KEY, session)
        return session

    def update_template(self, template: str) -> EarthquakeTemplateSession:
        session = self.session
        session.update_template(template)
        self.session_manager.set(_SESSION_KEY, session)
        return session

    def get_earthquake_options(self) -> list[EarthquakeOptionDTO]:
        """地震選択プルダウンの選択肢."""
        return self._usecase.to_options(self.session.candidates)

    def get_rendered_text(self) -> str:
        """現在の生成結果."""
        return self.session.rendered_text(self._usecase.display_tz)
