"""ドメイン層の例外定義."""

from __future__ import annotations


class DomainException(Exception):
    """ドメイン層の基底例外."""


class ExternalServiceException(DomainException):
    """外部サービス呼び出しの失敗.

    ``reason`` は利用者にそのまま表示できるメッセージを保持する。
    """

    def __init__(self, service_name: str, operation: str, reason: str) -> None:
        self.service_name = service_name
        self.operation = operation
        self.reason = reason
        super().__init__(f"{service_name}.{operation} の呼び出しに失敗しました: {reason}")
