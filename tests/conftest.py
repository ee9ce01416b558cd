"""共通テスト設定."""

import pytest
import structlog


@pytest.fixture(autouse=True, scope="session")
def _route_structlog_to_stdlib():
    """ログを標準 logging 経由にし、CLI出力に混ざらないようにする."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()
