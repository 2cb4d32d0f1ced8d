import logging
from collections.abc import Generator

import pytest

from faultkit.bootstrap import configure
from faultkit.config.settings import Settings
from faultkit.logging.logger import Log


@pytest.fixture()
def clean_logger() -> Generator[logging.Logger, None, None]:
    """Yield the faultkit logger and restore its handlers and level afterwards."""
    logger = logging.getLogger("faultkit")
    handlers, level = list(logger.handlers), logger.level
    logger.handlers.clear()
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestLogConfigure:
    def test_sets_level(self, clean_logger: logging.Logger) -> None:
        Log.configure("debug")
        assert clean_logger.level == logging.DEBUG

    def test_adds_single_handler(self, clean_logger: logging.Logger) -> None:
        Log.configure("INFO")
        Log.configure("INFO")
        assert len(clean_logger.handlers) == 1

    def test_handler_format(self, clean_logger: logging.Logger) -> None:
        Log.configure("INFO")
        formatter = clean_logger.handlers[0].formatter
        assert formatter is not None
        assert formatter._fmt == "%(asctime)s [%(levelname)s] %(message)s"


class TestLogMessages:
    def test_levels_forwarded(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("DEBUG", logger="faultkit"):
            Log.debug("d")
            Log.info("i")
            Log.warning("w")
            Log.error("e")
        assert [r.levelname for r in caplog.records] == ["DEBUG", "INFO", "WARNING", "ERROR"]

    def test_kwargs_become_extra(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("INFO", logger="faultkit"):
            Log.info("with context", code=404)
        assert caplog.records[0].code == 404  # type: ignore[attr-defined]


class TestBootstrap:
    def test_uses_given_settings(self, clean_logger: logging.Logger) -> None:
        settings = Settings(log_level="WARNING")
        assert configure(settings) is settings
        assert clean_logger.level == logging.WARNING

    def test_loads_settings_from_env(
        self, clean_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        settings = configure()
        assert settings.log_level == "ERROR"
        assert clean_logger.level == logging.ERROR

    def test_logs_configuration(
        self, clean_logger: logging.Logger, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level("INFO", logger="faultkit"):
            configure(Settings(app_env="staging", log_level="INFO"))
        assert "faultkit configured for staging at INFO" in caplog.text
