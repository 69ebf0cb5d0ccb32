"""
日誌配置測試模組
Test module for logging configuration
"""

import logging
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).parent.parent.parent.parent))

from translator_match.config import settings
from translator_match.config.logging_config import (
    LOG_FORMATS,
    LOGGER_CONFIGS,
    LogFormat,
    LoggerNames,
    LogLevel,
    get_development_logging_config,
    get_handler_configs,
    get_logging_config,
    get_production_logging_config,
    setup_logging,
)


@pytest.fixture
def restore_logging():
    original_env = settings.CURRENT_ENVIRONMENT
    root = logging.getLogger()
    original_level = root.level
    original_handlers = list(root.handlers)
    yield
    for handler in root.handlers:
        if handler not in original_handlers:
            handler.close()
    root.handlers = original_handlers
    root.setLevel(original_level)
    settings.CURRENT_ENVIRONMENT = original_env


class TestLogEnums:
    """測試日誌枚舉"""

    def test_log_level_values(self):
        assert LogLevel.DEBUG.value == "DEBUG"
        assert LogLevel.ERROR.value == "ERROR"

    def test_log_format_values(self):
        for fmt in LogFormat:
            assert fmt.value in LOG_FORMATS


class TestHandlerConfigs:
    """測試處理器配置"""

    def test_get_handler_configs_structure(self, tmp_path):
        handlers = get_handler_configs(tmp_path)
        assert set(handlers) == {"console", "file_info", "file_error", "recommendation", "pricing"}
        for handler in handlers.values():
            assert "class" in handler
            assert "formatter" in handler

    def test_file_handlers_use_log_directory(self, tmp_path):
        handlers = get_handler_configs(tmp_path / "nested")
        assert (tmp_path / "nested").is_dir()
        assert handlers["pricing"]["filename"] == str(tmp_path / "nested" / "pricing.log")
        assert handlers["recommendation"]["filename"] == str(tmp_path / "nested" / "recommendation.log")


class TestLoggingConfig:
    """測試完整日誌配置"""

    def test_logger_configs_reference_known_handlers(self, tmp_path):
        handlers = get_handler_configs(tmp_path)
        for logger_config in LOGGER_CONFIGS.values():
            for handler in logger_config["handlers"]:
                assert handler in handlers

    def test_logging_config_with_debug(self, tmp_path):
        config = get_logging_config(log_dir=tmp_path, debug_mode=True)
        assert config["handlers"]["console"]["level"] == "DEBUG"
        assert config["loggers"]["translator_match.core"]["level"] == "DEBUG"
        # 模組層級配置不受影響
        assert LOGGER_CONFIGS["translator_match.core"]["level"] == "INFO"

    def test_logging_config_console_level(self, tmp_path):
        config = get_logging_config(log_dir=tmp_path, console_level=LogLevel.WARNING)
        assert config["handlers"]["console"]["level"] == "WARNING"
        assert config["version"] == 1
        assert config["disable_existing_loggers"] is False

    def test_environment_presets(self, tmp_path):
        development = get_development_logging_config(tmp_path)
        production = get_production_logging_config(tmp_path)
        assert development["root"]["level"] == "DEBUG"
        assert production["root"]["level"] == "INFO"
        assert production["handlers"]["console"]["level"] == "INFO"

    def test_pricing_logger_has_pricing_handler(self):
        assert "pricing" in LOGGER_CONFIGS[LoggerNames.COST_MODEL]["handlers"]


class TestSetupLogging:
    """測試日誌系統設定"""

    def test_setup_logging_production(self, tmp_path, restore_logging):
        settings.CURRENT_ENVIRONMENT = "production"
        setup_logging(log_level="WARNING", log_dir=tmp_path)
        assert logging.getLogger().level == logging.WARNING
        assert (tmp_path / "application.log").exists()

    def test_setup_logging_testing_uses_subdirectory(self, tmp_path, restore_logging):
        settings.CURRENT_ENVIRONMENT = "testing"
        setup_logging(log_level="INFO", log_dir=tmp_path)
        assert (tmp_path / "test").is_dir()

    def test_setup_logging_invalid_level_defaults_to_info(self, tmp_path, restore_logging):
        settings.CURRENT_ENVIRONMENT = "development"
        setup_logging(log_level="chatty", log_dir=tmp_path)
        assert logging.getLogger().level == logging.INFO
