import logging

import pytest

from logaflow_mcp.config import DEFAULT_API_URL, Config
from logaflow_mcp.utils.logging import configure_logging, get_tool_logger


def test_config_from_env_reads_logaflow_variables(monkeypatch):
    monkeypatch.setenv("LOGAFLOW_API_KEY", "env-key")
    monkeypatch.setenv("LOGAFLOW_API_URL", "https://staging.logaflow.test/v1/")
    monkeypatch.setenv("LOGAFLOW_MCP_LOG_LEVEL", "DEBUG")

    config = Config.from_env()

    assert config.logaflow_api_key == "env-key"
    assert config.base_url == "https://staging.logaflow.test/v1"
    assert config.log_level == "DEBUG"
    assert config.validate() is True


def test_config_defaults_to_public_api(monkeypatch):
    monkeypatch.setenv("LOGAFLOW_API_KEY", "env-key")
    monkeypatch.delenv("LOGAFLOW_API_URL", raising=False)

    assert Config.from_env().base_url == DEFAULT_API_URL


def test_config_validate_requires_api_key(monkeypatch):
    monkeypatch.delenv("LOGAFLOW_API_KEY", raising=False)

    with pytest.raises(ValueError, match="LOGAFLOW_API_KEY"):
        Config.from_env().validate()


# ---------------------------------------------------------------------------
# Logging helpers
# ---------------------------------------------------------------------------


def test_configure_logging_installs_single_handler():
    configure_logging("debug")
    configure_logging("not-a-level")

    package_logger = logging.getLogger("logaflow_mcp")
    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.INFO
    assert package_logger.propagate is False


def test_tool_logger_prefixes_tool_name():
    adapter = get_tool_logger("reply_to_feedback")

    msg, _ = adapter.process("done", {})

    assert adapter.logger.name == "logaflow_mcp.tools.reply_to_feedback"
    assert msg == "[Tool reply_to_feedback] done"
