"""Logging utilities for logaflow_mcp.

Provides consistent logging configuration and a helper adapter to trace
tool invocations. Output goes to stderr; stdout carries the stdio protocol.
"""

from __future__ import annotations

import logging
import sys
from typing import Union

DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ToolLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that prefixes messages with the tool name."""

    def process(self, msg: str, kwargs):  # type: ignore[override]
        tool = self.extra.get("tool")
        if tool:
            msg = f"[Tool {tool}] {msg}"
        return msg, kwargs


def resolve_level(level: Union[int, str]) -> int:
    """Translate a level name into its numeric value, defaulting to INFO."""

    if isinstance(level, str):
        value = getattr(logging, level.upper(), logging.INFO)
        return value if isinstance(value, int) else logging.INFO
    return level


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Configure the base logger for the logaflow_mcp package.

    Args:
        level: Logging level or level name to apply. Defaults to INFO.
    """

    package_logger = logging.getLogger("logaflow_mcp")
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT, DEFAULT_DATE_FORMAT))
        package_logger.addHandler(handler)
    package_logger.setLevel(resolve_level(level))
    package_logger.propagate = False

    logging.captureWarnings(True)


def get_tool_logger(tool_name: str) -> ToolLoggerAdapter:
    """Return a logger adapter scoped to a single tool."""

    logger = logging.getLogger(f"logaflow_mcp.tools.{tool_name}")
    return ToolLoggerAdapter(logger, {"tool": tool_name})
