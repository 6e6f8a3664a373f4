"""공용 유틸리티."""

from .logging import configure_logging, get_tool_logger

__all__ = ["configure_logging", "get_tool_logger"]
