"""Logaflow MCP 서버용 도구들."""

from .feedback_tools import TOOL_NAMES, register

__all__ = ["TOOL_NAMES", "register"]
