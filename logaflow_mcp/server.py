"""MCP 서버 구성."""

from __future__ import annotations

import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP

from . import prompts, tools
from .config import Config
from .gateway import FeedbackGateway


LOGGER = logging.getLogger("logaflow_mcp.server")

SERVER_NAME = "Logaflow MCP Server"

INSTRUCTIONS = (
    "Logaflow feedback management tools. "
    "Use list_user_projects to find project IDs, list_project_feedbacks to read "
    "the feedback of a project and reply_to_feedback to answer a feedback item."
)


def create_server(
    config: Config, gateway: Optional[FeedbackGateway] = None
) -> FastMCP:
    """설정으로부터 도구와 프롬프트가 등록된 서버를 만든다."""
    gateway = gateway or FeedbackGateway(config)

    mcp = FastMCP(SERVER_NAME, instructions=INSTRUCTIONS)
    tools.register(mcp, gateway)
    prompts.register(mcp)

    LOGGER.info(
        "MCP 서버 구성 완료 | 도구=%d | 프롬프트=%d",
        len(tools.TOOL_NAMES),
        len(prompts.PROMPT_TEMPLATES),
    )
    return mcp
