"""피드백 게이트웨이 연산을 MCP 도구로 노출."""

from typing import Annotated

from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from ..gateway import FeedbackGateway
from ..models import ToolResult

TOOL_NAMES = ("list_user_projects", "list_project_feedbacks", "reply_to_feedback")


def _unwrap(result: ToolResult) -> str:
    """오류로 표시된 결과는 ToolError로 바꿔 호스트에 isError로 전달."""
    if result.is_error:
        raise ToolError(result.text)
    return result.text


def register(mcp, gateway: FeedbackGateway) -> None:
    """게이트웨이 연산 세 가지를 도구로 등록."""

    @mcp.tool(description="List the projects the API key's user belongs to")
    async def list_user_projects() -> str:
        return _unwrap(await gateway.list_user_projects())

    @mcp.tool(description="List the feedbacks submitted to a project")
    async def list_project_feedbacks(
        project_id: Annotated[
            str,
            Field(min_length=1, description="The ID of the project to retrieve feedbacks from"),
        ],
    ) -> str:
        return _unwrap(await gateway.list_project_feedbacks(project_id))

    # GatewayError는 SDK 오류 처리로 그대로 전파
    @mcp.tool(description="Reply to a feedback")
    async def reply_to_feedback(
        feedback_id: Annotated[str, Field(description="The ID of the feedback to reply to")],
        response: Annotated[str, Field(description="The text of the reply")],
    ) -> str:
        return (await gateway.reply_to_feedback(feedback_id, response)).text
