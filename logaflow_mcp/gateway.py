"""Logaflow 피드백 API 게이트웨이.

도구 인자를 받아 원격 API에 한 번의 HTTP 요청을 보내고, 응답 형태를 검증한 뒤
텍스트 결과를 돌려줍니다. 공유 상태는 읽기 전용 설정(Config)뿐입니다.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from .config import Config
from .models import (
    Feedback,
    FeedbacksResponse,
    Project,
    ProjectsResponse,
    ReplyResponse,
    ToolResult,
    render_records,
)
from .utils.logging import get_tool_logger


LOGGER = logging.getLogger("logaflow_mcp.gateway")

USER_AGENT = "MCP Server"

PROJECTS_ADAPTER = TypeAdapter(List[Project])
FEEDBACKS_ADAPTER = TypeAdapter(List[Feedback])

# 읽기 도구가 결과로 변환하는 실패 유형
READ_FAILURES = (httpx.HTTPError, httpx.InvalidURL, ValidationError, ValueError)


class GatewayError(RuntimeError):
    """원격 API 호출 실패를 호출자에게 전달하는 예외."""


class FeedbackGateway:
    """Logaflow API에 대한 상태 없는 도구 구현."""

    def __init__(
        self,
        config: Config,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self.transport = transport
        LOGGER.info("FeedbackGateway 초기화 | API=%s", config.base_url)

    def _get_headers(self, json_body: bool = False) -> Dict[str, str]:
        """Standard Logaflow headers"""
        headers = {
            "x-api-key": self.config.logaflow_api_key,
            "User-Agent": USER_AGENT,
        }
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=self.transport,
            follow_redirects=True,
        )

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json_body: Optional[Dict[str, Any]] = None,
        logger: logging.LoggerAdapter | logging.Logger = LOGGER,
    ) -> Any:
        """요청 한 건을 보내고 JSON 본문을 반환. 2xx가 아니면 예외."""
        logger.info("API 요청 | %s %s", method, path)
        async with self._client() as client:
            response = await client.request(
                method,
                self.config.base_url + path,
                headers=self._get_headers(json_body=json_body is not None),
                json=json_body,
            )
            response.raise_for_status()
            return response.json()

    async def list_user_projects(self) -> ToolResult:
        """사용자가 속한 프로젝트 목록을 조회합니다."""
        logger = get_tool_logger("list_user_projects")

        try:
            payload = await self._request("GET", "/projects", logger=logger)
            projects = ProjectsResponse.model_validate(payload).data
        except READ_FAILURES as e:
            logger.warning("프로젝트 조회 실패 | 오류=%s", e)
            return ToolResult.failure(str(e))

        logger.info("프로젝트 조회 완료 | 개수=%d", len(projects))
        return ToolResult.success(render_records(projects, PROJECTS_ADAPTER))

    async def list_project_feedbacks(self, project_id: str) -> ToolResult:
        """
        프로젝트의 피드백 목록을 조회합니다.

        피드백의 projectId가 요청한 프로젝트와 일치하는지는 확인하지 않습니다.
        원격 API가 기준입니다.

        Args:
            project_id: 피드백을 조회할 프로젝트 ID

        Returns:
            JSON 텍스트 또는 오류로 표시된 결과
        """
        logger = get_tool_logger("list_project_feedbacks")

        if not project_id:
            logger.warning("피드백 조회 거부 | project_id 없음")
            return ToolResult.failure("project_id is required")

        path = f"/projects/{quote(project_id, safe='')}/feedbacks"
        try:
            payload = await self._request("GET", path, logger=logger)
            feedbacks = FeedbacksResponse.model_validate(payload).data.feedbacks
        except READ_FAILURES as e:
            logger.warning("피드백 조회 실패 | 프로젝트=%s | 오류=%s", project_id, e)
            return ToolResult.failure(str(e))

        logger.info(
            "피드백 조회 완료 | 프로젝트=%s | 개수=%d", project_id, len(feedbacks)
        )
        return ToolResult.success(render_records(feedbacks, FEEDBACKS_ADAPTER))

    async def reply_to_feedback(self, feedback_id: str, response: str) -> ToolResult:
        """
        피드백에 답변을 등록합니다.

        읽기 도구와 달리 실패를 결과로 변환하지 않고 기록한 뒤 GatewayError로
        다시 던집니다.

        Args:
            feedback_id: 답변할 피드백 ID
            response: 답변 내용

        Returns:
            API가 돌려준 확인 문자열
        """
        logger = get_tool_logger("reply_to_feedback")

        path = f"/feedbacks/{quote(feedback_id, safe='')}/reply"
        try:
            payload = await self._request(
                "POST", path, json_body={"response": response}, logger=logger
            )
            confirmation = ReplyResponse.model_validate(payload).data
        except Exception as e:
            logger.exception("Error calling Logaflow API | 피드백=%s", feedback_id)
            raise GatewayError(f"Error replying to feedback: {e}") from e

        logger.info("피드백 답변 완료 | 피드백=%s", feedback_id)
        return ToolResult.success(confirmation)
