"""Logaflow API 응답을 위한 Pydantic 모델들."""

import re
from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# UTC 타임스탬프만 허용 (오프셋 없이 Z 접미사)
ISO_DATETIME_PATTERN = re.compile(
    r"[0-9]{4}-(0[1-9]|1[0-2])-(0[1-9]|[12][0-9]|3[01])"
    r"T([01][0-9]|2[0-3]):[0-5][0-9]:[0-5][0-9](\.[0-9]+)?Z"
)


class ApiModel(BaseModel):
    """원격 API 레코드의 공통 설정."""

    model_config = ConfigDict(strict=True)


class Project(ApiModel):
    """사용자가 속한 프로젝트."""

    project_id: str = Field(alias="projectId", description="Unique identifier of the project")
    project_name: str = Field(alias="projectName", description="Name of the project")
    user_role: str = Field(alias="userRole", description="Role of the user in the project")


class FeedbackAuthor(ApiModel):
    """피드백 작성자."""

    id: str = Field(description="Unique identifier of the feedback author")
    name: str = Field(description="Name of the feedback author")
    email: str = Field(description="Email of the feedback author")
    avatar: str = Field(description="URL of the feedback author's avatar")
    custom_fields: Optional[Dict[str, Any]] = Field(
        alias="customFields",
        description="Custom fields associated with the author",
    )


class Feedback(ApiModel):
    """프로젝트에 등록된 피드백 항목."""

    id: str = Field(description="Unique identifier of the feedback")
    url: Optional[str] = Field(description="URL associated with the feedback")
    type: str = Field(description="Type of feedback")
    title: str = Field(description="Title of the feedback")
    author: FeedbackAuthor = Field(description="Author of the feedback")
    comment: str = Field(description="Text of the feedback")
    asset_key: Optional[str] = Field(
        alias="assetKey", description="Asset key associated with the feedback"
    )
    is_private: bool = Field(
        alias="isPrivate", description="Indicates if the feedback is private"
    )
    project_id: str = Field(
        alias="projectId", description="ID of the project the feedback belongs to"
    )
    session_key: str = Field(
        alias="sessionKey", description="Session key associated with the feedback"
    )
    created_at: str = Field(
        alias="createdAt", description="Timestamp when the feedback was created"
    )
    updated_at: Optional[str] = Field(
        alias="updatedAt", description="Timestamp when the feedback was last updated"
    )

    @field_validator("created_at", "updated_at")
    @classmethod
    def validate_datetime(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        if not ISO_DATETIME_PATTERN.fullmatch(value):
            raise ValueError(f"Invalid ISO 8601 datetime: {value!r}")
        # 월별 일수 (2월 30일 등)
        date.fromisoformat(value[:10])
        return value


class ProjectsResponse(ApiModel):
    """GET /projects 응답."""

    data: List[Project]


class FeedbackPage(ApiModel):
    """프로젝트 피드백 목록."""

    feedbacks: List[Feedback]


class FeedbacksResponse(ApiModel):
    """GET /projects/{id}/feedbacks 응답."""

    data: FeedbackPage


class ReplyResponse(ApiModel):
    """POST /feedbacks/{id}/reply 응답."""

    data: str
