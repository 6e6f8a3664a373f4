"""모델 패키지."""

from .feedback import (
    Feedback,
    FeedbackAuthor,
    FeedbackPage,
    FeedbacksResponse,
    Project,
    ProjectsResponse,
    ReplyResponse,
)
from .result import ToolResult, render_records

__all__ = [
    "Feedback",
    "FeedbackAuthor",
    "FeedbackPage",
    "FeedbacksResponse",
    "Project",
    "ProjectsResponse",
    "ReplyResponse",
    "ToolResult",
    "render_records",
]
