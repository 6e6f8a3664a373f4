"""도구 실행 결과 모델."""

from typing import Any, Sequence

from pydantic import BaseModel, Field, TypeAdapter


class ToolResult(BaseModel):
    """호스트로 반환되는 텍스트 결과."""

    text: str
    is_error: bool = Field(default=False, description="오류로 표시된 결과 여부")

    @classmethod
    def success(cls, text: str) -> "ToolResult":
        return cls(text=text)

    @classmethod
    def failure(cls, message: str) -> "ToolResult":
        return cls(text=f"Error: {message}", is_error=True)


def render_records(records: Sequence[Any], adapter: TypeAdapter) -> str:
    """검증된 레코드를 들여쓰기된 JSON 텍스트로 직렬화."""
    return adapter.dump_json(list(records), indent=2, by_alias=True).decode("utf-8")
