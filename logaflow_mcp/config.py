"""logaflow_mcp의 설정 관리."""

import os
from pydantic import BaseModel
from dotenv import load_dotenv

# 환경 변수 로드
load_dotenv()

DEFAULT_API_URL = "https://api.logaflow.com/v1"


class Config(BaseModel):
    """Logaflow MCP 서버의 설정."""

    # Logaflow API 설정
    logaflow_api_key: str = ""
    logaflow_api_url: str = DEFAULT_API_URL

    # 로깅 설정
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """환경 변수로부터 설정 생성."""
        return cls(
            logaflow_api_key=os.getenv("LOGAFLOW_API_KEY", ""),
            logaflow_api_url=os.getenv("LOGAFLOW_API_URL") or DEFAULT_API_URL,
            log_level=os.getenv("LOGAFLOW_MCP_LOG_LEVEL", "INFO"),
        )

    @property
    def base_url(self) -> str:
        """끝의 슬래시를 제거한 API 기본 URL."""
        return self.logaflow_api_url.rstrip("/")

    def validate(self) -> bool:
        """필수 설정 검증."""
        if not self.logaflow_api_key:
            raise ValueError("LOGAFLOW_API_KEY environment variable is required")
        return True
