"""
Logaflow 피드백 API를 위한 MCP 서버.

이 패키지는 프로젝트 조회, 피드백 조회, 피드백 답변 도구와 피드백 분석용
프롬프트 템플릿을 Model Context Protocol 호스트에 제공합니다.
"""

__version__ = "1.0.0"

from .config import Config
from .gateway import FeedbackGateway, GatewayError

__all__ = ["Config", "FeedbackGateway", "GatewayError"]
