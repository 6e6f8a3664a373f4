"""피드백 분석용 프롬프트 템플릿 및 렌더러."""

from dataclasses import dataclass
from typing import Annotated, Any, Callable, Dict, List

from pydantic import Field

__all__ = [
    "PROMPT_TEMPLATES",
    "PromptTemplate",
    "register",
    "render_prompt",
]

FEEDBACK_TOOL = "list_project_feedbacks"


@dataclass(frozen=True)
class PromptTemplate:
    """프롬프트 이름, 설명, 본문."""

    name: str
    description: str
    argument_description: str
    body: str

    def render(self, project_id: str) -> List[Dict[str, Any]]:
        """프로젝트 ID를 주입해 사용자 메시지 하나를 만든다."""
        text = self.body.format(project_id=project_id, tool=FEEDBACK_TOOL)
        return [{"role": "user", "content": {"type": "text", "text": text}}]


PROMPT_TEMPLATES: Dict[str, PromptTemplate] = {
    template.name: template
    for template in (
        PromptTemplate(
            name="analyze_feedback_trends",
            description="Analyze feedback trends for a project",
            argument_description="The ID of the project to analyze",
            body=(
                "Analyze feedback trends for project {project_id}. "
                "Use the '{tool}' tool to get the data. "
                "Then, analyze the feedback types and creation dates to identify trends."
            ),
        ),
        PromptTemplate(
            name="identify_urgent_bugs",
            description="Identify urgent bug reports in a project",
            argument_description="The ID of the project to check for urgent bugs",
            body=(
                "Identify urgent bug reports in project {project_id}. "
                "Use the '{tool}' tool to get the data. "
                "Filter the feedback where 'type' is 'bug' and look for keywords like "
                "'critical', 'urgent', 'error', 'crash' in the title and comment."
            ),
        ),
        PromptTemplate(
            name="summarize_feedback",
            description="Summarize the feedback of a project",
            argument_description="The ID of the project to summarize feedback for",
            body=(
                "Summarize the feedback for project {project_id}. "
                "Use the '{tool}' tool to get the data. "
                "Summarize the key points, grouping similar comments together."
            ),
        ),
    )
}


def render_prompt(name: str, project_id: str) -> List[Dict[str, Any]]:
    """이름으로 템플릿을 찾아 렌더링."""
    try:
        template = PROMPT_TEMPLATES[name]
    except KeyError:
        known = ", ".join(sorted(PROMPT_TEMPLATES))
        raise KeyError(f"Unknown prompt '{name}'. Known prompts: {known}") from None
    return template.render(project_id)


def _prompt_function(template: PromptTemplate) -> Callable[..., List[Dict[str, Any]]]:
    def prompt_fn(
        project_id: Annotated[str, Field(description=template.argument_description)],
    ) -> List[Dict[str, Any]]:
        return template.render(project_id)

    prompt_fn.__name__ = template.name
    return prompt_fn


def register(mcp) -> None:
    """모든 템플릿을 MCP 프롬프트로 등록."""
    for template in PROMPT_TEMPLATES.values():
        mcp.prompt(name=template.name, description=template.description)(
            _prompt_function(template)
        )
