import pytest

from logaflow_mcp.prompts import PROMPT_TEMPLATES, render_prompt


def test_prompt_templates_cover_feedback_analyses():
    assert sorted(PROMPT_TEMPLATES) == [
        "analyze_feedback_trends",
        "identify_urgent_bugs",
        "summarize_feedback",
    ]


def test_render_prompt_builds_single_user_message():
    messages = render_prompt("summarize_feedback", "p1")

    assert messages == [
        {
            "role": "user",
            "content": {
                "type": "text",
                "text": (
                    "Summarize the feedback for project p1. "
                    "Use the 'list_project_feedbacks' tool to get the data. "
                    "Summarize the key points, grouping similar comments together."
                ),
            },
        }
    ]


@pytest.mark.parametrize("name", sorted(PROMPT_TEMPLATES))
def test_every_prompt_references_feedback_listing_tool(name):
    text = render_prompt(name, "proj-42")[0]["content"]["text"]

    assert "project proj-42" in text
    assert "'list_project_feedbacks' tool" in text


def test_identify_urgent_bugs_lists_keywords():
    text = render_prompt("identify_urgent_bugs", "p1")[0]["content"]["text"]

    assert "'type' is 'bug'" in text
    for keyword in ("critical", "urgent", "error", "crash"):
        assert f"'{keyword}'" in text


def test_render_prompt_accepts_empty_project_id():
    text = render_prompt("analyze_feedback_trends", "")[0]["content"]["text"]

    assert text.startswith("Analyze feedback trends for project . ")


def test_render_prompt_rejects_unknown_name():
    with pytest.raises(KeyError, match="summarize_feedback"):
        render_prompt("unknown", "p1")
