"""
Logaflow MCP 서버의 명령줄 인터페이스.
"""

import logging
import sys
from typing import Optional

import click

from . import __version__
from .config import Config
from .prompts import PROMPT_TEMPLATES
from .server import SERVER_NAME, create_server
from .utils.logging import configure_logging


LOGGER = logging.getLogger("logaflow_mcp.cli")


@click.group()
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx):
    """
    Logaflow 피드백 API를 위한 MCP 서버.

    LOGAFLOW_API_KEY 환경 변수(또는 .env 파일)가 필요합니다.
    """
    ctx.ensure_object(dict)
    ctx.obj["config"] = Config.from_env()


@cli.command()
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse", "streamable-http"], case_sensitive=False),
    default="stdio",
    show_default=True,
    help="Transport used to talk to the MCP host",
)
@click.option("--log-level", help="Override LOGAFLOW_MCP_LOG_LEVEL")
@click.pass_context
def serve(ctx, transport: str, log_level: Optional[str]):
    """
    MCP 서버를 시작합니다.

    예제:
        logaflow-mcp serve
        logaflow-mcp serve --transport sse --log-level DEBUG
    """
    config = ctx.obj["config"]

    # API 키 없이는 서버를 만들지 않음
    try:
        config.validate()
    except ValueError as e:
        click.echo(f"❌ Configuration error: {e}", err=True)
        sys.exit(1)

    configure_logging(log_level or config.log_level)

    server = create_server(config)
    LOGGER.info("MCP 서버 시작 | 이름=%s | 전송=%s", SERVER_NAME, transport)
    server.run(transport=transport.lower())


@cli.command(name="list")
def list_capabilities():
    """등록되는 도구와 프롬프트를 표시합니다."""
    tools_info = [
        ("list_user_projects", "List the projects of the API key's user", "📁"),
        ("list_project_feedbacks", "List the feedbacks of a project", "💬"),
        ("reply_to_feedback", "Reply to a feedback item", "✉️"),
    ]

    click.echo("🔧 Tools:")
    for name, description, emoji in tools_info:
        click.echo(f"  {emoji} {name}")
        click.echo(f"     {description}")

    click.echo("\n📝 Prompts:")
    for template in PROMPT_TEMPLATES.values():
        click.echo(f"  • {template.name}")
        click.echo(f"     {template.description}")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
