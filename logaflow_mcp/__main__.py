"""``python -m logaflow_mcp`` 진입점."""

from .cli import main

main()
