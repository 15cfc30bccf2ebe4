"""Command-line entry point: run the MCP server or print framework guidance."""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

import typer

from ..domain import Framework
from ..ext.mcp import serve_mcp
from ..foundation.config import get_settings
from ..handlers import build_registry
from ..runtime import configure_logging
from ..snippets import FRAMEWORKS, get_customization_guide, get_layout_shift_css, get_setup_guidance
from ..upstream import IconifyClient

app = typer.Typer(no_args_is_help=True, help="Iconify icon search, SVG retrieval and framework snippets over MCP.")


class TransportOption(StrEnum):
    STDIO = "stdio"
    SSE = "sse"
    STREAMABLE_HTTP = "streamable-http"


@app.command()
def serve(
    transport: Optional[TransportOption] = typer.Option(None, "--transport", "-t", help="Override ICONIFY_MCP_SERVER_TRANSPORT."),
    host: Optional[str] = typer.Option(None, "--host", help="Bind host for network transports."),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Bind port for network transports."),
) -> None:
    """Run the MCP server (stdio by default)."""
    settings = get_settings()
    configure_logging(settings.logging)

    client = IconifyClient.from_settings(settings.api)
    serve_mcp(
        build_registry(client),
        name=settings.server.name,
        transport=transport.value if transport else settings.server.transport,
        host=host or settings.server.host,
        port=port or settings.server.port,
    )


@app.command()
def guide(
    framework: Optional[Framework] = typer.Argument(None, help="Framework tag; omit to list all."),
    customization: bool = typer.Option(False, "--customization", "-c", help="Show the customization guide instead."),
) -> None:
    """Print setup guidance for one framework, or list supported frameworks."""
    if framework is None:
        for fw, spec in FRAMEWORKS.items():
            typer.echo(f"{fw.value:<28} {spec.display_name}")
        return

    if customization:
        typer.echo(get_customization_guide(framework))
        return
    typer.echo(get_setup_guidance(framework))
    typer.echo(f"\n{get_layout_shift_css(framework)}")


def main() -> None:
    app()
