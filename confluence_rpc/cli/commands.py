"""CLI commands for confluence_rpc.

In the overall architecture: a thin typer front end over :func:`confluence_rpc.login`.
Every command opens one session, makes one call and prints the result.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional

import typer
from rich.console import Console

from confluence_rpc import __version__
from confluence_rpc.cli.shared.logging_utils import ensure_rotating_log_file
from confluence_rpc.cli.shared.output import exit_on_failure, print_result, struct_table
from confluence_rpc.client import Confluence, login
from confluence_rpc.config.loader import get_config_path, load_config
from confluence_rpc.config.schema import ClientConfig
from confluence_rpc.errors import LocalPreconditionError
from confluence_rpc.tracing import set_tracing

app = typer.Typer(
    name="confluence-rpc",
    help="Call the XML-RPC remote API of a Confluence wiki",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"confluence-rpc v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    url: Optional[str] = typer.Option(None, "--url", help="XML-RPC endpoint, e.g. https://wiki/rpc/xmlrpc"),
    user: Optional[str] = typer.Option(None, "--user", "-u", help="Username (omit for anonymous access)"),
    password: Optional[str] = typer.Option(None, "--password", "-p", help="Password"),
    api_version: Optional[str] = typer.Option(None, "--api-version", help="Remote API namespace"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file path"),
    trace: bool = typer.Option(False, "--trace", help="Log every call, its arguments and result"),
    log_file: bool = typer.Option(False, "--log-file", help="Also write logs to ~/.confluence_rpc/logs/cli.log"),
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
):
    """confluence-rpc - Confluence XML-RPC client."""
    try:
        cfg = load_config(
            config_path,
            url=url,
            username=user,
            password=password,
            api_version=api_version,
            trace=True if trace else None,
        )
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from e
    if cfg.trace:
        set_tracing(True)
    if log_file:
        path = ensure_rotating_log_file("cli")
        set_tracing(True)
        console.print(f"[dim]Logging to {path}[/dim]")
    ctx.obj = {"config": cfg, "config_path": config_path or get_config_path()}


def _open_session(ctx: typer.Context) -> Confluence:
    cfg: ClientConfig = ctx.obj["config"]
    if not cfg.url:
        console.print("[red]No URL configured.[/red] Use --url, CONF_URL or the config file.")
        raise typer.Exit(2)
    wiki = login(cfg.url, cfg.username or None, cfg.password or None, cfg.api_version, config=cfg)
    if wiki is None:
        console.print(f"[red]Failed to connect to wiki at {cfg.url}[/red]")
        raise typer.Exit(2)
    return wiki


def _run(ctx: typer.Context, action) -> Any:
    with _open_session(ctx) as wiki:
        try:
            return action(wiki)
        except LocalPreconditionError as e:
            console.print(f"[red]{e.message}[/red]")
            raise typer.Exit(1) from e
        finally:
            if not wiki.anonymous:
                wiki.logout()


@app.command("server-info")
def server_info(ctx: typer.Context):
    """Show the server's version information."""
    result = _run(ctx, lambda wiki: wiki.get_server_info())
    exit_on_failure(console, result)
    console.print(struct_table(result, title="Server info") if isinstance(result, dict) else result)


@app.command("get-page")
def get_page(
    ctx: typer.Context,
    page_id: str = typer.Argument(..., help="Page ID"),
    content: bool = typer.Option(False, "--content", help="Print only the page body"),
):
    """Fetch a page by ID."""
    result = _run(ctx, lambda wiki: wiki.get_page(page_id))
    exit_on_failure(console, result)
    if content and isinstance(result, dict):
        console.print(result.get("content", ""), markup=False)
        return
    print_result(console, result)


@app.command("call")
def call(
    ctx: typer.Context,
    method: str = typer.Argument(..., help="Remote method name without namespace, e.g. getPages"),
    args: Optional[List[str]] = typer.Argument(None, help="Arguments, all sent as strings"),
):
    """Call any remote method whose arguments are strings."""
    result = _run(ctx, lambda wiki: wiki.call(method, *(args or [])))
    print_result(console, result)


@app.command("attach")
def attach(
    ctx: typer.Context,
    content_id: str = typer.Argument(..., help="ID of the page to attach to"),
    file: Path = typer.Argument(..., help="Local file to upload"),
    comment: Optional[str] = typer.Option(None, "--comment", "-m", help="Attachment comment"),
):
    """Upload a file as a page attachment."""
    result = _run(ctx, lambda wiki: wiki.add_attachment(content_id, file, comment))
    exit_on_failure(console, result)
    console.print(f"[green]✓[/green] Attached {file.name} to {content_id}")


@app.command("export-site")
def export_site(
    ctx: typer.Context,
    attachments: bool = typer.Option(False, "--attachments", help="Include attachments in the backup"),
):
    """Start a full site backup and print its location."""
    result = _run(ctx, lambda wiki: wiki.export_site(attachments))
    exit_on_failure(console, result)
    console.print(f"[green]✓[/green] Export written to {result}")


@app.command("config-show")
def config_show(ctx: typer.Context):
    """Show the effective configuration (password hidden)."""
    cfg: ClientConfig = ctx.obj["config"]
    path: Path = ctx.obj["config_path"]
    console.print(f"Config: {path} {'[green]✓[/green]' if path.exists() else '[dim]not found[/dim]'}")
    data = cfg.model_dump()
    data["password"] = "********" if cfg.password else ""
    console.print(struct_table(data))


if __name__ == "__main__":
    app()
