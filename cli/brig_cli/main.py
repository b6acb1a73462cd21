from __future__ import annotations

from importlib import metadata

import typer

from .commands import links_cmd
from .config import ConfigOverrides
from .logging_ import setup_logging


def cli_version() -> str:
    try:
        return metadata.version("brig-cli")
    except metadata.PackageNotFoundError:
        return "0.0.0"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"brig {cli_version()}")
        raise typer.Exit(code=0)


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="brig",
        help="brig URL-shortener CLI",
        no_args_is_help=True,
        add_completion=False,
    )

    app.command("list")(links_cmd.list_links)
    app.command("get")(links_cmd.get_link)
    app.command("add")(links_cmd.add_link)
    app.command("delete")(links_cmd.delete_link)

    @app.callback()
    def _main(
            ctx: typer.Context,
            config_file: str | None = typer.Option(
                None, "--config", help="Path to config file (default: per-user config dir)."
            ),
            api_token: str | None = typer.Option(None, "--api-token", help="API token (env: BRIG_API_TOKEN)."),
            base_url: str | None = typer.Option(
                None, "--base-url", help="Base URL of the URL-shortener service (env: BRIG_BASE_URL)."
            ),
            timeout: float | None = typer.Option(
                None, "--timeout", help="Request timeout in seconds (env: BRIG_TIMEOUT)."
            ),
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
            version: bool = typer.Option(
                False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit."
            ),
    ):
        setup_logging(verbose)
        ctx.obj = ConfigOverrides(
            config_file=config_file,
            api_token=api_token,
            base_url=base_url,
            timeout=timeout,
        )

    return app


app = _build_app()
