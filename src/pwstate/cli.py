"""pwstate — export a Passwordstate password list to a YAML file.

Every option can also be supplied through a ``PLUGIN_*`` environment variable,
which is how Drone passes plugin settings::

    PLUGIN_API_ENDPOINT=https://passwordstate.corp.example.com/api \\
    PLUGIN_API_KEY=... \\
    PLUGIN_PASSWORD_LIST_ID=42 \\
    pwstate
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from . import __version__
from .errors import PasswordStateError
from .log import build_logger
from .models import Config
from .plugin import Plugin

# ---------------------------------------------------------------------------
# App & consoles
# ---------------------------------------------------------------------------

_THEME = Theme(
    {
        "success": "bold green",
        "danger": "bold red",
        "muted": "dim",
    }
)

console = Console(theme=_THEME)
err = Console(stderr=True, theme=_THEME)

app = typer.Typer(
    name="pwstate",
    help="[bold cyan]pwstate[/bold cyan] — export Passwordstate secrets to YAML.",
    pretty_exceptions_show_locals=False,
    rich_markup_mode="rich",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"pwstate {__version__}")
        raise typer.Exit(0)


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------


@app.command()
def main(
    api_endpoint: Annotated[
        str, typer.Option("--api-endpoint", envvar="PLUGIN_API_ENDPOINT", help="Passwordstate API base URL.")
    ] = "",
    api_key: Annotated[
        str, typer.Option("--api-key", envvar="PLUGIN_API_KEY", help="API key of the password list.", show_default=False)
    ] = "",
    password_list_id: Annotated[
        int, typer.Option("--password-list-id", envvar="PLUGIN_PASSWORD_LIST_ID", help="Password list ID.")
    ] = 0,
    connection_retries: Annotated[
        int, typer.Option("--connection-retries", envvar="PLUGIN_CONNECTION_RETRIES", help="HTTP retry count.")
    ] = 1,
    connection_timeout: Annotated[
        int, typer.Option("--connection-timeout", envvar="PLUGIN_CONNECTION_TIMEOUT", help="HTTP timeout in seconds.")
    ] = 5,
    skip_tls_verify: Annotated[
        bool, typer.Option("--skip-tls-verify", envvar="PLUGIN_SKIP_TLS_VERIFY", help="Do not verify the server certificate.")
    ] = False,
    key_field: Annotated[
        str, typer.Option("--key-field", envvar="PLUGIN_KEY_FIELD", help="Record field used as the secret key.")
    ] = "Title",
    value_field: Annotated[
        str, typer.Option("--value-field", envvar="PLUGIN_VALUE_FIELD", help="Record field used as the secret value.")
    ] = "Password",
    encode_secrets: Annotated[
        bool, typer.Option("--encode-secrets", envvar="PLUGIN_ENCODE_SECRETS", help="Base64-encode secret values.")
    ] = False,
    output_path: Annotated[
        Path, typer.Option("--output-path", "-o", envvar="PLUGIN_OUTPUT_PATH", help="Output file path.")
    ] = Path("secrets.yml"),
    output_format: Annotated[
        str, typer.Option("--output-format", envvar="PLUGIN_OUTPUT_FORMAT", help="Output format (only YAML).")
    ] = "YAML",
    section_name: Annotated[
        str, typer.Option("--section-name", envvar="PLUGIN_SECTION_NAME", help="Top-level YAML key.")
    ] = "secrets",
    debug: Annotated[
        bool, typer.Option("--debug", envvar="PLUGIN_DEBUG", help="Verbose logging.")
    ] = False,
    no_secrets_fail: Annotated[
        bool,
        typer.Option("--no-secrets-fail", envvar="PLUGIN_NO_SECRETS_FAIL", help="Fail when no secrets are found."),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit."),
    ] = None,
) -> None:
    """Fetch a password list from Passwordstate and write it as YAML."""
    config = Config(
        api_endpoint=api_endpoint,
        api_key=api_key,
        password_list_id=password_list_id,
        connection_retries=connection_retries,
        connection_timeout=connection_timeout,
        skip_tls_verify=skip_tls_verify,
        key_field=key_field,
        value_field=value_field,
        encode_secrets=encode_secrets,
        output_path=output_path,
        output_format=output_format,
        section_name=section_name,
        debug=debug,
        no_secrets_fail=no_secrets_fail,
    )
    logger = build_logger(debug=config.debug, console=console)

    try:
        secrets = Plugin(config, logger).run()
    except PasswordStateError as exc:
        err.print(f"[danger]{escape(str(exc))}[/danger]")
        raise typer.Exit(1) from exc

    console.print(
        f"[success]Exported {len(secrets)} secret(s) →[/success] [bold]{config.output_path}[/bold]"
    )


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def run() -> None:
    app()


if __name__ == "__main__":
    run()
