"""pwstate — export Passwordstate password lists as YAML secrets files."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Secret

__version__ = "0.1.0"


def export_secrets(**options) -> list[Secret]:
    """Run one export from keyword options — the one-liner for scripts.

    Accepts the same fields as :class:`pwstate.models.Config`
    (``api_endpoint``, ``api_key``, ``password_list_id``, ``output_path`` ...)
    and returns the list of :class:`~pwstate.models.Secret` written.

    Raises:
        pwstate.errors.PasswordStateError: If validation, the fetch, the
            empty-result guard or the file write fails.

    Example::

        from pwstate import export_secrets

        export_secrets(
            api_endpoint="https://passwordstate.corp.example.com/api",
            api_key=os.environ["PASSWORDSTATE_KEY"],
            password_list_id=42,
            output_path="vars/secrets.yml",
        )
    """
    from .log import build_logger
    from .models import Config
    from .plugin import Plugin

    config = Config(**options)
    return Plugin(config, build_logger(debug=config.debug)).run()
