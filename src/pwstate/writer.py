"""YAML output.

The file is written line by line rather than through a YAML emitter so the
layout stays fixed::

    ---
    <section>:
      <key>: '<value>'

Nothing is escaped. Values are wrapped in single quotes verbatim, so a value
containing a single quote produces invalid YAML. Keys are written bare, so a
key containing ``: `` or starting with a YAML indicator (``#``, ``-``, ``&``,
``*``, ``!``, ``?``, ``|``, ``>``, ``%``, ``@``, ``[``, ``{``) is either
rejected by a YAML parser or read back as something other than the key.
"""

from __future__ import annotations

import base64
import logging
from collections.abc import Sequence
from pathlib import Path

from .errors import WriteError
from .models import Secret


def encode_value(value: str) -> str:
    """Return the standard base64 encoding of *value*'s UTF-8 bytes."""
    return base64.b64encode(value.encode("utf-8")).decode("ascii")


def _header(section: str) -> str:
    return f"---\n{section}:\n"


def _entry(secret: Secret, encode: bool) -> str:
    key = secret.key.strip()
    value = secret.value.strip()
    if encode:
        value = encode_value(value)
    return f"  {key}: '{value}'\n"


def render_yaml(section: str, secrets: Sequence[Secret], encode: bool = False) -> str:
    """Return the full file content for *secrets* under *section*."""
    return _header(section) + "".join(_entry(s, encode) for s in secrets)


def write_yaml(
    path: Path,
    section: str,
    secrets: Sequence[Secret],
    encode: bool,
    logger: logging.Logger,
) -> None:
    """Write *secrets* to *path*, replacing any previous content."""
    logger.info("Writing secrets to the file. output_path=%s", path)
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as fh:
            fh.write(_header(section))
            for secret in secrets:
                fh.write(_entry(secret, encode))
                logger.info("Secret saved. key=%s value=(hidden)", secret.key.strip())
    except OSError as exc:
        logger.error("Failed writing secrets to the file. output_path=%s error=%s", path, exc)
        raise WriteError(f"cannot write {path}: {exc}") from exc

    logger.info(
        "Secrets successfully saved to the file. output_path=%s count=%d",
        path,
        len(secrets),
    )
