"""Configuration validation.

Each check is independent; the first one that fails raises
:class:`~pwstate.errors.ConfigValidationError`.
"""

from __future__ import annotations

import logging
from urllib.parse import urlparse

from .errors import ConfigValidationError
from .models import RECORD_FIELDS, Config

SUPPORTED_FORMATS = ("YAML",)


def _is_absolute_url(value: str) -> bool:
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def validate(config: Config, logger: logging.Logger) -> None:
    """Raise :class:`ConfigValidationError` if *config* cannot be used."""
    if not _is_absolute_url(config.api_endpoint):
        logger.error("Provided API endpoint is not valid. endpoint=%s", config.api_endpoint)
        raise ConfigValidationError(f"API endpoint {config.api_endpoint!r} is not a valid URL")

    if config.password_list_id == 0:
        logger.error("Provided list ID is not valid. list_id=%s", config.password_list_id)
        raise ConfigValidationError("password list ID is not set")

    if not config.api_key:
        logger.error("API key is mandatory.")
        raise ConfigValidationError("API key is mandatory")

    if config.output_format not in SUPPORTED_FORMATS:
        logger.error("Currently only YAML format is supported. format=%s", config.output_format)
        raise ConfigValidationError(
            f"output format {config.output_format!r} is not supported; use YAML"
        )

    # Unknown field names are tolerated: every record is skipped at extraction.
    for option, name in (("key_field", config.key_field), ("value_field", config.value_field)):
        if name not in RECORD_FIELDS:
            logger.warning(
                "Unknown record field; no secrets will be produced. %s=%s known=%s",
                option,
                name,
                ",".join(RECORD_FIELDS),
            )
