"""Projection of password records onto key/value secrets."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .models import PasswordRecord, Secret, field_accessor


def extract_secrets(
    records: Iterable[PasswordRecord],
    key_field: str,
    value_field: str,
    logger: logging.Logger,
) -> list[Secret]:
    """Build one :class:`Secret` per record whose key and value fields are both set.

    Keys and values are stripped of surrounding whitespace. Records whose key
    or value field is unknown or blank are skipped with a warning. Output
    order follows *records*.
    """
    key_of = field_accessor(key_field)
    value_of = field_accessor(value_field)

    logger.info(
        "Converting retrieved passwords to secrets. key_field=%s value_field=%s",
        key_field,
        value_field,
    )

    secrets: list[Secret] = []
    for record in records:
        key = key_of(record).strip() if key_of else ""
        if not key:
            logger.warning(
                "Key is empty. Skipping the secret. password_id=%s field=%s",
                record.password_id,
                key_field,
            )
            continue

        value = value_of(record).strip() if value_of else ""
        if not value:
            logger.warning(
                "Value is empty. Skipping the secret. password_id=%s field=%s",
                record.password_id,
                value_field,
            )
            continue

        secrets.append(Secret(key=key, value=value))

    logger.info("Finished processing the secrets. count=%d", len(secrets))
    return secrets
