"""Pipeline: validate, fetch, extract, guard, write."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from . import config as config_mod
from .client import PasswordStateClient
from .errors import EmptyResultError
from .extractor import extract_secrets
from .models import Config, Secret
from .writer import write_yaml

ClientFactory = Callable[[Config, logging.Logger], PasswordStateClient]


class Plugin:
    """One export run against a Passwordstate password list."""

    def __init__(
        self,
        config: Config,
        logger: logging.Logger,
        client_factory: Optional[ClientFactory] = None,
    ) -> None:
        self.config = config
        self._log = logger
        self._client_factory = client_factory or PasswordStateClient

    def fetch_secrets(self) -> list[Secret]:
        """Query the API and return the secrets built from the configured fields."""
        with self._client_factory(self.config, self._log) as client:
            records = client.get_passwords(self.config.password_list_id)
        return extract_secrets(
            records,
            self.config.key_field,
            self.config.value_field,
            self._log,
        )

    def run(self) -> list[Secret]:
        """Execute the whole export. Returns the secrets that were written."""
        self._log.info("Starting the execution.")
        config_mod.validate(self.config, self._log)

        secrets = self.fetch_secrets()

        if self.config.no_secrets_fail and not secrets:
            self._log.error(
                "No secrets were retrieved from PasswordState and NO_SECRETS_FAIL is set. Terminating."
            )
            raise EmptyResultError("no secrets were retrieved from PasswordState")

        write_yaml(
            self.config.output_path,
            self.config.section_name,
            secrets,
            self.config.encode_secrets,
            self._log,
        )

        self._log.info("Finished the execution.")
        return secrets
