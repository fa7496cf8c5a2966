"""Passwordstate REST client.

Fetches every password in one list with a single ``GET`` request::

    GET <endpoint>/passwords/<list id>?QueryAll=true&PreventAuditing=false
    APIKey: <key>

Retries and timeouts are left to ``requests`` / ``urllib3``; this module only
configures them from :class:`~pwstate.models.Config`.
"""

from __future__ import annotations

import logging
from typing import Optional

import requests
import urllib3
from pydantic import ValidationError
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .errors import FetchError
from .models import Config, PasswordRecord

_QUERY = {"QueryAll": "true", "PreventAuditing": "false"}


class PasswordStateClient:
    """Thin wrapper around a :class:`requests.Session` for one Passwordstate server."""

    def __init__(
        self,
        config: Config,
        logger: logging.Logger,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._config = config
        self._log = logger
        self._session = session or self._new_session()

    # ------------------------------------------------------------------
    # Session setup
    # ------------------------------------------------------------------

    def _new_session(self) -> requests.Session:
        session = requests.Session()
        adapter = HTTPAdapter(max_retries=Retry(total=self._config.connection_retries))
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        if self._config.skip_tls_verify:
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
        return session

    def _headers(self) -> dict[str, str]:
        return {"APIKey": self._config.api_key, "Content-Type": "application/json"}

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "PasswordStateClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    def passwords_url(self, list_id: int) -> str:
        return f"{self._config.api_endpoint.rstrip('/')}/passwords/{list_id}"

    def get_passwords(self, list_id: int) -> list[PasswordRecord]:
        """Return every record of password list *list_id*, in API order."""
        url = self.passwords_url(list_id)
        self._log.info(
            "Querying PasswordState API. endpoint=%s list_id=%s",
            self._config.api_endpoint,
            list_id,
        )
        self._log.debug("GET %s params=%s", url, _QUERY)

        try:
            response = self._session.get(
                url,
                params=_QUERY,
                headers=self._headers(),
                verify=not self._config.skip_tls_verify,
                timeout=self._config.connection_timeout,
            )
            self._log.debug("Response status=%s", response.status_code)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            self._log.error("Failed to retrieve data from PasswordState. error=%s", exc)
            raise FetchError(f"request to {url} failed: {exc}") from exc
        except ValueError as exc:
            self._log.error("PasswordState returned a body that is not JSON.")
            raise FetchError(f"response from {url} is not valid JSON") from exc

        if not isinstance(payload, list):
            self._log.error("PasswordState returned an unexpected payload. type=%s", type(payload).__name__)
            raise FetchError(f"expected a JSON array from {url}, got {type(payload).__name__}")

        try:
            records = [PasswordRecord.model_validate(item) for item in payload]
        except ValidationError as exc:
            self._log.error("PasswordState returned malformed records. error=%s", exc)
            raise FetchError(f"response from {url} contains malformed records") from exc

        self._log.info("Passwords retrieved from PasswordState. count=%d", len(records))
        return records
