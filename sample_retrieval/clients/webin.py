"""Shared plumbing for clients of the submission REST service."""
from __future__ import annotations

from typing import Optional, Tuple
from urllib.parse import quote, urljoin

import requests

from sample_retrieval.config import Settings


class ServiceError(RuntimeError):
    """Raised when the submission service cannot satisfy a request."""


class WebinService:
    """Base class holding settings, credentials and URI resolution."""

    SERVICE_NAME = "Webin"

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or Settings()

    @property
    def rest_uri(self) -> str:
        return self.settings.rest_uri

    def resolve_against_rest_uri(self, path: str, **params: str) -> str:
        """
        Resolve ``path`` against the service base URI.

        ``{name}`` placeholders in ``path`` are substituted with the
        URL-quoted values of ``params``.
        """
        quoted = {key: quote(str(value), safe="") for key, value in params.items()}
        return urljoin(self.rest_uri, path.lstrip("/").format(**quoted))

    def auth(self) -> Optional[Tuple[str, str]]:
        if not self.settings.webin_username:
            return None
        return (
            self.settings.webin_username,
            self.settings.webin_password.get_secret_value(),
        )

    def new_session(self) -> requests.Session:
        session = requests.Session()
        session.auth = self.auth()
        session.headers.update({"Accept": "application/xml"})
        return session
