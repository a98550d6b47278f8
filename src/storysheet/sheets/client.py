from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Optional, Sequence

import google_auth_httplib2
import httplib2
from google.oauth2 import service_account
from googleapiclient.discovery import build

from .credentials import CredentialSource, InlineCredentials

logger = logging.getLogger(__name__)

SHEETS_SCOPES = ("https://www.googleapis.com/auth/spreadsheets",)

Builder = Callable[[Any], Any]
HttpFactory = Callable[[Any], Any]


def load_credentials(
    source: CredentialSource, scopes: Sequence[str] = SHEETS_SCOPES
) -> service_account.Credentials:
    """
    Turn a resolved credential source into google-auth credentials.

    Raises:
        FileNotFoundError: If the key file does not exist.
        ValueError: If the service account info is malformed.
    """
    if isinstance(source, InlineCredentials):
        return service_account.Credentials.from_service_account_info(
            dict(source.info), scopes=list(scopes)
        )
    return service_account.Credentials.from_service_account_file(
        str(source.path), scopes=list(scopes)
    )


def build_sheets_service(credentials: Any) -> Any:
    """Build the Sheets v4 discovery client."""
    return build("sheets", "v4", credentials=credentials, cache_discovery=False)


def authorized_http(credentials: Any) -> google_auth_httplib2.AuthorizedHttp:
    """New authorized transport; httplib2.Http must not be shared across threads."""
    return google_auth_httplib2.AuthorizedHttp(credentials, http=httplib2.Http())


class SheetClientFactory:
    """
    Lazily builds the Sheets API client once and hands out the same instance.

    The service object and credentials are shared; each request gets its own
    transport from `new_http()`. The instance is never refreshed; rotating
    credentials needs a restart.
    """

    def __init__(
        self,
        source: CredentialSource,
        scopes: Sequence[str] = SHEETS_SCOPES,
        builder: Optional[Builder] = None,
        credentials_loader: Optional[Callable[[CredentialSource, Sequence[str]], Any]] = None,
        http_factory: Optional[HttpFactory] = None,
    ) -> None:
        self.source = source
        self.scopes = tuple(scopes)
        self._builder = builder or build_sheets_service
        self._credentials_loader = credentials_loader or load_credentials
        self._http_factory = http_factory or authorized_http
        self._client: Optional[Any] = None
        self._credentials: Optional[Any] = None
        self._lock = threading.Lock()

    @property
    def built(self) -> bool:
        return self._client is not None

    def get(self) -> Any:
        """
        Return the cached client, building it on first use.

        Construction errors propagate and leave the cache empty.
        """
        if self._client is not None:
            return self._client

        with self._lock:
            if self._client is None:
                logger.info("Building Sheets client from %s", self.source.describe())
                credentials = self._credentials_loader(self.source, self.scopes)
                self._client = self._builder(credentials)
                self._credentials = credentials
        return self._client

    def new_http(self) -> Any:
        """
        Return a fresh authorized transport bound to the cached credentials.

        Builds the client first if needed.
        """
        self.get()
        return self._http_factory(self._credentials)
