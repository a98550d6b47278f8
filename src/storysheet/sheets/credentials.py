"""
Service account credential resolution.

Two sources are supported:

- discrete GOOGLE_SA_* environment values (all six must be set), or
- a service account JSON key file on disk.

The choice is made once at startup. The key file is never opened here; a
missing file surfaces on the first Sheets call.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Union

REQUIRED_ENV_KEYS = (
    "GOOGLE_SA_TYPE",
    "GOOGLE_SA_PROJECT_ID",
    "GOOGLE_SA_PRIVATE_KEY_ID",
    "GOOGLE_SA_PRIVATE_KEY",
    "GOOGLE_SA_CLIENT_EMAIL",
    "GOOGLE_SA_CLIENT_ID",
)

# google-auth refuses service account info without a token_uri.
DEFAULT_TOKEN_URI = "https://oauth2.googleapis.com/token"


@dataclass(frozen=True)
class InlineCredentials:
    """Service account info assembled from environment values."""

    info: Mapping[str, Any]

    def describe(self) -> str:
        return f"environment (client_email={self.info.get('client_email')})"


@dataclass(frozen=True)
class KeyFileCredentials:
    """Service account JSON key file path."""

    path: Path

    def describe(self) -> str:
        return f"key file {self.path}"


CredentialSource = Union[InlineCredentials, KeyFileCredentials]


def build_inline_info(environ: Mapping[str, str]) -> Optional[dict[str, str]]:
    """
    Build a service account info dict from GOOGLE_SA_* values.

    Args:
        environ: Mapping to read the values from.

    Returns:
        The info dict, or None if any required value is missing or empty.
    """
    if not all(environ.get(key) for key in REQUIRED_ENV_KEYS):
        return None

    return {
        "type": environ["GOOGLE_SA_TYPE"],
        "project_id": environ["GOOGLE_SA_PROJECT_ID"],
        "private_key_id": environ["GOOGLE_SA_PRIVATE_KEY_ID"],
        # Keys pasted into env files usually carry escaped newlines.
        "private_key": environ["GOOGLE_SA_PRIVATE_KEY"].replace("\\n", "\n"),
        "client_email": environ["GOOGLE_SA_CLIENT_EMAIL"],
        "client_id": environ["GOOGLE_SA_CLIENT_ID"],
        "token_uri": DEFAULT_TOKEN_URI,
    }


def resolve_credentials(environ: Mapping[str, str], key_file: Path) -> CredentialSource:
    """
    Pick the credential source: inline env values if complete, else the key file.
    """
    info = build_inline_info(environ)
    if info is not None:
        return InlineCredentials(info=info)
    return KeyFileCredentials(path=Path(key_file))
