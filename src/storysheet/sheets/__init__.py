"""
Google Sheets access: credential resolution, the cached API client and row appends.
"""

from .appender import RESPONSE_COLUMNS, RowAppender, format_row
from .client import SHEETS_SCOPES, SheetClientFactory
from .credentials import (
    CredentialSource,
    InlineCredentials,
    KeyFileCredentials,
    build_inline_info,
    resolve_credentials,
)

__all__ = [
    "RESPONSE_COLUMNS",
    "RowAppender",
    "format_row",
    "SHEETS_SCOPES",
    "SheetClientFactory",
    "CredentialSource",
    "InlineCredentials",
    "KeyFileCredentials",
    "build_inline_info",
    "resolve_credentials",
]
