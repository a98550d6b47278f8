from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from datetime import tzinfo
from typing import Mapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

# Folder: src/storysheet/
BASE_DIR = Path(__file__).parent

# Fallback key file: src/storysheet/service-account.json
DEFAULT_KEY_FILE = BASE_DIR / "service-account.json"

DEFAULT_PORT = 3000
DEFAULT_SHEET_RANGE = "'responses'!A:D"
DEFAULT_TIMEZONE = "Asia/Taipei"


@dataclass(frozen=True)
class Settings:
    """
    Service configuration, read once at startup.

    Attributes:
        host: Interface uvicorn binds to.
        port: Listen port.
        sheet_id: Target spreadsheet ID.
        sheet_range: Sheet/range the rows are appended to.
        key_file: Service account JSON used when the GOOGLE_SA_* values are incomplete.
        timezone: Zone used to render `created_at`, resolved from TIMEZONE.
        cors_origins: Allowed CORS origins.
        log_level: Root log level name.
        environ: Snapshot of the environment the credential resolver reads.
    """

    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    sheet_id: str = ""
    sheet_range: str = DEFAULT_SHEET_RANGE
    key_file: Path = DEFAULT_KEY_FILE
    timezone: tzinfo = ZoneInfo(DEFAULT_TIMEZONE)
    cors_origins: tuple[str, ...] = ("*",)
    log_level: str = "INFO"
    environ: Mapping[str, str] = field(default_factory=dict, repr=False)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        When `environ` is None the process environment is used, after loading
        an optional `.env` file from the working directory.

        Raises:
            ValueError: If TIMEZONE does not name a known IANA zone.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ
        env = dict(environ)

        origins = tuple(o.strip() for o in env.get("CORS_ORIGINS", "*").split(",") if o.strip())

        return cls(
            host=env.get("HOST", "0.0.0.0"),
            port=int(env.get("PORT") or DEFAULT_PORT),
            sheet_id=env.get("GOOGLE_SHEET_ID", ""),
            sheet_range=env.get("GOOGLE_SHEET_RANGE") or DEFAULT_SHEET_RANGE,
            key_file=Path(env.get("GOOGLE_APPLICATION_CREDENTIALS") or DEFAULT_KEY_FILE),
            timezone=_load_zone(env.get("TIMEZONE") or DEFAULT_TIMEZONE),
            cors_origins=origins or ("*",),
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
            environ=env,
        )


def _load_zone(name: str) -> tzinfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown TIMEZONE {name!r}") from e
