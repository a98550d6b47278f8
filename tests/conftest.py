from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import pytest
from fastapi.testclient import TestClient

from storysheet.api import create_app
from storysheet.config import Settings
from storysheet.sheets import KeyFileCredentials, SheetClientFactory


class FakeAppendRequest:
    def __init__(self, service: "FakeSheetsService", kwargs: dict[str, Any]) -> None:
        self.service = service
        self.kwargs = kwargs

    def execute(self, http: Any = None) -> dict[str, Any]:
        self.service.transports.append(http)
        if self.service.error is not None:
            raise self.service.error
        self.service.calls.append(self.kwargs)
        return {"updates": {"updatedRange": self.kwargs["range"], "updatedRows": 1}}


class FakeHttp:
    def __init__(self, credentials: Any) -> None:
        self.credentials = credentials


class FakeSheetsService:
    """In-memory stand-in for the `spreadsheets().values().append()` chain."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.transports: list[Any] = []
        self.error: Optional[Exception] = None

    def spreadsheets(self) -> "FakeSheetsService":
        return self

    def values(self) -> "FakeSheetsService":
        return self

    def append(self, **kwargs: Any) -> FakeAppendRequest:
        return FakeAppendRequest(self, kwargs)

    @property
    def rows(self) -> list[list[Any]]:
        return [row for call in self.calls for row in call["body"]["values"]]


@pytest.fixture
def sheets_service() -> FakeSheetsService:
    return FakeSheetsService()


@pytest.fixture
def client_factory(sheets_service: FakeSheetsService) -> SheetClientFactory:
    return SheetClientFactory(
        KeyFileCredentials(Path("unused.json")),
        builder=lambda credentials: sheets_service,
        credentials_loader=lambda source, scopes: "creds",
        http_factory=lambda credentials: FakeHttp(credentials),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings.from_env({"GOOGLE_SHEET_ID": "sheet-123", "LOG_LEVEL": "DEBUG"})


@pytest.fixture
def api(settings: Settings, client_factory: SheetClientFactory):
    app = create_app(settings=settings, client_factory=client_factory)
    with TestClient(app) as client:
        yield client
