"""
# storysheet HTTP client

Thin wrapper around the storysheet routes:

- GET  /
- GET  /health
- POST /api/responses

## Usage
from storysheet.client import ResponsesApiClient

client = ResponsesApiClient("http://127.0.0.1:3000")
print(client.health())

saved = client.submit_response(nickname="Amy", story="Hello")
print("Stored:", saved.id, saved.created_at)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union, cast

import requests

JsonDict = Dict[str, Any]
Json = Union[JsonDict, List[Any], str, int, float, bool, None]


class ResponsesApiError(RuntimeError):
    """
    Exception raised when the API returns a non-2xx response.
    """

    def __init__(
        self, status_code: int, message: str, url: str, details: Optional[Any] = None
    ) -> None:
        super().__init__(f"[ResponsesApiError] {status_code} {message} | url={url} | details={details}")
        self.status_code = status_code
        self.message = message
        self.url = url
        self.details = details


@dataclass(frozen=True)
class SubmittedResponse:
    """
    Client-side representation of a stored response record.
    """

    id: str
    created_at: str
    nickname: str
    story: str

    @staticmethod
    def from_payload(data: JsonDict) -> "SubmittedResponse":
        return SubmittedResponse(
            id=str(data["id"]),
            created_at=str(data["created_at"]),
            nickname=str(data["nickname"]),
            story=str(data["story"]),
        )


@dataclass(frozen=True)
class ResponsesApiClient:
    """
    A small client for the storysheet API.

    Attributes:
        base_url: Base URL for the service, e.g. "http://127.0.0.1:3000"
        timeout_s: Request timeout in seconds.
        session: Optional requests.Session for connection reuse.
    """

    base_url: str
    timeout_s: float = 10.0
    session: Optional[requests.Session] = None

    def _url(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}{path}"

    def _request(
        self,
        method: str,
        path: str,
        *,
        json_body: Optional[Json] = None,
    ) -> JsonDict:
        """
        Perform an HTTP request and return the JSON response.

        Raises:
            ResponsesApiError: If server returns non-2xx response.
            requests.RequestException: For network errors/timeouts.
            ValueError: If response is not a JSON object.
        """
        url = self._url(path)
        sess = self.session or requests

        resp = sess.request(
            method=method,
            url=url,
            json=json_body,
            timeout=self.timeout_s,
        )

        try:
            payload = resp.json()
        except ValueError:
            payload = None

        if not (200 <= resp.status_code < 300):
            details = None
            if isinstance(payload, dict):
                # 500s carry the underlying error, 400s only a message
                details = payload.get("error") or payload.get("message")
            raise ResponsesApiError(resp.status_code, resp.reason, url, details)

        if not isinstance(payload, dict):
            raise ValueError(f"Expected JSON object response, got: {type(payload)} from {url}")

        return cast(JsonDict, payload)

    def root(self) -> JsonDict:
        """GET /"""
        return self._request("GET", "/")

    def health(self) -> JsonDict:
        """GET /health"""
        return self._request("GET", "/health")

    def submit_response(self, *, nickname: str, story: str) -> SubmittedResponse:
        """
        POST /api/responses

        Returns:
            The record as stored on the sheet, including server-generated id and created_at.
        """
        payload = self._request(
            "POST", "/api/responses", json_body={"nickname": nickname, "story": story}
        )
        data = payload.get("data")
        if not isinstance(data, dict):
            raise ValueError("Expected payload['data'] to be an object")
        return SubmittedResponse.from_payload(cast(JsonDict, data))
