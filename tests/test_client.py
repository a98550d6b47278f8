from __future__ import annotations

from typing import Any, Optional

import pytest

from storysheet.client import ResponsesApiClient, ResponsesApiError, SubmittedResponse


class FakeResponse:
    def __init__(self, status_code: int, payload: Any, reason: str = "OK") -> None:
        self.status_code = status_code
        self._payload = payload
        self.reason = reason

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


class FakeSession:
    def __init__(self, response: FakeResponse) -> None:
        self.response = response
        self.requests: list[dict[str, Any]] = []

    def request(self, **kwargs: Any) -> FakeResponse:
        self.requests.append(kwargs)
        return self.response


def _client(response: FakeResponse) -> tuple[ResponsesApiClient, FakeSession]:
    session = FakeSession(response)
    return ResponsesApiClient("http://svc:3000/", session=session), session  # type: ignore[arg-type]


def test_submit_response():
    data = {"id": "1714719845123", "created_at": "2024/5/3 下午3:04:05", "nickname": "Amy", "story": "Hello"}
    client, session = _client(FakeResponse(201, {"message": "故事已成功送出", "data": data}, "Created"))

    saved = client.submit_response(nickname="Amy", story="Hello")

    assert saved == SubmittedResponse(**data)
    assert session.requests[0]["method"] == "POST"
    assert session.requests[0]["url"] == "http://svc:3000/api/responses"
    assert session.requests[0]["json"] == {"nickname": "Amy", "story": "Hello"}


@pytest.mark.parametrize(
    "status, payload, details",
    [
        (400, {"message": "請填寫暱稱與故事內容"}, "請填寫暱稱與故事內容"),
        (500, {"message": "伺服器錯誤，無法儲存回應", "error": "quota exceeded"}, "quota exceeded"),
        (502, None, None),
    ],
)
def test_error_responses_raise(status: int, payload: Optional[dict], details: Optional[str]):
    client, _ = _client(FakeResponse(status, payload, "Error"))

    with pytest.raises(ResponsesApiError) as exc_info:
        client.submit_response(nickname="Amy", story="Hello")

    assert exc_info.value.status_code == status
    assert exc_info.value.details == details


def test_health_requires_object():
    client, session = _client(FakeResponse(200, ["not", "an", "object"]))

    with pytest.raises(ValueError):
        client.health()
    assert session.requests[0]["url"] == "http://svc:3000/health"
