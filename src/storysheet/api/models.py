from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    ok: bool = True
    service: str = "storysheet"


class ResponseIn(BaseModel):
    """
    Submission from the front-end.

    Both fields are optional at the schema level so an empty value and a
    missing one get the same 400 from the handler.
    """

    nickname: Optional[str] = Field(None, description="Display name of the author")
    story: Optional[str] = Field(None, description="Story text")


class ResponseRecord(BaseModel):
    id: str = Field(..., description="Millisecond epoch timestamp at receipt")
    created_at: str = Field(..., description="Local receipt time, zh-TW format")
    nickname: str
    story: str


class ResponseCreated(BaseModel):
    message: str
    data: ResponseRecord


class ErrorResponse(BaseModel):
    message: str
    error: str
