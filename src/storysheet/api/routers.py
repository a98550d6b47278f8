from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from fastapi.concurrency import run_in_threadpool

from ..config import Settings
from ..records import build_record
from ..sheets import RESPONSE_COLUMNS, RowAppender
from .deps import get_appender, get_settings
from .models import (
    ErrorResponse,
    HealthResponse,
    MessageResponse,
    ResponseCreated,
    ResponseIn,
    ResponseRecord,
)

logger = logging.getLogger(__name__)

router = APIRouter()

LIVENESS_MESSAGE = "8號茶水間 API 運作中"
CREATED_MESSAGE = "故事已成功送出"


@router.get("/", response_model=MessageResponse)
async def root() -> MessageResponse:
    return MessageResponse(message=LIVENESS_MESSAGE)


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse()


@router.post(
    "/api/responses",
    response_model=ResponseCreated,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": MessageResponse},
        500: {"model": ErrorResponse},
    },
)
async def create_response(
    payload: ResponseIn,
    appender: RowAppender = Depends(get_appender),
    settings: Settings = Depends(get_settings),
) -> ResponseCreated:
    """
    Store a nickname/story submission as a new row on the responses sheet.
    """
    record = build_record(payload.nickname, payload.story, tz=settings.timezone)

    # googleapiclient is blocking; keep it off the event loop.
    await run_in_threadpool(appender.append, settings.sheet_range, RESPONSE_COLUMNS, record)

    logger.info("Stored response from %s", record["nickname"])
    return ResponseCreated(message=CREATED_MESSAGE, data=ResponseRecord(**record))
