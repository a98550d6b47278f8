"""
Response record construction.

`id` is the millisecond epoch at receipt and `created_at` is the zh-TW
rendering of the same instant, e.g. "2024/5/3 下午3:04:05".
"""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo

from .errors import ValidationError

DEFAULT_ZONE = ZoneInfo("Asia/Taipei")

MISSING_FIELDS_MESSAGE = "請填寫暱稱與故事內容"


def format_created_at(moment: datetime) -> str:
    """Render a zone-aware datetime as zh-TW `Y/M/D 上午|下午h:mm:ss`."""
    period = "上午" if moment.hour < 12 else "下午"
    hour = moment.hour % 12 or 12
    return (
        f"{moment.year}/{moment.month}/{moment.day} "
        f"{period}{hour}:{moment.minute:02d}:{moment.second:02d}"
    )


def record_id(moment: datetime) -> str:
    return str(int(moment.timestamp()) * 1000 + moment.microsecond // 1000)


def build_record(
    nickname: Optional[str],
    story: Optional[str],
    tz: Optional[tzinfo] = None,
    now: Optional[datetime] = None,
) -> dict[str, str]:
    """
    Validate a submission and build the record that is written to the sheet.

    Raises:
        ValidationError: If nickname or story is empty or missing.
    """
    if not nickname or not story:
        raise ValidationError(MISSING_FIELDS_MESSAGE)

    moment = now or datetime.now(timezone.utc)
    return {
        "id": record_id(moment),
        "created_at": format_created_at(moment.astimezone(tz or DEFAULT_ZONE)),
        "nickname": nickname,
        "story": story,
    }
