import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import Request

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive timestamps read back from the database."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


async def read_payload(request: Request) -> dict[str, Any]:
    """Read a JSON object or a form body into a plain dict."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        payload = await request.json()
        if not isinstance(payload, dict):
            raise ValueError("Request body must be a JSON object")
        return payload

    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}
