"""General helper utilities."""
from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional

from vultr_api.utils.constants import TIMESTAMP_FORMAT


def parse_timestamp(value: str) -> Optional[datetime]:
    """Convert an API timestamp string to an aware UTC datetime.

    Returns None for the empty strings the API uses for unset dates.
    """
    if not value:
        return None
    return datetime.strptime(value, TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)


def now_timestamp() -> str:
    """Current UTC time in the API's timestamp format."""
    return datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)


def join_url(base_url: str, endpoint: str) -> str:
    """Join base URL and endpoint with exactly one slash between them."""
    return f"{base_url.rstrip('/')}/{endpoint.lstrip('/')}"
