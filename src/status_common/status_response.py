"""
Wire types shared by the status service and its client.
"""

from datetime import datetime, timezone
from typing import TypedDict

STATUS_OK = "OK"


class StatusResponse(TypedDict):
    """Body of a ``GET /status`` response."""

    status: str
    currentDateTime: str


def format_date_time(moment: datetime) -> str:
    """
    Render a timestamp the way it travels on the wire.

    The value is truncated to milliseconds and written without a UTC offset,
    e.g. ``2017-06-27T13:54:29.214``.

    :param moment: The instant to render. An aware value is converted to UTC
        first; a naive value is written as it is.
    :returns: ISO-8601 text with millisecond precision.
    """
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment.isoformat(timespec="milliseconds")


def parse_date_time(value: str) -> datetime:
    """
    Parse a wire timestamp.

    :param value: ISO-8601 text.
    :returns: The parsed :class:`datetime.datetime`.
    :raises ValueError: If ``value`` is not a string or not a valid ISO-8601
        timestamp.
    """
    if not isinstance(value, str):
        raise ValueError(f"Expected an ISO-8601 string, got {type(value).__name__}")
    return datetime.fromisoformat(value)
