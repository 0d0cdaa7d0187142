from datetime import datetime, timezone

from status_common import STATUS_OK, StatusResponse, format_date_time


def current_status(now: datetime | None = None) -> StatusResponse:
    """
    Build the body of a ``GET /status`` response.

    :param now: The instant to report. Defaults to the current UTC time, which
        never moves backwards across daylight-saving changes.
    :returns: A fresh :class:`StatusResponse`.
    """
    moment = now if now is not None else datetime.now(timezone.utc)
    return StatusResponse(status=STATUS_OK, currentDateTime=format_date_time(moment))
