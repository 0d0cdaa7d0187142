from status_common.status_response import (
    STATUS_OK,
    StatusResponse,
    format_date_time,
    parse_date_time,
)

__all__ = ["STATUS_OK", "StatusResponse", "format_date_time", "parse_date_time"]
