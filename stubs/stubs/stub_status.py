"""
Minimal in-memory stub for the status service, implementing only
``GET /status``.

By default it answers the way the real service does:
    - Status: 200
    - Content-Type: application/json
    - Body: {"status":"OK","currentDateTime":"2017-06-27T13:54:29.214"}

Tests can swap in any status code, content type or raw body to exercise the
client's failure handling.
"""

import json
from typing import Any

from requests import Response
from requests.structures import CaseInsensitiveDict

from status_common import StatusResponse


def _create_response(
    status_code: int,
    headers: dict[str, str] | CaseInsensitiveDict[str],
    content: bytes,
    reason: str = "",
) -> Response:
    """
    Create a :class:`requests.Response` object for the stub.

    :param status_code: HTTP status code.
    :param headers: Response headers dictionary.
    :param content: Response body as bytes.
    :param reason: HTTP reason phrase (e.g., "OK", "Internal Server Error").
    :return: A :class:`requests.Response` instance.
    """
    response = Response()
    response.status_code = status_code
    response.headers = CaseInsensitiveDict(headers)
    response._content = content  # noqa: SLF001
    response.reason = reason
    response.encoding = "utf-8"
    return response


class StatusApiStub:
    """
    A minimal in-memory stub for the status service.

    Seeded with the documented example payload.
    """

    status_body: StatusResponse = {
        "status": "OK",
        "currentDateTime": "2017-06-27T13:54:29.214",
    }

    def __init__(
        self,
        status_code: int = 200,
        content_type: str | None = "application/json",
        content: bytes | None = None,
        reason: str = "OK",
    ) -> None:
        self.status_code = status_code
        self.content_type = content_type
        self.content = (
            content
            if content is not None
            else json.dumps(self.status_body, separators=(",", ":")).encode("utf-8")
        )
        self.reason = reason
        self.requests: list[dict[str, Any]] = []

    @classmethod
    def returning_json(cls, body: Any, status_code: int = 200) -> "StatusApiStub":
        """Create a stub that answers with ``body`` serialised as JSON."""
        return cls(status_code=status_code, content=json.dumps(body).encode("utf-8"))

    def get_status(self, url: str, headers: dict[str, str] | None = None) -> Response:
        """
        Simulate ``GET /status``.

        returns:
            Response: The configured answer wrapped in a Response object.
        """
        self.requests.append({"url": url, "headers": dict(headers or {})})

        response_headers: dict[str, str] = {}
        if self.content_type is not None:
            response_headers["Content-Type"] = self.content_type

        return _create_response(
            status_code=self.status_code,
            headers=response_headers,
            content=self.content,
            reason=self.reason,
        )

    def get(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,  # NOQA ARG002 (unused in stub)
    ) -> Response:
        """A stubbed requests.get function that routes to :meth:`get_status`."""
        if not url.endswith("/status"):
            return _create_response(
                status_code=404,
                headers={"Content-Type": "text/html"},
                content=b"Not Found",
                reason="Not Found",
            )
        return self.get_status(url, headers)
