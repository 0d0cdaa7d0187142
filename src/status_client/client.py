"""
Module: status_client.client

This module contains the StatusClient class, which provides a simple client
for the status service's ``GET /status`` endpoint.

Usage:
    Instantiate a StatusClient with:
        - base_url: Where the status service is listening,
          e.g. ``http://localhost:8080``.
        - timeout: Seconds to wait for the service before giving up.

    Use the `get_status` method to fetch the service status.

    Returns:
        The decoded StatusResponse.

Every failure is raised as a subclass of StatusClientError with a message fit
to show to a user.
"""

from typing import Any

import requests

from status_common import STATUS_OK, StatusResponse, parse_date_time
from status_common.logging_config import get_logger

STATUS_PATH = "/status"
JSON_CONTENT_TYPE = "application/json"

logger = get_logger(__name__)


class StatusClientError(Exception):
    """
    Base class for failures reported by :class:`StatusClient`.

    :cvar exit_code: Process exit code the CLI uses for this failure.
    """

    exit_code: int = 1


class ServiceUnreachableError(StatusClientError):
    """Raised when the status service cannot be contacted or times out."""

    exit_code = 3


class ServiceResponseError(StatusClientError):
    """Raised when the status service answers with anything other than 200."""

    exit_code = 4

    def __init__(self, status_code: int, reason: str | None = None) -> None:
        self.status_code = status_code
        self.reason = reason
        detail = f"HTTP {status_code}"
        if reason:
            detail = f"{detail} {reason}"
        super().__init__(f"Service returned error: {detail}")


class InvalidResponseFormatError(StatusClientError):
    """Raised when the status service's response body cannot be understood."""

    exit_code = 5

    def __init__(self, problem: str) -> None:
        self.problem = problem
        super().__init__(f"Invalid response format: {problem}")


def parse_status_response(body: Any) -> StatusResponse:
    """
    Validate a decoded JSON body as a :class:`StatusResponse`.

    Keys other than ``status`` and ``currentDateTime`` are ignored.

    :param body: The decoded JSON document.
    :returns: A StatusResponse holding only the two known fields.
    :raises InvalidResponseFormatError: If the body is not an object, a field
        is missing or has the wrong type, ``status`` is not ``"OK"``, or
        ``currentDateTime`` is not an ISO-8601 timestamp.
    """
    if not isinstance(body, dict):
        raise InvalidResponseFormatError(
            f"expected a JSON object, got {type(body).__name__}"
        )

    for field in ("status", "currentDateTime"):
        if field not in body:
            raise InvalidResponseFormatError(f'missing field "{field}"')
        if not isinstance(body[field], str):
            raise InvalidResponseFormatError(f'field "{field}" must be a string')

    if body["status"] != STATUS_OK:
        raise InvalidResponseFormatError(f'unexpected status "{body["status"]}"')

    try:
        parse_date_time(body["currentDateTime"])
    except ValueError as err:
        raise InvalidResponseFormatError(
            f'field "currentDateTime" is not an ISO-8601 timestamp: '
            f"{body['currentDateTime']!r}"
        ) from err

    return StatusResponse(
        status=body["status"], currentDateTime=body["currentDateTime"]
    )


class StatusClient:
    """
    A client for the status service.

    Attributes:
        base_url (str): Base URL of the status service, without trailing slash.
        timeout (float): Seconds to wait for the service.

    Methods:
        get_status() -> StatusResponse:
            Fetch and validate the service status.
    """

    def __init__(self, base_url: str, *, timeout: float = 10) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def status_url(self) -> str:
        return f"{self.base_url}{STATUS_PATH}"

    def get_status(self) -> StatusResponse:
        """
        Perform one ``GET /status`` call.

        Returns:
            StatusResponse: The validated response body.

        Raises:
            ServiceUnreachableError: If the service cannot be reached in time.
            ServiceResponseError: If the service does not answer 200.
            InvalidResponseFormatError: If the answer is not a JSON
                StatusResponse.
        """
        url = self.status_url
        logger.debug("Requesting %s", url)

        try:
            response = requests.get(
                url,
                headers={"Accept": JSON_CONTENT_TYPE},
                timeout=self.timeout,
            )
        except requests.RequestException as err:
            logger.info("Status request to %s failed: %s", url, err)
            raise ServiceUnreachableError(
                f"Cannot reach service at {self.base_url}"
            ) from err

        if response.status_code != 200:
            logger.info(
                "Status request to %s returned HTTP %d", url, response.status_code
            )
            raise ServiceResponseError(response.status_code, response.reason)

        content_type = response.headers.get("Content-Type", "")
        if content_type.split(";", 1)[0].strip().lower() != JSON_CONTENT_TYPE:
            raise InvalidResponseFormatError(
                f'expected content type "{JSON_CONTENT_TYPE}", '
                f'got "{content_type or "none"}"'
            )

        try:
            body = response.json()
        except requests.JSONDecodeError as err:
            raise InvalidResponseFormatError("body is not valid JSON") from err

        return parse_status_response(body)
