import logging
import os
from typing import TypedDict

from flask import Flask, Response

from status_api import status
from status_common import StatusResponse
from status_common.logging_config import get_logger, setup_logging

app = Flask(__name__)
# Keep "status" ahead of "currentDateTime" on the wire.
app.json.sort_keys = False  # type: ignore[attr-defined]

logger = get_logger(__name__)


class HealthResponse(TypedDict):
    """Body of a ``GET /health`` response."""

    status: str


def get_app_host() -> str:
    host = os.getenv("FLASK_HOST")
    if host is None:
        raise RuntimeError("FLASK_HOST environment variable is not set.")
    return host


def get_app_port() -> int:
    port = os.getenv("FLASK_PORT")
    if port is None:
        raise RuntimeError("FLASK_PORT environment variable is not set.")
    try:
        return int(port)
    except ValueError as err:
        raise RuntimeError(
            f"FLASK_PORT environment variable is not a port number: {port!r}"
        ) from err


@app.route("/status", methods=["GET"])
def get_status() -> StatusResponse | Response:
    """Report that the service is up, along with its current date and time."""
    try:
        body = status.current_status()
    except Exception as e:
        logger.exception("Failed to build status response")
        return Response(
            response=f"Internal Server Error: {e}",
            status=500,
            mimetype="text/plain",
        )

    logger.debug("Serving status at %s", body["currentDateTime"])
    return body


@app.route("/health", methods=["GET"])
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy")


def main() -> None:
    setup_logging(logging.INFO)
    host = get_app_host()
    port = get_app_port()
    logger.info("Starting status service on %s:%d", host, port)
    app.run(host=host, port=port)


if __name__ == "__main__":
    main()
