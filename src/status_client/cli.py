import argparse
import logging
import math
import os
import sys

from status_client.client import StatusClient, StatusClientError
from status_common.logging_config import setup_logging

BASE_URL_ENV_VAR = "STATUS_API_BASE_URL"
DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_TIMEOUT = 10.0


def positive_seconds(value: str) -> float:
    """Argparse type for a timeout: a finite number of seconds above zero."""
    try:
        seconds = float(value)
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from err
    if not math.isfinite(seconds) or seconds <= 0:
        raise argparse.ArgumentTypeError(
            f"must be a positive number of seconds: {value!r}"
        )
    return seconds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="status-client",
        description="Query the status service and print what it reports.",
    )
    parser.add_argument(
        "--base-url",
        default=os.getenv(BASE_URL_ENV_VAR, DEFAULT_BASE_URL),
        help=(
            "Base URL of the status service. Defaults to the "
            f"{BASE_URL_ENV_VAR} environment variable, or {DEFAULT_BASE_URL}."
        ),
    )
    parser.add_argument(
        "--timeout",
        type=positive_seconds,
        default=DEFAULT_TIMEOUT,
        help="Seconds to wait for the service before giving up.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log request details to stderr.",
    )

    subcommands = parser.add_subparsers(dest="command", required=True)
    subcommands.add_parser("status", help="Print the service status and time.")

    return parser


def print_status(client: StatusClient) -> None:
    status = client.get_status()
    print(f"Status: {status['status']}")
    print(f"Current date/time: {status['currentDateTime']}")


def main(args: list[str] | None = None) -> None:
    parsed = build_parser().parse_args(args)
    setup_logging(logging.DEBUG if parsed.verbose else logging.WARNING)

    client = StatusClient(parsed.base_url, timeout=parsed.timeout)

    try:
        print_status(client)
    except StatusClientError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(e.exit_code)


if __name__ == "__main__":
    main()
