"""Pytest configuration and shared fixtures for status service tests."""

import socket
import threading
import time
from datetime import timedelta

import pytest
import requests

from status_api.app import app as flask_app


class Client:
    """Thin HTTP client for driving a running status service from tests."""

    def __init__(self, base_url: str, timeout: timedelta = timedelta(seconds=1)):
        self.base_url = base_url
        self._timeout = timeout.total_seconds()

    def send_status_request(self) -> requests.Response:
        return requests.get(url=f"{self.base_url}/status", timeout=self._timeout)

    def send_health_check(self) -> requests.Response:
        return requests.get(url=f"{self.base_url}/health", timeout=self._timeout)


@pytest.fixture(scope="session")
def provider_url() -> str:
    """Start the Flask app in a separate thread and return its URL.

    This fixture is used by tests that need to make real HTTP requests
    to the Flask application (e.g., contract tests, schema tests).
    """
    # Use port 0 to let the OS assign a free port
    sock = socket.socket()
    sock.bind(("", 0))
    port = sock.getsockname()[1]
    sock.close()

    def run_app() -> None:
        flask_app.run(port=port, debug=False, use_reloader=False)

    # Daemon threads terminate when the test process exits,
    # so no explicit cleanup is needed
    thread = threading.Thread(target=run_app, daemon=True)
    thread.start()

    url = f"http://localhost:{port}"
    max_retries = 20
    retry_delay = 0.1

    for _ in range(max_retries):
        try:
            response = requests.get(f"{url}/health", timeout=1)
            if response.status_code == 200:
                break
        except requests.exceptions.RequestException:
            # Server not ready yet, wait and retry
            time.sleep(retry_delay)
    else:
        raise RuntimeError(f"Flask server failed to start on {url}")

    return url


@pytest.fixture
def client(provider_url: str) -> Client:
    return Client(base_url=provider_url)
