"""Shared state for the acceptance scenarios."""

from dataclasses import dataclass

import pytest
import requests


@dataclass
class ResponseContext:
    """Holds what a ``When`` step produced for the ``Then`` steps to inspect."""

    response: requests.Response | None = None
    output: str | None = None


@pytest.fixture
def response_context() -> ResponseContext:
    return ResponseContext()
