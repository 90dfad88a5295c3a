"""
Shared pytest configuration and fixtures for unifi-block tests.

This module provides common fixtures used across all test modules including:
- Raw and validated configurations
- A mock UniFi controller transport
- Configuration file factories
"""

import json
from typing import Any

import httpx
import pytest
import yaml

from unifi_block.core import UnifiConfig, ValidatedConfig

BASE_URL = "https://unifi.example.com:8443"
LOGIN_URL = f"{BASE_URL}/api/login"
STAMGR_URL = f"{BASE_URL}/api/s/default/cmd/stamgr"

# ========== Configuration Fixtures ==========


@pytest.fixture
def raw_config_dict() -> dict[str, Any]:
    """Provide a complete configuration file body as a dictionary."""
    return {
        "base_url": BASE_URL,
        "site": "default",
        "accept_invalid_certs": True,
        "user": "admin",
        "password": "test_password_123",
        "client_macs": ["AA:BB:CC:DD:EE:01", "AA:BB:CC:DD:EE:02"],
    }


@pytest.fixture
def raw_config(raw_config_dict) -> UnifiConfig:
    """Provide a loaded, not yet validated configuration."""
    return UnifiConfig(**raw_config_dict)


def make_validated_config(client_macs=(), **overrides) -> ValidatedConfig:
    """Create a validated configuration with test defaults."""
    values = {
        "base_url": BASE_URL,
        "site": "default",
        "accept_invalid_certs": True,
        "user": "admin",
        "password": "test_password_123",
        "client_macs": tuple(client_macs),
    }
    values.update(overrides)
    return ValidatedConfig(**values)


@pytest.fixture
def validated_config() -> ValidatedConfig:
    """Provide a validated configuration with three stations."""
    return make_validated_config(
        ["AA:BB:CC:DD:EE:01", "AA:BB:CC:DD:EE:02", "AA:BB:CC:DD:EE:03"]
    )


@pytest.fixture
def write_config(tmp_path):
    """Return a factory that writes a YAML config file and returns its path."""

    def _write(data, name: str = "config.yaml", mode: int = 0o600):
        path = tmp_path / name
        if isinstance(data, str):
            path.write_text(data)
        else:
            path.write_text(yaml.safe_dump(data))
        path.chmod(mode)
        return path

    return _write


# ========== Mock Controller Transport ==========


class MockController(httpx.MockTransport):
    """Mock transport simulating a UniFi controller.

    Records every request and answers with a configured status per URL.
    Status sequences are consumed one entry per request; a status of
    ``None`` raises ``httpx.ConnectError`` instead of answering.
    """

    def __init__(self, responses: dict[str, Any] = None):
        """Initialize mock controller with optional status mapping.

        Args:
            responses: Dictionary mapping URLs to a status code or a list
                of status codes
        """
        self.responses = {
            url: list(status) if isinstance(status, (list, tuple)) else status
            for url, status in (responses or {}).items()
        }
        self.requests_made: list[httpx.Request] = []
        super().__init__(self._handle_request)

    def _next_status(self, url: str):
        status = self.responses.get(url, 200)
        if isinstance(status, list):
            return status.pop(0) if status else 200
        return status

    def _handle_request(self, request: httpx.Request) -> httpx.Response:
        self.requests_made.append(request)
        url = str(request.url)
        status = self._next_status(url)

        if status is None:
            raise httpx.ConnectError("Connection refused", request=request)

        headers = {}
        if url == LOGIN_URL and status == 200:
            headers["Set-Cookie"] = "unifises=session-token-abc; Path=/"

        return httpx.Response(
            status_code=status,
            json={"meta": {"rc": "ok" if 200 <= status < 300 else "error"}, "data": []},
            headers=headers,
            request=request,
        )

    def requests_to(self, url: str) -> list[httpx.Request]:
        """Return recorded requests for one URL."""
        return [r for r in self.requests_made if str(r.url) == url]

    def bodies_to(self, url: str) -> list[dict[str, Any]]:
        """Return decoded JSON bodies of recorded requests for one URL."""
        return [json.loads(r.content) for r in self.requests_to(url)]


@pytest.fixture
def mock_controller():
    """Provide a mock controller answering 200 to everything."""
    return MockController()


# ========== Pytest Configuration ==========


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
