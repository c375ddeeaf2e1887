"""Pytest configuration and fixtures for release-actions tests.

Every test starts from an environment without CI inputs so that values
from the machine running the suite (including a real ``GITHUB_OUTPUT`` on
GitHub Actions) never leak into a test.
"""

from __future__ import annotations

import re
from pathlib import Path

import pytest

CI_VARIABLES = (
    "BINARY",
    "NAME",
    "TARGET",
    "VERSION",
    "GITHUB_TOKEN",
    "GITHUB_REPOSITORY",
    "GITHUB_REF",
    "GITHUB_RUN_NUMBER",
    "GITHUB_API_URL",
    "GITHUB_OUTPUT",
)

_OUTPUT_BLOCK = re.compile(r"^(?P<name>[^<\n]+)<<(?P<delim>\S+)\n(?P<value>.*?)\n(?P=delim)$", re.M | re.S)


@pytest.fixture(autouse=True)
def clean_ci_env(monkeypatch):
    """Remove CI inputs inherited from the outer environment."""
    for key in CI_VARIABLES:
        monkeypatch.delenv(key, raising=False)
    # No .env file may fill in variables a test removed on purpose
    monkeypatch.setattr("release_actions.config.load_dotenv", lambda *args, **kwargs: False)


@pytest.fixture
def github_output(tmp_path, monkeypatch) -> Path:
    """Point ``GITHUB_OUTPUT`` at an empty file and return its path."""
    path = tmp_path / "github_output"
    path.write_text("", encoding="utf-8")
    monkeypatch.setenv("GITHUB_OUTPUT", str(path))
    return path


def _parse_outputs(path: Path) -> dict[str, str]:
    text = path.read_text(encoding="utf-8")
    return {m.group("name"): m.group("value") for m in _OUTPUT_BLOCK.finditer(text)}


@pytest.fixture
def read_outputs():
    """Return a parser for ``GITHUB_OUTPUT`` files in the delimiter format."""
    return _parse_outputs


@pytest.fixture
def http_client(mocker):
    """Return a factory for MagicMock httpx clients answering with one response."""

    def make(status_code: int = 200, payload: object = None, text: str = ""):
        return _make_http_client(mocker, status_code, payload, text)

    return make


def _make_http_client(mocker, status_code, payload, text):
    mock_response = mocker.MagicMock()
    mock_response.status_code = status_code
    mock_response.json.return_value = payload
    mock_response.text = text

    mock_client = mocker.MagicMock()
    mock_client.request.return_value = mock_response
    mock_client.__enter__ = mocker.MagicMock(return_value=mock_client)
    mock_client.__exit__ = mocker.MagicMock(return_value=False)
    return mock_client
