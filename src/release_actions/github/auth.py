"""Authentication helpers for GitHub API."""

from __future__ import annotations

import httpx

from ..config import VersionConfig
from ..constants import HTTP_TIMEOUT_S


def get_github_client(config: VersionConfig) -> httpx.Client:
    """Return a configured GitHub httpx client with the Authorization header set."""
    return httpx.Client(
        headers={
            "Authorization": f"token {config.token}",
            "Accept": "application/vnd.github+json",
            "User-Agent": f"release-actions/{config.owner}",
        },
        timeout=HTTP_TIMEOUT_S,
    )
