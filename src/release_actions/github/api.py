"""GitHub REST API wrapper."""

from __future__ import annotations

import logging

import httpx

from ..config import VersionConfig
from ..policy.redaction import redact_secrets
from .auth import get_github_client

logger = logging.getLogger(__name__)


def _github_request(
    config: VersionConfig,
    method: str,
    url: str,
    *,
    params: dict[str, object] | None = None,
) -> object:
    """Perform an HTTP request against the GitHub API.

    This helper wraps ``httpx`` to provide the client headers and basic
    error handling.  Transport failures and non-2xx responses are raised as
    ``RuntimeError``; nothing is retried.

    Requests go only to the configured API base URL.
    """
    if not url.startswith(f"{config.api_url}/"):
        raise ValueError(f"Invalid GitHub API URL: {url}")

    try:
        with get_github_client(config) as client:
            resp = client.request(method, url, params=params)
    except httpx.HTTPError as exc:
        message = redact_secrets(str(exc), [config.token])
        logger.error("GitHub API request failed: %s", message)
        raise RuntimeError(f"GitHub API request failed: {message}") from exc

    if 200 <= resp.status_code < 300:
        return resp.json()

    body = redact_secrets(resp.text, [config.token])
    logger.error("GitHub API error %s: %s", resp.status_code, body)
    raise RuntimeError(f"GitHub API error {resp.status_code}: {body}")


def list_tags(config: VersionConfig) -> list[dict[str, object]]:
    """Return the first page of tags for the configured repository.

    Tags come back in the order GitHub returns them; callers treat the
    first entry as the latest tag.
    An empty list is returned for a repository without tags.
    """
    url = f"{config.api_url}/repos/{config.owner}/{config.repo}/tags"
    data = _github_request(config, "GET", url)
    if not data:
        return []
    if not isinstance(data, list):
        raise RuntimeError(f"Unexpected response listing tags for {config.repo_slug}")
    logger.debug("Fetched %d tags for %s", len(data), config.repo_slug)
    return data
