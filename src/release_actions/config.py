"""Configuration loading for release-actions.

This module loads environment variables from a `.env` file using
`python-dotenv` and populates one configuration object per tool.  Both
objects are validated once, before any tool logic runs.

Bundler (`BundleConfig`), all required:
- BINARY
- NAME
- TARGET
- VERSION

Versioner (`VersionConfig`):
- GITHUB_TOKEN (required)
- GITHUB_REPOSITORY (required, ``owner/repo``)
- GITHUB_REF (required)
- GITHUB_RUN_NUMBER (default: 0)
- GITHUB_API_URL (default: 'https://api.github.com')
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .constants import DEFAULT_GITHUB_API_URL


def _require(keys: list[str]) -> dict[str, str]:
    """Read ``keys`` from the environment, raising if any are unset or empty."""
    values: dict[str, str] = {}
    missing = []
    for key in keys:
        value = os.getenv(key)
        if not value:
            missing.append(key)
        else:
            values[key] = value

    if missing:
        raise RuntimeError(f"Missing required environment variables: {', '.join(missing)}")
    return values


@dataclass(frozen=True)
class BundleConfig:
    """Inputs for packaging a compiled binary."""

    binary: str
    name: str
    target: str
    version: str

    @classmethod
    def load_from_env(cls) -> BundleConfig:
        """Load bundler inputs from environment variables.

        The `.env` file is loaded if present.  Raises `RuntimeError` naming
        every missing variable.
        """
        load_dotenv()
        env = _require(["BINARY", "NAME", "TARGET", "VERSION"])
        return cls(
            binary=env["BINARY"],
            name=env["NAME"],
            target=env["TARGET"],
            version=env["VERSION"],
        )


@dataclass(frozen=True)
class VersionConfig:
    """Inputs for deriving the build version from git state."""

    token: str
    owner: str
    repo: str
    ref: str
    build: int = 0
    api_url: str = DEFAULT_GITHUB_API_URL

    @property
    def repo_slug(self) -> str:
        return f"{self.owner}/{self.repo}"

    @classmethod
    def load_from_env(cls) -> VersionConfig:
        """Load versioner inputs from environment variables.

        Raises `RuntimeError` if required variables are missing and
        `ValueError` if ``GITHUB_REPOSITORY`` or ``GITHUB_RUN_NUMBER`` is
        malformed.
        """
        load_dotenv()
        env = _require(["GITHUB_TOKEN", "GITHUB_REPOSITORY", "GITHUB_REF"])

        owner, repo = split_repository(env["GITHUB_REPOSITORY"])

        # Optional: GITHUB_RUN_NUMBER with default
        run_number = os.getenv("GITHUB_RUN_NUMBER") or "0"
        try:
            build = int(run_number)
        except ValueError:
            raise ValueError(f"GITHUB_RUN_NUMBER must be an integer, got {run_number!r}") from None
        if build < 0:
            raise ValueError(f"GITHUB_RUN_NUMBER must not be negative, got {run_number!r}")

        api_url = os.getenv("GITHUB_API_URL") or DEFAULT_GITHUB_API_URL

        return cls(
            token=env["GITHUB_TOKEN"],
            owner=owner,
            repo=repo,
            ref=env["GITHUB_REF"],
            build=build,
            api_url=api_url.rstrip("/"),
        )


def split_repository(slug: str) -> tuple[str, str]:
    """Split an ``owner/repo`` identifier into its two parts."""
    owner, sep, repo = slug.partition("/")
    if not sep or not owner or not repo or "/" in repo:
        raise ValueError(f"GITHUB_REPOSITORY must look like 'owner/repo', got {slug!r}")
    return owner, repo
