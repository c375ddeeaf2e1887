"""Global constants for release-actions.

These values are fixed by the CI pipeline contract.  Only the logging level
and the GitHub API base URL may be overridden through the environment.
"""

import os

# Architecture tokens from the target triple mapped to release names
ARCH_ALIASES = {
    "aarch64": "arm64",
    "armv7": "arm",
    "x86_64": "amd64",
}

BUNDLE_SUFFIX = ".tgz"
BINARY_MODE = 0o755

# Git refs
TAG_REF_PREFIX = "refs/tags/"
BRANCH_REF_PREFIX = "refs/heads/"
UNKNOWN_BRANCH = "unknown"
DEFAULT_BASE_TAG = "0.0.0"

# Version result
INVALID_VERSION = "INVALID"
RELEASE_PUBLISH = ("bundle", "package")
PRERELEASE_PUBLISH = ("bundle",)

# GitHub
DEFAULT_GITHUB_API_URL = "https://api.github.com"
HTTP_TIMEOUT_S = 10.0

# Logging
DEFAULT_LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# Largest version component a CI consumer can compare exactly (2**53 - 1)
MAX_VERSION_COMPONENT = 9007199254740991
