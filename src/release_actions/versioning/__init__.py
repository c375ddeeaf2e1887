"""Version resolution from git refs."""

from .resolver import (
    VersionResult,
    parse_ref,
    parse_version,
    resolve_branch_version,
    resolve_tag_version,
    resolve_version,
)

__all__ = [
    "VersionResult",
    "parse_ref",
    "parse_version",
    "resolve_branch_version",
    "resolve_tag_version",
    "resolve_version",
]
