"""Derive the build version from the ref that triggered the workflow.

A tag push (``refs/tags/<version>``) is a release: the tag itself is the
version.  Anything else is a prerelease build of the latest tag, marked with
the branch name and the CI run number, e.g. ``1.0.0-main.42``.

A tag that is not a valid semantic version does not fail the run.  The
result keeps its ``INVALID`` defaults and downstream jobs gate on the
``release``/``publish`` outputs.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import asdict, dataclass, field

import semver

from ..config import VersionConfig
from ..constants import (
    BRANCH_REF_PREFIX,
    DEFAULT_BASE_TAG,
    INVALID_VERSION,
    MAX_VERSION_COMPONENT,
    PRERELEASE_PUBLISH,
    RELEASE_PUBLISH,
    TAG_REF_PREFIX,
    UNKNOWN_BRANCH,
)
from ..github import api

logger = logging.getLogger(__name__)


@dataclass
class VersionResult:
    """Version and publishing flags reported to the pipeline."""

    version: str = INVALID_VERSION
    prerelease: bool = False
    publish: list[str] = field(default_factory=list)
    release: bool = False

    def to_dict(self) -> dict[str, object]:
        return asdict(self)

    def outputs(self) -> dict[str, str]:
        """Return the step outputs as strings, in emission order."""
        return {
            "version": self.version,
            "prerelease": "true" if self.prerelease else "false",
            "publish": ",".join(self.publish),
            "release": "true" if self.release else "false",
        }


def parse_ref(ref: str) -> tuple[str, str]:
    """Classify ``ref`` as ``("tag", name)`` or ``("branch", name)``.

    Tags are checked first.  A ref outside ``refs/heads/`` is reported as
    the branch ``unknown``.
    """
    if ref.startswith(TAG_REF_PREFIX):
        return "tag", _third_segment(ref)
    if ref.startswith(BRANCH_REF_PREFIX):
        return "branch", _third_segment(ref)
    return "branch", UNKNOWN_BRANCH


def _third_segment(ref: str) -> str:
    # refs/heads/feature/x yields "feature"
    parts = ref.split("/")
    return parts[2] if len(parts) > 2 else ""


def parse_version(tag: str) -> semver.Version | None:
    """Parse a bare tag such as ``1.2.3`` or ``2.0.0-beta.1`` as strict semver.

    Tags carrying their own ``v`` prefix do not parse, nor do tags whose
    major, minor or patch exceed 2**53 - 1.  Returns ``None`` instead of
    raising for anything that does not parse.
    """
    try:
        version = semver.Version.parse(tag.strip())
    except (ValueError, TypeError):
        return None
    if max(version.major, version.minor, version.patch) > MAX_VERSION_COMPONENT:
        return None
    return version


def resolve_tag_version(tag: str) -> VersionResult:
    result = VersionResult()
    version = parse_version(tag)
    if version is None:
        logger.warning("Tag %r is not a semantic version", tag)
        return result

    result.version = str(version.replace(build=None))
    result.prerelease = version.prerelease is not None
    result.publish = list(RELEASE_PUBLISH)
    result.release = True
    return result


def resolve_branch_version(branch: str, build: int, latest_tag: str) -> VersionResult:
    """Build a prerelease of ``latest_tag`` identified by ``{branch}.{build}``.

    The numeric core is not bumped; an existing prerelease on the base tag
    is replaced.
    """
    result = VersionResult()
    base = parse_version(latest_tag)
    if base is None:
        logger.warning("Base tag %r is not a semantic version", latest_tag)
        return result

    identifier = f"{branch}.{build}"
    candidate = str(base.replace(prerelease=identifier, build=None))
    # A "+" in the branch name would move the build number into metadata
    parsed = parse_version(candidate)
    if parsed is None or parsed.prerelease != identifier or parsed.build is not None:
        logger.warning("Prerelease identifier %r is not valid semver", identifier)
        return result

    result.version = candidate
    result.prerelease = True
    result.publish = list(PRERELEASE_PUBLISH)
    result.release = False
    return result


def latest_tag_name(tags: list[dict[str, object]]) -> str:
    """Return the first tag's name, or ``0.0.0`` when there is none."""
    if tags:
        name = tags[0].get("name")
        if name:
            return str(name)
    return DEFAULT_BASE_TAG


def resolve_version(
    config: VersionConfig,
    fetch_tags: Callable[[VersionConfig], list[dict[str, object]]] | None = None,
) -> VersionResult:
    """Resolve the version for ``config.ref``.

    The tag list is fetched only for branch builds.  API failures propagate.
    """
    kind, name = parse_ref(config.ref)

    if kind == "tag":
        result = resolve_tag_version(name)
    else:
        tags = (fetch_tags or api.list_tags)(config)
        latest = latest_tag_name(tags)
        logger.info("Latest tag for %s is %s", config.repo_slug, latest)
        result = resolve_branch_version(name, config.build, latest)

    return result
