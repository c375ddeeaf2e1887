"""Binary bundling."""

from .bundler import (
    Bundle,
    Target,
    build_bundle,
    bundle_name,
    bundle_prefix,
    create_archive,
    normalize_arch,
    parse_target,
    stage_binary,
)

__all__ = [
    "Bundle",
    "Target",
    "build_bundle",
    "bundle_name",
    "bundle_prefix",
    "create_archive",
    "normalize_arch",
    "parse_target",
    "stage_binary",
]
