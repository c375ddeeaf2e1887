"""Top‑level package for release-actions.

This package provides two CI helpers: a bundler that packages a compiled
binary into a platform-named archive, and a versioner that derives a
semantic version from git tag and branch state.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
