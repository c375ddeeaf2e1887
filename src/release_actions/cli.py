"""Command-line entrypoints for the CI helpers.

``release-bundle`` and ``release-version`` each read their inputs from the
environment, run once and report step outputs.  ``release-actions`` takes
the tool name as its first argument.

Input and infrastructure errors exit with status 1 and an ``::error::``
annotation.  An unparseable version is not an error: the versioner reports
``version=INVALID`` and exits 0.
"""

from __future__ import annotations

import json
import logging
import subprocess
import sys
from collections.abc import Callable, Sequence

from .artifacts.bundler import build_bundle
from .config import BundleConfig, VersionConfig
from .constants import DEFAULT_LOG_LEVEL
from .github import workflow
from .policy.redaction import redact_secrets
from .telemetry.logger import configure_logging
from .versioning.resolver import resolve_version

logger = logging.getLogger(__name__)

# Exceptions reported as a failed step rather than a traceback
FAILURES = (RuntimeError, ValueError, OSError, subprocess.CalledProcessError)


def _fail(tool: str, exc: BaseException, secrets: Sequence[str] = ()) -> int:
    message = redact_secrets(str(exc), secrets)
    logger.error("%s failed: %s", tool, message)
    workflow.error(f"{tool}: {message}")
    return 1


def bundle_main() -> int:
    """Package the binary named by ``BINARY`` and report ``bundle``."""
    configure_logging(DEFAULT_LOG_LEVEL)
    try:
        config = BundleConfig.load_from_env()
        bundle = build_bundle(config)
        workflow.set_output("bundle", bundle.name)
    except FAILURES as exc:
        return _fail("bundle", exc)

    return 0


def version_main() -> int:
    """Resolve the build version and report it as step outputs."""
    configure_logging(DEFAULT_LOG_LEVEL)
    secrets: list[str] = []
    try:
        config = VersionConfig.load_from_env()
        secrets.append(config.token)
        result = resolve_version(config)

        workflow.notice(f"version {result.version}")
        # The result record is printed regardless of LOG_LEVEL
        print(json.dumps(result.to_dict()), flush=True)

        workflow.set_outputs(result.outputs())
    except FAILURES as exc:
        return _fail("version", exc, secrets)
    return 0


TOOLS: dict[str, Callable[[], int]] = {
    "bundle": bundle_main,
    "version": version_main,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Dispatch ``release-actions <tool>`` to the matching entrypoint."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1 or args[0] not in TOOLS:
        sys.stderr.write(f"usage: release-actions {{{','.join(TOOLS)}}}\n")
        return 2
    return TOOLS[args[0]]()


if __name__ == "__main__":
    sys.exit(main())
