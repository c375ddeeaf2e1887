"""Package a compiled binary into a versioned, platform-named tarball.

The archive contains a single top-level directory ``{name}-{version}`` with
the binary under ``bin/``, and is named ``{name}_{version}_{os}_{arch}.tgz``.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

from ..config import BundleConfig
from ..constants import ARCH_ALIASES, BINARY_MODE, BUNDLE_SUFFIX

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Target:
    """A ``<arch>-<vendor>-<os>`` target triple."""

    arch: str
    vendor: str
    os: str


@dataclass(frozen=True)
class Bundle:
    """Result of a bundling run."""

    name: str
    path: Path
    prefix: Path
    staged_binary: Path


def parse_target(target: str) -> Target:
    """Split a target triple into its parts.

    Segments beyond the third (e.g. the ``gnu`` in
    ``x86_64-unknown-linux-gnu``) are ignored.
    """
    parts = target.split("-")
    if len(parts) < 3 or not parts[0] or not parts[2]:
        raise ValueError(f"TARGET must look like '<arch>-<vendor>-<os>', got {target!r}")
    return Target(arch=parts[0], vendor=parts[1], os=parts[2])


def normalize_arch(arch: str) -> str:
    """Map a target architecture to its release name; unknown names pass through."""
    return ARCH_ALIASES.get(arch, arch)


def bundle_name(name: str, version: str, os_name: str, arch: str) -> str:
    return f"{name}_{version}_{os_name}_{arch}{BUNDLE_SUFFIX}"


def bundle_prefix(name: str, version: str) -> str:
    return f"{name}-{version}"


def stage_binary(binary: str | os.PathLike[str], prefix: Path) -> Path:
    """Copy ``binary`` into ``{prefix}/bin`` and mark it executable.

    Raises ``FileNotFoundError`` if the source binary does not exist.
    """
    source = Path(binary)
    bin_dir = prefix / "bin"
    bin_dir.mkdir(parents=True, exist_ok=True)

    staged = bin_dir / source.name
    shutil.copyfile(source, staged)
    staged.chmod(BINARY_MODE)
    logger.info("Staged %s at %s", source, staged)
    return staged


def create_archive(bundle: str, prefix: str, cwd: str | os.PathLike[str] | None = None) -> None:
    """Create ``bundle`` as a gzipped tarball of ``prefix`` using ``tar``.

    A non-zero exit raises ``subprocess.CalledProcessError``.
    """
    argv = ["tar", "-czvf", bundle, prefix]
    logger.info("Running %s", " ".join(argv))
    subprocess.run(argv, cwd=cwd, check=True)


def build_bundle(config: BundleConfig, workdir: str | os.PathLike[str] = ".") -> Bundle:
    """Stage ``config.binary`` and archive it in ``workdir``."""
    target = parse_target(config.target)
    arch = normalize_arch(target.arch)

    name = bundle_name(config.name, config.version, target.os, arch)
    prefix = bundle_prefix(config.name, config.version)

    root = Path(workdir)
    staged = stage_binary(config.binary, root / prefix)
    create_archive(name, prefix, cwd=root)

    logger.info("Created bundle %s", name)
    return Bundle(name=name, path=root / name, prefix=root / prefix, staged_binary=staged)
