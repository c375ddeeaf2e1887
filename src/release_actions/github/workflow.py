"""GitHub Actions workflow commands and step outputs.

Step outputs are appended to the file named by ``GITHUB_OUTPUT`` using the
heredoc-style delimiter format, which tolerates newlines in values.  Outside
of Actions (no ``GITHUB_OUTPUT``) the legacy ``::set-output`` command is
printed so the values are still visible when running locally.

Annotations are printed to stdout as ``::notice::`` / ``::error::`` lines.
"""

from __future__ import annotations

import logging
import os
import sys
import uuid

logger = logging.getLogger(__name__)


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _to_command_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def issue_command(command: str, message: object) -> None:
    """Print a ``::command::message`` workflow command to stdout."""
    sys.stdout.write(f"::{command}::{_escape_data(_to_command_value(message))}\n")
    sys.stdout.flush()


def notice(message: object) -> None:
    """Emit a notice annotation."""
    issue_command("notice", message)


def error(message: object) -> None:
    """Emit an error annotation."""
    issue_command("error", message)


def set_output(name: str, value: object) -> None:
    """Record a step output named ``name``.

    Booleans are rendered as ``true``/``false`` and ``None`` as an empty
    string.
    """
    set_outputs({name: value})


def set_outputs(outputs: dict[str, object]) -> None:
    """Record several step outputs with a single write.

    Every block is built before anything is written, so a rejected value
    leaves the output file untouched.
    """
    output_file = os.environ.get("GITHUB_OUTPUT")
    blocks = []
    for name, value in outputs.items():
        text = _to_command_value(value)
        if output_file:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            if delimiter in name or delimiter in text:
                raise ValueError(f"Unexpected input: output {name!r} contains the delimiter")
            blocks.append(f"{name}<<{delimiter}\n{text}\n{delimiter}\n")
        else:
            blocks.append(f"\n::set-output name={name}::{_escape_data(text)}\n")
        logger.debug("Output %s=%s", name, text)

    if output_file:
        with open(output_file, "a", encoding="utf-8") as f:
            f.write("".join(blocks))
    else:
        sys.stdout.write("".join(blocks))
        sys.stdout.flush()
