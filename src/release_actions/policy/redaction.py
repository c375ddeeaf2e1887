"""Secret redaction utilities.

Error messages raised by the HTTP layer can echo request headers, and CI
logs are often public.  Text is passed through ``redact_secrets`` before it
is written to a log or an annotation.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

_TOKEN_PATTERNS = [
    # GitHub tokens: ghp_, gho_, ghu_, ghs_ (Actions), ghr_
    (re.compile(r"gh[pousr]_[A-Za-z0-9]{30,}"), "<REDACTED>"),
    (re.compile(r"github_pat_[A-Za-z0-9_]{20,}"), "<REDACTED>"),
    # Authorization header values
    (re.compile(r"(Authorization:\s*(?:token|Bearer)\s+)[^\s'\"<]+", re.IGNORECASE), r"\1<REDACTED>"),
]


def redact_secrets(text: str, secrets: Iterable[str] = ()) -> str:
    """Return ``text`` with secrets and GitHub token patterns replaced.

    :param text: arbitrary text that may contain secrets
    :param secrets: explicit secret strings to redact
    :return: text with each match replaced by ``<REDACTED>``
    """
    redacted = text or ""
    for secret in secrets:
        if secret:
            redacted = redacted.replace(secret, "<REDACTED>")
    for pattern, replacement in _TOKEN_PATTERNS:
        redacted = pattern.sub(replacement, redacted)
    return redacted
