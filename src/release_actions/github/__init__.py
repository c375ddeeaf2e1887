"""GitHub API and Actions workflow integration."""

from .api import list_tags
from .auth import get_github_client
from .workflow import error, notice, set_output, set_outputs

__all__ = [
    "get_github_client",
    "list_tags",
    "set_output",
    "set_outputs",
    "notice",
    "error",
]
