from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Optional, Union

_LEADING_ANCHORS = re.compile(r"^[/\\.]+")
_TRAVERSAL = re.compile(r"\.\.")
_INVALID_CHARS = re.compile(r'[<>:"|?*]')

# A pass never lengthens the string, so the loop settles well before this.
_MAX_PASSES = 32


def _sanitize_once(value: str) -> str:
    normalized = os.path.normpath(value)
    sanitized = _LEADING_ANCHORS.sub("", normalized)
    sanitized = _TRAVERSAL.sub("", sanitized)
    return _INVALID_CHARS.sub("_", sanitized)


def sanitize_path(candidate: Optional[str]) -> str:
    """
    Turn an untrusted relative path into one that cannot leave its root.

    Never raises: anything unusable collapses to "" (the root itself).
    Note that every ".." substring is dropped, so "report..final" becomes
    "reportfinal".
    """
    if not candidate or not candidate.strip():
        return ""

    current = candidate
    for _ in range(_MAX_PASSES):
        sanitized = _sanitize_once(current)
        if sanitized == current:
            break
        current = sanitized
    return current


def resolve_in_root(candidate: Optional[str], root: Union[str, Path]) -> Path:
    """Join a sanitized candidate onto root. Returns root for blank input."""
    return Path(root) / sanitize_path(candidate)
