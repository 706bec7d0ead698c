"""
Cache Key Helpers.

Build stable string keys from arbitrary parts.
"""

from __future__ import annotations

import hashlib
import re
from typing import Any, Optional


def generate_key(*parts: Any, prefix: Optional[str] = None) -> str:
    """
    Join parts into a colon-separated key.

    Args:
        *parts: Key components (None becomes "null")
        prefix: Optional namespace prepended as "prefix:"

    Returns:
        Key string; "empty" when no parts are given

    Example:
        >>> generate_key("student", 42, prefix="grades")
        'grades:student:42'
    """
    key = ":".join("null" if p is None else str(p) for p in parts) if parts else "empty"
    return f"{prefix}:{key}" if prefix is not None else key


def normalize_key(key: Optional[str]) -> str:
    """Lowercase, trim and replace whitespace runs with underscores."""
    if key is None:
        return "null"
    return re.sub(r"\s+", "_", key.strip().lower())


def generate_hash_key(*objects: Any) -> str:
    """Short hash-based key for composite objects."""
    digest = hashlib.sha256(repr(objects).encode()).hexdigest()[:16]
    return f"hash_{digest}"
