"""
Entity identifier helpers.

Every row is keyed by a 32 character hexadecimal token.
"""

from __future__ import annotations
import re
import uuid
from typing import Any, Optional

ID_LENGTH = 32

_ID_PATTERN = re.compile(r"[0-9a-fA-F]{32}")


def new_id() -> str:
    return uuid.uuid4().hex


def is_valid_id(value: Any) -> bool:
    return isinstance(value, str) and _ID_PATTERN.fullmatch(value) is not None


def normalize_id(value: Any) -> Optional[str]:
    """Return the canonical (lower-case) form of an identifier, or None if malformed."""
    if not is_valid_id(value):
        return None
    return value.lower()
