"""Utility functions for tunnel import."""

import posixpath
from typing import Any

MAX_PORT = 65535

SENSITIVE_FIELDS = {
    "private_key",
    "pre_shared_key",
    "preshared_key",
    "password",
    "secret",
    "token",
}


def split_list(value: str) -> list[str]:
    """Split a comma separated attribute value, dropping empty items."""
    return [item.strip() for item in value.split(",") if item.strip()]


def join_and_trim(values: "list[str] | tuple[str, ...]") -> str:
    """Join values with ", " and trim the result."""
    return ", ".join(values).strip()


def file_extension(file_name: str) -> str | None:
    """Return the extension of a file name including the dot, or None.

    The extension is everything from the last dot of the final path
    component, matched as-is (no case folding).
    """
    base = posixpath.basename(file_name.replace("\\", "/"))
    index = base.rfind(".")
    if index == -1:
        return None
    return base[index:]


def strip_extension(file_name: str) -> str:
    """Return the final path component of a file name without its extension."""
    base = posixpath.basename(file_name.replace("\\", "/"))
    index = base.rfind(".")
    if index == -1:
        return base
    return base[:index]


def mask_sensitive_data(
    value: str | None, mask_char: str = "*", show_chars: int = 4
) -> str:
    """Mask sensitive data for logging while preserving some characters for debugging.

    Args:
        value: Sensitive string to mask (e.g., a private key)
        mask_char: Character to use for masking
        show_chars: Number of characters to show at the end

    Returns:
        Masked string safe for logging
    """
    if not value:
        return "<None>"

    if len(value) <= show_chars:
        return mask_char * len(value)

    masked_length = len(value) - show_chars
    return mask_char * masked_length + value[-show_chars:]


def sanitize_log_data(data: dict[str, Any]) -> dict[str, Any]:
    """Mask values whose key names look like key material or credentials."""
    sanitized = {}
    for key, value in data.items():
        if key.lower() in SENSITIVE_FIELDS:
            sanitized[key] = mask_sensitive_data(str(value) if value else None)
        else:
            sanitized[key] = value

    return sanitized
