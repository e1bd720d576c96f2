"""Tunnel naming: unique names, file-derived names and generated defaults."""

import random
import re
from collections.abc import Collection

from ..common.utils import strip_extension
from ..config.models import ParsedTunnel

NUMBERED_NAME_PATTERN = re.compile(r"^(?P<base>.*)\((?P<number>\d+)\)$")
RANDOM_NAME_LIMIT = 100000


def split_numbered_name(name: str) -> tuple[str, int] | None:
    """Split ``base(n)`` into ``(base, n)``; None if there is no numeric suffix."""
    match = NUMBERED_NAME_PATTERN.match(name)
    if match is None:
        return None
    return match.group("base"), int(match.group("number"))


def unique_name(candidate: str, existing_names: Collection[str]) -> str:
    """Return a name that is not in ``existing_names``.

    A free candidate is returned unchanged. Otherwise ``base(1)``,
    ``base(2)``, ... are tried in order, where ``base`` is the candidate
    without any trailing ``(n)``. Every proposal is derived from the given
    candidate, so at most ``len(existing_names) + 1`` proposals are made.

    Args:
        candidate: Desired name
        existing_names: Snapshot of all committed tunnel names

    Returns:
        The first free name
    """
    if candidate not in existing_names:
        return candidate

    numbered = split_numbered_name(candidate)
    base = numbered[0] if numbered else candidate

    number = 1
    while True:
        proposal = f"{base}({number})"
        if proposal not in existing_names:
            return proposal
        number += 1


def name_from_file_name(file_name: str) -> str:
    """Tunnel name for a file: its final path component without extension."""
    return strip_extension(file_name)


def generate_random_tunnel_name(prefix: str = "tunnel") -> str:
    """Default name used when a source offers nothing better."""
    return f"{prefix}{random.randrange(RANDOM_NAME_LIMIT)}"


def derive_default_name(tunnel: ParsedTunnel) -> str | None:
    """Host of the first peer's endpoint, if the tunnel has one."""
    if not tunnel.peers:
        return None
    endpoint = tunnel.peers[0].endpoint
    if endpoint is None:
        return None
    return endpoint.host
