"""Render ParsedTunnel models back into configuration text."""

from typing import Any

from ..common.logging import get_logger
from ..common.utils import join_and_trim
from .dialect import EXTENDED_INTERFACE_FIELDS, Attribute, AttributeKind, Dialect
from .models import ParsedTunnel

logger = get_logger(__name__)


def render_config(tunnel: ParsedTunnel, dialect: Dialect = Dialect.EXTENDED) -> str:
    """Render a tunnel as configuration text in the given dialect.

    Fields the dialect cannot express are dropped, never approximated.

    Args:
        tunnel: Tunnel to render
        dialect: Target dialect

    Returns:
        Configuration text ending with a newline
    """
    if not dialect.supports_extended:
        dropped = sorted(
            name
            for name in EXTENDED_INTERFACE_FIELDS
            if getattr(tunnel.interface, name) is not None
        )
        if dropped:
            logger.debug(
                "Dropping fields unsupported by dialect",
                dialect=dialect.value,
                fields=dropped,
            )

    lines = ["[Interface]"]
    lines.extend(_render_section(tunnel.interface, dialect.interface_attributes()))

    for peer in tunnel.peers:
        lines.append("")
        lines.append("[Peer]")
        lines.extend(_render_section(peer, dialect.peer_attributes()))

    return "\n".join(lines) + "\n"


def _render_section(model: Any, attributes: tuple[Attribute, ...]) -> list[str]:
    lines = []
    for attribute in attributes:
        value = getattr(model, attribute.field)
        if value is None or value == ():
            continue
        if attribute.kind is AttributeKind.LIST:
            text = join_and_trim(value)
        else:
            text = str(value)
        lines.append(f"{attribute.name} = {text}")
    return lines
