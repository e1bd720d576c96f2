"""Tunnel configuration dialects: models, parser and renderer."""

from .dialect import (
    INTERFACE_ATTRIBUTES,
    PEER_ATTRIBUTES,
    Attribute,
    AttributeKind,
    Dialect,
)
from .models import (
    ALL_IPS,
    Endpoint,
    Interface,
    ParsedTunnel,
    Peer,
    validate_cidr,
    validate_key,
)
from .parser import parse_config
from .renderer import render_config

__all__ = [
    # Dialects
    "Dialect",
    "Attribute",
    "AttributeKind",
    "INTERFACE_ATTRIBUTES",
    "PEER_ATTRIBUTES",
    # Models
    "ParsedTunnel",
    "Interface",
    "Peer",
    "Endpoint",
    "ALL_IPS",
    "validate_key",
    "validate_cidr",
    # Parsing
    "parse_config",
    "render_config",
]
