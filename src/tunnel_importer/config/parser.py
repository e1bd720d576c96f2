"""Parser for wg-quick style configuration text."""

import re
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from ..common.exceptions import ConfigFormatError
from ..common.logging import get_logger
from ..common.utils import split_list
from .dialect import Attribute, AttributeKind, Dialect
from .models import Endpoint, Interface, ParsedTunnel, Peer

logger = get_logger(__name__)

INTERFACE_SECTION = "interface"
PEER_SECTION = "peer"

ATTRIBUTE_NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9]{0,31}$")


@dataclass
class _Section:
    """Attributes collected for one section, keyed by lower-case name.

    Each value is the name as written, the raw value and its line number.
    """

    kind: str
    line_number: int
    attributes: dict[str, tuple[str, str, int]] = field(default_factory=dict)


def parse_config(text: str, dialect: Dialect = Dialect.EXTENDED) -> ParsedTunnel:
    """Parse configuration text into a ParsedTunnel.

    Args:
        text: Configuration text
        dialect: Dialect to accept; the extended dialect also accepts baseline text

    Returns:
        The decoded tunnel

    Raises:
        ConfigFormatError: If the text is not a valid configuration
    """
    sections = _read_sections(text.lstrip("\ufeff"))

    interfaces = [s for s in sections if s.kind == INTERFACE_SECTION]
    if not interfaces:
        raise ConfigFormatError("Missing [Interface] section")
    if len(interfaces) > 1:
        raise ConfigFormatError(
            "Multiple [Interface] sections", interfaces[1].line_number
        )

    interface = _build(Interface, interfaces[0], dialect)
    peers = [_build(Peer, s, dialect) for s in sections if s.kind == PEER_SECTION]

    try:
        tunnel = ParsedTunnel(interface=interface, peers=tuple(peers))
    except ValidationError as e:
        raise ConfigFormatError(_describe(e)) from e

    logger.debug("Configuration parsed", dialect=dialect.value, peers=len(peers))
    return tunnel


def _read_sections(text: str) -> list[_Section]:
    sections: list[_Section] = []
    current: _Section | None = None

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.split("#", 1)[0].strip()
        if not line:
            continue

        if line.startswith("["):
            if not line.endswith("]"):
                raise ConfigFormatError("Malformed section header", line_number)
            kind = line[1:-1].strip().lower()
            if kind not in (INTERFACE_SECTION, PEER_SECTION):
                raise ConfigFormatError("Unknown section", line_number)
            current = _Section(kind=kind, line_number=line_number)
            sections.append(current)
            continue

        if current is None:
            raise ConfigFormatError("Attribute outside of any section", line_number)

        # Messages never echo the line itself, it may carry key material
        name, sep, value = line.partition("=")
        name = name.strip()
        if not sep:
            raise ConfigFormatError("Expected 'Key = Value'", line_number)
        if not ATTRIBUTE_NAME_PATTERN.match(name):
            raise ConfigFormatError("Malformed attribute name", line_number)
        key = name.lower()
        if key in current.attributes:
            raise ConfigFormatError(f"Duplicate attribute '{name}'", line_number)
        current.attributes[key] = (name, value.strip(), line_number)

    return sections


def _build(model: Any, section: _Section, dialect: Dialect) -> Any:
    values: dict[str, Any] = {}

    for key, (name, raw_value, line_number) in section.attributes.items():
        attribute = dialect.find_attribute(section.kind, key)
        if attribute is None:
            raise ConfigFormatError(
                f"Unknown {section.kind} attribute '{name}' for {dialect.value}",
                line_number,
            )
        if not raw_value:
            continue
        try:
            value = _convert(attribute, raw_value)
        except ValueError as e:
            raise ConfigFormatError(f"Invalid value for {attribute.name}", line_number) from e
        if value is not None:
            values[attribute.field] = value

    try:
        return model(**values)
    except ValidationError as e:
        raise ConfigFormatError(_describe(e), section.line_number) from e


def _convert(attribute: Attribute, value: str) -> Any:
    if attribute.kind is AttributeKind.LIST:
        return tuple(split_list(value))
    if attribute.kind is AttributeKind.INT:
        return int(value)
    if attribute.kind is AttributeKind.KEEPALIVE:
        if value.lower() == "off":
            return None
        return int(value)
    if attribute.kind is AttributeKind.ENDPOINT:
        return Endpoint.parse(value)
    return value


def _describe(error: ValidationError) -> str:
    """Summarize a pydantic error without echoing input values."""
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "config"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)
