"""Configuration dialects.

Both dialects share one attribute table. The extended dialect accepts every
baseline attribute plus the obfuscation parameters, so baseline text always
parses under the extended dialect.
"""

from dataclasses import dataclass
from enum import Enum


class AttributeKind(str, Enum):
    """How an attribute value is decoded from text."""

    TEXT = "text"
    INT = "int"
    LIST = "list"
    ENDPOINT = "endpoint"
    KEEPALIVE = "keepalive"


@dataclass(frozen=True)
class Attribute:
    """A ``Key = Value`` attribute and the model field it maps to."""

    name: str
    field: str
    kind: AttributeKind
    extended: bool = False

    @property
    def key(self) -> str:
        """Lookup key; attribute names are case-insensitive."""
        return self.name.lower()


INTERFACE_ATTRIBUTES: tuple[Attribute, ...] = (
    Attribute("Address", "addresses", AttributeKind.LIST),
    Attribute("DNS", "dns", AttributeKind.LIST),
    Attribute("ExcludedApplications", "excluded_applications", AttributeKind.LIST),
    Attribute("IncludedApplications", "included_applications", AttributeKind.LIST),
    Attribute("ListenPort", "listen_port", AttributeKind.INT),
    Attribute("MTU", "mtu", AttributeKind.INT),
    Attribute("PrivateKey", "private_key", AttributeKind.TEXT),
    Attribute("Jc", "junk_packet_count", AttributeKind.INT, extended=True),
    Attribute("Jmin", "junk_packet_min_size", AttributeKind.INT, extended=True),
    Attribute("Jmax", "junk_packet_max_size", AttributeKind.INT, extended=True),
    Attribute("S1", "init_packet_junk_size", AttributeKind.INT, extended=True),
    Attribute("S2", "response_packet_junk_size", AttributeKind.INT, extended=True),
    Attribute("S3", "cookie_reply_packet_junk_size", AttributeKind.INT, extended=True),
    Attribute("S4", "transport_packet_junk_size", AttributeKind.INT, extended=True),
    Attribute("H1", "init_packet_magic_header", AttributeKind.TEXT, extended=True),
    Attribute("H2", "response_packet_magic_header", AttributeKind.TEXT, extended=True),
    Attribute("H3", "underload_packet_magic_header", AttributeKind.TEXT, extended=True),
    Attribute("H4", "transport_packet_magic_header", AttributeKind.TEXT, extended=True),
    Attribute("I1", "special_junk_1", AttributeKind.TEXT, extended=True),
    Attribute("I2", "special_junk_2", AttributeKind.TEXT, extended=True),
    Attribute("I3", "special_junk_3", AttributeKind.TEXT, extended=True),
    Attribute("I4", "special_junk_4", AttributeKind.TEXT, extended=True),
    Attribute("I5", "special_junk_5", AttributeKind.TEXT, extended=True),
)

PEER_ATTRIBUTES: tuple[Attribute, ...] = (
    Attribute("AllowedIPs", "allowed_ips", AttributeKind.LIST),
    Attribute("Endpoint", "endpoint", AttributeKind.ENDPOINT),
    Attribute("PersistentKeepalive", "persistent_keepalive", AttributeKind.KEEPALIVE),
    Attribute("PresharedKey", "pre_shared_key", AttributeKind.TEXT),
    Attribute("PublicKey", "public_key", AttributeKind.TEXT),
)

EXTENDED_INTERFACE_FIELDS = frozenset(a.field for a in INTERFACE_ATTRIBUTES if a.extended)


class Dialect(str, Enum):
    """Configuration text dialect."""

    BASELINE = "wg-quick"
    EXTENDED = "awg-quick"

    @property
    def supports_extended(self) -> bool:
        return self is Dialect.EXTENDED

    def interface_attributes(self) -> tuple[Attribute, ...]:
        """Interface attributes understood by this dialect, in render order."""
        return tuple(
            a for a in INTERFACE_ATTRIBUTES if self.supports_extended or not a.extended
        )

    def peer_attributes(self) -> tuple[Attribute, ...]:
        """Peer attributes understood by this dialect, in render order."""
        return tuple(
            a for a in PEER_ATTRIBUTES if self.supports_extended or not a.extended
        )

    def find_attribute(self, section: str, key: str) -> Attribute | None:
        """Look up an attribute of an ``interface`` or ``peer`` section.

        Args:
            section: Lower-case section name
            key: Attribute name as written (any case)

        Returns:
            The attribute, or None if this dialect does not know it
        """
        if section == "interface":
            attributes = self.interface_attributes()
        else:
            attributes = self.peer_attributes()
        key = key.lower()
        for attribute in attributes:
            if attribute.key == key:
                return attribute
        return None
