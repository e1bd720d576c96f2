"""Tunnel configuration models.

This module defines the canonical in-memory form of a tunnel configuration:
an interface and an ordered sequence of peers. Both dialects decode into and
encode from these models.
"""

import base64
import binascii
import ipaddress
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..common.utils import MAX_PORT, join_and_trim

KEY_LENGTH = 32
MAGIC_HEADER_PATTERN = r"^\d+(-\d+)?$"

ALL_IPS: tuple[str, ...] = ("0.0.0.0/0", "::/0")


def validate_key(value: str) -> str:
    """Validate a base64 encoded 32 byte key."""
    try:
        raw = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError("Key is not valid base64") from e
    if len(raw) != KEY_LENGTH:
        raise ValueError(f"Key must decode to {KEY_LENGTH} bytes, got {len(raw)}")
    return value


def validate_cidr(value: str) -> str:
    """Validate an IPv4/IPv6 network, a bare address meaning a host route."""
    try:
        ipaddress.ip_network(value, strict=False)
    except ValueError as e:
        raise ValueError(f"Invalid network '{value}'") from e
    return value


class Endpoint(BaseModel):
    """Remote peer endpoint (host and UDP port)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    host: str = Field(min_length=1, description="Hostname or IP address")
    port: int = Field(ge=1, le=MAX_PORT, description="UDP port")

    @classmethod
    def parse(cls, text: str) -> "Endpoint":
        """Parse ``host:port`` or ``[v6-address]:port``.

        Raises:
            ValueError: If the text is not a valid endpoint
        """
        text = text.strip()
        if text.startswith("["):
            end = text.find("]")
            if end == -1 or text[end + 1 : end + 2] != ":":
                raise ValueError(f"Invalid endpoint '{text}'")
            host, port_text = text[1:end], text[end + 2 :]
        else:
            host, sep, port_text = text.rpartition(":")
            if not sep or ":" in host:
                raise ValueError(f"Invalid endpoint '{text}'")
        try:
            port = int(port_text)
        except ValueError as e:
            raise ValueError(f"Invalid endpoint port '{port_text}'") from e
        return cls(host=host, port=port)

    def __str__(self) -> str:
        if ":" in self.host:
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"


class Interface(BaseModel):
    """Local side of a tunnel."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    private_key: str = Field(description="Base64 private key")
    listen_port: int | None = Field(default=None, ge=0, le=MAX_PORT)
    addresses: tuple[str, ...] = Field(default=(), description="Interface addresses")
    dns: tuple[str, ...] = Field(default=(), description="DNS servers and search domains")
    mtu: int | None = Field(default=None, ge=1, le=65535)
    excluded_applications: tuple[str, ...] = Field(default=())
    included_applications: tuple[str, ...] = Field(default=())

    # Obfuscation parameters, extended dialect only
    junk_packet_count: int | None = Field(default=None, ge=0)
    junk_packet_min_size: int | None = Field(default=None, ge=0)
    junk_packet_max_size: int | None = Field(default=None, ge=0)
    init_packet_junk_size: int | None = Field(default=None, ge=0)
    response_packet_junk_size: int | None = Field(default=None, ge=0)
    cookie_reply_packet_junk_size: int | None = Field(default=None, ge=0)
    transport_packet_junk_size: int | None = Field(default=None, ge=0)
    init_packet_magic_header: str | None = Field(default=None, pattern=MAGIC_HEADER_PATTERN)
    response_packet_magic_header: str | None = Field(default=None, pattern=MAGIC_HEADER_PATTERN)
    underload_packet_magic_header: str | None = Field(default=None, pattern=MAGIC_HEADER_PATTERN)
    transport_packet_magic_header: str | None = Field(default=None, pattern=MAGIC_HEADER_PATTERN)
    special_junk_1: str | None = Field(default=None, min_length=1)
    special_junk_2: str | None = Field(default=None, min_length=1)
    special_junk_3: str | None = Field(default=None, min_length=1)
    special_junk_4: str | None = Field(default=None, min_length=1)
    special_junk_5: str | None = Field(default=None, min_length=1)

    @field_validator("private_key")
    @classmethod
    def validate_private_key(cls, v: str) -> str:
        return validate_key(v)

    @field_validator("addresses")
    @classmethod
    def validate_addresses(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(validate_cidr(address) for address in v)

    @model_validator(mode="after")
    def validate_junk_sizes(self) -> "Interface":
        """Junk packet minimum size cannot exceed the maximum."""
        low, high = self.junk_packet_min_size, self.junk_packet_max_size
        if low is not None and high is not None and low > high:
            raise ValueError("Jmin must not be greater than Jmax")
        return self


class Peer(BaseModel):
    """Remote side of a tunnel."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    public_key: str = Field(description="Base64 public key")
    pre_shared_key: str | None = Field(default=None, description="Base64 pre-shared key")
    persistent_keepalive: int | None = Field(default=None, ge=0, le=65535)
    endpoint: Endpoint | None = Field(default=None)
    allowed_ips: tuple[str, ...] = Field(default=ALL_IPS, min_length=1)

    @field_validator("public_key")
    @classmethod
    def validate_public_key(cls, v: str) -> str:
        return validate_key(v)

    @field_validator("pre_shared_key")
    @classmethod
    def validate_pre_shared_key(cls, v: str | None) -> str | None:
        if v is not None:
            validate_key(v)
        return v

    @field_validator("allowed_ips")
    @classmethod
    def validate_allowed_ips(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(validate_cidr(network) for network in v)

    @property
    def allowed_ips_text(self) -> str:
        """Allowed IPs as written in configuration text."""
        return join_and_trim(self.allowed_ips)


class ParsedTunnel(BaseModel):
    """A decoded tunnel configuration: one interface plus its peers."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    interface: Interface
    peers: tuple[Peer, ...] = Field(default=())

    @field_validator("peers")
    @classmethod
    def validate_unique_peers(cls, v: tuple[Peer, ...]) -> tuple[Peer, ...]:
        seen: set[str] = set()
        for peer in v:
            if peer.public_key in seen:
                raise ValueError(f"Duplicate peer public key '{peer.public_key}'")
            seen.add(peer.public_key)
        return v

    def with_peers(self, peers: Any) -> "ParsedTunnel":
        """Create new tunnel instance with replaced peers (immutable pattern)."""
        return ParsedTunnel(interface=self.interface, peers=tuple(peers))
