"""Persistable tunnel record."""

from pydantic import BaseModel, ConfigDict, Field

from ..config.dialect import Dialect
from ..config.models import ParsedTunnel
from ..config.parser import parse_config
from ..config.renderer import render_config


class TunnelConfig(BaseModel):
    """A named tunnel with its configuration in both dialects.

    Instances are immutable; a modified tunnel is a new record that replaces
    the old one in the repository.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1, description="Unique tunnel name")
    wg_quick: str = Field(description="Configuration in the baseline dialect")
    am_quick: str = Field(description="Configuration in the extended dialect")
    is_primary_tunnel: bool = Field(
        default=False, description="Tunnel preferred by auto-tunneling"
    )

    @classmethod
    def from_parsed(cls, tunnel: ParsedTunnel, name: str) -> "TunnelConfig":
        """Build a record rendering both dialect texts.

        Args:
            tunnel: Parsed configuration
            name: Tunnel name (already made unique by the caller)

        Returns:
            New TunnelConfig
        """
        return cls(
            name=name,
            wg_quick=render_config(tunnel, Dialect.BASELINE),
            am_quick=render_config(tunnel, Dialect.EXTENDED),
        )

    def parsed(self) -> ParsedTunnel:
        """Decode the stored extended-dialect text."""
        return parse_config(self.am_quick, Dialect.EXTENDED)

    def with_name(self, name: str) -> "TunnelConfig":
        """Create new record with another name (immutable pattern)."""
        return self.model_copy(update={"name": name})

    def with_primary(self, is_primary: bool) -> "TunnelConfig":
        """Create new record with the primary flag set or cleared."""
        return self.model_copy(update={"is_primary_tunnel": is_primary})
