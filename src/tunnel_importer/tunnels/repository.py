"""Tunnel persistence interface and an in-memory implementation."""

import asyncio
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, Field, PrivateAttr

from ..common.logging import get_logger
from .exceptions import TunnelRepositoryError
from .models import TunnelConfig

logger = get_logger(__name__)


@runtime_checkable
class TunnelRepository(Protocol):
    """Storage for tunnel records, keyed by name."""

    async def get_all_tunnel_names(self) -> set[str]: ...

    async def save(self, tunnel: TunnelConfig) -> None: ...

    async def delete(self, tunnel: TunnelConfig) -> None: ...

    async def count(self) -> int: ...


class InMemoryTunnelRepository(BaseModel):
    """In-memory store for tunnel records with save/delete/query operations."""

    tunnels: dict[str, TunnelConfig] = Field(
        default_factory=dict, description="Tunnels by name"
    )

    _lock: asyncio.Lock = PrivateAttr(default_factory=asyncio.Lock)

    async def get_all_tunnel_names(self) -> set[str]:
        """Snapshot of every committed tunnel name."""
        async with self._lock:
            return set(self.tunnels)

    async def save(self, tunnel: TunnelConfig) -> None:
        """Insert a tunnel or replace the record with the same name.

        Args:
            tunnel: Tunnel to store
        """
        async with self._lock:
            replaced = tunnel.name in self.tunnels
            self.tunnels[tunnel.name] = tunnel
        logger.info("Saved tunnel", tunnel=tunnel.name, replaced=replaced)

    async def delete(self, tunnel: TunnelConfig) -> None:
        """Remove a tunnel.

        Args:
            tunnel: Tunnel to remove

        Raises:
            TunnelRepositoryError: If no tunnel with that name exists
        """
        async with self._lock:
            if tunnel.name not in self.tunnels:
                raise TunnelRepositoryError(f"Tunnel '{tunnel.name}' not found")
            del self.tunnels[tunnel.name]
        logger.info("Deleted tunnel", tunnel=tunnel.name)

    async def count(self) -> int:
        async with self._lock:
            return len(self.tunnels)

    async def get(self, name: str) -> TunnelConfig | None:
        """Get tunnel by name."""
        async with self._lock:
            return self.tunnels.get(name)

    async def list_tunnels(self, primary: bool | None = None) -> list[TunnelConfig]:
        """List tunnels in insertion order, optionally filtered by primary flag."""
        async with self._lock:
            tunnels = list(self.tunnels.values())
        if primary is not None:
            tunnels = [t for t in tunnels if t.is_primary_tunnel == primary]
        return tunnels

    def to_dict(self) -> dict[str, Any]:
        """Serialize repository to dictionary."""
        return {"tunnels": [tunnel.model_dump() for tunnel in self.tunnels.values()]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "InMemoryTunnelRepository":
        """Deserialize repository from dictionary."""
        repository = cls()
        for tunnel_data in data.get("tunnels", []):
            tunnel = TunnelConfig(**tunnel_data)
            repository.tunnels[tunnel.name] = tunnel
        return repository
