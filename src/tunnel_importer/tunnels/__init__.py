"""Tunnel records, naming, routing policy and storage."""

from .exceptions import TunnelRepositoryError
from .models import TunnelConfig
from .naming import (
    derive_default_name,
    generate_random_tunnel_name,
    name_from_file_name,
    split_numbered_name,
    unique_name,
)
from .policy import (
    ALL_IPS,
    IPV4_PUBLIC_NETWORKS,
    exclude_lan,
    exclude_lan_all,
    include_lan,
    include_lan_all,
    is_lan_excluded,
)
from .repository import InMemoryTunnelRepository, TunnelRepository

__all__ = [
    # Models
    "TunnelConfig",
    # Naming
    "unique_name",
    "split_numbered_name",
    "name_from_file_name",
    "generate_random_tunnel_name",
    "derive_default_name",
    # Policy
    "ALL_IPS",
    "IPV4_PUBLIC_NETWORKS",
    "exclude_lan",
    "include_lan",
    "is_lan_excluded",
    "exclude_lan_all",
    "include_lan_all",
    # Storage
    "TunnelRepository",
    "InMemoryTunnelRepository",
    "TunnelRepositoryError",
]
