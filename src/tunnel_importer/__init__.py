"""Tunnel Importer - import and normalize WireGuard and AmneziaWG tunnel configurations."""

# High-level API
from .api import import_path, import_text

# Common utilities
from .common.exceptions import (
    ConfigFormatError,
    InvalidSourceSchemeError,
    SourceReadError,
    TunnelImportError,
    UnsupportedExtensionError,
)
from .common.logging import get_logger, setup_logging

# Configuration dialects
from .config import (
    Dialect,
    Endpoint,
    Interface,
    ParsedTunnel,
    Peer,
    parse_config,
    render_config,
)

# Import orchestration
from .importer import (
    ImportFailure,
    ImportReport,
    LocalFileProvider,
    SourceProvider,
    TunnelImporter,
)
from .settings import ImportSettings

# Tunnel records
from .tunnels import (
    InMemoryTunnelRepository,
    TunnelConfig,
    TunnelRepository,
    exclude_lan,
    include_lan,
    is_lan_excluded,
    unique_name,
)

# Setup logging on package initialization
setup_logging(level="INFO")

# Package level logger
logger = get_logger(__name__)

__version__ = "0.1.0"


__all__ = [
    # High-level API
    "import_path",
    "import_text",
    # Import orchestration
    "TunnelImporter",
    "ImportReport",
    "ImportFailure",
    "ImportSettings",
    "SourceProvider",
    "LocalFileProvider",
    # Configuration dialects
    "Dialect",
    "ParsedTunnel",
    "Interface",
    "Peer",
    "Endpoint",
    "parse_config",
    "render_config",
    # Tunnel records
    "TunnelConfig",
    "TunnelRepository",
    "InMemoryTunnelRepository",
    "unique_name",
    "exclude_lan",
    "include_lan",
    "is_lan_excluded",
    # Exceptions
    "TunnelImportError",
    "InvalidSourceSchemeError",
    "UnsupportedExtensionError",
    "ConfigFormatError",
    "SourceReadError",
    # Logging
    "get_logger",
    "setup_logging",
]
