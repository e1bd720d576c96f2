"""High-level API for tunnel import.

This module provides simple synchronous functions for the common import
tasks. Each call runs one import to completion on a fresh event loop.
"""

import asyncio
from os import PathLike
from pathlib import Path

from .common.logging import get_logger
from .importer.models import ImportReport
from .importer.orchestrator import TunnelImporter
from .settings import ImportSettings
from .tunnels.repository import InMemoryTunnelRepository, TunnelRepository

logger = get_logger(__name__)


def import_path(
    path: "str | PathLike[str]",
    repository: TunnelRepository | None = None,
    *,
    settings: ImportSettings | None = None,
) -> ImportReport:
    """Import a ``.conf`` file or a ``.zip`` archive from the local filesystem.

    Args:
        path: File to import
        repository: Where to save tunnels (a new in-memory repository if omitted)
        settings: Import settings

    Returns:
        ImportReport: Saved tunnels and failures

    Example:
        >>> report = import_path("home.conf")
        >>> report.saved_names
        ['home']
    """
    uri = Path(path).resolve().as_uri()
    importer = TunnelImporter(
        repository if repository is not None else InMemoryTunnelRepository(),
        settings=settings,
    )
    logger.debug("Importing path", uri=uri)
    return asyncio.run(importer.import_source(uri))


def import_text(
    text: str,
    repository: TunnelRepository | None = None,
    *,
    settings: ImportSettings | None = None,
) -> ImportReport:
    """Import configuration text such as clipboard contents.

    Args:
        text: Configuration text in either dialect
        repository: Where to save the tunnel (a new in-memory repository if omitted)
        settings: Import settings

    Returns:
        ImportReport: The saved tunnel or the failure
    """
    importer = TunnelImporter(
        repository if repository is not None else InMemoryTunnelRepository(),
        settings=settings,
    )
    return asyncio.run(importer.import_text(text))
