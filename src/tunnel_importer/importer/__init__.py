"""Tunnel import from files, archives and text."""

from .dispatcher import (
    ArchiveEntry,
    SourceFormat,
    classify_file_name,
    iter_archive_entries,
    iter_config_entries,
)
from .models import ImportFailure, ImportReport
from .orchestrator import TunnelImporter
from .sources import LocalFileProvider, SourceProvider, source_scheme

__all__ = [
    # Orchestration
    "TunnelImporter",
    "ImportReport",
    "ImportFailure",
    # Dispatch
    "SourceFormat",
    "ArchiveEntry",
    "classify_file_name",
    "iter_archive_entries",
    "iter_config_entries",
    # Sources
    "SourceProvider",
    "LocalFileProvider",
    "source_scheme",
]
