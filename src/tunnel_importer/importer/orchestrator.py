"""Tunnel import orchestration.

Every entry point is a coroutine that catches failures of its own unit of
work, classifies them and records them on an ImportReport. Cancellation is
never swallowed. A record is built completely before the single save call,
so a cancelled import leaves no partial record behind; entries of an archive
already saved stay saved.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import BinaryIO

from ..common.exceptions import (
    ConfigFormatError,
    InvalidSourceSchemeError,
    to_import_error,
)
from ..common.logging import get_logger
from ..config.dialect import Dialect
from ..config.models import ParsedTunnel
from ..config.parser import parse_config
from ..settings import ImportSettings
from ..tunnels.models import TunnelConfig
from ..tunnels.naming import (
    derive_default_name,
    generate_random_tunnel_name,
    name_from_file_name,
    unique_name,
)
from ..tunnels.repository import TunnelRepository
from .dispatcher import (
    SourceFormat,
    classify_file_name,
    iter_archive_entries,
    iter_config_entries,
)
from .models import ImportFailure, ImportReport
from .sources import LocalFileProvider, SourceProvider, source_scheme

logger = get_logger(__name__)

TEXT_SOURCE = "<text>"
ARCHIVE_SOURCE = "<archive>"


class TunnelImporter:
    """Imports tunnels from files, archives and raw text into a repository."""

    def __init__(
        self,
        repository: TunnelRepository,
        provider: SourceProvider | None = None,
        settings: ImportSettings | None = None,
        on_auto_tunnel_reset: Callable[[], Awaitable[None]] | None = None,
    ) -> None:
        """Initialize the importer.

        Args:
            repository: Tunnel storage
            provider: Byte-source provider (local files by default)
            settings: Import settings
            on_auto_tunnel_reset: Awaited when deleting the primary or last tunnel
        """
        self.repository = repository
        self.provider = provider or LocalFileProvider()
        self.settings = settings or ImportSettings()
        self.on_auto_tunnel_reset = on_auto_tunnel_reset

    async def import_source(self, uri: str) -> ImportReport:
        """Import a single configuration file or an archive of them.

        Args:
            uri: Source URI; its scheme must match ``settings.source_scheme``

        Returns:
            Report of saved tunnels and failures
        """
        report = ImportReport(source=uri)
        try:
            scheme = source_scheme(uri)
            if scheme != self.settings.source_scheme:
                raise InvalidSourceSchemeError(
                    f"Unsupported source scheme {scheme!r}, "
                    f"expected {self.settings.source_scheme!r}"
                )

            file_name = self.provider.display_name(uri) or self._random_name()
            source_format = classify_file_name(file_name, self.settings)

            stream = await asyncio.to_thread(self.provider.open_stream, uri)
            with stream:
                if source_format is SourceFormat.ARCHIVE:
                    await self._import_entries(stream, report)
                else:
                    data = await asyncio.to_thread(stream.read)
                    report.saved.append(await self._import_bytes(data, file_name))
        except Exception as e:
            self._record_failure(report, uri, e)

        return report

    async def import_archive(
        self, stream: BinaryIO, source: str = ARCHIVE_SOURCE
    ) -> ImportReport:
        """Import every configuration entry of an archive stream.

        A failing entry is recorded and the remaining entries are still
        processed, strictly one after another.

        Args:
            stream: Binary zip stream
            source: Label used in the report

        Returns:
            Report of saved tunnels and per-entry failures
        """
        report = ImportReport(source=source)
        try:
            await self._import_entries(stream, report)
        except Exception as e:
            self._record_failure(report, source, e)
        return report

    async def import_text(self, text: str) -> ImportReport:
        """Import configuration text, e.g. from the clipboard or a QR code.

        The tunnel is named after the first peer's endpoint host, or gets a
        generated name when there is none.

        Args:
            text: Configuration text in either dialect

        Returns:
            Report with the saved tunnel or the failure
        """
        report = ImportReport(source=TEXT_SOURCE)
        try:
            tunnel = await asyncio.to_thread(parse_config, text, Dialect.EXTENDED)
            candidate = derive_default_name(tunnel) or self._random_name()
            report.saved.append(await self._save_unique(tunnel, candidate))
        except Exception as e:
            self._record_failure(report, TEXT_SOURCE, e)
        return report

    async def copy_tunnel(self, tunnel: TunnelConfig) -> TunnelConfig:
        """Save a duplicate of a tunnel under a unique name.

        The copy is never the primary tunnel.
        """
        existing = await self.repository.get_all_tunnel_names()
        duplicate = TunnelConfig(
            name=unique_name(tunnel.name, existing),
            wg_quick=tunnel.wg_quick,
            am_quick=tunnel.am_quick,
        )
        await self.repository.save(duplicate)
        logger.info("Copied tunnel", tunnel=tunnel.name, copy=duplicate.name)
        return duplicate

    async def delete_tunnel(self, tunnel: TunnelConfig) -> bool:
        """Delete a tunnel.

        Deleting the primary tunnel or the last remaining tunnel leaves
        auto-tunneling without a target, so the reset callback is awaited
        first.

        Returns:
            True if auto-tunnel state was reset
        """
        reset = tunnel.is_primary_tunnel or await self.repository.count() == 1
        if reset:
            logger.info("Resetting auto-tunnel", tunnel=tunnel.name)
            if self.on_auto_tunnel_reset is not None:
                await self.on_auto_tunnel_reset()
        await self.repository.delete(tunnel)
        return reset

    async def _import_entries(self, stream: BinaryIO, report: ImportReport) -> None:
        entries = iter_config_entries(iter_archive_entries(stream), self.settings)
        while True:
            entry = await asyncio.to_thread(next, entries, None)
            if entry is None:
                break
            try:
                data = await asyncio.to_thread(entry.read_bytes)
                report.saved.append(await self._import_bytes(data, entry.name))
            except Exception as e:
                self._record_failure(report, entry.name, e)

    async def _import_bytes(self, data: bytes, file_name: str) -> TunnelConfig:
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ConfigFormatError("Configuration is not valid UTF-8 text") from e

        tunnel = await asyncio.to_thread(
            parse_config, text, self.settings.default_dialect
        )
        candidate = name_from_file_name(file_name) or self._random_name()
        return await self._save_unique(tunnel, candidate)

    async def _save_unique(self, tunnel: ParsedTunnel, candidate: str) -> TunnelConfig:
        existing = await self.repository.get_all_tunnel_names()
        record = TunnelConfig.from_parsed(tunnel, unique_name(candidate, existing))
        await self.repository.save(record)
        logger.info("Imported tunnel", tunnel=record.name, peers=len(tunnel.peers))
        return record

    def _random_name(self) -> str:
        return generate_random_tunnel_name(self.settings.random_name_prefix)

    def _record_failure(self, report: ImportReport, source: str, error: Exception) -> None:
        failure = ImportFailure(source=source, error=to_import_error(error))
        report.failures.append(failure)
        logger.error(
            "Tunnel import failed",
            source=source,
            kind=failure.kind,
            error=str(failure.error),
        )
