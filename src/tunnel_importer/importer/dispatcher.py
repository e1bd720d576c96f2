"""Source format classification and archive entry iteration."""

import io
import zipfile
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO

from ..common.exceptions import ConfigFormatError, UnsupportedExtensionError
from ..common.logging import get_logger
from ..common.utils import file_extension
from ..settings import ImportSettings

logger = get_logger(__name__)


class SourceFormat(str, Enum):
    """Recognized source formats."""

    CONFIG = "config"
    ARCHIVE = "archive"


def classify_file_name(file_name: str, settings: ImportSettings) -> SourceFormat:
    """Decide how a source is handled from its file name.

    Extensions are compared case-sensitively.

    Args:
        file_name: Display name of the source
        settings: Import settings holding the recognized extensions

    Returns:
        The source format

    Raises:
        UnsupportedExtensionError: If the extension is missing or unrecognized
    """
    extension = file_extension(file_name)
    if extension == settings.config_extension:
        return SourceFormat.CONFIG
    if extension == settings.archive_extension:
        return SourceFormat.ARCHIVE
    raise UnsupportedExtensionError(
        f"Unsupported file extension {extension!r} for '{file_name}'"
    )


@dataclass(frozen=True)
class ArchiveEntry:
    """One member of an archive; readable only while the archive is open."""

    name: str
    is_dir: bool
    _archive: zipfile.ZipFile
    _info: zipfile.ZipInfo

    def read_bytes(self) -> bytes:
        with self._archive.open(self._info) as member:
            return member.read()


def iter_archive_entries(stream: BinaryIO) -> Iterator[ArchiveEntry]:
    """Lazily yield the entries of a zip archive, once each, in archive order.

    Args:
        stream: Binary stream positioned at the start of the archive

    Yields:
        Archive entries

    Raises:
        ConfigFormatError: If the stream is not a zip archive
    """
    seekable = getattr(stream, "seekable", None)
    if seekable is None or not seekable():
        stream = io.BytesIO(stream.read())

    try:
        archive = zipfile.ZipFile(stream)
    except zipfile.BadZipFile as e:
        raise ConfigFormatError(f"Not a valid zip archive: {e}") from e

    with archive:
        for info in archive.infolist():
            yield ArchiveEntry(
                name=info.filename, is_dir=info.is_dir(), _archive=archive, _info=info
            )


def iter_config_entries(
    entries: Iterable[ArchiveEntry], settings: ImportSettings
) -> Iterator[ArchiveEntry]:
    """Skip directories and entries without the configuration extension."""
    for entry in entries:
        if entry.is_dir or file_extension(entry.name) != settings.config_extension:
            logger.debug("Skipping archive entry", entry=entry.name)
            continue
        yield entry
