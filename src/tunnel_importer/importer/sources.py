"""Byte-source providers.

A source is identified by a URI. Providers resolve a display name for it and
open it as a binary stream; the importer never touches the filesystem
directly.
"""

from pathlib import Path
from typing import BinaryIO, Protocol, runtime_checkable
from urllib.parse import urlsplit
from urllib.request import url2pathname

from ..common.exceptions import SourceReadError
from ..common.logging import get_logger

logger = get_logger(__name__)


def source_scheme(uri: str) -> str:
    """Access scheme of a source URI (empty when it has none)."""
    return urlsplit(uri).scheme


@runtime_checkable
class SourceProvider(Protocol):
    """Resolves names for and opens byte sources."""

    def display_name(self, uri: str) -> str | None: ...

    def open_stream(self, uri: str) -> BinaryIO: ...


class LocalFileProvider:
    """Provider for ``file://`` URIs on the local filesystem."""

    @staticmethod
    def path_for(uri: str) -> Path:
        """Filesystem path addressed by a file URI."""
        return Path(url2pathname(urlsplit(uri).path))

    def display_name(self, uri: str) -> str | None:
        """File name of the source, or None if the URI names no file."""
        name = self.path_for(uri).name
        return name or None

    def open_stream(self, uri: str) -> BinaryIO:
        """Open the source for binary reading.

        Raises:
            SourceReadError: If the file cannot be opened
        """
        path = self.path_for(uri)
        try:
            return path.open("rb")
        except OSError as e:
            logger.warning("Failed to open source", path=str(path), error=str(e))
            raise SourceReadError(f"Cannot open '{path}': {e.strerror or e}") from e
