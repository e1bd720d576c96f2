"""Custom exceptions for tunnel import."""

INVALID_EXTENSION_MESSAGE = "Invalid file extension"
INVALID_FORMAT_MESSAGE = "Invalid file format"


class TunnelImportError(Exception):
    """Base exception for all tunnel import errors."""

    @property
    def user_message(self) -> str:
        """Message suitable for showing to an end user."""
        return INVALID_FORMAT_MESSAGE


class InvalidSourceSchemeError(TunnelImportError):
    """Raised when a source URI uses an unexpected access scheme.

    Presented to users like an unsupported extension: the source is not a
    file this importer can take.
    """

    @property
    def user_message(self) -> str:
        return INVALID_EXTENSION_MESSAGE


class UnsupportedExtensionError(TunnelImportError):
    """Raised when a file name carries neither recognized extension."""

    @property
    def user_message(self) -> str:
        return INVALID_EXTENSION_MESSAGE


class ConfigFormatError(TunnelImportError):
    """Raised when configuration text cannot be parsed."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class SourceReadError(TunnelImportError):
    """Raised when a source stream cannot be opened or read."""

    pass


def to_import_error(error: Exception) -> TunnelImportError:
    """Classify an arbitrary failure into the import error taxonomy.

    I/O failures become SourceReadError; anything else that is not already
    a TunnelImportError is treated as unreadable configuration content.
    """
    if isinstance(error, TunnelImportError):
        return error
    if isinstance(error, OSError):
        converted: TunnelImportError = SourceReadError(str(error) or type(error).__name__)
    else:
        converted = ConfigFormatError(str(error) or type(error).__name__)
    converted.__cause__ = error
    return converted
