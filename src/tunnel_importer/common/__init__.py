"""Common utilities and shared functionality."""

from .exceptions import (
    ConfigFormatError,
    InvalidSourceSchemeError,
    SourceReadError,
    TunnelImportError,
    UnsupportedExtensionError,
    to_import_error,
)
from .logging import get_logger, setup_logging
from .utils import (
    MAX_PORT,
    file_extension,
    join_and_trim,
    mask_sensitive_data,
    sanitize_log_data,
    split_list,
    strip_extension,
)

__all__ = [
    # Exceptions
    "TunnelImportError",
    "InvalidSourceSchemeError",
    "UnsupportedExtensionError",
    "ConfigFormatError",
    "SourceReadError",
    "to_import_error",
    # Logging
    "get_logger",
    "setup_logging",
    # Utils
    "split_list",
    "join_and_trim",
    "file_extension",
    "strip_extension",
    "mask_sensitive_data",
    "sanitize_log_data",
    "MAX_PORT",
]
