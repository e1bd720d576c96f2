"""Custom exceptions for tunnel storage."""

from ..common.exceptions import TunnelImportError


class TunnelRepositoryError(TunnelImportError):
    """Exception raised for tunnel repository operations."""

    pass
