"""Import outcome models."""

from pydantic import BaseModel, ConfigDict, Field

from ..common.exceptions import (
    InvalidSourceSchemeError,
    TunnelImportError,
    UnsupportedExtensionError,
)
from ..tunnels.models import TunnelConfig

REJECTED_SOURCE_ERRORS = (UnsupportedExtensionError, InvalidSourceSchemeError)


class ImportFailure(BaseModel):
    """A failed import of one source or one archive entry."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    source: str = Field(description="Source URI or archive entry name")
    error: TunnelImportError = Field(description="Classified failure")

    @property
    def kind(self) -> str:
        return type(self.error).__name__

    @property
    def user_message(self) -> str:
        return self.error.user_message


class ImportReport(BaseModel):
    """Outcome of one import operation."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    source: str = Field(description="What was imported")
    saved: list[TunnelConfig] = Field(default_factory=list)
    failures: list[ImportFailure] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def saved_names(self) -> list[str]:
        return [tunnel.name for tunnel in self.saved]

    @property
    def user_message(self) -> str | None:
        """Single message to present for this import, None on success.

        Rejected sources (unsupported extension or scheme) take precedence;
        every other failure reads as an invalid format.
        """
        if self.ok:
            return None
        for failure in self.failures:
            if isinstance(failure.error, REJECTED_SOURCE_ERRORS):
                return failure.user_message
        return self.failures[0].user_message
