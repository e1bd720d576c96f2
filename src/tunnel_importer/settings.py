"""Import settings."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config.dialect import Dialect


class ImportSettings(BaseModel):
    """Pydantic configuration for tunnel import behavior"""

    model_config = ConfigDict(
        str_strip_whitespace=True, validate_assignment=True, extra="forbid"
    )

    config_extension: str = Field(
        default=".conf", description="Extension of single configuration files"
    )
    archive_extension: str = Field(
        default=".zip", description="Extension of configuration archives"
    )
    source_scheme: str = Field(
        default="file", min_length=1, description="Accepted source URI scheme"
    )
    random_name_prefix: str = Field(
        default="tunnel", min_length=1, description="Prefix for generated names"
    )
    default_dialect: Dialect = Field(
        default=Dialect.EXTENDED, description="Dialect used to parse imported text"
    )

    @field_validator("config_extension", "archive_extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        """Extensions are matched literally and must include the dot"""
        if len(v) < 2 or not v.startswith(".") or "." in v[1:]:
            raise ValueError("Extension must be a single dot followed by a suffix")
        return v
