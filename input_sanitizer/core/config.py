"""
Application configuration from environment variables.
No input values ever appear in defaults or logs.
"""
from functools import lru_cache
from typing import List, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Service configuration
    service_env: Literal["dev", "staging", "prod"] = Field(
        default="dev",
        description="Service environment"
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8080, description="Server port")

    # HTTP surface limits
    max_fields: int = Field(
        default=500,
        ge=1,
        le=10000,
        description="Maximum number of input keys accepted by /v1/sanitize"
    )
    expose_transform_catalog: bool = Field(
        default=True,
        description="List registered transform names on GET /v1/transforms"
    )

    # Transform configuration
    date_input_formats: List[str] = Field(
        default_factory=lambda: [
            "Y-m-d",
            "Y-m-d H:i:s",
            "m/d/Y",
            "d.m.Y",
            "d-m-Y",
            "Y/m/d",
        ],
        description=(
            "PHP-style formats the date transform tries after ISO-8601 "
            "when no explicit input format is given"
        )
    )

    @field_validator("date_input_formats", mode="after")
    @classmethod
    def drop_blank_formats(cls, v: List[str]) -> List[str]:
        """Strip surrounding whitespace and drop empty format strings."""
        return [fmt.strip() for fmt in v if fmt and fmt.strip()]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
