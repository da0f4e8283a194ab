"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
Every option can be overridden with a GPXVIEWER_* environment variable.
"""

from typing import Annotated, List
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # === CORS ===
    # Comma-separated in the environment, e.g. "http://a.com,http://b.com"
    cors_origins: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"],
        description="Allowed CORS origins"
    )

    # === Track / route styling ===
    track_colour: str = Field(default="#ff00ff", description="Default stroke colour")
    track_width: int = Field(default=5, ge=1, description="Stroke width in pixels")

    # === Simplification ===
    min_point_delta: float = Field(
        default=0.0001,
        ge=0,
        description="Minimum planar distance (degrees) between kept points"
    )
    simplify_tracks: bool = Field(default=True)
    simplify_routes: bool = Field(default=True)

    # === Markers ===
    marker_size_class: int = Field(
        default=6,
        description="Icon size class 1-10, anything else falls back to 6"
    )
    icon_base_path: str = Field(default="/static/images")

    # === Document ===
    default_time_offset: float = Field(
        default=3,
        description="Time offset used when metadata/desc carries none"
    )

    # === Viewport fallback ===
    default_center_lat: float = Field(default=49.327667, ge=-90, le=90)
    default_center_lon: float = Field(default=-122.942333, ge=-180, le=180)
    default_zoom: int = Field(default=14, ge=0)

    # === Loading ===
    fetch_timeout_seconds: float = Field(default=30, gt=0)
    max_upload_bytes: int = Field(default=20 * 1024 * 1024, gt=0)
    allow_url_fetch: bool = Field(
        default=False,
        description="Enable the server-side fetch-by-URL endpoint"
    )

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',') if origin.strip()]
        return v

    @field_validator('icon_base_path')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Icon URLs are joined with '/', keep a single separator."""
        return v.rstrip('/') if v != '/' else v

    model_config = SettingsConfigDict(
        env_prefix="GPXVIEWER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
