"""
Configuration management system using Pydantic Settings.
Resolves the remote service URL, map defaults and logging at startup.
"""

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings
from typing import Optional, Dict, Any, List, Tuple
from enum import Enum


DEFAULT_BACKEND_URL = "http://localhost:8000"


class Environment(str, Enum):
    """Supported deployment environments"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Supported log levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class MapSettings(BaseSettings):
    """Map viewport, tiles and marker configuration"""

    # Fallback center: Tyumen
    default_latitude: float = Field(default=57.15303, ge=-90.0, le=90.0)
    default_longitude: float = Field(default=65.53433, ge=-180.0, le=180.0)
    default_zoom: int = Field(default=12, ge=0, le=19)
    recenter_zoom: int = Field(default=13, ge=0, le=19)

    tile_url: str = Field(default="https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png")
    tile_attribution: str = Field(
        default='&copy; <a href="https://www.openstreetmap.org/copyright">OSM</a>'
    )
    directions_url: str = Field(default="https://www.google.com/maps/dir/")

    # Marker icon, applied once at startup
    marker_icon_url: str = Field(default="/static/leaflet/marker-icon.png")
    marker_icon_retina_url: str = Field(default="/static/leaflet/marker-icon-2x.png")
    marker_shadow_url: str = Field(default="/static/leaflet/marker-shadow.png")
    marker_icon_size: Tuple[int, int] = Field(default=(25, 41))
    marker_icon_anchor: Tuple[int, int] = Field(default=(12, 41))
    marker_popup_anchor: Tuple[int, int] = Field(default=(1, -34))
    marker_shadow_size: Tuple[int, int] = Field(default=(41, 41))

    model_config = {
        "env_prefix": "MAP_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


class Settings(BaseSettings):
    """Main application settings"""

    # Application Configuration
    app_name: str = Field(default="H2Ok Map Client")
    app_version: str = Field(default="0.1.0")
    environment: Environment = Field(default=Environment.DEVELOPMENT)
    debug: bool = Field(default=False)

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=5173, ge=1, le=65535)
    reload: bool = Field(default=False)

    # Remote data service
    backend_url: str = Field(
        default=DEFAULT_BACKEND_URL,
        validation_alias=AliasChoices("backend_url", "vite_backend_url"),
        description="Base URL of the partners/updates service",
    )
    request_timeout_seconds: Optional[float] = Field(
        default=None,
        gt=0,
        description="Outbound request timeout; unset means wait indefinitely",
    )

    # Logging Configuration
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_format: str = Field(default="json", description="json or text")

    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    community_url: str = Field(default="https://t.me/H2OK_tyumen")

    # Nested Settings
    map: MapSettings = Field(default_factory=MapSettings)

    @field_validator('backend_url', mode='before')
    @classmethod
    def normalize_backend_url(cls, v):
        """Fall back to the local endpoint when unset and drop trailing slashes"""
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_BACKEND_URL
        return v.strip().rstrip("/")

    @field_validator('environment', mode='before')
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment setting"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from environment variable or list"""
        if isinstance(v, str):
            origin_list = v.split(",")
            return [origin.strip() for origin in origin_list if origin.strip()]
        return v or ["*"]

    def get_cors_config(self) -> Dict[str, Any]:
        """Get CORS configuration for FastAPI"""
        return {
            "allow_origins": self.cors_origins,
            "allow_credentials": True,
            "allow_methods": ["GET", "POST"],
            "allow_headers": ["*"],
        }

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
        "populate_by_name": True,
    }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings instance"""
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment and files"""
    global settings
    settings = Settings()
    return settings
