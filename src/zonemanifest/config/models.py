"""Configuration models using Pydantic for validation."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_dir: Path = Field(default=Path("logs"), description="Directory for log files")
    max_bytes: int = Field(
        default=10 * 1024 * 1024, ge=1024, description="Max log file size before rotation (bytes)"
    )
    backup_count: int = Field(default=5, ge=1, description="Number of rotated log files to keep")
    console_enabled: bool = Field(default=True, description="Enable console logging")
    file_enabled: bool = Field(default=True, description="Enable file logging")

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper


class ZoneManifestConfig(BaseModel):
    """Main configuration for ZoneManifest."""

    # Zonetool layout
    zonetool_dir: Path = Field(
        default=Path("."), description="Directory holding one folder per zone"
    )
    zonetool_dir_name: str = Field(
        default="zonetool", description="Required name of the zonetool directory"
    )
    enforce_zonetool_dir: bool = Field(
        default=True, description="Refuse to run unless zonetool_dir has the required name"
    )
    map_folder_prefix: str = Field(
        default="mp_", description="Name prefix of zone folders offered for map manifests"
    )

    # Output
    output_dir: Path | None = Field(
        default=None, description="Where <zone>.csv files are written (defaults to zonetool_dir)"
    )

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings, description="Logging settings"
    )

    def get_output_dir(self) -> Path:
        """Get the manifest output directory."""
        if self.output_dir is not None:
            return self.output_dir
        return self.zonetool_dir

    @field_validator("map_folder_prefix")
    @classmethod
    def validate_map_folder_prefix(cls, v: str) -> str:
        """Ensure the map folder prefix is not empty."""
        if not v:
            raise ValueError("map_folder_prefix must not be empty")
        return v

    class Config:
        """Pydantic config."""

        validate_assignment = True
        extra = "forbid"  # Raise error on unknown fields
