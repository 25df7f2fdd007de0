"""
Pydantic model for application configuration.
Provides robust validation for all settings.
"""

from pathvalidate import sanitize_filepath
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

DEFAULT_LIBRARY_REPORT = "DJ_Set_Report.txt"
DEFAULT_COLLECTION_REPORT = "DJ_Set_Collection_Report.txt"


class AppConfig(BaseModel):
    """A validated configuration model for the application."""

    model_config = ConfigDict(validate_assignment=True, str_strip_whitespace=True)

    # Input ranges
    bpm_min: int = 60
    bpm_max: int = 200

    # Library sizing
    max_tracks: int = 7
    initial_capacity: int = 2

    # Recommendation rules
    bpm_range: int = 5

    # Report files
    library_report: str = DEFAULT_LIBRARY_REPORT
    collection_report: str = DEFAULT_COLLECTION_REPORT

    @field_validator("bpm_min", "bpm_max")
    @classmethod
    def validate_bpm_bounds(cls, v: int) -> int:
        """Keeps tempo bounds inside what a DJ deck can actually play."""
        if v < 1 or v > 400:
            raise ValueError("BPM bounds must be between 1 and 400.")
        return v

    @field_validator("max_tracks")
    @classmethod
    def validate_max_tracks(cls, v: int) -> int:
        if v < 1 or v > 1000:
            raise ValueError("Max tracks must be between 1 and 1000.")
        return v

    @field_validator("initial_capacity")
    @classmethod
    def validate_initial_capacity(cls, v: int) -> int:
        if v < 2:
            raise ValueError("Initial capacity must be at least 2.")
        return v

    @field_validator("bpm_range")
    @classmethod
    def validate_bpm_range(cls, v: int) -> int:
        if v < 0:
            raise ValueError("BPM range cannot be negative.")
        return v

    @field_validator("library_report", "collection_report")
    @classmethod
    def validate_report_path(cls, v: str) -> str:
        """Rejects empty report names and strips characters the OS would refuse."""
        if not v:
            raise ValueError("Report file name cannot be empty.")
        return str(sanitize_filepath(v, platform="auto"))

    @model_validator(mode="after")
    def validate_bpm_order(self) -> "AppConfig":
        """Ensures the tempo bounds describe a non-empty range."""
        if self.bpm_min >= self.bpm_max:
            raise ValueError(
                f"bpm_min ({self.bpm_min}) must be lower than bpm_max ({self.bpm_max})."
            )
        return self

    @classmethod
    def get_ini_keys(cls) -> set[str]:
        """Returns a set of all keys that are expected in the INI file."""
        return set(cls.model_fields)
