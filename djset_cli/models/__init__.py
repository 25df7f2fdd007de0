"""
Data Models Layer.

This package contains the track records, the energy scale and the Pydantic
configuration model used throughout the application.
"""

from .config import AppConfig
from .energy import EnergyLevel
from .tracks import FileBackedTrack, MixNotes, StreamBackedTrack, TrackRecord

__all__ = [
    "AppConfig",
    "EnergyLevel",
    "FileBackedTrack",
    "MixNotes",
    "StreamBackedTrack",
    "TrackRecord",
]
