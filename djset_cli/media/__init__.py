"""
Media Layer.

Reads metadata tags from local audio files.
"""

from .tags import TrackTags, read_track_tags

__all__ = ["TrackTags", "read_track_tags"]
