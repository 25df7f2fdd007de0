"""
Core library engine.

`TrackCollectionManager` owns the track records and delegates storage to
`GrowableContainer`. `SetLibrary` is the bounded plain-entry library, and the
recommender applies the next-track rules to either of them.
"""

from .container import GrowableContainer
from .library import SetLibrary, SetTrack
from .manager import TrackCollectionManager

__all__ = ["GrowableContainer", "SetLibrary", "SetTrack", "TrackCollectionManager"]
