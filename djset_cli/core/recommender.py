"""
Fixed compatibility rules for picking the next track in a set.
"""

from collections.abc import Iterable
from typing import Protocol, TypeVar

from djset_cli.models.energy import EnergyLevel

DEFAULT_BPM_RANGE = 5


class Playable(Protocol):
    tempo: int
    energy: EnergyLevel


P = TypeVar("P", bound=Playable)


def is_compatible(
    track: Playable,
    current_tempo: int,
    current_energy: EnergyLevel,
    bpm_range: int = DEFAULT_BPM_RANGE,
) -> bool:
    """
    A track follows well if its tempo is within `bpm_range` of the current one
    and its energy holds steady or rises by exactly one step.
    """
    if abs(track.tempo - current_tempo) > bpm_range:
        return False
    return track.energy in (current_energy, current_energy.next_step())


def recommend_next(
    tracks: Iterable[P],
    current_tempo: int,
    current_energy: EnergyLevel,
    bpm_range: int = DEFAULT_BPM_RANGE,
) -> list[P]:
    """Returns the compatible tracks, in their original order."""
    return [
        t
        for t in tracks
        if is_compatible(t, current_tempo, current_energy, bpm_range)
    ]


def set_prep_advice(target_tempo: int, prep_hours: float) -> list[str]:
    """Returns two lines of planning advice for a session's target tempo and prep time."""
    if 4.0 <= prep_hours <= 8.0:
        pacing = f"Nice. With {prep_hours:g} hours, you can build a solid set."
    elif prep_hours < 4.0 and target_tempo >= 125:
        pacing = "Short prep time + high BPM target. Keep transitions simple."
    else:
        pacing = "Plan smart: focus on clean BPM ranges and energy flow."

    if target_tempo >= 128 and prep_hours >= 5.0:
        shape = "Recommendation: build an energy climb into a peak-hour section."
    else:
        shape = "Recommendation: keep a steady groove and avoid risky key jumps."

    return [pacing, shape]


SET_PREP_TIPS = (
    "Group tracks by BPM buckets.",
    "Keep keys compatible when possible.",
    "Increase energy gradually.",
)
