"""
The energy scale used to plan how a set builds up and cools down.
"""

from enum import IntEnum


class EnergyLevel(IntEnum):
    """How intense a track feels on the floor. Ordered: LOW < MEDIUM < HIGH."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3

    @property
    def label(self) -> str:
        """The printable name used in tables and reports ('Low', 'Medium', 'High')."""
        return self.name.capitalize()

    def next_step(self) -> "EnergyLevel | None":
        """Returns the level one step above this one, or None at the top."""
        if self is EnergyLevel.HIGH:
            return None
        return EnergyLevel(self.value + 1)

    @classmethod
    def from_label(cls, label: str) -> "EnergyLevel":
        """
        Parses a label ('low', 'Medium', 'HIGH') or a menu number ('1'-'3').

        Raises:
            ValueError: If the text does not name an energy level.
        """
        text = label.strip()
        if text.isdigit():
            return cls(int(text))
        try:
            return cls[text.upper()]
        except KeyError:
            raise ValueError(f"Unknown energy level: {label!r}") from None
