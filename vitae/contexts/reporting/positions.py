"""
Position History Data Structures

Defines the position record, the ordered timeline of positions, and the
built-in position table printed by the reporter.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from vitae.contexts.reporting.exceptions import InvalidTimelineError


@dataclass(frozen=True)
class Position:
    """
    A single job position.

    The end year is not stored: it is the start year of the next position
    in the timeline, or "present" for the most recent one.

    Attributes:
        key: Short stable identifier (e.g., "cs_space")
        start_year: Calendar year the position began
        name: Employer or role label
    """

    key: str
    start_year: int
    name: str


class Timeline:
    """
    Immutable, validated sequence of positions, oldest first.

    Raises InvalidTimelineError on construction if the positions are empty,
    not strictly increasing by start year, or reuse a key.
    """

    def __init__(self, positions: Iterable[Position]):
        self._positions = tuple(positions)
        self._validate()

    def _validate(self) -> None:
        if not self._positions:
            raise InvalidTimelineError("Timeline must contain at least one position")

        seen_keys = set()
        for position in self._positions:
            if position.key in seen_keys:
                raise InvalidTimelineError(f"Duplicate position key: '{position.key}'")
            seen_keys.add(position.key)

        for older, newer in zip(self._positions, self._positions[1:]):
            if newer.start_year <= older.start_year:
                raise InvalidTimelineError(
                    f"Positions must be strictly increasing by start year: "
                    f"'{older.key}' ({older.start_year}) is followed by "
                    f"'{newer.key}' ({newer.start_year})"
                )

    def __len__(self) -> int:
        return len(self._positions)

    def __iter__(self) -> Iterator[Position]:
        return iter(self._positions)

    def __reversed__(self) -> Iterator[Position]:
        return reversed(self._positions)

    def __getitem__(self, index: int) -> Position:
        return self._positions[index]

    def __repr__(self) -> str:
        return f"Timeline({list(self._positions)!r})"

    def index(self, position: Position) -> int:
        """
        Get the position's index in the timeline.

        Raises:
            KeyError: If the position is not part of this timeline
        """
        try:
            return self._positions.index(position)
        except ValueError:
            raise KeyError(position.key) from None

    def first(self) -> Position:
        """Oldest position."""
        return self._positions[0]

    def last(self) -> Position:
        """Most recent (current) position."""
        return self._positions[-1]

    def next_of(self, position: Position) -> Optional[Position]:
        """Next-newer position, or None for the current one."""
        i = self.index(position)
        if i + 1 < len(self._positions):
            return self._positions[i + 1]
        return None

    def previous_of(self, position: Position) -> Optional[Position]:
        """Next-older position, or None for the first one."""
        i = self.index(position)
        if i > 0:
            return self._positions[i - 1]
        return None

    def end_year(self, position: Position) -> Optional[int]:
        """End year of a position, or None if it is still held."""
        following = self.next_of(position)
        return following.start_year if following is not None else None

    def span(self, position: Position, current_year: int) -> int:
        """
        Number of years spent in a position.

        Args:
            position: Position in this timeline
            current_year: Year used as the end of the current position

        Returns:
            end_year - start_year
        """
        end_year = self.end_year(position)
        if end_year is None:
            end_year = current_year
        return end_year - position.start_year

    def total_years(self, current_year: int) -> int:
        """Sum of all position spans, ending the current position at current_year."""
        return sum(self.span(position, current_year) for position in self._positions)


# Built-in position history, oldest first.
POSITIONS = Timeline(
    [
        Position(key="babylon_software", start_year=2001, name="Babylon Software"),
        Position(key="cs_vr", start_year=2003, name="CS, Virtual-Reality Dpt"),
        Position(key="diginext", start_year=2010, name="Diginext (CS Group);"),
        Position(key="cs_space", start_year=2012, name="CS, Space Dpt"),
    ]
)
