"""Scale: interval patterns, degree resolution and the named Western scales."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final, TypeVar

import numpy as np

from musickit.pitch import SEMITONES_PER_OCTAVE

T = TypeVar("T")


class InvalidScale(ValueError):
    """Raised when an interval pattern does not describe a whole number of octaves."""


def rotate(items: Sequence[T], n: int) -> list[T]:
    """
    Cyclic left shift: drop the first *n* items and append them at the end.

    *n* is reduced modulo the length, so rotating by ``len(items)`` returns
    the original order.
    """
    if not items:
        return []
    index = n % len(items)
    return list(items[index:]) + list(items[:index])


class Scale:
    """
    An ordered pattern of semitone intervals spanning one period.

    The period (sum of the intervals) must be a multiple of 12 semitones;
    construction raises ``InvalidScale`` otherwise, so a Scale instance is
    always valid. Instances are immutable.

    Degree resolution
    -----------------
    ``semitones(degree)`` returns the distance from the tonic (degree 0) to any
    degree, including degrees past the end of the pattern and negative degrees
    below the tonic:

        octaves   = degree // len(intervals)      (floor)
        remainder = degree %  len(intervals)      (0 <= remainder < len)
        offset    = octaves * 12 + sum(intervals[:remainder])

    Major, degree 9  → 1 * 12 + (2 + 2)         = 16  (the 9th)
    Major, degree -1 → -1 * 12 + 11             = -1  (leading tone below)
    """

    __slots__ = ("_intervals", "_prefix_sums")

    def __init__(self, intervals: Sequence[float]) -> None:
        """
        Args:
            intervals: Non-empty sequence of positive semitone steps.

        Raises:
            InvalidScale: If the pattern is empty, has a non-positive step, or
                          does not sum to a multiple of 12.
        """
        steps = tuple(intervals)
        if not steps:
            raise InvalidScale("A scale needs at least one interval.")
        if any(step <= 0 for step in steps):
            raise InvalidScale(f"Scale intervals must be positive, got {list(steps)}.")
        period = sum(steps)
        if period % SEMITONES_PER_OCTAVE != 0:
            raise InvalidScale(
                f"Scale intervals {list(steps)} sum to {period}, "
                f"which is not a multiple of {SEMITONES_PER_OCTAVE}."
            )
        self._intervals = steps
        # _prefix_sums[k] = sum(steps[:k]); one extra leading zero.
        self._prefix_sums = np.concatenate(([0], np.cumsum(steps)))

    @classmethod
    def from_intervals(cls, intervals: Sequence[float]) -> Scale:
        return cls(intervals)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def intervals(self) -> tuple[float, ...]:
        return self._intervals

    @property
    def period(self) -> float:
        """Total span of one pass through the pattern, in semitones."""
        return sum(self._intervals)

    def __len__(self) -> int:
        return len(self._intervals)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scale):
            return NotImplemented
        return self._intervals == other._intervals

    def __hash__(self) -> int:
        return hash(self._intervals)

    def __repr__(self) -> str:
        return f"Scale({list(self._intervals)})"

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def rotate(self, n: int) -> Scale:
        """Mode of this scale starting on degree *n*."""
        return Scale(rotate(self._intervals, n))

    def semitones(self, degree: int) -> float:
        """
        Semitone distance from the tonic to *degree*.

        Args:
            degree: Scale degree relative to the tonic (0). May be negative or
                    exceed the pattern length.

        Returns:
            An ``int`` for integral patterns, a ``float`` otherwise.
        """
        octaves, remainder = divmod(degree, len(self._intervals))
        return octaves * SEMITONES_PER_OCTAVE + self._prefix_sums[remainder].item()


# ── Named scales ────────────────────────────────────────────────────────────

CHROMATIC: Final = Scale([1] * 12)
OCTATONIC_1: Final = Scale([2, 1, 2, 1, 2, 1, 2, 1])
OCTATONIC_2: Final = OCTATONIC_1.rotate(1)
MAJOR: Final = Scale([2, 2, 1, 2, 2, 2, 1])
DORIAN: Final = MAJOR.rotate(1)
PHRYGIAN: Final = MAJOR.rotate(2)
LYDIAN: Final = MAJOR.rotate(3)
MIXOLYDIAN: Final = MAJOR.rotate(4)
MINOR: Final = MAJOR.rotate(5)
LOCRIAN: Final = MAJOR.rotate(6)

SCALES: Final[dict[str, Scale]] = {
    "chromatic": CHROMATIC,
    "octatonic1": OCTATONIC_1,
    "octatonic2": OCTATONIC_2,
    "major": MAJOR,
    "ionian": MAJOR,
    "dorian": DORIAN,
    "phrygian": PHRYGIAN,
    "lydian": LYDIAN,
    "mixolydian": MIXOLYDIAN,
    "minor": MINOR,
    "aeolian": MINOR,
    "locrian": LOCRIAN,
}


def get_scale(name: str) -> Scale:
    """
    Look up a named scale (case-insensitive).

    Raises:
        KeyError: If *name* is not registered in ``SCALES``.
    """
    normalized = name.strip().lower()
    if normalized not in SCALES:
        supported = ", ".join(SCALES)
        raise KeyError(f"Unknown scale '{name}'. Use one of: {supported}.")
    return SCALES[normalized]
