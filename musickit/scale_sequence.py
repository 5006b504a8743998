"""ScaleSequence: a lazily computed run of scale degrees above a root pitch."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from musickit.pitch import LetterName, Pitch
from musickit.scale import Scale


@dataclass
class ScaleIterator:
    """
    Walks a ScaleSequence one degree at a time.

    Instead of re-summing intervals for every degree, the iterator keeps the
    running MIDI number and advances it by the interval of the current degree.

    Attributes:
        scale:       Interval pattern being walked.
        midi_number: MIDI number of the next pitch to yield.
        degree:      Position of the next pitch within the pattern (0..len-1).
        index:       Absolute degree index of the next pitch.
        end_index:   Exclusive upper bound on ``index``.
    """

    scale: Scale
    midi_number: float
    degree: int
    index: int
    end_index: int

    def __iter__(self) -> ScaleIterator:
        return self

    def __next__(self) -> Pitch:
        if self.index >= self.end_index:
            raise StopIteration
        pitch = Pitch(int(self.midi_number))
        self.midi_number += self.scale.intervals[self.degree]
        self.index += 1
        self.degree = self.index % len(self.scale)
        return pitch


class ScaleSequence:
    """
    The pitches of *scale* above *root* for degree indices ``[start_index, end_index)``.

    Nothing is stored beyond the four defining values: indexing computes the
    pitch from the scale's degree offset, and iteration walks the intervals.
    Both paths yield identical MIDI numbers.

    Example
    -------
        >>> seq = ScaleSequence(Pitch(23), MAJOR, 0, 7)
        >>> [p.midi_number for p in seq]
        [23, 25, 27, 28, 30, 32, 34]
        >>> seq[7].midi_number
        35
    """

    def __init__(
        self,
        root: Pitch | int,
        scale: Scale,
        start_index: int = 0,
        end_index: int | None = None,
    ) -> None:
        """
        Args:
            root:        Pitch (or MIDI number) of degree 0.
            scale:       Interval pattern.
            start_index: First degree index, relative to the root. May be negative.
            end_index:   Exclusive last degree index. Defaults to one full
                         pass through the pattern after start_index.

        Raises:
            ValueError: If start_index > end_index.
        """
        self.root = root if isinstance(root, Pitch) else Pitch(root)
        self.scale = scale
        self.start_index = start_index
        self.end_index = start_index + len(scale) if end_index is None else end_index
        if self.start_index > self.end_index:
            raise ValueError(
                f"start_index ({self.start_index}) must not exceed end_index ({self.end_index})."
            )

    def __repr__(self) -> str:
        return (
            f"ScaleSequence(root={self.root.midi_number}, scale={self.scale!r}, "
            f"start_index={self.start_index}, end_index={self.end_index})"
        )

    def __len__(self) -> int:
        return self.end_index - self.start_index

    def __iter__(self) -> Iterator[Pitch]:
        first = self.root.midi_number + self.scale.semitones(self.start_index)
        return ScaleIterator(
            scale=self.scale,
            midi_number=first,
            degree=self.start_index % len(self.scale),
            index=self.start_index,
            end_index=self.end_index,
        )

    def __getitem__(self, i: int) -> Pitch:
        return self.at(i)

    def at(self, i: int) -> Pitch:
        """
        Pitch at position *i*, counted from start_index.

        Positions outside ``range(len(self))`` are not clamped; they continue
        the scale in either direction.
        """
        offset = self.scale.semitones(self.start_index + i)
        return Pitch(int(self.root.midi_number + offset))

    def names(self) -> list[str]:
        """
        Note names of the sequence, spelled so that consecutive notes avoid
        sharing a letter where an alternative spelling exists.
        """
        names: list[str] = []
        previous: LetterName | None = None
        for pitch in self:
            spelling = pitch.pitch_class.spelling(previous)
            names.append(f"{spelling}{pitch.octave_number}")
            previous = spelling.letter
        return names
