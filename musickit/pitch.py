"""Pitch, pitch class and enharmonic spelling primitives."""

from dataclasses import dataclass
from enum import Enum
from typing import Final

# ── MIDI constants ──────────────────────────────────────────────────────────
SEMITONES_PER_OCTAVE = 12
MIDDLE_C_MIDI = 60  # C4 in Scientific Pitch Notation


class LetterName(Enum):
    """The seven natural note letters."""

    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    A = "A"
    B = "B"

    @property
    def natural_index(self) -> int:
        """Pitch class of the unaltered letter (C=0, D=2, ..., B=11)."""
        return _NATURAL_INDICES[self]


class Accidental(Enum):
    """Accidentals, valued by their canonical glyph."""

    NATURAL = "♮"
    SHARP = "♯"
    FLAT = "♭"
    DOUBLE_SHARP = "𝄪"
    DOUBLE_FLAT = "𝄫"

    @property
    def display(self) -> str:
        """Glyph used inside note names. Naturals are not written."""
        return "" if self is Accidental.NATURAL else self.value

    @property
    def semitones(self) -> int:
        """Signed alteration applied to the letter's natural pitch class."""
        return _ALTERATIONS[self]


_NATURAL_INDICES: Final[dict[LetterName, int]] = {
    LetterName.C: 0,
    LetterName.D: 2,
    LetterName.E: 4,
    LetterName.F: 5,
    LetterName.G: 7,
    LetterName.A: 9,
    LetterName.B: 11,
}

_ALTERATIONS: Final[dict[Accidental, int]] = {
    Accidental.NATURAL: 0,
    Accidental.SHARP: 1,
    Accidental.FLAT: -1,
    Accidental.DOUBLE_SHARP: 2,
    Accidental.DOUBLE_FLAT: -2,
}


@dataclass(frozen=True)
class PitchClassSpelling:
    """
    One way of writing a pitch class.

    Attributes:
        letter:     Note letter, e.g. LetterName.C.
        accidental: Alteration applied to the letter.
    """

    letter: LetterName
    accidental: Accidental = Accidental.NATURAL

    @property
    def index(self) -> int:
        """Pitch class (0-11) this spelling denotes."""
        return (self.letter.natural_index + self.accidental.semitones) % SEMITONES_PER_OCTAVE

    def __str__(self) -> str:
        return f"{self.letter.value}{self.accidental.display}"


# ── Spelling table ──────────────────────────────────────────────────────────

_NAT = Accidental.NATURAL
_SHARP = Accidental.SHARP
_FLAT = Accidental.FLAT

#: Valid spellings per pitch class, in order of preference (first = default).
SPELLINGS: Final[tuple[tuple[PitchClassSpelling, ...], ...]] = (
    (PitchClassSpelling(LetterName.C, _NAT), PitchClassSpelling(LetterName.B, _SHARP)),
    (PitchClassSpelling(LetterName.D, _FLAT), PitchClassSpelling(LetterName.C, _SHARP)),
    (PitchClassSpelling(LetterName.D, _NAT),),
    (PitchClassSpelling(LetterName.E, _FLAT), PitchClassSpelling(LetterName.D, _SHARP)),
    (PitchClassSpelling(LetterName.E, _NAT),),
    (PitchClassSpelling(LetterName.F, _NAT), PitchClassSpelling(LetterName.E, _SHARP)),
    (PitchClassSpelling(LetterName.F, _SHARP), PitchClassSpelling(LetterName.G, _FLAT)),
    (PitchClassSpelling(LetterName.G, _NAT),),
    (PitchClassSpelling(LetterName.A, _FLAT), PitchClassSpelling(LetterName.G, _SHARP)),
    (PitchClassSpelling(LetterName.A, _NAT),),
    (PitchClassSpelling(LetterName.B, _FLAT), PitchClassSpelling(LetterName.A, _SHARP)),
    (PitchClassSpelling(LetterName.B, _NAT), PitchClassSpelling(LetterName.C, _FLAT)),
)


def spellings_of(index: int) -> tuple[PitchClassSpelling, ...]:
    """Return the ordered spellings of pitch class *index* (0-11)."""
    return SPELLINGS[index]


@dataclass(frozen=True)
class PitchClass:
    """A pitch class, identified by its residue mod 12 (0=C, 1=C#/Db, ..., 11=B)."""

    index: int

    def __post_init__(self) -> None:
        if not 0 <= self.index < SEMITONES_PER_OCTAVE:
            raise ValueError(f"Pitch class index must be in 0..11, got {self.index}.")

    @property
    def spellings(self) -> tuple[PitchClassSpelling, ...]:
        return spellings_of(self.index)

    def spelling(self, neighbor: LetterName | None = None) -> PitchClassSpelling:
        """
        Choose a spelling for this pitch class.

        Without a neighbor the first (preferred) spelling is returned. With a
        neighbor, the first spelling whose letter differs from it wins, so that
        adjacent notes of a melodic line do not share a letter. When every
        spelling uses the neighbor's letter the preferred one is kept.

        Args:
            neighbor: Letter of an adjacent, already spelled note, if any.
        """
        candidates = self.spellings
        if neighbor is not None:
            for candidate in candidates:
                if candidate.letter is not neighbor:
                    return candidate
        return candidates[0]


def octave_number(midi_number: int) -> int:
    """
    Scientific octave number of a MIDI note.

    MIDI octave numbering: C-1 = 0, C0 = 12, C1 = 24, ... C4 (Middle C) = 60.
    Floor division keeps notes below 12 in octave -1.
    """
    return (midi_number - SEMITONES_PER_OCTAVE) // SEMITONES_PER_OCTAVE


def note_name(midi_number: int, neighbor: LetterName | None = None) -> str:
    """
    Format a MIDI note as ``<letter><accidental><octave>``, e.g. ``"C♯4"``.

    Args:
        midi_number: Absolute MIDI note number (>= 0).
        neighbor:    Letter of an adjacent note to avoid repeating, if any.

    Returns:
        Display name with naturals written without a glyph ("C4", not "C♮4").
    """
    pitch_class = PitchClass(midi_number % SEMITONES_PER_OCTAVE)
    return f"{pitch_class.spelling(neighbor)}{octave_number(midi_number)}"


@dataclass(frozen=True)
class Pitch:
    """
    A concrete pitch on the MIDI keyboard.

    Attributes:
        midi_number: Absolute semitone number (0-based, 60 = Middle C).
        note_name:   Explicit display name. When left empty the default
                     spelling is computed from midi_number.
    """

    midi_number: int
    note_name: str = ""

    def __post_init__(self) -> None:
        if self.midi_number < 0:
            raise ValueError(f"MIDI number must be non-negative, got {self.midi_number}.")
        if not self.note_name:
            object.__setattr__(self, "note_name", note_name(self.midi_number))

    @property
    def pitch_class(self) -> PitchClass:
        return PitchClass(self.midi_number % SEMITONES_PER_OCTAVE)

    @property
    def octave_number(self) -> int:
        return octave_number(self.midi_number)

    def name(self, neighbor: LetterName | None = None) -> str:
        """Neighbor-aware display name (see ``note_name``)."""
        return note_name(self.midi_number, neighbor)

    def __str__(self) -> str:
        return self.note_name
