"""musickit — pitch spelling and scale primitives."""

__version__ = "0.1.0"

from musickit.pitch import (  # noqa: E402
    Accidental,
    LetterName,
    Pitch,
    PitchClass,
    PitchClassSpelling,
    note_name,
    octave_number,
    spellings_of,
)
from musickit.scale import (  # noqa: E402
    CHROMATIC,
    DORIAN,
    LOCRIAN,
    LYDIAN,
    MAJOR,
    MINOR,
    MIXOLYDIAN,
    OCTATONIC_1,
    OCTATONIC_2,
    PHRYGIAN,
    SCALES,
    InvalidScale,
    Scale,
    get_scale,
    rotate,
)
from musickit.scale_sequence import ScaleIterator, ScaleSequence  # noqa: E402

__all__ = [
    "Accidental",
    "CHROMATIC",
    "DORIAN",
    "InvalidScale",
    "LOCRIAN",
    "LYDIAN",
    "LetterName",
    "MAJOR",
    "MINOR",
    "MIXOLYDIAN",
    "OCTATONIC_1",
    "OCTATONIC_2",
    "PHRYGIAN",
    "Pitch",
    "PitchClass",
    "PitchClassSpelling",
    "SCALES",
    "Scale",
    "ScaleIterator",
    "ScaleSequence",
    "get_scale",
    "note_name",
    "octave_number",
    "rotate",
    "spellings_of",
]
