"""Unit tests for pitch classes, spellings and note naming."""

import pytest

from musickit.pitch import (
    Accidental,
    LetterName,
    Pitch,
    PitchClass,
    PitchClassSpelling,
    note_name,
    octave_number,
    spellings_of,
)


@pytest.mark.parametrize("index", range(12))
def test_spellings_reduce_to_their_pitch_class(index: int) -> None:
    spellings = spellings_of(index)
    assert 1 <= len(spellings) <= 2
    assert all(s.index == index for s in spellings)


@pytest.mark.parametrize("index", [2, 4, 7, 9])
def test_single_spelling_classes_are_naturals(index: int) -> None:
    (only,) = spellings_of(index)
    assert only.accidental is Accidental.NATURAL


def test_spelling_order_is_preserved() -> None:
    assert spellings_of(0) == (
        PitchClassSpelling(LetterName.C, Accidental.NATURAL),
        PitchClassSpelling(LetterName.B, Accidental.SHARP),
    )
    assert spellings_of(11) == (
        PitchClassSpelling(LetterName.B, Accidental.NATURAL),
        PitchClassSpelling(LetterName.C, Accidental.FLAT),
    )


def test_spelling_str_hides_natural_glyph() -> None:
    assert str(PitchClassSpelling(LetterName.E)) == "E"
    assert str(PitchClassSpelling(LetterName.F, Accidental.SHARP)) == "F♯"
    assert str(PitchClassSpelling(LetterName.G, Accidental.DOUBLE_FLAT)) == "G𝄫"


def test_double_accidentals_reduce_correctly() -> None:
    assert PitchClassSpelling(LetterName.C, Accidental.DOUBLE_SHARP).index == 2
    assert PitchClassSpelling(LetterName.C, Accidental.DOUBLE_FLAT).index == 10


def test_pitch_class_rejects_out_of_range_index() -> None:
    with pytest.raises(ValueError):
        PitchClass(12)
    with pytest.raises(ValueError):
        PitchClass(-1)


@pytest.mark.parametrize(
    "midi_number, expected",
    [(0, -1), (11, -1), (12, 0), (23, 0), (24, 1), (60, 4), (127, 9)],
)
def test_octave_number_uses_floor_division(midi_number: int, expected: int) -> None:
    assert octave_number(midi_number) == expected


def test_note_name_default_spelling() -> None:
    assert note_name(24) == "C1"
    assert note_name(60) == "C4"
    assert note_name(61) == "D♭4"
    assert note_name(0) == "C-1"
    assert note_name(11) == "B-1"


def test_note_name_avoids_neighbor_letter() -> None:
    assert note_name(25, LetterName.D) == "C♯1"
    assert note_name(13, LetterName.D) == "C♯0"
    assert note_name(60, LetterName.C) == "B♯4"
    assert note_name(71, LetterName.B) == "C♭4"


def test_note_name_ignores_unrelated_neighbor() -> None:
    assert note_name(61, LetterName.G) == "D♭4"


def test_note_name_falls_back_when_only_spelling_matches_neighbor() -> None:
    assert note_name(62, LetterName.D) == "D4"


def test_pitch_computes_name_and_attributes() -> None:
    pitch = Pitch(66)
    assert pitch.note_name == "F♯4"
    assert str(pitch) == "F♯4"
    assert pitch.pitch_class == PitchClass(6)
    assert pitch.octave_number == 4
    assert pitch.name(LetterName.F) == "G♭4"


def test_pitch_keeps_explicit_name() -> None:
    assert Pitch(66, note_name="G♭4").note_name == "G♭4"


def test_pitch_rejects_negative_midi_number() -> None:
    with pytest.raises(ValueError):
        Pitch(-1)


def test_pitch_equality_is_by_value() -> None:
    assert Pitch(40) == Pitch(40)
    assert Pitch(40) != Pitch(41)
