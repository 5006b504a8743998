"""musickit CLI entry point."""

import sys

import click

from musickit import __version__
from musickit.pitch import LetterName, Pitch, note_name
from musickit.scale import SCALES, get_scale
from musickit.scale_sequence import ScaleSequence

LETTER_CHOICES = [letter.value for letter in LetterName]


def _format_intervals(intervals: tuple[float, ...]) -> str:
    """Render an interval pattern as ``2-2-1-2-2-2-1``."""
    return "-".join(f"{step:g}" for step in intervals)


# ── CLI group ──────────────────────────────────────────────────────────────────

@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="musickit")
def main() -> None:
    """musickit — pitch spelling and scale explorer."""


# ── name subcommand ────────────────────────────────────────────────────────────

@main.command()
@click.argument("midi_number", type=click.IntRange(min=0))
@click.option(
    "--neighbor",
    "-n",
    type=click.Choice(LETTER_CHOICES, case_sensitive=False),
    default=None,
    help="Letter of an adjacent note. The spelling avoids repeating it when possible.",
)
def name(midi_number: int, neighbor: str | None) -> None:
    """
    Print the note name of a MIDI note number.

    \b
    Examples:
      musickit name 60
      musickit name 61 --neighbor D
    """
    neighbor_letter = LetterName(neighbor.upper()) if neighbor is not None else None
    pitch = Pitch(midi_number)

    click.echo(note_name(midi_number, neighbor_letter))
    spellings = ", ".join(str(s) for s in pitch.pitch_class.spellings)
    click.echo(f"  Pitch class : {pitch.pitch_class.index}  ({spellings})")
    click.echo(f"  Octave      : {pitch.octave_number}")


# ── scale subcommand ───────────────────────────────────────────────────────────

@main.command()
@click.argument("root", type=click.IntRange(min=0))
@click.option(
    "--scale",
    "scale_name",
    type=click.Choice(list(SCALES), case_sensitive=False),
    default="major",
    show_default=True,
    help="Named interval pattern to walk.",
)
@click.option(
    "--start",
    type=int,
    default=0,
    show_default=True,
    help="First scale degree, relative to ROOT (may be negative).",
)
@click.option(
    "--end",
    type=int,
    default=None,
    help="Exclusive last scale degree. Defaults to one full pass through the scale.",
)
@click.option(
    "--spell/--no-spell",
    default=False,
    show_default=True,
    help="Spell consecutive notes with different letters where possible.",
)
def scale(root: int, scale_name: str, start: int, end: int | None, spell: bool) -> None:
    """
    Print the pitches of a scale built on ROOT (a MIDI note number).

    \b
    Examples:
      musickit scale 60
      musickit scale 23 --scale dorian --start -3 --end 10
      musickit scale 62 --scale octatonic1 --spell
    """
    selected = get_scale(scale_name)
    try:
        sequence = ScaleSequence(root, selected, start, end)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="'--start' / '--end'") from exc

    click.echo(f"musickit v{__version__}")
    click.echo(f"  Root   : {Pitch(root)}  (MIDI {root})")
    click.echo(f"  Scale  : {scale_name.lower()}  [{_format_intervals(selected.intervals)}]")
    click.echo(f"  Degrees: {sequence.start_index} .. {sequence.end_index - 1}")
    click.echo()

    try:
        pitches = list(sequence)
        names = sequence.names() if spell else [str(p) for p in pitches]
    except ValueError as exc:
        click.echo(f"  ERROR: {exc}", err=True)
        sys.exit(1)

    for degree, (pitch, label) in enumerate(zip(pitches, names), start=sequence.start_index):
        click.echo(f"  {degree:>4}  {pitch.midi_number:>4}  {label}")


# ── scales subcommand ──────────────────────────────────────────────────────────

@main.command("scales")
def list_scales() -> None:
    """List the named scales and their interval patterns."""
    width = max(len(scale_name) for scale_name in SCALES)
    for scale_name, pattern in SCALES.items():
        click.echo(f"{scale_name:<{width}}  {_format_intervals(pattern.intervals)}")
