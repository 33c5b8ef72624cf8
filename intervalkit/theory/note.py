from __future__ import annotations

"""Pitch classes and notes for 12-TET.

Includes pitch-class names, enharmonic handling and MIDI conversion.
A `Note` is a pitch class plus an octave number; C4 is MIDI 60.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Dict, Union

if TYPE_CHECKING:  # pragma: no cover
    from .interval import Interval


PITCH_CLASS_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

NAME_TO_PC: Dict[str, int] = {
    "C": 0, "B#": 0, "C#": 1, "Db": 1, "D": 2, "D#": 3, "Eb": 3, "E": 4, "Fb": 4,
    "F": 5, "E#": 5, "F#": 6, "Gb": 6, "G": 7, "G#": 8, "Ab": 8, "A": 9, "A#": 10, "Bb": 10, "B": 11, "Cb": 11,
}


class PitchClass(IntEnum):
    C = 0
    CSharp = 1
    D = 2
    DSharp = 3
    E = 4
    F = 5
    FSharp = 6
    G = 7
    GSharp = 8
    A = 9
    ASharp = 10
    B = 11

    @property
    def label(self) -> str:
        return PITCH_CLASS_NAMES[int(self)]

    def __str__(self) -> str:
        return self.label

    @classmethod
    def from_name(cls, name: str) -> "PitchClass":
        """Resolve a pitch name like "C", "F#" or "Bb". Flats map onto sharps."""
        if not name:
            raise ValueError(f"Unsupported note name: {name!r}")
        norm = name[0].upper() + name[1:]
        if norm not in NAME_TO_PC:
            raise ValueError(f"Unsupported note name: {name}")
        return cls(NAME_TO_PC[norm])

    @classmethod
    def from_interval(cls, pitch_class: Union["PitchClass", int], interval: "Interval") -> "PitchClass":
        """Return the pitch class `interval` above `pitch_class`, wrapping at the octave."""
        return cls((int(pitch_class) + interval.semitone_count) % 12)


def _coerce_pitch_class(value: Union[PitchClass, int, str]) -> PitchClass:
    if isinstance(value, PitchClass):
        return value
    if isinstance(value, str):
        return PitchClass.from_name(value)
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 11:
        raise ValueError(f"pitch class ordinal must be an int 0..11, got {value!r}")
    return PitchClass(value)


@dataclass(frozen=True)
class Note:
    """A concrete pitch: pitch class plus octave number."""

    pitch_class: PitchClass
    octave: int

    @staticmethod
    def new(pitch_class: Union[PitchClass, int, str], octave: int) -> "Note":
        return Note(pitch_class=_coerce_pitch_class(pitch_class), octave=int(octave))

    @staticmethod
    def parse(note: str) -> "Note":
        """Parse a note string like 'C4', 'Db3', 'G#5' or 'A-1'."""
        if not note or len(note) < 2:
            raise ValueError(f"Invalid note string: {note}")
        name = note[0].upper()
        idx = 1
        if idx < len(note) and note[idx] in ("#", "b"):
            name += note[idx]
            idx += 1
        try:
            octave = int(note[idx:])
        except ValueError as e:
            raise ValueError(f"Invalid octave in note string: {note}") from e
        return Note(PitchClass.from_name(name), octave)

    @staticmethod
    def from_midi(midi: int) -> "Note":
        if midi < 0 or midi > 127:
            raise ValueError("MIDI out of range")
        octave, pc = divmod(int(midi), 12)
        return Note(PitchClass(pc), octave - 1)

    def to_midi(self) -> int:
        """Convert to a MIDI number. Uses C4 = 60 (MIDI middle C)."""
        midi = (self.octave + 1) * 12 + int(self.pitch_class)  # C4 -> 60
        if midi < 0 or midi > 127:
            raise ValueError("MIDI out of range")
        return midi

    @property
    def name(self) -> str:
        return self.pitch_class.label

    def __str__(self) -> str:
        return f"{self.name}{self.octave}"
