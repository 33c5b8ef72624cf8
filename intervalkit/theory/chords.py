from __future__ import annotations

"""Chord helpers: stacked-interval recipes and roots by degree."""

from typing import Dict, List, Literal

from .interval import Interval, classify_many, transpose_chain
from .note import Note, PitchClass
from .scales import diatonic_degree_to_pc


ChordType = Literal[
    "triad_major",
    "triad_minor",
    "triad_dim",
    "triad_aug",
    "seventh_dominant",
    "seventh_major",
    "seventh_minor",
    "seventh_half_dim",
]

# Semitones between successive chord tones, bottom up.
CHORD_STEPS: Dict[str, List[int]] = {
    "triad_major": [4, 3],
    "triad_minor": [3, 4],
    "triad_dim": [3, 3],
    "triad_aug": [4, 4],
    "seventh_dominant": [4, 3, 3],
    "seventh_major": [4, 3, 4],
    "seventh_minor": [3, 4, 3],
    "seventh_half_dim": [3, 3, 4],
}


def chord_type_for_degree(scale_type: str, degree: int) -> ChordType:
    """Return a basic triad chord type for a degree (major scale mapping)."""
    if degree < 1 or degree > 7:
        raise ValueError("degree must be 1..7")
    if scale_type == "major":
        mapping = {
            1: "triad_major",
            2: "triad_minor",
            3: "triad_minor",
            4: "triad_major",
            5: "triad_major",
            6: "triad_minor",
            7: "triad_dim",
        }
        return mapping[degree]  # type: ignore[return-value]
    # Fallback: assume major-like for other scale types
    return chord_type_for_degree("major", degree)


def chord_intervals(chord_type: str) -> List[Interval]:
    steps = CHORD_STEPS.get(chord_type)
    if steps is None:
        raise ValueError(f"Unsupported chord_type: {chord_type}")
    return classify_many(steps)


def build_chord(root: Note, chord_type: str = "triad_major") -> List[Note]:
    """Stack the chord's intervals on `root`, root first.

    Octaves come from `Interval.transpose`, so a tone landing on C gets no
    bump: A4 minor yields A4 C4 E4.
    """
    return transpose_chain(root, chord_intervals(chord_type))


def chord_root_note(key_root: str, scale_type: str, degree: int, octave: int) -> Note:
    root_pc = PitchClass.from_name(key_root)
    offset = diatonic_degree_to_pc(scale_type, degree)
    return Note(PitchClass((int(root_pc) + offset) % 12), octave)


def build_degree_chord(key_root: str, scale_type: str, degree: int, octave: int = 4) -> List[Note]:
    """Build the diatonic triad on `degree` of the given key."""
    root = chord_root_note(key_root, scale_type, degree, octave)
    return build_chord(root, chord_type_for_degree(scale_type, degree))
