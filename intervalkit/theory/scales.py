from __future__ import annotations

"""Scale patterns and helpers for 12-TET.

Provides step patterns, utilities to map diatonic degrees to
pitch-class offsets, and scale construction from a root note.
"""

from typing import List

from .interval import Interval, classify_many, transpose_chain
from .note import Note


SCALE_PATTERNS = {
    "major": [2, 2, 1, 2, 2, 2, 1],
    "natural_minor": [2, 1, 2, 2, 1, 2, 2],
    "harmonic_minor": [2, 1, 2, 2, 1, 3, 1],
    "melodic_minor": [2, 1, 2, 2, 2, 2, 1],
}


def _steps_for(scale_type: str) -> List[int]:
    steps = SCALE_PATTERNS.get(scale_type)
    if steps is None:
        raise ValueError(f"Unsupported scale_type: {scale_type}")
    return steps


def diatonic_degree_to_pc(scale_type: str, degree: int) -> int:
    """Return semitone offset (pitch class) from tonic for a diatonic degree.

    Args:
        scale_type: One of SCALE_PATTERNS keys.
        degree: 1-based diatonic degree (1..7).

    Returns:
        Semitone offset from tonic (0..11).
    """
    if degree < 1 or degree > 7:
        raise ValueError("degree must be 1..7")
    steps = _steps_for(scale_type)
    # Sum steps up to degree-1
    return sum(steps[: degree - 1]) % 12


def build_scale_pcs(scale_type: str) -> List[int]:
    """Build pitch-class offsets for 7 diatonic degrees."""
    return [diatonic_degree_to_pc(scale_type, d) for d in range(1, 8)]


def scale_intervals(scale_type: str) -> List[Interval]:
    """Classify the step pattern of a scale (one interval per step)."""
    return classify_many(_steps_for(scale_type))


def build_scale(root: Note, scale_type: str = "major") -> List[Note]:
    """Build the notes of a scale from `root`, closing tonic included.

    Each step is applied to the previous note, so the result has one more
    note than the pattern has steps.
    """
    return transpose_chain(root, scale_intervals(scale_type))
