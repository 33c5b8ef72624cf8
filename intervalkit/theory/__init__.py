"""Interval theory layer: classification, transposition, scales and chords."""

from .errors import IntervalError, InvalidInterval  # noqa: F401
from .note import Note, PitchClass  # noqa: F401
from .interval import (  # noqa: F401
    Interval,
    Number,
    Quality,
    Step,
    classify_many,
    classify_one,
    transpose_chain,
    transpose_one,
)
