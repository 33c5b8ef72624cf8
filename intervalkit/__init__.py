"""intervalkit package initialization.

Re-exports the interval classifier and transposer so callers can simply
`from intervalkit import classify_many, transpose_chain`.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .theory import (  # noqa: E402
    IntervalError,
    InvalidInterval,
    Interval,
    Note,
    Number,
    PitchClass,
    Quality,
    Step,
    classify_many,
    classify_one,
    transpose_chain,
    transpose_one,
)

__all__ = [
    "__version__",
    "IntervalError",
    "InvalidInterval",
    "Interval",
    "Note",
    "Number",
    "PitchClass",
    "Quality",
    "Step",
    "classify_many",
    "classify_one",
    "transpose_chain",
    "transpose_one",
]
