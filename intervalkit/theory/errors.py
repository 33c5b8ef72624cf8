from __future__ import annotations

"""Errors raised by the theory layer."""


class IntervalError(ValueError):
    """Base class for interval classification errors."""


class InvalidInterval(IntervalError):
    """Raised when a value cannot be classified as an interval within one octave."""

    def __init__(self, value: object = None) -> None:
        self.value = value
        if value is None:
            msg = "not a valid interval"
        else:
            msg = f"not a valid interval: {value!r} (expected semitones 0..12)"
        super().__init__(msg)
