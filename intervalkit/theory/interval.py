from __future__ import annotations

"""Interval classification and interval-driven transposition.

An `Interval` is described by its size in semitones (0..12), its quality,
its diatonic number and, for the half step, whole step and tritone, a step
label. `classify_one` / `classify_many` build intervals from raw semitone
counts; `transpose_one` / `transpose_chain` apply them to notes.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .errors import InvalidInterval
from .note import Note, PitchClass

logger = logging.getLogger(__name__)


class Quality(Enum):
    Perfect = "Perfect"
    Major = "Major"
    Minor = "Minor"
    Augmented = "Augmented"
    Diminished = "Diminished"

    def __str__(self) -> str:
        return self.value


class Number(Enum):
    Unison = "Unison"
    Second = "Second"
    Third = "Third"
    Fourth = "Fourth"
    Fifth = "Fifth"
    Sixth = "Sixth"
    Seventh = "Seventh"
    Octave = "Octave"

    def __str__(self) -> str:
        return self.value


class Step(Enum):
    Half = "Half"
    Whole = "Whole"
    Tritone = "Tritone"

    def __str__(self) -> str:
        return self.value


# semitone_count -> (number, quality, step)
SEMITONE_TABLE: Dict[int, Tuple[Number, Quality, Optional[Step]]] = {
    0: (Number.Unison, Quality.Perfect, None),
    1: (Number.Second, Quality.Minor, Step.Half),
    2: (Number.Second, Quality.Major, Step.Whole),
    3: (Number.Third, Quality.Minor, None),
    4: (Number.Third, Quality.Major, None),
    5: (Number.Fourth, Quality.Perfect, None),
    6: (Number.Fifth, Quality.Diminished, Step.Tritone),
    7: (Number.Fifth, Quality.Perfect, None),
    8: (Number.Sixth, Quality.Minor, None),
    9: (Number.Sixth, Quality.Major, None),
    10: (Number.Seventh, Quality.Minor, None),
    11: (Number.Seventh, Quality.Major, None),
    12: (Number.Octave, Quality.Perfect, None),
}


@dataclass(frozen=True)
class Interval:
    """Distance between two pitches within one octave.

    The dataclass constructor sets fields as given and does not check them
    against `SEMITONE_TABLE`; use `Interval.from_semitone` for a classified
    value. `Interval()` is a zero-value placeholder (0 semitones, Major,
    Unison) and is not the perfect unison that `from_semitone(0)` returns.
    """

    semitone_count: int = 0
    quality: Quality = Quality.Major
    number: Number = Number.Unison
    step: Optional[Step] = None

    @classmethod
    def from_semitone(cls, semitone_count: int) -> "Interval":
        """Classify a single semitone distance.

        Raises:
            InvalidInterval: if `semitone_count` is not an integer in 0..12.
        """
        if isinstance(semitone_count, bool) or not isinstance(semitone_count, int):
            raise InvalidInterval(semitone_count)
        entry = SEMITONE_TABLE.get(semitone_count)
        if entry is None:
            raise InvalidInterval(semitone_count)
        number, quality, step = entry
        return cls(semitone_count=semitone_count, quality=quality, number=number, step=step)

    @classmethod
    def from_semitones(cls, semitone_counts: Iterable[int]) -> List["Interval"]:
        """Classify each semitone distance in order.

        An empty input is rejected: chord and scale builders always need at
        least one interval. Classification is all-or-nothing; the first bad
        value raises and nothing is returned.
        """
        values = list(semitone_counts)
        if not values:
            raise InvalidInterval()
        intervals = [cls.from_semitone(v) for v in values]
        logger.debug("Classified %d intervals: %s", len(intervals), values)
        return intervals

    def transpose(self, start: Note) -> Note:
        """Return the note this interval above `start`.

        The octave bump is `(pc + semitones - 1) // 12`, truncated toward zero.
        A C transposed by an octave therefore gets no bump here.
        """
        pitch_class = PitchClass.from_interval(start.pitch_class, self)
        excess_octave = _excess_octaves(int(start.pitch_class), self.semitone_count)
        return Note(pitch_class=pitch_class, octave=start.octave + excess_octave)

    @staticmethod
    def to_notes(root: Note, intervals: Sequence["Interval"]) -> List[Note]:
        """Stack `intervals` on `root`, each one measured from the previous note."""
        notes = [root]
        for interval in intervals:
            notes.append(interval.transpose(notes[-1]))
        logger.debug("Stacked %d intervals on %s -> %s", len(intervals), root, notes[-1])
        return notes

    @property
    def label(self) -> str:
        return f"{self.quality} {self.number}"

    def __str__(self) -> str:
        return self.label


def _excess_octaves(pitch_class: int, semitone_count: int) -> int:
    # int() truncates toward zero; floor division would give -1 for (0, 0)
    return int((pitch_class + semitone_count - 1) / 12)


def classify_one(semitone_count: int) -> Interval:
    return Interval.from_semitone(semitone_count)


def classify_many(semitone_counts: Iterable[int]) -> List[Interval]:
    return Interval.from_semitones(semitone_counts)


def transpose_one(interval: Interval, start: Note) -> Note:
    return interval.transpose(start)


def transpose_chain(root: Note, intervals: Sequence[Interval]) -> List[Note]:
    return Interval.to_notes(root, intervals)
