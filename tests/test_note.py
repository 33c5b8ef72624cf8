import unittest

from intervalkit.theory.interval import classify_one
from intervalkit.theory.note import Note, PitchClass


class TestPitchClass(unittest.TestCase):
    def test_from_interval_wraps_at_octave(self) -> None:
        self.assertEqual(PitchClass.from_interval(PitchClass.A, classify_one(4)), PitchClass.CSharp)
        self.assertEqual(PitchClass.from_interval(PitchClass.C, classify_one(12)), PitchClass.C)
        self.assertEqual(PitchClass.from_interval(11, classify_one(1)), PitchClass.C)

    def test_from_name_accepts_flats_and_edge_enharmonics(self) -> None:
        self.assertEqual(PitchClass.from_name("Db"), PitchClass.CSharp)
        self.assertEqual(PitchClass.from_name("bb"), PitchClass.ASharp)
        self.assertEqual(PitchClass.from_name("B#"), PitchClass.C)
        self.assertEqual(PitchClass.from_name("Fb"), PitchClass.E)

    def test_from_name_rejects_unknown(self) -> None:
        for name in ("H", "", "C##"):
            with self.subTest(name=name):
                with self.assertRaises(ValueError):
                    PitchClass.from_name(name)

    def test_label_uses_sharps(self) -> None:
        self.assertEqual(str(PitchClass.GSharp), "G#")


class TestNote(unittest.TestCase):
    def test_parse(self) -> None:
        self.assertEqual(Note.parse("C4"), Note(PitchClass.C, 4))
        self.assertEqual(Note.parse("Db3"), Note(PitchClass.CSharp, 3))
        self.assertEqual(Note.parse("g#5"), Note(PitchClass.GSharp, 5))
        self.assertEqual(Note.parse("A-1"), Note(PitchClass.A, -1))

    def test_parse_rejects_bad_strings(self) -> None:
        for text in ("C", "Cx", "H4", ""):
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    Note.parse(text)

    def test_new_accepts_ordinal_or_name(self) -> None:
        self.assertEqual(Note.new(6, 2), Note(PitchClass.FSharp, 2))
        self.assertEqual(Note.new("Gb", 2), Note(PitchClass.FSharp, 2))
        with self.assertRaises(ValueError):
            Note.new(12, 4)

    def test_new_rejects_non_int_ordinals(self) -> None:
        for value in (3.7, 3.0, True, None):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    Note.new(value, 4)  # type: ignore[arg-type]
        self.assertEqual(Note.new(PitchClass.DSharp, 4), Note(PitchClass.DSharp, 4))

    def test_midi_round_trip_anchors(self) -> None:
        self.assertEqual(Note(PitchClass.C, 4).to_midi(), 60)
        self.assertEqual(Note(PitchClass.A, 4).to_midi(), 69)
        self.assertEqual(Note.from_midi(0), Note(PitchClass.C, -1))
        self.assertEqual(Note.from_midi(127), Note(PitchClass.G, 9))

    def test_midi_out_of_range(self) -> None:
        with self.assertRaises(ValueError):
            Note(PitchClass.GSharp, 9).to_midi()
        with self.assertRaises(ValueError):
            Note.from_midi(128)

    def test_str(self) -> None:
        self.assertEqual(str(Note(PitchClass.DSharp, 3)), "D#3")


if __name__ == "__main__":
    unittest.main()
