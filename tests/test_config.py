import tempfile
import unittest
from pathlib import Path

from pydantic import ValidationError

from intervalkit.config.config import load_config, validate_config


class TestConfig(unittest.TestCase):
    def test_packaged_defaults(self) -> None:
        cfg = validate_config(load_config())
        self.assertEqual(cfg.context.root, "C")
        self.assertEqual(cfg.context.octave, 4)
        self.assertEqual(cfg.context.scale_type, "major")
        self.assertEqual(cfg.context.chord_type, "triad_major")
        self.assertTrue(cfg.display.show_steps)

    def test_empty_config_gets_defaults(self) -> None:
        cfg = validate_config({})
        self.assertEqual(cfg.context.root, "C")
        self.assertTrue(cfg.display.show_semitones)

    def test_load_from_yaml_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "cfg.yml"
            path.write_text("context:\n  root: Eb\n  octave: 3\n  scale_type: natural_minor\n", encoding="utf-8")
            cfg = validate_config(load_config(str(path)))
        self.assertEqual(cfg.context.root, "Eb")
        self.assertEqual(cfg.context.octave, 3)
        self.assertEqual(cfg.context.scale_type, "natural_minor")

    def test_missing_file_exits(self) -> None:
        with self.assertRaises(SystemExit):
            load_config("/nonexistent/intervalkit.yml")

    def test_unsupported_types_fall_back_with_warning(self) -> None:
        with self.assertLogs("intervalkit.config.config", level="WARNING") as logs:
            cfg = validate_config({"context": {"scale_type": "lydian", "chord_type": "sus4"}})
        self.assertEqual(cfg.context.scale_type, "major")
        self.assertEqual(cfg.context.chord_type, "triad_major")
        self.assertEqual(len(logs.records), 2)

    def test_empty_sections_get_defaults(self) -> None:
        cfg = validate_config({"context": None, "display": None})
        self.assertEqual(cfg.context.root, "C")
        self.assertTrue(cfg.display.show_steps)

    def test_empty_section_in_yaml_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "cfg.yml"
            path.write_text("context:\ndisplay:\n  show_steps: false\n", encoding="utf-8")
            cfg = validate_config(load_config(str(path)))
        self.assertEqual(cfg.context.scale_type, "major")
        self.assertFalse(cfg.display.show_steps)

    def test_non_mapping_config_is_rejected(self) -> None:
        for raw in (["a"], "major", 3):
            with self.subTest(raw=raw):
                with self.assertRaises(ValueError):
                    validate_config(raw)
        with self.assertRaises(ValueError):
            validate_config({"context": ["root", "C"]})

    def test_invalid_root_and_octave_are_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            validate_config({"context": {"root": "H"}})
        with self.assertRaises(ValidationError):
            validate_config({"context": {"octave": 12}})


if __name__ == "__main__":
    unittest.main()
