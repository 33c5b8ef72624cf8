from __future__ import annotations

"""CLI entry point for intervalkit."""

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from . import __version__
from .config.config import IntervalkitConfig, load_config, validate_config
from .theory.chords import CHORD_STEPS, build_chord, build_degree_chord
from .theory.interval import Interval, classify_many, transpose_chain
from .theory.note import Note
from .theory.scales import SCALE_PATTERNS, build_scale


def _init_logging(verbose: bool) -> None:
    if logging.getLogger().handlers:
        return
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="intervalkit", description="Interval classification and transposition")
    p.add_argument("--config", type=str, default=None, help="Path to YAML config")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command")

    classify = sub.add_parser("classify", help="Classify semitone distances")
    classify.add_argument("semitones", nargs="+", type=int)

    chain = sub.add_parser("chain", help="Stack intervals on a root note, e.g. 'chain C4 4 3'")
    chain.add_argument("root", type=str)
    chain.add_argument("semitones", nargs="+", type=int)

    scale = sub.add_parser("scale", help="Print the notes of a scale")
    scale.add_argument("root", nargs="?", default=None, help="Root note like C4 (defaults to config)")
    scale.add_argument("--type", dest="scale_type", default=None, choices=sorted(SCALE_PATTERNS))

    chord = sub.add_parser(
        "chord",
        help="Print the notes of a chord; octaves follow the chain transposer (A4 minor -> A4 C4 E4)",
    )
    chord.add_argument("root", nargs="?", default=None, help="Root note like C4 (defaults to config)")
    chord.add_argument("--type", dest="chord_type", default=None, choices=sorted(CHORD_STEPS))
    chord.add_argument(
        "--degree",
        type=int,
        default=None,
        help="Diatonic triad on degree 1..7 of the configured key (not combinable with ROOT or --type)",
    )
    return p


def _describe(interval: Interval, cfg: IntervalkitConfig) -> str:
    parts = [interval.label]
    if cfg.display.show_semitones:
        parts.append(f"({interval.semitone_count} semitones)")
    if cfg.display.show_steps and interval.step is not None:
        parts.append(f"[{interval.step} step]")
    return " ".join(parts)


def _format_notes(notes: Sequence[Note]) -> str:
    return " ".join(str(n) for n in notes)


def _default_root(cfg: IntervalkitConfig) -> Note:
    return Note.new(cfg.context.root, cfg.context.octave)


def _run(args: argparse.Namespace, cfg: IntervalkitConfig) -> int:
    if args.command == "classify":
        for interval in classify_many(args.semitones):
            print(_describe(interval, cfg))
        return 0

    if args.command == "chain":
        root = Note.parse(args.root)
        notes = transpose_chain(root, classify_many(args.semitones))
        print(_format_notes(notes))
        return 0

    if args.command == "scale":
        root = Note.parse(args.root) if args.root else _default_root(cfg)
        scale_type = args.scale_type or cfg.context.scale_type
        print(_format_notes(build_scale(root, scale_type)))
        return 0

    if args.command == "chord":
        if args.degree is not None:
            notes = build_degree_chord(cfg.context.root, cfg.context.scale_type, args.degree, cfg.context.octave)
        else:
            root = Note.parse(args.root) if args.root else _default_root(cfg)
            notes = build_chord(root, args.chord_type or cfg.context.chord_type)
        print(_format_notes(notes))
        return 0

    return 1


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.version:
        print(f"intervalkit {__version__}")
        return 0

    _init_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "chord" and args.degree is not None and (args.root or args.chord_type):
        parser.error("--degree cannot be combined with ROOT or --type")

    try:
        cfg = validate_config(load_config(args.config))
        return _run(args, cfg)
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2


def cli() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    cli()
