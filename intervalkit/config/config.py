from __future__ import annotations

"""Configuration loading and validation for intervalkit.

This module loads YAML configuration, applies defaults, and validates
that enumerations and note names are sane for the CLI.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from ..theory.chords import CHORD_STEPS
from ..theory.note import PitchClass
from ..theory.scales import SCALE_PATTERNS

logger = logging.getLogger(__name__)

ALLOWED_SCALE_TYPES = set(SCALE_PATTERNS)
ALLOWED_CHORD_TYPES = set(CHORD_STEPS)


class ContextConfig(BaseModel):
    """Default key context used when the CLI is not given a root or type."""

    root: str = "C"
    octave: int = Field(4, ge=-1, le=9)
    scale_type: str = "major"
    chord_type: str = "triad_major"

    @field_validator("root")
    @classmethod
    def _known_root(cls, v: str) -> str:
        PitchClass.from_name(v)
        return v


class DisplayConfig(BaseModel):
    show_steps: bool = True
    show_semitones: bool = True


class IntervalkitConfig(BaseModel):
    context: ContextConfig = Field(default_factory=ContextConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"ERROR: Config file not found: {path}", file=sys.stderr)
        sys.exit(1)


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML or defaults.

    Args:
        path: Optional path to a YAML config. If None, use package defaults.

    Returns:
        A dictionary with configuration values.
    """
    if path:
        cfg = _load_yaml(Path(path))
    else:
        default_path = Path(__file__).with_name("defaults.yml")
        cfg = _load_yaml(default_path)
    return cfg


def validate_config(cfg: Any) -> IntervalkitConfig:
    """Apply defaults and validate configuration values.

    Unsupported scale or chord types are replaced by the defaults with a
    warning. A non-mapping config or section raises ValueError; anything
    else invalid raises pydantic's ValidationError.

    Args:
        cfg: The raw configuration dictionary.

    Returns:
        The validated configuration model.
    """
    if not isinstance(cfg, dict):
        raise ValueError(f"Config must be a mapping, got {type(cfg).__name__}")
    # An empty YAML section loads as None
    for section in ("context", "display"):
        cfg[section] = cfg.get(section) or {}
        if not isinstance(cfg[section], dict):
            raise ValueError(f"Config section '{section}' must be a mapping")
    context = cfg["context"]

    scale_type = context.get("scale_type", "major")
    if scale_type not in ALLOWED_SCALE_TYPES:
        logger.warning("Unsupported scale_type '%s', using 'major'.", scale_type)
        context["scale_type"] = "major"

    chord_type = context.get("chord_type", "triad_major")
    if chord_type not in ALLOWED_CHORD_TYPES:
        logger.warning("Unsupported chord_type '%s', using 'triad_major'.", chord_type)
        context["chord_type"] = "triad_major"

    # YAML may hand back an int for roots like "7"; keep names as strings
    if "root" in context:
        context["root"] = str(context["root"])

    return IntervalkitConfig(**cfg)
