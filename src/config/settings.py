"""
Settings for the Guitar Theory Companion.

Pydantic models validate the YAML settings file so a bad tuning or
fret count fails at load time instead of deep inside the fretboard.

Example:
    settings = load_settings()                 # packaged defaults.yaml
    settings = load_settings("my_tuning.yaml")
    board = Fretboard.from_config(settings)

Author: Rohan Rajendra Dhanawade
"""

from pathlib import Path
from typing import List, Optional, Union
import logging

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from src.theory.fretboard import (
    DEFAULT_FRETS, NUM_STRINGS, STANDARD_TUNING_LABELS, STANDARD_TUNING_VALUES
)
from src.theory.notes import DEFAULT_BASE_VALUE, pitch_class_of

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path(__file__).with_name("defaults.yaml")

# Highest fret the companion will draw (25 columns including the open string)
MAX_FRETS = 24


# =============================================================================
# SCHEMAS
# =============================================================================

class TuningSettings(BaseModel):
    """
    Open-string tuning of a six-string guitar.

    Attributes:
        name: Tuning name (e.g., "standard", "drop_d")
        open_values: MIDI value of each open string, high string first
        labels: Note label of each string, high string first
    """

    name: str = Field(
        default="standard",
        min_length=1,
        description="Tuning name",
        examples=["standard", "drop_d"]
    )

    open_values: List[int] = Field(
        default_factory=lambda: list(STANDARD_TUNING_VALUES),
        description="MIDI value of each open string, high string first",
        examples=[[64, 59, 55, 50, 45, 40], [64, 59, 55, 50, 45, 38]]
    )

    labels: List[str] = Field(
        default_factory=lambda: list(STANDARD_TUNING_LABELS),
        description="Note label of each string, high string first",
        examples=[["E", "B", "G", "D", "A", "E"]]
    )

    @field_validator('open_values')
    @classmethod
    def validate_open_values(cls, v: List[int]) -> List[int]:
        """Six strings, each a MIDI note number"""
        if len(v) != NUM_STRINGS:
            raise ValueError(f"Tuning must have {NUM_STRINGS} strings. Got: {len(v)}")
        out_of_range = [value for value in v if not 0 <= value <= 127]
        if out_of_range:
            raise ValueError(f"Open string values must be 0-127. Got: {out_of_range}")
        return v

    @field_validator('labels')
    @classmethod
    def validate_labels(cls, v: List[str]) -> List[str]:
        if len(v) != NUM_STRINGS:
            raise ValueError(f"Tuning must have {NUM_STRINGS} labels. Got: {len(v)}")
        for label in v:
            pitch_class_of(label)
        return v

    @model_validator(mode='after')
    def labels_match_values(self) -> "TuningSettings":
        """Each label must name the pitch class of its open string"""
        mismatched = [
            (label, value)
            for label, value in zip(self.labels, self.open_values)
            if pitch_class_of(label) != value % 12
        ]
        if mismatched:
            raise ValueError(f"String labels do not match open values: {mismatched}")
        return self


class CompanionSettings(BaseModel):
    """Top-level settings."""

    frets: int = Field(
        default=DEFAULT_FRETS,
        ge=1,
        le=MAX_FRETS,
        description="Highest fret on the fretboard",
        examples=[12, 24]
    )

    root_base: int = Field(
        default=DEFAULT_BASE_VALUE,
        ge=0,
        le=115,
        description="MIDI value of C in the octave used for typed root notes",
        examples=[48, 60]
    )

    exercise_rounds: int = Field(
        default=5,
        ge=1,
        le=50,
        description="Number of questions per exercise round"
    )

    tuning: TuningSettings = Field(default_factory=TuningSettings)

    @field_validator('root_base')
    @classmethod
    def validate_root_base(cls, v: int) -> int:
        """Root base must be a C so pitch classes line up with octaves"""
        if v % 12 != 0:
            raise ValueError(f"root_base must be a multiple of 12 (a C). Got: {v}")
        return v


# =============================================================================
# LOADING
# =============================================================================

def load_settings(path: Optional[Union[str, Path]] = None) -> CompanionSettings:
    """
    Load and validate settings from YAML.

    Args:
        path: Optional path to a YAML file. If None, use the packaged defaults.

    Returns:
        Validated CompanionSettings (missing keys take their defaults)

    Raises:
        FileNotFoundError: If the file does not exist
        pydantic.ValidationError: If a value fails validation
    """
    settings_path = Path(path) if path else DEFAULT_SETTINGS_PATH

    with settings_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Settings file must contain a mapping: {settings_path}")

    settings = CompanionSettings(**raw)
    logger.debug("Loaded settings from %s: frets=%d, tuning=%s",
                 settings_path, settings.frets, settings.tuning.name)
    return settings
