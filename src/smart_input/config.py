"""
Configuration management (SSOT).

This module defines ALL configuration for the smart-input application.
All config keys are defined here; no other module should invent config keys.

Key invariants:
- The extraction engine only reads ExtractionConfig; it never sees provider settings
- The default provider is the simulated one, which needs no credentials
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

PROVIDER_NAMES = ("simulated",)
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    pass


@dataclass
class ExtractionConfig:
    """Extraction engine settings."""

    # Maximum length of a receipt note
    note_max_length: int = 50
    # Matched-but-unparseable amounts become 0 (True) or None (False)
    lenient_amount_parsing: bool = True


@dataclass
class RecognitionConfig:
    """Recognition provider settings.

    Only the simulated provider ships; it returns sample receipts and
    utterances so the pipeline can be exercised without credentials.
    """

    provider: str = "simulated"
    # Artificial latency of the simulated provider (seconds)
    simulated_delay_seconds: float = 0.0
    # Seed for the simulated provider's utterance choice (None = random)
    seed: Optional[int] = None


@dataclass
class Config:
    """Application configuration (SSOT)."""

    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    recognition: RecognitionConfig = field(default_factory=RecognitionConfig)
    log_level: str = "INFO"

    def validate(self) -> list[str]:
        """Validate configuration completeness and consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors: list[str] = []

        if self.extraction.note_max_length <= 0:
            errors.append("extraction.note_max_length must be positive")

        if self.recognition.provider not in PROVIDER_NAMES:
            errors.append(
                f"recognition.provider must be one of {', '.join(PROVIDER_NAMES)}, "
                f"got {self.recognition.provider!r}"
            )
        if self.recognition.simulated_delay_seconds < 0:
            errors.append("recognition.simulated_delay_seconds must not be negative")

        if self.log_level.upper() not in LOG_LEVELS:
            errors.append(f"log_level must be one of {', '.join(LOG_LEVELS)}")

        return errors

    def validate_or_raise(self) -> None:
        """Raise ConfigValidationError if validate() reports problems."""
        errors = self.validate()
        if errors:
            raise ConfigValidationError("; ".join(errors))

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level.upper(), logging.INFO)


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name, "").lower()
    if value in ("true", "1", "yes"):
        return True
    if value in ("false", "0", "no"):
        return False
    return default


def load_config(config_path: Path) -> Config:
    """
    Load configuration from YAML file.

    A missing file yields the defaults. Environment variables can override
    config values:
    - SMART_INPUT_PROVIDER
    - SMART_INPUT_LENIENT_AMOUNTS (true/false)
    - SMART_INPUT_SIMULATED_DELAY (seconds)
    - SMART_INPUT_LOG_LEVEL
    """
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    else:
        data = {}

    if not isinstance(data, dict):
        raise ConfigValidationError(f"{config_path}: top level must be a mapping")

    # Extraction config
    extraction_data = data.get("extraction") or {}
    extraction = ExtractionConfig(
        note_max_length=int(extraction_data.get("note_max_length", 50)),
        lenient_amount_parsing=_env_bool(
            "SMART_INPUT_LENIENT_AMOUNTS",
            extraction_data.get("lenient_amount_parsing", True),
        ),
    )

    # Recognition config
    recognition_data = data.get("recognition") or {}
    delay_env = os.environ.get("SMART_INPUT_SIMULATED_DELAY", "")
    delay = recognition_data.get("simulated_delay_seconds", 0.0)
    if delay_env:
        try:
            delay = float(delay_env)
        except ValueError:
            raise ConfigValidationError(
                f"SMART_INPUT_SIMULATED_DELAY is not a number: {delay_env!r}"
            ) from None

    recognition = RecognitionConfig(
        provider=os.environ.get(
            "SMART_INPUT_PROVIDER", recognition_data.get("provider", "simulated")
        ),
        simulated_delay_seconds=float(delay),
        seed=recognition_data.get("seed"),
    )

    return Config(
        extraction=extraction,
        recognition=recognition,
        log_level=os.environ.get("SMART_INPUT_LOG_LEVEL", data.get("log_level", "INFO")),
    )


def create_default_config(config_path: Path) -> None:
    """Create a default configuration file."""
    default_config = """# Smart input configuration

# Extraction engine
extraction:
  note_max_length: 50            # Receipt notes are cut to this many characters
  lenient_amount_parsing: true   # Unparseable matched amounts become 0 instead of null

# Recognition provider (OCR / speech-to-text)
recognition:
  provider: "simulated"          # Only "simulated" ships; it needs no credentials
  simulated_delay_seconds: 0.0   # Artificial latency of the simulated provider
  seed: null                     # Fix the simulated utterance choice

log_level: "INFO"
"""

    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w", encoding="utf-8") as f:
        f.write(default_config)
