"""
Recognition providers (OCR and speech-to-text).

Provides:
- RecognitionProvider: interface every provider implements
- SimulatedRecognitionProvider: credential-free stand-in
- create_provider: factory driven by RecognitionConfig
"""

from ..config import ConfigValidationError, RecognitionConfig
from .base import OcrResult, RecognitionError, RecognitionProvider, SpeechResult
from .simulated import SAMPLE_UTTERANCES, SimulatedRecognitionProvider, sample_receipt_lines

__all__ = [
    "RecognitionProvider",
    "RecognitionError",
    "OcrResult",
    "SpeechResult",
    "SimulatedRecognitionProvider",
    "SAMPLE_UTTERANCES",
    "sample_receipt_lines",
    "create_provider",
]


def create_provider(config: RecognitionConfig) -> RecognitionProvider:
    """Return the provider named in config."""
    name = config.provider.lower().strip()

    if name == "simulated":
        return SimulatedRecognitionProvider(
            delay_seconds=config.simulated_delay_seconds,
            seed=config.seed,
        )

    raise ConfigValidationError(f"Unknown recognition provider: {config.provider!r}")
