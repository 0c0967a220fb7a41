"""
Recognition provider interface and common types.

A provider turns an image into OCR text lines or an audio clip into a
transcript. The extraction engine never calls a provider; the smart input
service does, then hands the text over.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class RecognitionError(Exception):
    """Recognition provider failed to produce text."""

    def __init__(self, message: str, provider: str = ""):
        self.message = message
        self.provider = provider
        super().__init__(f"{provider} recognition failed: {message}" if provider else message)


@dataclass(frozen=True)
class OcrResult:
    """Text lines recognized in an image, in detection order."""

    success: bool
    message: str
    text_list: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class SpeechResult:
    """Transcript recognized in an audio clip."""

    success: bool
    message: str
    text: str = ""


class RecognitionProvider(ABC):
    """
    Base class for all recognition providers.

    Implementations raise RecognitionError for transport or payload
    problems and may return success=False for a recognized-but-empty
    outcome.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name for logging."""
        pass

    @abstractmethod
    def recognize_text(self, image_base64: str) -> OcrResult:
        """
        Recognize text in an image.

        Args:
            image_base64: Base64-encoded image

        Returns:
            OcrResult with one entry per detected line
        """
        pass

    @abstractmethod
    def recognize_speech(
        self,
        audio_base64: str,
        audio_format: str = "wav",
        rate: int = 16000,
    ) -> SpeechResult:
        """
        Recognize speech in an audio clip.

        Args:
            audio_base64: Base64-encoded audio
            audio_format: wav, pcm, amr or m4a
            rate: Sample rate, 8000 or 16000

        Returns:
            SpeechResult with the transcript
        """
        pass
