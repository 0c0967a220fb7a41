"""
Smart input service: recognition provider -> extraction engine.

This is the caller-side glue the add-transaction screen uses. Provider
failures never escape; they come back as an unsuccessful outcome whose
message can be shown to the user.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from .engine import SmartInputEngine
from .recognition import RecognitionError, RecognitionProvider
from .schemas.smart_input_result import SmartInputResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SmartInputOutcome:
    """Result of a full recognize-then-extract round."""

    success: bool
    message: str
    result: SmartInputResult = field(default_factory=SmartInputResult)
    extracted_text: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "result": self.result.to_dict(),
            "extracted_text": list(self.extracted_text),
        }


class SmartInputService:
    """Runs recognition and feeds the recognized text to the engine."""

    def __init__(
        self,
        provider: RecognitionProvider,
        engine: Optional[SmartInputEngine] = None,
    ):
        self.provider = provider
        self.engine = engine or SmartInputEngine()

    def process_ocr_result(self, image_base64: str) -> SmartInputOutcome:
        """Recognize a receipt image and extract a transaction draft."""
        try:
            ocr_result = self.provider.recognize_text(image_base64)
        except RecognitionError as e:
            logger.warning(f"OCR failed ({self.provider.name}): {e.message}")
            return SmartInputOutcome(success=False, message=f"OCR failed: {e.message}")

        if not ocr_result.success:
            logger.info(f"OCR returned no result: {ocr_result.message}")
            return SmartInputOutcome(success=False, message=ocr_result.message)

        result = self.engine.extract_transaction_info(ocr_result.text_list)
        logger.info(
            f"OCR extraction complete: {len(ocr_result.text_list)} lines, "
            f"confidence={result.confidence}"
        )
        return SmartInputOutcome(
            success=True,
            message="Extraction complete",
            result=result,
            extracted_text=list(ocr_result.text_list),
        )

    def process_speech_result(
        self,
        audio_base64: str,
        audio_format: str = "wav",
        rate: int = 16000,
    ) -> SmartInputOutcome:
        """Recognize a voice clip and parse it as a transaction description."""
        try:
            speech_result = self.provider.recognize_speech(audio_base64, audio_format, rate)
        except RecognitionError as e:
            logger.warning(f"Speech recognition failed ({self.provider.name}): {e.message}")
            return SmartInputOutcome(
                success=False, message=f"Speech recognition failed: {e.message}"
            )

        if not speech_result.success:
            logger.info(f"Speech recognition returned no result: {speech_result.message}")
            # Keep whatever partial transcript came back so the user can edit it
            return SmartInputOutcome(
                success=False,
                message=speech_result.message,
                result=SmartInputResult(note=speech_result.text or None),
            )

        result = self.engine.parse_voice_input(speech_result.text)
        logger.info(f"Voice extraction complete: confidence={result.confidence}")
        return SmartInputOutcome(
            success=True,
            message="Voice parsing complete",
            result=result,
            extracted_text=[speech_result.text],
        )
