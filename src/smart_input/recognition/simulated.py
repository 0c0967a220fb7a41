"""
Simulated recognition provider.

Stands in for a paid OCR/speech service: it validates the payload, then
returns a sample receipt or a sample utterance.
"""

import logging
import random
import time
from datetime import date
from typing import Optional

from .base import OcrResult, RecognitionError, RecognitionProvider, SpeechResult

logger = logging.getLogger(__name__)

SUPPORTED_AUDIO_FORMATS = ("wav", "pcm", "amr", "m4a")
SUPPORTED_RATES = (8000, 16000)

SAMPLE_UTTERANCES = (
    "买菜花了五十元",
    "午餐消费三十八块",
    "加油费用二百元",
    "超市购物一百二十元",
    "咖啡十五元",
    "地铁费用六元",
)

SIMULATED_MESSAGE = "Simulated recognition succeeded"


def sample_receipt_lines(today: Optional[date] = None) -> list[str]:
    """The receipt the simulated OCR always 'sees'."""
    today = today or date.today()
    return [
        "超市购物小票",
        "商品名称：蔬菜水果",
        "金额：￥45.80",
        f"日期：{today.isoformat()}",
        "收银员：001",
    ]


class SimulatedRecognitionProvider(RecognitionProvider):
    """Recognition provider that needs no network or credentials."""

    def __init__(self, delay_seconds: float = 0.0, seed: Optional[int] = None):
        self.delay_seconds = delay_seconds
        self._random = random.Random(seed)

    @property
    def name(self) -> str:
        return "simulated"

    def _simulate_latency(self) -> None:
        if self.delay_seconds > 0:
            time.sleep(self.delay_seconds)

    def recognize_text(self, image_base64: str) -> OcrResult:
        if not image_base64:
            raise RecognitionError("empty image payload", provider=self.name)

        self._simulate_latency()
        lines = sample_receipt_lines()
        logger.debug(f"Simulated OCR returned {len(lines)} lines")
        return OcrResult(success=True, message=SIMULATED_MESSAGE, text_list=lines)

    def recognize_speech(
        self,
        audio_base64: str,
        audio_format: str = "wav",
        rate: int = 16000,
    ) -> SpeechResult:
        if not audio_base64:
            raise RecognitionError("empty audio payload", provider=self.name)
        if audio_format not in SUPPORTED_AUDIO_FORMATS:
            raise RecognitionError(f"unsupported audio format: {audio_format}", provider=self.name)
        if rate not in SUPPORTED_RATES:
            raise RecognitionError(f"unsupported sample rate: {rate}", provider=self.name)

        self._simulate_latency()
        text = self._random.choice(SAMPLE_UTTERANCES)
        logger.debug(f"Simulated speech returned {text!r}")
        return SpeechResult(success=True, message=SIMULATED_MESSAGE, text=text)
