"""Tests for recognition providers and the smart input service."""

from datetime import date
from decimal import Decimal

import pytest

from smart_input.config import ConfigValidationError, RecognitionConfig
from smart_input.recognition import (
    SAMPLE_UTTERANCES,
    OcrResult,
    RecognitionError,
    RecognitionProvider,
    SimulatedRecognitionProvider,
    SpeechResult,
    create_provider,
    sample_receipt_lines,
)
from smart_input.service import SmartInputService


class FailingProvider(RecognitionProvider):
    """Provider whose every call fails."""

    @property
    def name(self) -> str:
        return "failing"

    def recognize_text(self, image_base64):
        raise RecognitionError("token request failed", provider=self.name)

    def recognize_speech(self, audio_base64, audio_format="wav", rate=16000):
        raise RecognitionError("token request failed", provider=self.name)


class SoftFailProvider(RecognitionProvider):
    """Provider that answers but reports no usable result."""

    @property
    def name(self) -> str:
        return "soft-fail"

    def recognize_text(self, image_base64):
        return OcrResult(success=False, message="No text detected")

    def recognize_speech(self, audio_base64, audio_format="wav", rate=16000):
        return SpeechResult(success=False, message="Speech too quiet", text="在超市")


class FixedSpeechProvider(SoftFailProvider):
    """Provider returning a fixed transcript."""

    def recognize_speech(self, audio_base64, audio_format="wav", rate=16000):
        return SpeechResult(success=True, message="ok", text="加油站加油三百块钱")


class TestSimulatedProvider:
    """Tests for the simulated provider."""

    def test_recognize_text(self):
        result = SimulatedRecognitionProvider().recognize_text("aW1hZ2U=")

        assert result.success
        assert result.text_list == sample_receipt_lines()
        assert "金额：￥45.80" in result.text_list

    def test_sample_receipt_is_dated(self):
        lines = sample_receipt_lines(date(2024, 11, 18))
        assert "日期：2024-11-18" in lines

    def test_recognize_speech(self):
        result = SimulatedRecognitionProvider().recognize_speech("YXVkaW8=")

        assert result.success
        assert result.text in SAMPLE_UTTERANCES

    def test_seed_is_deterministic(self):
        first = SimulatedRecognitionProvider(seed=42)
        second = SimulatedRecognitionProvider(seed=42)

        texts_a = [first.recognize_speech("YQ==").text for _ in range(5)]
        texts_b = [second.recognize_speech("YQ==").text for _ in range(5)]
        assert texts_a == texts_b

    def test_empty_payloads_rejected(self):
        provider = SimulatedRecognitionProvider()
        with pytest.raises(RecognitionError):
            provider.recognize_text("")
        with pytest.raises(RecognitionError):
            provider.recognize_speech("")

    def test_unsupported_audio(self):
        provider = SimulatedRecognitionProvider()
        with pytest.raises(RecognitionError, match="format"):
            provider.recognize_speech("YQ==", audio_format="mp3")
        with pytest.raises(RecognitionError, match="rate"):
            provider.recognize_speech("YQ==", rate=44100)


class TestCreateProvider:
    """Tests for the provider factory."""

    def test_simulated(self):
        provider = create_provider(RecognitionConfig(simulated_delay_seconds=0.25, seed=3))

        assert isinstance(provider, SimulatedRecognitionProvider)
        assert provider.delay_seconds == 0.25

    def test_unknown(self):
        with pytest.raises(ConfigValidationError):
            create_provider(RecognitionConfig(provider="baidu"))


class TestSmartInputService:
    """Tests for recognition followed by extraction."""

    def test_process_ocr_result(self):
        service = SmartInputService(SimulatedRecognitionProvider())
        outcome = service.process_ocr_result("aW1hZ2U=")

        assert outcome.success
        assert outcome.extracted_text == sample_receipt_lines()
        assert outcome.result.amount == Decimal("45.80")
        assert outcome.result.merchant == "超市购物小票"
        assert outcome.result.suggested_category == "购物"
        assert outcome.result.note == "超市购物小票 商品名称：蔬菜水果"
        assert outcome.result.confidence == 1.0

    def test_process_speech_result(self):
        outcome = SmartInputService(FixedSpeechProvider()).process_speech_result("YQ==")

        assert outcome.success
        assert outcome.extracted_text == ["加油站加油三百块钱"]
        assert outcome.result.amount == Decimal("300.00")
        assert outcome.result.note == "加油站加油三百块钱"

    def test_provider_error_becomes_failed_outcome(self):
        service = SmartInputService(FailingProvider())

        ocr = service.process_ocr_result("aW1hZ2U=")
        speech = service.process_speech_result("YQ==")

        assert not ocr.success
        assert "token request failed" in ocr.message
        assert ocr.result.is_empty
        assert not speech.success
        assert speech.extracted_text == []

    def test_soft_failure(self):
        service = SmartInputService(SoftFailProvider())

        ocr = service.process_ocr_result("aW1hZ2U=")
        assert not ocr.success
        assert ocr.message == "No text detected"

        speech = service.process_speech_result("YQ==")
        assert not speech.success
        # The partial transcript is kept as the note
        assert speech.result.note == "在超市"
        assert speech.result.amount is None

    def test_outcome_to_dict(self):
        outcome = SmartInputService(FixedSpeechProvider()).process_speech_result("YQ==")
        data = outcome.to_dict()

        assert data["success"] is True
        assert data["result"]["amount"] == "300.00"
        assert data["extracted_text"] == ["加油站加油三百块钱"]
