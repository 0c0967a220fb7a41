"""
Accuracy evaluation against labelled receipt and voice samples.
"""

from .accuracy import (
    OCR_CASES,
    VOICE_CASES,
    EvaluationCase,
    EvaluationResult,
    average_score,
    evaluate_result,
    generate_report,
    run_ocr_evaluation,
    run_voice_evaluation,
)

__all__ = [
    "EvaluationCase",
    "EvaluationResult",
    "OCR_CASES",
    "VOICE_CASES",
    "average_score",
    "evaluate_result",
    "generate_report",
    "run_ocr_evaluation",
    "run_voice_evaluation",
]
