"""
Accuracy evaluation for smart input.

Runs labelled receipt and voice samples through the engine, scores each
field, and renders a Markdown report.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Sequence

from ..engine import SmartInputEngine
from ..schemas.smart_input_result import SmartInputResult

logger = logging.getLogger(__name__)

ACCURACY_TARGET = 0.8


@dataclass(frozen=True)
class EvaluationCase:
    """A labelled input. OCR cases use newlines to separate receipt lines."""

    input: str
    expected_amount: Optional[Decimal]
    expected_merchant: Optional[str]
    expected_category: Optional[str]
    description: str


@dataclass(frozen=True)
class EvaluationResult:
    """Per-field verdict for one case."""

    case: EvaluationCase
    actual: SmartInputResult
    amount_correct: bool
    merchant_correct: bool
    category_correct: bool
    score: float


OCR_CASES = (
    EvaluationCase(
        input="超市购物小票\n合计: ¥128.50\n沃尔玛超市",
        expected_amount=Decimal("128.50"),
        expected_merchant="沃尔玛超市",
        expected_category="日用品",
        description="Supermarket receipt",
    ),
    EvaluationCase(
        input="餐厅账单\n总计: 89.00元\n海底捞火锅",
        expected_amount=Decimal("89.00"),
        expected_merchant="海底捞火锅",
        expected_category="餐饮",
        description="Restaurant bill",
    ),
    EvaluationCase(
        input="加油站发票\n金额: 300.00\n中石化加油站",
        expected_amount=Decimal("300.00"),
        expected_merchant="中石化加油站",
        expected_category="交通",
        description="Gas station invoice",
    ),
    EvaluationCase(
        input="药店购药\n应付: ¥45.80\n同仁堂药店",
        expected_amount=Decimal("45.80"),
        expected_merchant="同仁堂药店",
        expected_category="医疗",
        description="Pharmacy receipt",
    ),
    EvaluationCase(
        input="电影票\n票价: 58元\n万达影城",
        expected_amount=Decimal("58.00"),
        expected_merchant="万达影城",
        expected_category="娱乐",
        description="Cinema ticket",
    ),
)

VOICE_CASES = (
    EvaluationCase(
        input="在超市花了一百二十八块五毛钱买日用品",
        expected_amount=Decimal("128.50"),
        expected_merchant="超市",
        expected_category="日用品",
        description="Supermarket purchase",
    ),
    EvaluationCase(
        input="今天在海底捞吃火锅花了八十九块钱",
        expected_amount=Decimal("89.00"),
        expected_merchant="海底捞",
        expected_category="餐饮",
        description="Restaurant meal",
    ),
    EvaluationCase(
        input="加油站加油三百块钱",
        expected_amount=Decimal("300.00"),
        expected_merchant="加油站",
        expected_category="交通",
        description="Refuelling",
    ),
    EvaluationCase(
        input="在药店买药花了四十五块八毛",
        expected_amount=Decimal("45.80"),
        expected_merchant="药店",
        expected_category="医疗",
        description="Pharmacy purchase",
    ),
    EvaluationCase(
        input="看电影票价五十八元",
        expected_amount=Decimal("58.00"),
        expected_merchant="电影院",
        expected_category="娱乐",
        description="Cinema ticket",
    ),
)


def evaluate_result(case: EvaluationCase, actual: SmartInputResult) -> EvaluationResult:
    """
    Score one result against its labels.

    - amount: numeric equality (128.5 == 128.50)
    - merchant: expected text contained in the actual merchant, ignoring case
    - category: equal, ignoring case
    A missing expectation is satisfied only by a missing value.
    """
    if case.expected_amount is not None:
        amount_correct = actual.amount is not None and actual.amount == case.expected_amount
    else:
        amount_correct = actual.amount is None

    if case.expected_merchant is not None:
        merchant_correct = (
            actual.merchant is not None
            and case.expected_merchant.lower() in actual.merchant.lower()
        )
    else:
        merchant_correct = actual.merchant is None

    if case.expected_category is not None:
        category_correct = (
            actual.suggested_category is not None
            and actual.suggested_category.lower() == case.expected_category.lower()
        )
    else:
        category_correct = actual.suggested_category is None

    verdicts = (amount_correct, merchant_correct, category_correct)
    score = sum(1.0 for ok in verdicts if ok) / len(verdicts)

    return EvaluationResult(
        case=case,
        actual=actual,
        amount_correct=amount_correct,
        merchant_correct=merchant_correct,
        category_correct=category_correct,
        score=score,
    )


def run_ocr_evaluation(
    engine: Optional[SmartInputEngine] = None,
    cases: Sequence[EvaluationCase] = OCR_CASES,
) -> list[EvaluationResult]:
    """Evaluate receipt cases (input split on newlines)."""
    engine = engine or SmartInputEngine()
    results = [
        evaluate_result(case, engine.extract_transaction_info(case.input.split("\n")))
        for case in cases
    ]
    logger.info(f"OCR evaluation: {len(results)} cases, accuracy={average_score(results):.3f}")
    return results


def run_voice_evaluation(
    engine: Optional[SmartInputEngine] = None,
    cases: Sequence[EvaluationCase] = VOICE_CASES,
) -> list[EvaluationResult]:
    """Evaluate voice cases."""
    engine = engine or SmartInputEngine()
    results = [evaluate_result(case, engine.parse_voice_input(case.input)) for case in cases]
    logger.info(f"Voice evaluation: {len(results)} cases, accuracy={average_score(results):.3f}")
    return results


def average_score(results: Sequence[EvaluationResult]) -> float:
    """Mean score, 0.0 for no results."""
    if not results:
        return 0.0
    return sum(r.score for r in results) / len(results)


def _percent(value: float) -> str:
    return f"{value * 100:.1f}%"


def _case_section(result: EvaluationResult) -> list[str]:
    case = result.case
    actual = result.actual
    return [
        f"### {case.description}",
        f"- **Input**: {case.input.replace(chr(10), ' | ')}",
        f"- **Expected amount**: {case.expected_amount}",
        f"- **Actual amount**: {actual.amount}",
        f"- **Expected merchant**: {case.expected_merchant}",
        f"- **Actual merchant**: {actual.merchant}",
        f"- **Expected category**: {case.expected_category}",
        f"- **Actual category**: {actual.suggested_category}",
        f"- **Accuracy**: {_percent(result.score)}",
        "",
    ]


def generate_report(
    ocr_results: Sequence[EvaluationResult],
    voice_results: Sequence[EvaluationResult],
) -> str:
    """Render both evaluations as a Markdown report."""
    ocr_accuracy = average_score(ocr_results)
    voice_accuracy = average_score(voice_results)

    lines = ["# Smart Input Accuracy Report", ""]

    lines += ["## OCR Results", "", f"**Overall accuracy**: {_percent(ocr_accuracy)}", ""]
    for result in ocr_results:
        lines += _case_section(result)

    lines += ["## Voice Results", "", f"**Overall accuracy**: {_percent(voice_accuracy)}", ""]
    for result in voice_results:
        lines += _case_section(result)

    lines += [
        "## Summary",
        "",
        f"- **OCR accuracy**: {_percent(ocr_accuracy)}",
        f"- **Voice accuracy**: {_percent(voice_accuracy)}",
        f"- **Combined accuracy**: {_percent((ocr_accuracy + voice_accuracy) / 2)}",
        "",
        "## Suggestions",
        "",
    ]
    if ocr_accuracy < ACCURACY_TARGET:
        lines.append("- OCR accuracy is low: refine the amount patterns and merchant keywords")
    if voice_accuracy < ACCURACY_TARGET:
        lines.append("- Voice accuracy is low: refine the phrasing patterns and numeral parsing")
    lines.append("- Add merchant keywords and category rules as new receipts come in")

    return "\n".join(lines) + "\n"
