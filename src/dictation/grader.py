from __future__ import annotations
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Mapping

from .classifier import classify
from .errors import ErrorCategory, describe
from .template import Segment, blank_segments

logger = logging.getLogger(__name__)

Answers = Mapping[int, str] | Iterable[tuple[int, str]]


@dataclass(frozen=True)
class BlankResult:
    blank_id: int
    provided_text: str
    expected_text: str
    is_correct: bool
    error_category: ErrorCategory | None = None

    @property
    def description(self) -> str | None:
        if self.error_category is None:
            return None
        return describe(self.error_category)


@dataclass
class GradeResult:
    score: float
    total_blanks: int
    correct_count: int
    incorrect_count: int
    details: list[BlankResult] = field(default_factory=list)


def _answers_by_id(answers: Answers | None) -> dict[int, str]:
    if answers is None:
        return {}
    if isinstance(answers, Mapping):
        return dict(answers)
    # later pairs for the same blank replace earlier ones
    return {blank_id: text for blank_id, text in answers}


def compute_score(correct_count: int, total_blanks: int) -> float:
    if total_blanks <= 0:
        return 0.0
    return round(100 * correct_count / total_blanks, 2)


def grade_dictation(segments: Iterable[Segment], answers: Answers | None) -> GradeResult:
    blanks = blank_segments(segments)
    provided = _answers_by_id(answers)

    known_ids = {seg.key for seg in blanks}
    ignored = [blank_id for blank_id in provided if blank_id not in known_ids]
    if ignored:
        logger.debug("ignored_answers_for_unknown_blanks ids=%s", ignored)

    details: list[BlankResult] = []
    correct = 0
    for seg in blanks:
        text = provided.get(seg.key)
        if text is None:
            text = ""
        outcome = classify(seg.content, text)
        if outcome.is_correct:
            correct += 1
        details.append(
            BlankResult(
                blank_id=seg.key,
                provided_text=text,
                expected_text=seg.content,
                is_correct=outcome.is_correct,
                error_category=outcome.category,
            )
        )

    total = len(blanks)
    return GradeResult(
        score=compute_score(correct, total),
        total_blanks=total,
        correct_count=correct,
        incorrect_count=total - correct,
        details=details,
    )


def errors_by_category(details: Iterable[BlankResult]) -> dict[ErrorCategory, int]:
    counts = Counter(
        d.error_category for d in details if not d.is_correct and d.error_category is not None
    )
    return dict(counts.most_common())
