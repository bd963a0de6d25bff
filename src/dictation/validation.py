from __future__ import annotations

from dataclasses import dataclass

from .template import BLANK_RE, split_word_context


@dataclass(frozen=True)
class ValidationIssue:
    severity: str  # "error" | "warning"
    message: str
    position: int | None = None  # offset in the source text


def _bracket_issues(source: str) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    open_at: int | None = None
    for idx, ch in enumerate(source):
        if ch == "[":
            if open_at is not None:
                issues.append(
                    ValidationIssue("warning", "nested '[' inside a blank", idx)
                )
            else:
                open_at = idx
        elif ch == "]":
            if open_at is None:
                issues.append(
                    ValidationIssue("warning", "']' without a matching '['", idx)
                )
            else:
                open_at = None
    if open_at is not None:
        issues.append(
            ValidationIssue(
                "warning",
                "'[' is never closed; the rest of the text is kept as plain text",
                open_at,
            )
        )
    return issues


def validate_template(source: str) -> list[ValidationIssue]:
    source = source or ""
    issues = _bracket_issues(source)
    matches = list(BLANK_RE.finditer(source))
    if not matches:
        issues.append(ValidationIssue("error", "text has no [bracketed] blanks"))
    for m in matches:
        raw = m.group(1)
        _, word, _ = split_word_context(raw)
        if not any(ch.isalpha() for ch in word):
            issues.append(
                ValidationIssue(
                    "warning",
                    f"blank [{raw}] has no letters to type",
                    m.start(),
                )
            )
        elif len(word.split()) > 1:
            issues.append(
                ValidationIssue(
                    "warning",
                    f"blank [{raw}] holds more than one word",
                    m.start(),
                )
            )
    return sorted(issues, key=lambda issue: (issue.position is None, issue.position or 0))
