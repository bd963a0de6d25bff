"""Spelling-error classification for a single dictation blank.

``classify`` compares the word a student typed with the expected word and
either accepts it or names the kind of mistake. The rules form an ordered
cascade and the first satisfied rule wins:

1. exact match after trimming and case folding is correct;
2. an empty answer is an omission;
3. last-letter rules (words of 3+ letters, compared without accents);
4. first-letter rules (compared without accents);
5. accents are the only difference;
6. same length, some letters differ;
7. fuzzy fallback: close enough is a generic spelling error, anything
   further away is treated as an omission.

A word wrong at both ends is therefore reported by its last-letter error.
"""
from __future__ import annotations
from dataclasses import dataclass

from .errors import ErrorCategory, describe
from .normalize import is_blank_answer, norm_answer, strip_diacritics

FUZZY_MATCH_THRESHOLD = 0.70
MAX_FUZZY_LENGTH_GAP = 2
MIN_EDGE_RULE_LENGTH = 3

_FINAL_CONFUSIONS: dict[frozenset[str], ErrorCategory] = {
    frozenset("sz"): ErrorCategory.CONFUSION_SZ,
    frozenset("sx"): ErrorCategory.CONFUSION_SX,
}
_FINAL_CEDILLA = frozenset("sç")
_SOFT_C_VOWELS = frozenset("ei")


@dataclass(frozen=True)
class Classification:
    is_correct: bool
    category: ErrorCategory | None = None

    @classmethod
    def correct(cls) -> "Classification":
        return cls(True, None)

    @classmethod
    def wrong(cls, category: ErrorCategory) -> "Classification":
        return cls(False, category)

    @property
    def description(self) -> str | None:
        return describe(self.category) if self.category is not None else None


def classify(expected: str, submitted: str) -> Classification:
    exp = norm_answer(expected)
    sub = norm_answer(submitted)
    if sub == exp:
        return Classification.correct()
    if is_blank_answer(sub):
        return Classification.wrong(ErrorCategory.OMISSION)

    exp_plain = strip_diacritics(exp)
    sub_plain = strip_diacritics(sub)
    category = (
        _last_letter_error(exp_plain, sub_plain, exp, sub)
        or _first_letter_error(exp_plain, sub_plain)
        or _whole_word_error(exp_plain, sub_plain)
    )
    return Classification.wrong(category)


def _last_letter_error(e: str, s: str, exp: str, sub: str) -> ErrorCategory | None:
    if len(e) < MIN_EDGE_RULE_LENGTH or len(s) < MIN_EDGE_RULE_LENGTH:
        return None

    # bola -> boal
    if (
        len(s) == len(e)
        and s[-1] == e[-2]
        and s[-2] == e[-1]
        and s[:-2] == e[:-2]
    ):
        return ErrorCategory.INVERSION_END

    # gato -> gat
    if len(s) == len(e) - 1 and s == e[:-1]:
        return ErrorCategory.DELETION_END

    # tres -> tress, and the reverse
    if len(s) == len(e) + 1 and s.endswith("ss") and e.endswith("s") and s[:-2] == e[:-1]:
        return ErrorCategory.CONFUSION_SSS
    if len(s) == len(e) - 1 and s.endswith("s") and e.endswith("ss") and s[:-1] == e[:-2]:
        return ErrorCategory.CONFUSION_SSS

    # alo -> aloh; must precede the generic insertion rule
    if len(s) == len(e) + 1 and s.endswith("h") and s[:-1] == e:
        return ErrorCategory.SPURIOUS_FINAL_H

    # casa -> casaa
    if len(s) == len(e) + 1 and s[:-1] == e:
        return ErrorCategory.INSERTION_END

    # bom -> bon
    if len(s) == len(e) and s[-1] != e[-1] and s[:-1] == e[:-1]:
        confusion = _FINAL_CONFUSIONS.get(frozenset((s[-1], e[-1])))
        if confusion is not None:
            return confusion
        # stripping turns ç into c, so look at the folded letters
        if frozenset((sub[-1], exp[-1])) == _FINAL_CEDILLA:
            return ErrorCategory.CONFUSION_SC
        return ErrorCategory.SUBSTITUTION_END

    return None


def _first_letter_error(e: str, s: str) -> ErrorCategory | None:
    # homem -> omem, ontem -> hontem
    if e.startswith("h") and not s.startswith("h") and e[1:] == s:
        return ErrorCategory.IRREGULAR_INITIAL_H
    if s.startswith("h") and e and not e.startswith("h") and s[1:] == e:
        return ErrorCategory.IRREGULAR_INITIAL_H

    # cigarro -> sigarro
    if (
        len(s) > 1
        and len(e) > 1
        and frozenset((s[0], e[0])) == frozenset("sc")
        and s[1] in _SOFT_C_VOWELS
        and s[1:] == e[1:]
    ):
        return ErrorCategory.CONTEXTUAL_SC_START

    # teste -> este
    if len(s) == len(e) - 1 and e[1:] == s:
        return ErrorCategory.DELETION_START

    # teste -> oteste
    if len(s) == len(e) + 1 and s[1:] == e:
        return ErrorCategory.INSERTION_START

    # teste -> deste
    if len(s) == len(e) and s[0] != e[0] and s[1:] == e[1:]:
        return ErrorCategory.SUBSTITUTION_START

    return None


def _whole_word_error(e: str, s: str) -> ErrorCategory:
    if s == e:
        return ErrorCategory.MISSING_DIACRITIC
    if len(s) == len(e):
        return ErrorCategory.GENERIC_SPELLING
    if abs(len(s) - len(e)) <= MAX_FUZZY_LENGTH_GAP:
        shorter = min(len(s), len(e))
        if shorter and len(set(s) & set(e)) / shorter >= FUZZY_MATCH_THRESHOLD:
            return ErrorCategory.GENERIC_SPELLING
    return ErrorCategory.OMISSION
