"""Bracket-markup parser for dictation texts.

``"O [cachorro] late."`` becomes three ordered segments: the fixed text
``"O "``, a blank whose expected answer is ``"cachorro"`` and the fixed text
``" late."``. Punctuation typed inside the brackets is moved out of the blank
into the neighbouring text so that students never have to type it.
"""
from __future__ import annotations
import enum
import logging
import re
from dataclasses import dataclass
from typing import Iterable

logger = logging.getLogger(__name__)

BLANK_RE = re.compile(r"\[([^\]]+)\]")

# whitespace and punctuation around a bracketed word
_CONTEXT_CLASS = r"[\s,.;:!?\-—'\"«»]"
_WORD_CLASS = r"[a-zA-Z0-9áàâãäéèêëíìîïóòôõöúùûüçÁÀÂÃÄÉÈÊËÍÌÎÏÓÒÔÕÖÚÙÛÜÇ'\-]"
_WORD_CONTEXT_RE = re.compile(
    rf"({_CONTEXT_CLASS}*)({_WORD_CLASS}+)({_CONTEXT_CLASS}*)"
)


class SegmentKind(str, enum.Enum):
    TEXT = "text"
    BLANK = "blank"


@dataclass(frozen=True)
class Segment:
    order: int
    kind: SegmentKind
    content: str
    id: int | None = None  # set once persisted

    @property
    def is_blank(self) -> bool:
        return self.kind == SegmentKind.BLANK

    @property
    def key(self) -> int:
        """Identifier answers are keyed by: the row id, or the order before saving."""
        return self.id if self.id is not None else self.order


def split_word_context(raw: str) -> tuple[str, str, str]:
    """Split bracket content into ``(prefix, word, suffix)``.

    ``", Gato. "`` gives ``(", ", "Gato", ". ")``. Content without a usable
    word falls back to whitespace trimming and is kept as the word;
    whitespace-only content yields an empty word.
    """
    m = _WORD_CONTEXT_RE.fullmatch(raw)
    if m:
        return m.group(1), m.group(2), m.group(3)
    trimmed = raw.strip()
    if not trimmed:
        return raw, "", ""
    start = len(raw) - len(raw.lstrip())
    end = start + len(trimmed)
    logger.debug("degenerate_blank content=%r", raw)
    return raw[:start], trimmed, raw[end:]


def parse_template(source: str) -> list[Segment]:
    segments: list[Segment] = []
    source = source or ""

    def emit(kind: SegmentKind, content: str) -> None:
        segments.append(Segment(order=len(segments) + 1, kind=kind, content=content))

    last_index = 0
    # trailing punctuation of the previous blank, owed to the next text run
    pending = ""

    for m in BLANK_RE.finditer(source):
        prefix, word, suffix = split_word_context(m.group(1))
        if not word:
            # nothing to type; the bracket stays in the surrounding text
            logger.debug("literal_bracket pos=%d", m.start())
            continue
        between = source[last_index:m.start()]

        if pending:
            # the owed run ends at this bracket; the prefix stands on its own
            emit(SegmentKind.TEXT, pending + between)
            pending = ""
            if prefix:
                emit(SegmentKind.TEXT, prefix)
        elif between + prefix:
            emit(SegmentKind.TEXT, between + prefix)

        emit(SegmentKind.BLANK, word)
        last_index = m.end()
        pending = suffix

    tail = pending + source[last_index:]
    if tail:
        emit(SegmentKind.TEXT, tail)
    return segments


def blank_segments(segments: Iterable[Segment]) -> list[Segment]:
    return sorted((seg for seg in segments if seg.is_blank), key=lambda seg: seg.order)


def render_template(segments: Iterable[Segment]) -> str:
    parts = []
    for seg in sorted(segments, key=lambda seg: seg.order):
        parts.append(f"[{seg.content}]" if seg.is_blank else seg.content)
    return "".join(parts)
