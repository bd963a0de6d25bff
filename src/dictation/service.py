from __future__ import annotations

import base64
import binascii
import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .grader import Answers, GradeResult, grade_dictation
from .models import Attempt, AttemptAnswer, Dictation, DictationSegment
from .template import Segment, SegmentKind, parse_template

logger = logging.getLogger(__name__)

DEFAULT_AUDIO_MIME_TYPE = "audio/mpeg"


def decode_audio(data: str | None) -> bytes:
    """Decode raw base64 or a ``data:<mime>;base64,...`` URL."""
    if not data:
        return b""
    payload = data.split(",", 1)[1] if "," in data else data
    try:
        return base64.b64decode(payload.strip(), validate=True)
    except binascii.Error as exc:
        raise ValueError(f"audio is not valid base64: {exc}") from exc


def encode_audio(audio: bytes | None, mime_type: str = DEFAULT_AUDIO_MIME_TYPE) -> str:
    encoded = base64.b64encode(audio or b"").decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def _to_segment(row: DictationSegment) -> Segment:
    return Segment(order=row.order, kind=SegmentKind(row.kind), content=row.content, id=row.id)


async def _get_active_dictation(s: AsyncSession, dictation_id: int) -> Dictation | None:
    return (await s.execute(
        select(Dictation).where(Dictation.id == dictation_id, Dictation.is_active == True)
    )).scalar_one_or_none()


async def create_dictation(
    s: AsyncSession,
    *,
    title: str,
    source_text: str,
    audio_base64: str | None,
    description: str | None = None,
    author_id: int | None = None,
    audio_mime_type: str = DEFAULT_AUDIO_MIME_TYPE,
) -> Dictation:
    title = (title or "").strip()
    if not title:
        raise ValueError("title is required")
    audio = decode_audio(audio_base64)
    parsed = parse_template(source_text)

    dictation = Dictation(
        title=title,
        description=(description or "").strip() or None,
        audio=audio,
        audio_mime_type=audio_mime_type,
        author_id=author_id,
        is_active=True,
        segments=[
            DictationSegment(order=seg.order, kind=seg.kind.value, content=seg.content)
            for seg in parsed
        ],
    )
    s.add(dictation)
    await s.commit()
    logger.info(
        "dictation_created id=%s segments=%s blanks=%s audio_bytes=%s",
        dictation.id,
        len(parsed),
        sum(1 for seg in parsed if seg.is_blank),
        len(audio),
    )
    return dictation


async def load_segments(s: AsyncSession, dictation_id: int) -> list[Segment]:
    rows = (await s.execute(
        select(DictationSegment)
        .where(DictationSegment.dictation_id == dictation_id)
        .order_by(DictationSegment.order)
    )).scalars().all()
    return [_to_segment(row) for row in rows]


async def dictation_for_student(s: AsyncSession, dictation_id: int) -> dict[str, Any] | None:
    dictation = await _get_active_dictation(s, dictation_id)
    if dictation is None:
        return None
    segments = await load_segments(s, dictation_id)
    return {
        "id": dictation.id,
        "title": dictation.title,
        "audio": encode_audio(dictation.audio, dictation.audio_mime_type),
        "segments": [
            {
                "order": seg.order,
                "kind": seg.kind.value,
                # the expected answer never leaves the server
                "content": None if seg.is_blank else seg.content,
                "segment_id": seg.id if seg.is_blank else None,
            }
            for seg in segments
        ],
    }


async def submit_attempt(
    s: AsyncSession,
    *,
    dictation_id: int,
    answers: Answers,
    student_id: int | None = None,
) -> tuple[Attempt, GradeResult] | None:
    dictation = await _get_active_dictation(s, dictation_id)
    if dictation is None:
        logger.info("attempt_rejected dictation_id=%s reason=not_found_or_inactive", dictation_id)
        return None

    segments = await load_segments(s, dictation_id)
    result = grade_dictation(segments, answers)

    attempt = Attempt(
        dictation_id=dictation_id,
        student_id=student_id,
        score=result.score,
        answers=[
            AttemptAnswer(
                segment_id=d.blank_id,
                provided_text=d.provided_text,
                is_correct=d.is_correct,
                error_category=d.error_category.value if d.error_category is not None else None,
            )
            for d in result.details
        ],
    )
    s.add(attempt)
    await s.commit()
    logger.info(
        "attempt_recorded id=%s dictation_id=%s student_id=%s score=%s correct=%s total=%s",
        attempt.id,
        dictation_id,
        student_id,
        result.score,
        result.correct_count,
        result.total_blanks,
    )
    return attempt, result


async def set_dictation_active(s: AsyncSession, dictation_id: int, active: bool) -> bool:
    dictation = await s.get(Dictation, dictation_id)
    if dictation is None:
        return False
    dictation.is_active = active
    await s.commit()
    logger.info("dictation_active_changed id=%s active=%s", dictation_id, active)
    return True
