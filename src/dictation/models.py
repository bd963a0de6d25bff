from __future__ import annotations
import datetime as dt
from sqlalchemy import (
    String, Integer, DateTime, Boolean, Text, Float, LargeBinary, ForeignKey, UniqueConstraint, Index
)
from sqlalchemy.orm import Mapped, mapped_column, relationship
from .db import Base

UTC = dt.timezone.utc
def utcnow() -> dt.datetime:
    return dt.datetime.now(tz=UTC)

class Dictation(Base):
    __tablename__ = "dictations"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(200))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    audio: Mapped[bytes] = mapped_column(LargeBinary, default=b"")      # opaque reading audio
    audio_mime_type: Mapped[str] = mapped_column(String(64), default="audio/mpeg")
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    author_id: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    segments: Mapped[list[DictationSegment]] = relationship(
        "DictationSegment",
        back_populates="dictation",
        cascade="all, delete-orphan",
        order_by="DictationSegment.order",
    )

class DictationSegment(Base):
    __tablename__ = "dictation_segments"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    dictation_id: Mapped[int] = mapped_column(Integer, ForeignKey("dictations.id", ondelete="CASCADE"), index=True)
    order: Mapped[int] = mapped_column(Integer)                     # 1-based reading order
    kind: Mapped[str] = mapped_column(String(16))                   # text | blank
    content: Mapped[str] = mapped_column(Text)                      # blank: expected answer as authored

    dictation: Mapped[Dictation] = relationship("Dictation", back_populates="segments")
    __table_args__ = (UniqueConstraint("dictation_id", "order", name="uq_segment_order"),)

class Attempt(Base):
    __tablename__ = "attempts"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    dictation_id: Mapped[int] = mapped_column(Integer, ForeignKey("dictations.id", ondelete="CASCADE"), index=True)
    student_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    score: Mapped[float] = mapped_column(Float, default=0.0)        # 0..100
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    answers: Mapped[list[AttemptAnswer]] = relationship(
        "AttemptAnswer", back_populates="attempt", cascade="all, delete-orphan"
    )
    __table_args__ = (Index("ix_attempts_student_dictation", "student_id", "dictation_id"),)

class AttemptAnswer(Base):
    __tablename__ = "attempt_answers"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    attempt_id: Mapped[int] = mapped_column(Integer, ForeignKey("attempts.id", ondelete="CASCADE"), index=True)
    segment_id: Mapped[int] = mapped_column(Integer, ForeignKey("dictation_segments.id"), index=True)
    provided_text: Mapped[str] = mapped_column(Text, default="")
    is_correct: Mapped[bool] = mapped_column(Boolean, default=False)
    error_category: Mapped[str | None] = mapped_column(String(32), nullable=True)  # None when correct

    attempt: Mapped[Attempt] = relationship("Attempt", back_populates="answers")
