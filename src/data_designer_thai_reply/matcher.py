# SPDX-License-Identifier: Apache-2.0
"""Confidence-scored selection of a canned reply from a mapping table."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from data_designer_thai_reply.core import POLITENESS_VERY_POLITE, Context

DEFAULT_REPLY_QUESTION_FORMAL = "ขออภัยค่ะ/ครับ ดิฉัน/ผมไม่แน่ใจในคำตอบ กรุณาถามใหม่อีกครั้ง"
DEFAULT_REPLY_QUESTION_CASUAL = "ขอโทษนะ ไม่แน่ใจ ลองถามใหม่ได้ไหม"
DEFAULT_REPLY_FORMAL = "ขอบคุณที่แจ้งให้ทราบค่ะ/ครับ"
DEFAULT_REPLY_CASUAL = "เข้าใจแล้ว ขอบคุณนะ"


class MappingContext(BaseModel):
    """Optional filters on a mapping entry. A field left unset is ignored when scoring."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sentiment: str | None = None
    politeness: str | None = None
    is_question: bool | None = Field(default=None, alias="isQuestion")


class MappingEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    target: str
    replacement: str
    context: MappingContext | None = None


class MappingTable(BaseModel):
    model_config = ConfigDict(frozen=True)

    mappings: tuple[MappingEntry, ...] = ()


EMPTY_TABLE = MappingTable()


@dataclass(frozen=True)
class MatchingParameters:
    """Confidence values used when ranking mapping entries."""

    exact_confidence: float = 1.0
    partial_confidence: float = 0.5
    context_bonus: float = 0.1


DEFAULT_PARAMETERS = MatchingParameters()


def _context_bonus(entry: MappingEntry, context: Context, params: MatchingParameters) -> float:
    wanted = entry.context
    if wanted is None:
        return 0.0
    bonus = 0.0
    if wanted.sentiment is not None and wanted.sentiment == context.sentiment:
        bonus += params.context_bonus
    if wanted.politeness is not None and wanted.politeness == context.politeness:
        bonus += params.context_bonus
    if wanted.is_question is not None and wanted.is_question == context.is_question:
        bonus += params.context_bonus
    return bonus


def _overlaps(text: str, target: str) -> bool:
    # Empty input never overlaps, although an empty target is contained in any text.
    if not text:
        return False
    return target in text or text in target


def calculate_confidence(
    text: str,
    entry: MappingEntry,
    context: Context,
    params: MatchingParameters = DEFAULT_PARAMETERS,
) -> float:
    if entry.target == text:
        return params.exact_confidence
    if _overlaps(text, entry.target):
        return params.partial_confidence + _context_bonus(entry, context, params)
    return 0.0


def default_response(context: Context) -> str:
    very_polite = context.politeness == POLITENESS_VERY_POLITE
    if context.is_question:
        return DEFAULT_REPLY_QUESTION_FORMAL if very_polite else DEFAULT_REPLY_QUESTION_CASUAL
    return DEFAULT_REPLY_FORMAL if very_polite else DEFAULT_REPLY_CASUAL


def best_match(
    text: str,
    context: Context,
    table: MappingTable,
    params: MatchingParameters = DEFAULT_PARAMETERS,
) -> tuple[MappingEntry | None, float]:
    """Return the highest-confidence entry and its score.

    Only a strictly greater confidence replaces the running best, so the
    earliest entry wins a tie. ``(None, 0.0)`` when nothing scores above zero.
    """
    best: MappingEntry | None = None
    highest = 0.0
    for entry in table.mappings:
        confidence = calculate_confidence(text, entry, context, params)
        if confidence > highest:
            highest = confidence
            best = entry
    return best, highest


def select_response(
    text: str,
    context: Context,
    table: MappingTable,
    params: MatchingParameters = DEFAULT_PARAMETERS,
) -> str:
    entry, _ = best_match(text, context, table, params)
    if entry is None:
        return default_response(context)
    return entry.replacement
