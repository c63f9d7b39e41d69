# SPDX-License-Identifier: Apache-2.0
"""Word-break rules and marker word lists used by the analyzer."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from functools import cached_property

_PREFIXES = (
    "การ", "ความ", "น่า", "จะ", "แสน", "ใน", "นัก", "ช่าง",
    "พระ", "นาง", "นาย", "เด็ก", "คน", "คุณ", "หมอ",
)
_SUFFIXES = (
    "ๆ", "นะ", "ครับ", "ค่ะ", "คะ", "ไหม", "เลย", "มาก",
    "จัง", "อยู่", "แล้ว", "ด้วย", "เช่นกัน", "ทีเดียว",
)
_CONJUNCTIONS = (
    "และ", "หรือ", "แต่", "ที่", "ซึ่ง", "เพราะ", "ฉะนั้น",
    "ดังนั้น", "เพื่อ", "เมื่อ", "ถ้า", "จน", "เพราะว่า",
)

_QUESTION_MARKERS = (
    "ไหม", "หรือ", "ใคร", "อะไร", "ที่ไหน",
    "เมื่อไร", "อย่างไร", "ทำไม", "ได้ไหม",
)
_POSITIVE_WORDS = (
    "ดี", "สวัสดี", "ขอบคุณ", "ยินดี", "รัก",
    "ชอบ", "เยี่ยม", "สุข", "สนุก",
)
_NEGATIVE_WORDS = (
    "แย่", "เสียใจ", "โกรธ", "เกลียด", "ไม่",
    "ผิด", "แก้", "เลว", "กลัว", "เศร้า",
)
_POLITE_WORDS = (
    "ครับ", "ค่ะ", "คะ", "นะ", "ขอบคุณ",
    "ขอโทษ", "ขออนุญาต", "รบกวน",
)

RULE_CATEGORIES = ("prefixes", "suffixes", "conjunctions")


@dataclass(frozen=True)
class Lexicon:
    """Read-only word tables shared by the segmenter and the analyzer.

    The three rule categories are only ever consulted as one flat set of
    exact-match words. The remaining lists are matched by substring
    containment.
    """

    prefixes: tuple[str, ...] = _PREFIXES
    suffixes: tuple[str, ...] = _SUFFIXES
    conjunctions: tuple[str, ...] = _CONJUNCTIONS
    questions: tuple[str, ...] = _QUESTION_MARKERS
    positive: tuple[str, ...] = _POSITIVE_WORDS
    negative: tuple[str, ...] = _NEGATIVE_WORDS
    polite: tuple[str, ...] = _POLITE_WORDS

    @cached_property
    def rule_words(self) -> frozenset[str]:
        return frozenset(self.prefixes) | frozenset(self.suffixes) | frozenset(self.conjunctions)

    def shared_rule_words(self) -> list[str]:
        """Rule words listed under more than one category, in first-seen order."""
        seen: Counter[str] = Counter()
        order: list[str] = []
        for category in RULE_CATEGORIES:
            for word in dict.fromkeys(getattr(self, category)):
                if word not in seen:
                    order.append(word)
                seen[word] += 1
        return [word for word in order if seen[word] > 1]


DEFAULT_LEXICON = Lexicon()
