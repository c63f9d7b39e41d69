# SPDX-License-Identifier: Apache-2.0
"""Code-point classification for characters of the Thai Unicode block."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CharacterClass(str, Enum):
    CONSONANT = "consonant"
    VOWEL = "vowel"
    TONE = "tone"
    SPECIAL = "special"
    OTHER = "other"


# Inclusive code-point ranges, tested in this order.
_CONSONANT_RANGE = (0x0E01, 0x0E2E)
_VOWEL_RANGE = (0x0E30, 0x0E46)
_TONE_RANGE = (0x0E47, 0x0E4B)

# Repeat and abbreviation markers, baht sign, and combining signs.
SPECIAL_CHARS = frozenset({
    "ๆ", "ฯ", "฿", "็", "์",
    "่", "้", "๊", "๋",
})


def _in_range(code: int, bounds: tuple[int, int]) -> bool:
    return bounds[0] <= code <= bounds[1]


def classify(char: str) -> CharacterClass:
    """Classify a single character by its code point."""
    code = ord(char)
    if _in_range(code, _CONSONANT_RANGE):
        return CharacterClass.CONSONANT
    if _in_range(code, _VOWEL_RANGE):
        return CharacterClass.VOWEL
    if _in_range(code, _TONE_RANGE):
        return CharacterClass.TONE
    if char in SPECIAL_CHARS:
        return CharacterClass.SPECIAL
    return CharacterClass.OTHER


@dataclass(frozen=True)
class CharacterDistribution:
    consonants: int = 0
    vowels: int = 0
    tones: int = 0
    special: int = 0
    other: int = 0

    @property
    def total(self) -> int:
        return self.consonants + self.vowels + self.tones + self.special + self.other

    def to_payload(self) -> dict[str, int]:
        return {
            "consonants": self.consonants,
            "vowels": self.vowels,
            "tones": self.tones,
            "special": self.special,
            "other": self.other,
            "total": self.total,
        }


_FIELD_FOR_CLASS = {
    CharacterClass.CONSONANT: "consonants",
    CharacterClass.VOWEL: "vowels",
    CharacterClass.TONE: "tones",
    CharacterClass.SPECIAL: "special",
    CharacterClass.OTHER: "other",
}


def classify_text(text: str) -> CharacterDistribution:
    counts = {name: 0 for name in _FIELD_FOR_CLASS.values()}
    for char in text:
        counts[_FIELD_FOR_CLASS[classify(char)]] += 1
    return CharacterDistribution(**counts)
