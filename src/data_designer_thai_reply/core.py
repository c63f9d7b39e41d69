# SPDX-License-Identifier: Apache-2.0
# Rule-based analysis of Thai text: word segmentation, character classes,
# sentiment, politeness and question detection. Matching is exact-string and
# substring based only.

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from data_designer_thai_reply.characters import CharacterDistribution, classify_text
from data_designer_thai_reply.lexicon import DEFAULT_LEXICON, Lexicon
from data_designer_thai_reply.segmenter import segment_words

# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------

SENTIMENT_POSITIVE = "positive"
SENTIMENT_NEGATIVE = "negative"
SENTIMENT_NEUTRAL = "neutral"

POLITENESS_VERY_POLITE = "very polite"
POLITENESS_POLITE = "polite"
POLITENESS_CASUAL = "casual"

VERY_POLITE_MIN_EXCLUSIVE = 2

# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Sentiment:
    score: int
    label: str


@dataclass(frozen=True)
class Politeness:
    score: int
    level: str


@dataclass(frozen=True)
class QuestionAnalysis:
    is_question: bool
    markers: tuple[str, ...]


@dataclass(frozen=True)
class Context:
    """The signals a mapping entry may be scored against."""

    sentiment: str
    politeness: str
    is_question: bool


@dataclass(frozen=True)
class AnalysisResult:
    text: str
    length: int
    words: tuple[str, ...]
    word_frequency: Mapping[str, int]
    characters: CharacterDistribution
    sentiment: Sentiment
    politeness: Politeness
    question: QuestionAnalysis

    def __hash__(self) -> int:
        return hash((
            self.text, self.words, tuple(self.word_frequency.items()),
            self.characters, self.sentiment, self.politeness, self.question,
        ))

    @property
    def word_count(self) -> int:
        return len(self.words)

    @property
    def unique_words(self) -> int:
        return len(self.word_frequency)

    def context(self) -> Context:
        return Context(
            sentiment=self.sentiment.label,
            politeness=self.politeness.level,
            is_question=self.question.is_question,
        )

    def to_payload(self) -> dict[str, object]:
        return {
            "text": self.text,
            "length": self.length,
            "words": list(self.words),
            "word_count": self.word_count,
            "unique_words": self.unique_words,
            "word_frequency": dict(self.word_frequency),
            "characters": self.characters.to_payload(),
            "sentiment": {"score": self.sentiment.score, "label": self.sentiment.label},
            "politeness": {"score": self.politeness.score, "level": self.politeness.level},
            "question": {
                "is_question": self.question.is_question,
                "markers": list(self.question.markers),
            },
        }


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _contains_any(word: str, needles: tuple[str, ...]) -> bool:
    return any(needle in word for needle in needles)


def _sentiment_label(score: int) -> str:
    if score > 0:
        return SENTIMENT_POSITIVE
    if score < 0:
        return SENTIMENT_NEGATIVE
    return SENTIMENT_NEUTRAL


def politeness_level(score: int) -> str:
    if score > VERY_POLITE_MIN_EXCLUSIVE:
        return POLITENESS_VERY_POLITE
    if score > 0:
        return POLITENESS_POLITE
    return POLITENESS_CASUAL


def _score_sentiment(words: list[str], lexicon: Lexicon) -> Sentiment:
    score = 0
    for word in words:
        # Both checks run for every word, so one word can cancel itself out.
        if _contains_any(word, lexicon.positive):
            score += 1
        if _contains_any(word, lexicon.negative):
            score -= 1
    return Sentiment(score=score, label=_sentiment_label(score))


def _score_politeness(words: list[str], lexicon: Lexicon) -> Politeness:
    score = sum(1 for word in words if _contains_any(word, lexicon.polite))
    return Politeness(score=score, level=politeness_level(score))


def _detect_question(text: str, lexicon: Lexicon) -> QuestionAnalysis:
    markers = tuple(dict.fromkeys(m for m in lexicon.questions if m in text))
    return QuestionAnalysis(is_question=bool(markers), markers=markers)


def _word_frequency(words: list[str]) -> Mapping[str, int]:
    freq: dict[str, int] = {}
    for word in words:
        freq[word] = freq.get(word, 0) + 1
    return MappingProxyType(freq)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def analyze_text(text: str, lexicon: Lexicon | None = None) -> AnalysisResult:
    """Analyze Thai text.

    Sentiment and politeness are scored per segmented word, so a marker split
    across a word boundary is not counted. Question markers are searched in
    the raw text.

    Args:
        text: The text to analyze. Empty text is valid and yields zero counts.
        lexicon: Optional word tables. Uses the built-in tables if omitted.

    Returns:
        An immutable AnalysisResult.
    """
    lex = lexicon or DEFAULT_LEXICON
    words = segment_words(text, lex)

    return AnalysisResult(
        text=text,
        length=len(text),
        words=tuple(words),
        word_frequency=_word_frequency(words),
        characters=classify_text(text),
        sentiment=_score_sentiment(words, lex),
        politeness=_score_politeness(words, lex),
        question=_detect_question(text, lex),
    )
