import pytest

from data_designer_thai_reply.core import Context
from data_designer_thai_reply.matcher import (
    DEFAULT_REPLY_CASUAL,
    DEFAULT_REPLY_FORMAL,
    DEFAULT_REPLY_QUESTION_CASUAL,
    DEFAULT_REPLY_QUESTION_FORMAL,
    EMPTY_TABLE,
    MappingEntry,
    MappingTable,
    MatchingParameters,
    best_match,
    calculate_confidence,
    default_response,
    select_response,
)

CASUAL = Context(sentiment="neutral", politeness="casual", is_question=False)
POLITE_POSITIVE = Context(sentiment="positive", politeness="polite", is_question=False)


def _table(*entries: dict) -> MappingTable:
    return MappingTable.model_validate({"mappings": list(entries)})


def _entry(**fields) -> MappingEntry:
    return MappingEntry.model_validate(fields)


class TestCalculateConfidence:
    def test_exact_match(self):
        entry = _entry(target="สวัสดี", replacement="r")
        assert calculate_confidence("สวัสดี", entry, CASUAL) == 1.0

    def test_text_contains_target(self):
        entry = _entry(target="สวัสดี", replacement="r")
        assert calculate_confidence("สวัสดีครับ", entry, CASUAL) == 0.5

    def test_target_contains_text(self):
        entry = _entry(target="สวัสดีครับ ยินดีที่ได้รู้จัก", replacement="r", context={"sentiment": "negative"})
        assert calculate_confidence("สวัสดีครับ", entry, POLITE_POSITIVE) == 0.5

    def test_no_overlap(self):
        entry = _entry(target="ลาก่อน", replacement="r")
        assert calculate_confidence("สวัสดี", entry, CASUAL) == 0.0

    def test_every_context_field_matches(self):
        entry = _entry(
            target="สวัสดี",
            replacement="r",
            context={"sentiment": "positive", "politeness": "polite", "isQuestion": False},
        )
        assert calculate_confidence("สวัสดีครับ", entry, POLITE_POSITIVE) == pytest.approx(0.8)

    def test_absent_context_fields_contribute_nothing(self):
        entry = _entry(target="สวัสดี", replacement="r", context={"politeness": "polite"})
        assert calculate_confidence("สวัสดีครับ", entry, POLITE_POSITIVE) == pytest.approx(0.6)

    def test_is_question_false_must_match(self):
        entry = _entry(target="สวัสดี", replacement="r", context={"isQuestion": False})
        asking = Context(sentiment="positive", politeness="polite", is_question=True)
        assert calculate_confidence("สวัสดีครับ", entry, POLITE_POSITIVE) == pytest.approx(0.6)
        assert calculate_confidence("สวัสดีครับ", entry, asking) == 0.5

    def test_empty_text_never_overlaps(self):
        entry = _entry(target="สวัสดี", replacement="r")
        assert calculate_confidence("", entry, CASUAL) == 0.0

    def test_empty_target_is_contained_in_any_text(self):
        entry = _entry(target="", replacement="r")
        assert calculate_confidence("สวัสดี", entry, CASUAL) == 0.5

    def test_empty_target_gets_context_bonus(self):
        entry = _entry(target="", replacement="r", context={"sentiment": "positive"})
        assert calculate_confidence("สวัสดี", entry, POLITE_POSITIVE) == pytest.approx(0.6)

    def test_empty_target_and_empty_text_match_exactly(self):
        entry = _entry(target="", replacement="r")
        assert calculate_confidence("", entry, CASUAL) == 1.0

    def test_custom_parameters(self):
        params = MatchingParameters(partial_confidence=0.3, context_bonus=0.2)
        entry = _entry(target="สวัสดี", replacement="r", context={"sentiment": "positive"})
        assert calculate_confidence("สวัสดีครับ", entry, POLITE_POSITIVE, params) == pytest.approx(0.5)


class TestSelectResponse:
    def test_exact_match_beats_later_context_bonus(self):
        table = _table(
            {"target": "สวัสดีครับ", "replacement": "exact"},
            {
                "target": "สวัสดี",
                "replacement": "bonus",
                "context": {"sentiment": "positive", "politeness": "polite", "isQuestion": False},
            },
        )
        assert select_response("สวัสดีครับ", POLITE_POSITIVE, table) == "exact"

    def test_first_exact_match_wins(self):
        table = _table(
            {"target": "hi", "replacement": "first"},
            {"target": "hi", "replacement": "second"},
        )
        assert select_response("hi", CASUAL, table) == "first"

    def test_tie_keeps_earliest_entry(self):
        table = _table(
            {"target": "สวัสดี", "replacement": "first"},
            {"target": "ครับ", "replacement": "second"},
        )
        assert select_response("สวัสดีครับ", CASUAL, table) == "first"

    def test_context_bonus_breaks_partial_tie(self):
        table = _table(
            {"target": "สวัสดี", "replacement": "plain"},
            {"target": "สวัสดี", "replacement": "matched", "context": {"sentiment": "positive"}},
        )
        assert select_response("สวัสดีครับ", POLITE_POSITIVE, table) == "matched"

    def test_best_match_reports_confidence(self):
        table = _table({"target": "สวัสดี", "replacement": "r"})
        entry, confidence = best_match("สวัสดีครับ", CASUAL, table)
        assert entry is not None and entry.replacement == "r"
        assert confidence == 0.5

    def test_empty_table_falls_back_to_default(self):
        assert select_response("สวัสดี", CASUAL, EMPTY_TABLE) == DEFAULT_REPLY_CASUAL
        assert best_match("สวัสดี", CASUAL, EMPTY_TABLE) == (None, 0.0)

    def test_no_match_falls_back_to_default(self):
        table = _table({"target": "ลาก่อน", "replacement": "bye"})
        assert select_response("สวัสดี", CASUAL, table) == DEFAULT_REPLY_CASUAL


class TestDefaultResponse:
    def test_question_very_polite(self):
        context = Context(sentiment="neutral", politeness="very polite", is_question=True)
        assert default_response(context) == DEFAULT_REPLY_QUESTION_FORMAL

    def test_question_casual(self):
        context = Context(sentiment="neutral", politeness="polite", is_question=True)
        assert default_response(context) == DEFAULT_REPLY_QUESTION_CASUAL

    def test_statement_very_polite(self):
        context = Context(sentiment="neutral", politeness="very polite", is_question=False)
        assert default_response(context) == DEFAULT_REPLY_FORMAL

    def test_statement_casual(self):
        assert default_response(CASUAL) == DEFAULT_REPLY_CASUAL


class TestMappingModels:
    def test_context_alias_and_defaults(self):
        entry = _entry(target="t", replacement="r", context={"isQuestion": True})
        assert entry.context is not None
        assert entry.context.is_question is True
        assert entry.context.sentiment is None
        assert entry.context.politeness is None

    def test_table_keeps_order(self):
        table = _table({"target": "a", "replacement": "1"}, {"target": "b", "replacement": "2"})
        assert [e.target for e in table.mappings] == ["a", "b"]
