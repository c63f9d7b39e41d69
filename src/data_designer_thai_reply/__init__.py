# SPDX-License-Identifier: Apache-2.0
"""Thai reply plugin for NeMo Data Designer.

Adds a ``thai-reply`` column type that analyzes Thai text (rule-table word
segmentation, character classes, sentiment, politeness, question markers) and
selects a canned reply from a mapping table by substring confidence scoring.
No statistical models, no API dependencies.

Usage::

    from data_designer_thai_reply import ThaiReplyColumnConfig

    builder.add_column(ThaiReplyColumnConfig(
        name="reply",
        target_columns=["message"],
        mappings_path="mappings.json",
    ))

The pipeline can also be used on its own::

    from data_designer_thai_reply import ResponseSystem, load_mappings

    system = ResponseSystem(load_mappings("mappings.json"))
    system.process("สวัสดีครับ")
"""

from data_designer_thai_reply.config import ThaiReplyColumnConfig
from data_designer_thai_reply.core import AnalysisResult, Context, analyze_text
from data_designer_thai_reply.lexicon import DEFAULT_LEXICON, Lexicon
from data_designer_thai_reply.loader import load_lexicon, load_mappings
from data_designer_thai_reply.matcher import MappingEntry, MappingTable, MatchingParameters, select_response
from data_designer_thai_reply.system import ResponseSystem

__all__ = [
    "ThaiReplyColumnConfig",
    "analyze_text",
    "AnalysisResult",
    "Context",
    "Lexicon",
    "DEFAULT_LEXICON",
    "load_lexicon",
    "load_mappings",
    "MappingEntry",
    "MappingTable",
    "MatchingParameters",
    "select_response",
    "ResponseSystem",
]
