# SPDX-License-Identifier: Apache-2.0
"""Text in, canned reply out."""

from __future__ import annotations

import logging

from data_designer_thai_reply.core import AnalysisResult, analyze_text
from data_designer_thai_reply.lexicon import DEFAULT_LEXICON, Lexicon
from data_designer_thai_reply.loader import PathLike, load_lexicon, load_mappings
from data_designer_thai_reply.matcher import (
    DEFAULT_PARAMETERS,
    EMPTY_TABLE,
    MappingTable,
    MatchingParameters,
    select_response,
)

logger = logging.getLogger(__name__)


class ResponseSystem:
    """Analyzes input text and picks a reply from a mapping table.

    The lexicon and mapping table are treated as read-only. ``reload_mappings``
    swaps in a whole new table so calls already in flight keep a consistent view.
    """

    def __init__(
        self,
        mappings: MappingTable | None = None,
        lexicon: Lexicon | None = None,
        params: MatchingParameters | None = None,
    ) -> None:
        self._mappings = mappings if mappings is not None else EMPTY_TABLE
        self.lexicon = lexicon or DEFAULT_LEXICON
        self.params = params or DEFAULT_PARAMETERS

    @classmethod
    def from_files(cls, mappings_path: PathLike | None = None, lexicon_path: PathLike | None = None) -> ResponseSystem:
        mappings = load_mappings(mappings_path) if mappings_path else EMPTY_TABLE
        lexicon = load_lexicon(lexicon_path) if lexicon_path else DEFAULT_LEXICON
        return cls(mappings=mappings, lexicon=lexicon)

    @property
    def mappings(self) -> MappingTable:
        return self._mappings

    def reload_mappings(self, source: MappingTable | PathLike) -> None:
        table = source if isinstance(source, MappingTable) else load_mappings(source)
        self._mappings = table
        logger.info(f"Mapping table replaced ({len(table.mappings)} entries)")

    def analyze(self, text: str) -> AnalysisResult:
        return analyze_text(text, self.lexicon)

    def respond(self, text: str) -> str:
        table = self._mappings
        context = self.analyze(text).context()
        response = select_response(text, context, table, self.params)
        logger.debug(f"Selected reply {response!r} for context {context}")
        return response

    def process(self, text: str) -> dict[str, str]:
        return {"response": self.respond(text)}
