from __future__ import annotations

from typing import Literal

from pydantic import Field

from data_designer.config.column_configs import SingleColumnConfig


class ThaiReplyColumnConfig(SingleColumnConfig):
    """Pick a canned reply for Thai text using rule-based analysis and a mapping table.

    Segments each row's text with a fixed word table, scores sentiment, politeness
    and question markers, and selects the best-matching reply from a JSON mapping
    table (or a context-appropriate default when nothing matches).

    Attributes:
        target_columns: Columns whose text content will be concatenated and analyzed.
        mappings_path: JSON file shaped ``{"mappings": [...]}``. A missing or malformed
            file behaves like an empty table.
        lexicon_path: Optional JSON file overriding the built-in word lists.
        include_analysis: Include the full analysis record in the output.
    """

    target_columns: list[str]
    mappings_path: str | None = Field(default=None, description="Path to the reply mapping table JSON")
    lexicon_path: str | None = Field(default=None, description="Path to a lexicon overrides JSON")
    include_analysis: bool = Field(default=False, description="Include the full analysis record in output")
    column_type: Literal["thai-reply"] = "thai-reply"

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f4ac"

    @property
    def required_columns(self) -> list[str]:
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []
