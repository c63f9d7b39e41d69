from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_thai_reply.config import ThaiReplyColumnConfig
from data_designer_thai_reply.matcher import select_response
from data_designer_thai_reply.system import ResponseSystem

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


class ThaiReplyColumnGenerator(ColumnGeneratorFullColumn[ThaiReplyColumnConfig]):
    """Column generator that answers Thai text with replies from a mapping table."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\U0001f4ac Selecting replies for column {self.config.name!r}")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   mappings: {self.config.mappings_path}")

        system = ResponseSystem.from_files(self.config.mappings_path, self.config.lexicon_path)

        results = []
        for _, row in data[self.config.target_columns].iterrows():
            text = " ".join(str(v) for v in row.values if v is not None)
            analysis = system.analyze(text)
            context = analysis.context()
            output: dict = {
                "response": select_response(text, context, system.mappings, system.params),
                "sentiment": context.sentiment,
                "politeness": context.politeness,
                "is_question": context.is_question,
            }
            if self.config.include_analysis:
                output["analysis"] = analysis.to_payload()
            results.append(output)

        data = data.copy()
        data[self.config.name] = results
        return data
