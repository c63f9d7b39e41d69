# SPDX-License-Identifier: Apache-2.0
"""Loading of the mapping table and lexicon overrides from JSON files.

Both loaders fail soft: a missing, unreadable, or malformed source is logged
and replaced by an empty mapping table or the built-in lexicon, so analysis
and reply selection never see a configuration error.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

from data_designer_thai_reply.lexicon import DEFAULT_LEXICON, Lexicon
from data_designer_thai_reply.matcher import EMPTY_TABLE, MappingTable

logger = logging.getLogger(__name__)

PathLike = str | Path


class LexiconOverrides(BaseModel):
    """Shape of a lexicon file. Any list left out keeps its built-in value."""

    model_config = ConfigDict(extra="ignore")

    prefixes: list[str] | None = None
    suffixes: list[str] | None = None
    conjunctions: list[str] | None = None
    questions: list[str] | None = None
    positive: list[str] | None = None
    negative: list[str] | None = None
    polite: list[str] | None = None

    def apply(self, base: Lexicon) -> Lexicon:
        changes = {
            name: tuple(words)
            for name, words in self.model_dump(exclude_none=True).items()
        }
        return dataclasses.replace(base, **changes)


def _read_json(path: PathLike) -> object | None:
    try:
        with open(path, encoding="utf-8") as fh:
            return json.load(fh)
    except FileNotFoundError:
        logger.warning(f"Configuration file {str(path)!r} not found")
    except (OSError, ValueError) as exc:
        logger.warning(f"Could not read configuration file {str(path)!r}: {exc}")
    return None


def parse_mappings(data: object) -> MappingTable:
    try:
        return MappingTable.model_validate(data)
    except ValidationError as exc:
        logger.warning(f"Ignoring malformed mapping table ({exc.error_count()} errors)")
        return EMPTY_TABLE


def load_mappings(path: PathLike) -> MappingTable:
    """Load ``{"mappings": [...]}`` from ``path``; empty table on any failure."""
    data = _read_json(path)
    if data is None:
        return EMPTY_TABLE
    table = parse_mappings(data)
    logger.info(f"Loaded {len(table.mappings)} mappings from {str(path)!r}")
    return table


def load_lexicon(path: PathLike, base: Lexicon = DEFAULT_LEXICON) -> Lexicon:
    """Load lexicon overrides from ``path`` on top of ``base``."""
    data = _read_json(path)
    if data is None:
        return base
    try:
        overrides = LexiconOverrides.model_validate(data)
    except ValidationError as exc:
        logger.warning(f"Ignoring malformed lexicon file {str(path)!r} ({exc.error_count()} errors)")
        return base

    lexicon = overrides.apply(base)
    shared = lexicon.shared_rule_words()
    if shared:
        logger.warning(f"Rule words listed in more than one category: {shared}")
    return lexicon
