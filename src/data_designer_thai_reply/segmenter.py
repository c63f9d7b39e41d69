# SPDX-License-Identifier: Apache-2.0
"""Greedy rule-table word segmentation.

The scanner grows a buffer one character at a time and emits it as soon as
the whole buffer equals a rule word. There is no backtracking and no
longest-match search, so ``เพราะว่า`` comes out as ``เพราะ`` + ``ว่า``.
Whitespace is appended to the buffer like any other character and then acts
as a delimiter for text the rule table does not cover.
"""

from __future__ import annotations

from data_designer_thai_reply.lexicon import DEFAULT_LEXICON, Lexicon


def segment_words(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> list[str]:
    rule_words = lexicon.rule_words
    words: list[str] = []
    buffer = ""

    for char in text:
        buffer += char

        if buffer in rule_words:
            words.append(buffer)
            buffer = ""
            continue

        if char.isspace() and buffer.strip():
            words.append(buffer.strip())
            buffer = ""

    if buffer.strip():
        words.append(buffer.strip())

    return [w for w in words if not w.isspace()]
