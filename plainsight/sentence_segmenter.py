from __future__ import annotations

import logging
import re
from typing import List

from .text_utils import word_count


logger = logging.getLogger(__name__)

MAX_SENTENCE_WORDS = 24

# A sentence is a run of non-terminators closed by one or more of ".!?".
# A bare run of terminators ("?!", a leading "...") is kept as its own
# sentence, and a trailing fragment without a terminator is kept whole.
_SENTENCE = re.compile(r"[^.!?]+[.!?]+|[.!?]+|[^.!?]+$")
_CLAUSE_BREAK = re.compile(r"\s*,\s*(?:and|which|that|while|because)\b\s*", re.IGNORECASE)


def split_sentences(text: str) -> List[str]:
    """Split *text* into sentences on terminal punctuation.

    Nothing is dropped: joining the result with single spaces gives back
    *text* modulo whitespace.
    """

    out: List[str] = []
    for m in _SENTENCE.finditer(text):
        s = m.group(0).strip()
        if s:
            out.append(s)
    return out


def split_clauses(sentence: str, max_words: int = MAX_SENTENCE_WORDS) -> List[str]:
    """Break an overlong sentence at ``, and`` / ``, which`` / ``, that`` /
    ``, while`` / ``, because``.

    Sentences of *max_words* words or fewer come back unchanged, as do
    long sentences without a connector.
    """

    if word_count(sentence) <= max_words:
        return [sentence]

    clauses = [c.strip() for c in _CLAUSE_BREAK.split(sentence)]
    clauses = [c for c in clauses if c]
    return clauses or [sentence]


def segment(raw: str) -> List[str]:
    sentences = split_sentences(raw)
    out: List[str] = []
    for s in sentences:
        out.extend(split_clauses(s))
    logger.debug(f"Segmented {len(sentences)} sentences into {len(out)} units")
    return out
