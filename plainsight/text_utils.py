from __future__ import annotations

import re
from typing import Iterable, List


STOPWORDS = frozenset({"the", "a", "an", "of", "for", "to", "in", "on", "and", "or", "with"})


_WS = re.compile(r"\s+")
_WORD = re.compile(r"\b[a-z0-9']+\b")


def collapse_whitespace(text: str) -> str:
    return _WS.sub(" ", text).strip()


def word_count(text: str) -> int:
    """Number of whitespace-delimited tokens in *text*."""

    return len(text.split())


def tokenize_words(text: str) -> List[str]:
    return _WORD.findall(text.lower())


def remove_stopwords(words: Iterable[str], stopwords: frozenset[str] | None = None) -> List[str]:
    sw = STOPWORDS if stopwords is None else stopwords
    return [w for w in words if w not in sw]


def whole_word_pattern(phrase: str, flags: int = 0) -> re.Pattern[str]:
    """Compile *phrase* so it only matches between word boundaries.

    Edges that are not word characters (``COVID-19``, ``p-value.``) get a
    lookaround instead of ``\\b`` so they still match at the end of a token.
    """

    body = re.escape(phrase)
    left = r"\b" if phrase[:1].isalnum() or phrase[:1] == "_" else r"(?<!\w)"
    right = r"\b" if phrase[-1:].isalnum() or phrase[-1:] == "_" else r"(?!\w)"
    return re.compile(left + body + right, flags)
