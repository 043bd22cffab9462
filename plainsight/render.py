from __future__ import annotations

import re
from typing import List, Sequence

from .text_utils import collapse_whitespace, remove_stopwords, tokenize_words, word_count


MAX_BULLETS = 6
MAX_PARAGRAPH_SENTENCES = 5
LENGTH_CAP = 40

_VERBS = re.compile(r"\b(?:is|are|was|were|has|have|does|do|did|shows?|finds?|improves?)\b", re.IGNORECASE)


def score_sentence(sentence: str) -> int:
    """Informativeness heuristic: verbs and content words up, length down."""

    length = min(word_count(sentence), LENGTH_CAP)
    verbs = len(_VERBS.findall(sentence))
    content = len(remove_stopwords(tokenize_words(sentence)))
    return verbs * 10 + content * 2 + (LENGTH_CAP - length)


def render_bullets(sentences: Sequence[str], max_bullets: int = MAX_BULLETS) -> List[str]:
    # sorted() is stable, so equal scores keep their original order
    ranked = sorted(sentences, key=score_sentence, reverse=True)[:max_bullets]
    bullets = (collapse_whitespace(s) for s in ranked)
    return list(dict.fromkeys(b for b in bullets if b))


def render_paragraph(sentences: Sequence[str], max_sentences: int = MAX_PARAGRAPH_SENTENCES) -> str:
    return collapse_whitespace(" ".join(sentences[:max_sentences]))
