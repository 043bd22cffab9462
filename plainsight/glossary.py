from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Sequence, Tuple

from .text_utils import whole_word_pattern


logger = logging.getLogger(__name__)


# Example configuration only. Callers pass it in explicitly; the pipeline
# never falls back to it.
DEFAULT_GLOSSARY: Dict[str, str] = {
    "homeostasis": "the body's balance system",
    "negative feedback": "a process that reverses a change",
    "confidence interval": "a range that likely contains the true value",
    "variance": "how spread out the data is",
    "hypothesis": "a testable idea or claim",
    "randomized trial": "study design assigning subjects by chance",
    "effect size": "how big the change or difference is",
    "algorithm": "a step-by-step method to solve a problem",
    "complexity": "how resources (time/memory) grow with input size",
}


class GlossaryError(ValueError):
    pass


@dataclass(frozen=True)
class TermDefinition:
    term: str
    definition: str


def parse_glossary(text: str, source: str = "<string>") -> Dict[str, str]:
    """Parse a JSON object of ``{"term": "definition"}``.

    Keys are stripped and lower-cased to match how the annotator looks
    terms up; empty keys are dropped.
    """

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise GlossaryError(f"Glossary {source} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise GlossaryError(f"Glossary {source} must contain a JSON object, got {type(data).__name__}.")

    out: Dict[str, str] = {}
    for k, v in data.items():
        if not isinstance(v, str):
            raise GlossaryError(f"Definition for {k!r} in {source} must be a string.")
        key = k.strip().lower()
        if key:
            out[key] = v.strip()
    return out


def load_glossary(path: str | Path) -> Dict[str, str]:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise GlossaryError(f"Cannot read glossary file {p}: {e}") from e

    out = parse_glossary(text, source=str(p))
    logger.info(f"Loaded {len(out)} glossary entries from {p}")
    return out


def annotate(sentence: str, terms: Sequence[str], glossary: Mapping[str, str]) -> str:
    """Insert `` [definition]`` after the first occurrence of each known term.

    Longer terms are placed first. A shorter term that sits inside a longer
    annotated one ("Interval" in "Confidence Interval") moves on to its next
    free occurrence, or is skipped when there is none.
    """

    # each surface form once
    hits = [(t, glossary[t.lower()]) for t in dict.fromkeys(terms) if t.lower() in glossary]
    if not hits:
        return sentence

    claimed: List[Tuple[int, int]] = []
    inserts: List[Tuple[int, str]] = []
    for term, definition in sorted(hits, key=lambda h: len(h[0]), reverse=True):
        for m in whole_word_pattern(term).finditer(sentence):
            start, end = m.span()
            if any(start < e and s < end for s, e in claimed):
                continue
            claimed.append((start, end))
            inserts.append((end, f" [{definition}]"))
            logger.debug(f"Annotated {term!r} at offset {start}")
            break

    out = sentence
    for pos, text in sorted(inserts, reverse=True):
        out = out[:pos] + text + out[pos:]
    return out


def extract_term_defs(text: str, glossary: Mapping[str, str]) -> List[TermDefinition]:
    """Glossary entries whose term appears anywhere in *text*, in glossary order."""

    out: List[TermDefinition] = []
    for term, definition in glossary.items():
        if term and whole_word_pattern(term, re.IGNORECASE).search(text):
            out.append(TermDefinition(term=term, definition=definition))
    return out
