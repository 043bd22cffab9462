from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import List, Literal, Optional, get_args

from .glossary import TermDefinition, annotate, extract_term_defs
from .numeric_guard import guard
from .phrases import simplify_phrases
from .render import MAX_PARAGRAPH_SENTENCES, render_bullets, render_paragraph
from .sentence_segmenter import segment
from .terms import RegexTermDetector, TermDetector


logger = logging.getLogger(__name__)

SimplifyMode = Literal["paragraph", "bullets"]
MODES = get_args(SimplifyMode)


class SimplifyConfigError(ValueError):
    pass


@dataclass(frozen=True)
class SimplifyOptions:
    mode: SimplifyMode
    inline_glossary: bool
    glossary: Mapping[str, str]

    def __post_init__(self) -> None:
        if self.mode not in MODES:
            raise SimplifyConfigError(f"Unknown mode {self.mode!r}; expected one of {', '.join(MODES)}.")
        if not isinstance(self.glossary, Mapping):
            raise SimplifyConfigError(f"glossary must be a mapping, got {type(self.glossary).__name__}.")


@dataclass(frozen=True)
class SimplifyResult:
    simple: str
    bullets: List[str]
    terms: List[TermDefinition]


def _process_sentence(sentence: str, opts: SimplifyOptions, detector: TermDetector) -> str:
    t = simplify_phrases(sentence)
    if opts.inline_glossary:
        t = annotate(t, detector.detect(t), opts.glossary)
    return guard(sentence, t).strip()


def simplify(raw: str, opts: SimplifyOptions, *, detector: Optional[TermDetector] = None) -> SimplifyResult:
    """Condense *raw* into a short paragraph or a bullet digest.

    Every sentence goes through phrase simplification, optional inline
    glossary definitions and the numeric guard before the mode renderer
    picks what to show. ``terms`` lists the glossary entries found in the
    processed text whether or not they were annotated inline.
    """

    if not isinstance(opts, SimplifyOptions):
        raise SimplifyConfigError(f"opts must be SimplifyOptions, got {type(opts).__name__}.")

    if detector is None:
        detector = RegexTermDetector()

    # 1) Sentences + clauses
    sentences = segment(raw)

    # 2) Per-sentence rewrite
    processed = [_process_sentence(s, opts, detector) for s in sentences]

    # 3) Terms shown alongside the output
    terms = extract_term_defs(" ".join(processed), opts.glossary)

    # 4) Render
    if opts.mode == "bullets":
        bullets = render_bullets(processed)
        logger.debug(f"Rendered {len(bullets)} bullets from {len(processed)} sentences")
        return SimplifyResult(simple="", bullets=bullets, terms=terms)

    simple = render_paragraph(processed)
    logger.debug(f"Rendered paragraph from {min(len(processed), MAX_PARAGRAPH_SENTENCES)} of {len(processed)} sentences")
    return SimplifyResult(simple=simple, bullets=[], terms=terms)
