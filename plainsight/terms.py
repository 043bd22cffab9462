from __future__ import annotations

import re
from typing import List, Protocol


_CAPITALIZED_RUN = re.compile(r"\b([A-Z][a-z]+(?:\s+[A-Z][a-z]+)+)\b")
_PAREN_ABBREV = re.compile(r"\b([A-Za-z][A-Za-z0-9\- ]+)\s*\(([A-Za-z0-9-]+)\)")


class TermDetector(Protocol):
    def detect(self, sentence: str) -> List[str]:
        ...


class RegexTermDetector:
    """Purely syntactic term finder.

    Two rules, unioned:

    - runs of two or more Capitalized words ("Negative Feedback Loop")
    - the text in front of a parenthesized code ("Effect Size (ES)")

    Nothing is checked against a vocabulary, so false positives such as a
    capitalized sentence opener followed by a name are expected.
    """

    def detect(self, sentence: str) -> List[str]:
        found: List[str] = []
        for m in _CAPITALIZED_RUN.finditer(sentence):
            found.append(m.group(1))
        for m in _PAREN_ABBREV.finditer(sentence):
            found.append(m.group(1).strip())
        # dedupe, first-seen order
        return list(dict.fromkeys(t for t in found if t))


def detect_terms(sentence: str) -> List[str]:
    return RegexTermDetector().detect(sentence)
