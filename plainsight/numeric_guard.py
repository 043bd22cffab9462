from __future__ import annotations

import logging
import re
from typing import List


logger = logging.getLogger(__name__)

# 42, 3,200, 98.6%, 5kg, 45 participants
_NUMERIC = re.compile(r"\d[\d,]*(?:\.\d+)?\s?(?:%|[a-zA-Z]+)?")


def find_numeric_tokens(text: str) -> List[str]:
    return _NUMERIC.findall(text)


def guard(original: str, rewritten: str) -> str:
    """Return *rewritten* only if it still carries every numeric token of
    *original* verbatim; otherwise fall back to *original* as a whole.
    """

    for tok in find_numeric_tokens(original):
        if tok not in rewritten:
            logger.debug(f"Numeric token {tok!r} lost in rewrite, keeping original sentence")
            return original
    return rewritten
