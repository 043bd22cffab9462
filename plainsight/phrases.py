from __future__ import annotations

import re
from typing import List, Tuple


# Applied in this order. When two entries can match overlapping text the
# earlier one wins, so multi-word phrases come before the single words they
# contain.
PHRASE_MAP: Tuple[Tuple[str, str], ...] = (
    ("in order to", "to"),
    ("prior to", "before"),
    ("in addition", "also"),
    ("a number of", "several"),
    ("due to the fact that", "because"),
    ("utilized", "used"),
    ("utilizes", "uses"),
    ("utilizing", "using"),
    ("utilize", "use"),
    ("facilitated", "helped"),
    ("facilitates", "helps"),
    ("facilitate", "help"),
    ("subsequently", "then"),
    ("demonstrated", "showed"),
    ("demonstrates", "shows"),
    ("demonstrate", "show"),
    ("indicates", "shows"),
    ("endeavor", "try"),
    ("approximately", "about"),
    ("commence", "start"),
)


def _compile(pairs: Tuple[Tuple[str, str], ...]) -> List[Tuple[re.Pattern[str], str]]:
    return [(re.compile(rf"\b{re.escape(k)}\b"), f" {v} ") for k, v in pairs]


_COMPILED = _compile(PHRASE_MAP)


def simplify_phrases(sentence: str) -> str:
    """Swap verbose phrases for plain ones.

    Matching runs on a lower-cased copy, so a rewritten sentence loses its
    mid-sentence capitals; only the first character is upper-cased again.
    A sentence with nothing to replace is returned as given.
    """

    out = sentence.lower()
    changed = False
    for pat, repl in _COMPILED:
        out, n = pat.subn(repl, out)
        changed = changed or n > 0

    if not changed:
        return sentence

    out = out.strip()
    return out[:1].upper() + out[1:]
