"""PlainSight (offline text simplifier).

This package provides:
- Sentence and clause segmentation
- Plain-language phrase replacement
- Heuristic term detection + inline glossary definitions
- A numeric guard that never lets a rewrite drop a number
- Paragraph or ranked-bullet output
"""
