# Sentence segmentation, tokenization and set-overlap helpers shared by the
# rewriter, the authorship scorer and the overlap matcher.

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

_WHITESPACE_RE = re.compile(r"\s+")
_SENTENCE_BOUNDARY_RE = re.compile(r"(?<=[.!?])\s+")
_BRACKET_QUOTE_RE = re.compile(r"[()\[\]{}\"“”‘’«»<>]")
_NON_TOKEN_CHAR_RE = re.compile(r"[^a-z0-9'\- ]")

SHINGLE_SIZE = 6


def split_sentences(text: str) -> list[str]:
    """Split text into trimmed sentences, keeping each terminator attached.

    Whitespace runs are collapsed first, so joining the result with single
    spaces reproduces the normalized input.
    """
    collapsed = _WHITESPACE_RE.sub(" ", text)
    return [s.strip() for s in _SENTENCE_BOUNDARY_RE.split(collapsed) if s.strip()]


def tokenize(text: str) -> list[str]:
    """Lowercase word tokens made of letters, digits, apostrophes and hyphens."""
    lowered = _BRACKET_QUOTE_RE.sub(" ", text.lower())
    return _NON_TOKEN_CHAR_RE.sub(" ", lowered).split()


def shingles(tokens: list[str], size: int = SHINGLE_SIZE) -> set[str]:
    return {" ".join(tokens[i : i + size]) for i in range(len(tokens) - size + 1)}


def jaccard(a: Iterable[str], b: Iterable[str]) -> float:
    set_a, set_b = set(a), set(b)
    inter = len(set_a & set_b)
    union = len(set_a) + len(set_b) - inter
    return inter / union if union else 0.0


def round_half_up(value: float, places: int) -> float:
    """Round like JavaScript's ``toFixed``: exact halves of the binary value go up."""
    return float(Decimal(value).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP))
