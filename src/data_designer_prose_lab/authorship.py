# Heuristic machine-authorship score built from five stylometric features.
#
# Not a trained classifier: the weights and thresholds below are fixed and the
# result is fully deterministic for a given text.

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from data_designer_prose_lab.text import round_half_up, split_sentences, tokenize

# ---------------------------------------------------------------------------
# Hyperparameters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AuthorshipHyperparameters:
    """Normalization spans, feature weights and label thresholds."""

    length_offset: float = 18.0
    length_span: float = 22.0
    std_span: float = 12.0
    ttr_span: float = 0.7
    contraction_span: float = 3.0
    punct_span: float = 5.0

    length_weight: float = 0.30
    burstiness_weight: float = 0.25
    ttr_weight: float = 0.20
    contraction_weight: float = 0.10
    punct_weight: float = 0.15

    likely_ai_min: float = 0.65
    likely_human_max: float = 0.45


DEFAULT_HYPERPARAMETERS = AuthorshipHyperparameters()

LIKELY_AI = "Likely AI"
LIKELY_HUMAN = "Likely Human"
MIXED = "Mixed"

_CONTRACTION_RE = re.compile(r"\b\w+'(?:s|re|ve|ll|d|t)\b", re.IGNORECASE | re.ASCII)
_PUNCT_VARIETY_RE = re.compile(r"[,:;\-—()]")


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, value))


# ---------------------------------------------------------------------------
# Features
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AuthorshipFeatures:
    """Raw text statistics and the [0, 1] factors derived from them.

    Every factor grows toward 1 as the text looks more machine-written.
    """

    avg_sentence_len: float
    std_sentence_len: float
    ttr: float
    contractions_per_sentence: float
    punct_variety: int

    length_factor: float
    burstiness_factor: float
    ttr_factor: float
    contraction_factor: float
    punct_var_factor: float

    def weighted_score(self, hp: AuthorshipHyperparameters = DEFAULT_HYPERPARAMETERS) -> float:
        return (
            hp.length_weight * self.length_factor
            + hp.burstiness_weight * self.burstiness_factor
            + hp.ttr_weight * self.ttr_factor
            + hp.contraction_weight * self.contraction_factor
            + hp.punct_weight * self.punct_var_factor
        )

    def details(self) -> dict[str, float]:
        return {
            "avg_sentence_len": round_half_up(self.avg_sentence_len, 1),
            "std_sentence_len": round_half_up(self.std_sentence_len, 1),
            "ttr": round_half_up(self.ttr, 3),
            "contractions_per_sentence": round_half_up(self.contractions_per_sentence, 2),
            "punct_variety": self.punct_variety,
        }


def extract_features(text: str, hyperparameters: AuthorshipHyperparameters | None = None) -> AuthorshipFeatures:
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    sentences = split_sentences(text)
    tokens = tokenize(text)

    lengths = [n for n in (len(tokenize(s)) for s in sentences) if n > 0]
    avg = sum(lengths) / (len(lengths) or 1)
    variance = sum((n - avg) ** 2 for n in lengths) / (len(lengths) or 1)
    std = math.sqrt(variance)

    ttr = len(set(tokens)) / (len(tokens) or 1)
    contractions = len(_CONTRACTION_RE.findall(text)) / (len(sentences) or 1)
    punct_types = len(set(_PUNCT_VARIETY_RE.findall(text)))

    return AuthorshipFeatures(
        avg_sentence_len=avg,
        std_sentence_len=std,
        ttr=ttr,
        contractions_per_sentence=contractions,
        punct_variety=punct_types,
        length_factor=_clamp((avg - hp.length_offset) / hp.length_span),
        burstiness_factor=1 - _clamp(std / hp.std_span),
        ttr_factor=1 - _clamp(ttr / hp.ttr_span),
        contraction_factor=1 - _clamp(contractions / hp.contraction_span),
        punct_var_factor=1 - _clamp(punct_types / hp.punct_span),
    )


def _label(score: float, hp: AuthorshipHyperparameters) -> str:
    if score >= hp.likely_ai_min:
        return LIKELY_AI
    if score <= hp.likely_human_max:
        return LIKELY_HUMAN
    return MIXED


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def score_authorship(text: str, hyperparameters: AuthorshipHyperparameters | None = None) -> dict:
    """Estimate how machine-written a text looks.

    Args:
        text: The prose to score. Empty text is scored from zero-valued statistics.
        hyperparameters: Optional tuning overrides.

    Returns:
        Dict with keys: score (0-1, three decimals), label ("Likely AI",
        "Mixed" or "Likely Human") and details (the rounded raw statistics).
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    features = extract_features(text, hp)
    score = features.weighted_score(hp)
    return {
        "score": round_half_up(score, 3),
        "label": _label(score, hp),
        "details": features.details(),
    }
