# Rough textual-overlap estimate: 6-gram shingle matches against a small
# built-in reference corpus plus near-duplicate sentences within the input.
#
# The percentage is a deliberately crude scale (each match adds at most 25
# points, capped at 100), not a calibrated measurement.

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import Iterable

from data_designer_prose_lab.text import SHINGLE_SIZE, jaccard, round_half_up, shingles, split_sentences, tokenize

REFERENCE_CORPUS: tuple[str, ...] = (
    "Artificial intelligence is reshaping industries with automation and smarter decision‑making.",
    "Effective writing balances clarity, rhythm, and specificity to keep readers engaged.",
    "Search engines prioritize useful, original content with strong user signals and authority.",
    "Students can build credit by paying on time and keeping utilization low over months.",
    "Good design reduces friction, directs attention, and makes choices feel obvious.",
)

LOCAL_CORPUS_SOURCE = "Local Corpus"
SELF_REPETITION_SOURCE = "Self repetition"

# ---------------------------------------------------------------------------
# Hyperparameters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class OverlapHyperparameters:
    """Shingle size, sample truncation and the overlap scaling constants."""

    shingle_size: int = SHINGLE_SIZE
    sample_chars: int = 120
    self_repetition_min_tokens: int = 6
    self_repetition_threshold: float = 0.7
    match_divisor: float = 4.0
    match_cap: float = 25.0
    overlap_cap: float = 100.0


DEFAULT_HYPERPARAMETERS = OverlapHyperparameters()


@dataclass(frozen=True)
class MatchRecord:
    source: str
    sample: str
    similarity: float

    def to_payload(self) -> dict[str, object]:
        return {
            "source": self.source,
            "sample": self.sample,
            "similarity": self.similarity,
        }


# ---------------------------------------------------------------------------
# Matchers
# ---------------------------------------------------------------------------


def _corpus_matches(text_shingles: set[str], corpus: Iterable[str], hp: OverlapHyperparameters) -> list[MatchRecord]:
    matches = []
    for entry in corpus:
        entry_shingles = shingles(tokenize(entry), hp.shingle_size)
        if text_shingles & entry_shingles:
            similarity = jaccard(text_shingles, entry_shingles)
            matches.append(MatchRecord(LOCAL_CORPUS_SOURCE, entry[: hp.sample_chars] + "...", round_half_up(similarity * 100, 1)))
    return matches


def _self_repetition_matches(sentences: list[str], hp: OverlapHyperparameters) -> list[MatchRecord]:
    sentence_tokens = [tokenize(s) for s in sentences]
    matches = []
    for i, j in combinations(range(len(sentences)), 2):
        a, b = sentence_tokens[i], sentence_tokens[j]
        if len(a) <= hp.self_repetition_min_tokens or len(b) <= hp.self_repetition_min_tokens:
            continue
        similarity = jaccard(a, b)
        if similarity > hp.self_repetition_threshold:
            sample = f"“{sentences[j][: hp.sample_chars]}...”"
            matches.append(MatchRecord(SELF_REPETITION_SOURCE, sample, round_half_up(similarity * 100, 1)))
    return matches


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def check_overlap(
    text: str,
    corpus: Iterable[str] = REFERENCE_CORPUS,
    hyperparameters: OverlapHyperparameters | None = None,
) -> dict:
    """Estimate how much of a text overlaps known or repeated material.

    Args:
        text: The prose to check.
        corpus: Reference sentences to compare against. Defaults to the built-in corpus.
        hyperparameters: Optional tuning overrides.

    Returns:
        Dict with keys: percent_overlap, uniqueness and matches (list of match
        payloads). Texts too short to form a single shingle return only
        percent_overlap=0 and an empty match list.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    text_shingles = shingles(tokenize(text), hp.shingle_size)
    if not text_shingles:
        return {"percent_overlap": 0, "matches": []}

    matches = _corpus_matches(text_shingles, corpus, hp) + _self_repetition_matches(split_sentences(text), hp)
    overlap = min(hp.overlap_cap, sum((min(hp.match_cap, m.similarity / hp.match_divisor) for m in matches), 0.0))
    return {
        "percent_overlap": round_half_up(overlap, 1),
        "uniqueness": round_half_up(max(0.0, hp.overlap_cap - overlap), 1),
        "matches": [m.to_payload() for m in matches],
    }
