# Light paraphrasing: clause reordering, probabilistic synonym substitution,
# tone normalization and crude length shaping.
#
# Every random decision is drawn from an explicit ``random.Random`` so callers
# can seed or script the outcome. There is no module-level random state.

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from functools import reduce
from typing import Callable, Literal

from data_designer_prose_lab.lexicon import CONTRACTION_EXPANSIONS, is_stopword, synonyms_for
from data_designer_prose_lab.text import split_sentences

Tone = Literal["natural", "formal", "casual"]
KeepLength = Literal["shorter", "medium", "longer"]

# ---------------------------------------------------------------------------
# Hyperparameters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RewriteHyperparameters:
    """Probabilities and fixed strings used by the rewrite steps."""

    min_sentence_words: int = 6
    clause_swap_probability: float = 0.25
    synonym_probability: float = 0.35
    casual_opener_probability: float = 0.3
    casual_opener: str = "Honestly, "
    longer_min_chars: int = 12
    longer_probability: float = 0.4
    longer_suffix: str = " In practice, this tends to work well."


DEFAULT_HYPERPARAMETERS = RewriteHyperparameters()

RewriteStep = Callable[[str, random.Random, RewriteHyperparameters], str]

_KEEP_WHITESPACE_SPLIT_RE = re.compile(r"(\s+)")
_NON_CORE_CHAR_RE = re.compile(r"[^a-z'\-]")
_CONTRACTION_RE = re.compile(
    r"\b(" + "|".join(re.escape(c) for c in CONTRACTION_EXPANSIONS) + r")\b",
    re.IGNORECASE,
)
# Needs whitespace on both sides, so neighbouring short words are removed alternately.
_SHORT_WORD_RE = re.compile(r"\s+\w{1,3}\s+", re.ASCII)


def _match_case(original: str, replacement: str) -> str:
    if original[:1].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement


# ---------------------------------------------------------------------------
# Sentence steps
# ---------------------------------------------------------------------------


def swap_clauses(sentence: str, rng: random.Random, hp: RewriteHyperparameters) -> str:
    """Turn ``"A, B"`` into ``"B, A"``; sentences with two or more commas are left alone."""
    if "," not in sentence or rng.random() >= hp.clause_swap_probability:
        return sentence
    parts = sentence.split(",")
    if len(parts) != 2:
        return sentence
    return f"{parts[1].strip()}, {parts[0].strip()}"


def substitute_synonyms(sentence: str, rng: random.Random, hp: RewriteHyperparameters) -> str:
    """Replace known headwords with a random synonym, keeping the leading capital.

    The whole whitespace-delimited word is replaced, attached punctuation included.
    """
    pieces = _KEEP_WHITESPACE_SPLIT_RE.split(sentence)
    for i, piece in enumerate(pieces):
        core = _NON_CORE_CHAR_RE.sub("", piece.lower())
        # Bare numbers have an empty core, so they are never altered.
        if not core or is_stopword(core):
            continue
        choices = synonyms_for(core)
        if choices and rng.random() < hp.synonym_probability:
            pieces[i] = _match_case(piece, rng.choice(choices))
    return "".join(pieces)


def _expand_contraction(match: re.Match) -> str:
    found = match.group(0)
    return _match_case(found, CONTRACTION_EXPANSIONS[found.lower()])


def expand_contractions(sentence: str, rng: random.Random, hp: RewriteHyperparameters) -> str:
    return _CONTRACTION_RE.sub(_expand_contraction, sentence)


def add_casual_opener(sentence: str, rng: random.Random, hp: RewriteHyperparameters) -> str:
    if rng.random() >= hp.casual_opener_probability:
        return sentence
    return hp.casual_opener + sentence[:1].lower() + sentence[1:]


def shorten(sentence: str, rng: random.Random, hp: RewriteHyperparameters) -> str:
    return _SHORT_WORD_RE.sub(" ", sentence).strip()


def lengthen(sentence: str, rng: random.Random, hp: RewriteHyperparameters) -> str:
    if len(sentence) <= hp.longer_min_chars:
        return sentence
    if rng.random() < hp.longer_probability:
        return sentence + hp.longer_suffix
    return sentence


_TONE_STEPS: dict[str, RewriteStep] = {
    "formal": expand_contractions,
    "casual": add_casual_opener,
}

_LENGTH_STEPS: dict[str, RewriteStep] = {
    "shorter": shorten,
    "longer": lengthen,
}


# ---------------------------------------------------------------------------
# Pipeline wiring
# ---------------------------------------------------------------------------


def _pipeline_for(tone: str) -> list[RewriteStep]:
    steps: list[RewriteStep] = [swap_clauses, substitute_synonyms]
    if tone in _TONE_STEPS:
        steps.append(_TONE_STEPS[tone])
    return steps


def is_protected(sentence: str, hp: RewriteHyperparameters = DEFAULT_HYPERPARAMETERS) -> bool:
    """Short sentences are passed through untouched by every step."""
    return len(sentence.split()) < hp.min_sentence_words


def rewrite_sentence(
    sentence: str,
    tone: str,
    rng: random.Random,
    hp: RewriteHyperparameters = DEFAULT_HYPERPARAMETERS,
) -> str:
    if is_protected(sentence, hp):
        return sentence
    return reduce(lambda current, step: step(current, rng, hp), _pipeline_for(tone), sentence)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def rewrite_text(
    text: str,
    tone: Tone = "natural",
    keep_length: KeepLength = "medium",
    rng: random.Random | None = None,
    hyperparameters: RewriteHyperparameters | None = None,
) -> str:
    """Paraphrase text sentence by sentence.

    Args:
        text: The prose to rewrite.
        tone: ``"formal"`` expands contractions, ``"casual"`` may add a conversational
            opener, anything else leaves tone alone.
        keep_length: ``"shorter"`` drops short words, ``"longer"`` may append a stock
            follow-up sentence, anything else leaves length alone.
        rng: Random source for every probabilistic decision. A fresh generator is
            created when omitted, so separate calls never share state.
        hyperparameters: Optional tuning overrides.

    Returns:
        The rewritten sentences joined by single spaces.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    if rng is None:
        rng = random.Random()

    sentences = split_sentences(text)
    rewritten = [rewrite_sentence(s, tone, rng, hp) for s in sentences]

    length_step = _LENGTH_STEPS.get(keep_length)
    if length_step is not None:
        rewritten = [
            new if is_protected(old, hp) else length_step(new, rng, hp)
            for old, new in zip(sentences, rewritten)
        ]
    return " ".join(rewritten)
