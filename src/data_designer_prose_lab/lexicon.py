# Static word lists used by the rewriter. Everything here is immutable and
# built once at import time.

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

STOPWORDS = frozenset({
    "the", "is", "are", "am", "a", "an", "and", "or", "but", "as", "of", "to",
    "in", "on", "for", "with", "by", "at", "from", "that", "this", "it", "be",
    "was", "were", "has", "have", "had", "not", "no", "yes", "if", "then", "so",
    "than", "too", "very", "can", "could", "should", "would", "will", "shall",
    "do", "did", "does", "into", "about", "over", "under", "out", "up", "down",
})

# Conservative replacements only; numbers, citations and titles are never headwords.
SYNONYMS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "important": ("crucial", "essential", "vital", "key"),
    "big": ("major", "significant", "large"),
    "small": ("minor", "modest", "compact"),
    "make": ("create", "build", "craft", "produce"),
    "get": ("receive", "obtain", "secure", "gain"),
    "use": ("utilize", "apply", "employ"),
    "help": ("assist", "support", "aid"),
    "show": ("demonstrate", "reveal", "display"),
    "improve": ("enhance", "boost", "refine"),
    "increase": ("raise", "elevate", "amplify"),
    "reduce": ("lower", "decrease", "cut"),
    "because": ("since", "as"),
    "however": ("but", "yet", "still"),
    "also": ("additionally", "moreover", "furthermore"),
    "therefore": ("thus", "hence", "so"),
    "many": ("numerous", "several"),
    "few": ("some", "limited"),
    "people": ("individuals", "users", "customers"),
    "problem": ("issue", "challenge", "concern"),
    "solution": ("approach", "remedy", "fix"),
    "feature": ("capability", "function", "option"),
    "good": ("solid", "strong", "reliable", "great"),
    "bad": ("weak", "poor", "unreliable"),
    "easy": ("simple", "straightforward"),
    "hard": ("difficult", "challenging", "tough"),
    "fast": ("quick", "rapid", "speedy"),
    "slow": ("gradual", "sluggish"),
    "work": ("operate", "function"),
    "buy": ("purchase", "acquire"),
    "sell": ("offer", "provide"),
})

# Keys are lowercase; the formal tone matches them case-insensitively.
CONTRACTION_EXPANSIONS: Mapping[str, str] = MappingProxyType({
    "can't": "cannot",
    "won't": "will not",
    "don't": "do not",
    "isn't": "is not",
    "aren't": "are not",
    "i'm": "I am",
    "you're": "you are",
    "we're": "we are",
    "they're": "they are",
    "it's": "it is",
})


def is_stopword(word: str) -> bool:
    return word.lower() in STOPWORDS


def synonyms_for(word: str) -> tuple[str, ...]:
    return SYNONYMS.get(word.lower(), ())
