from __future__ import annotations

MIN_REWRITE_CHARS = 20
MIN_AUTHORSHIP_CHARS = 20
MIN_OVERLAP_CHARS = 50


class TextTooShortError(ValueError):
    """Raised at the column boundary when a row's text is below the minimum length."""

    def __init__(self, min_chars: int) -> None:
        super().__init__(f"Please provide at least {min_chars} characters.")
        self.min_chars = min_chars


def require_min_length(text: str | None, min_chars: int) -> str:
    """Return ``text`` unchanged if its trimmed length reaches ``min_chars``."""
    if not text or len(text.strip()) < min_chars:
        raise TextTooShortError(min_chars)
    return text
