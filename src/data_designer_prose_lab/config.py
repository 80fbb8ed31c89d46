from __future__ import annotations

from typing import Literal

from pydantic import Field

from data_designer.config.column_configs import SingleColumnConfig

from data_designer_prose_lab.validation import MIN_AUTHORSHIP_CHARS, MIN_OVERLAP_CHARS, MIN_REWRITE_CHARS


class ProseRewriteColumnConfig(SingleColumnConfig):
    """Paraphrase text columns with light clause reordering and synonym substitution.

    Attributes:
        target_columns: Columns whose text content will be concatenated and rewritten.
        tone: ``formal`` expands contractions, ``casual`` sometimes adds a conversational
            opener, ``natural`` leaves tone alone.
        keep_length: ``shorter`` drops short words, ``longer`` sometimes appends a stock
            follow-up sentence, ``medium`` leaves length alone.
        seed: Seed for the random source shared by all rows of one generation run.
            Unseeded runs differ every time.
        min_chars: Rows whose trimmed text is shorter than this are rejected.
    """

    target_columns: list[str]
    tone: Literal["natural", "formal", "casual"] = "natural"
    keep_length: Literal["shorter", "medium", "longer"] = "medium"
    seed: int | None = Field(default=None, description="Seed for reproducible rewrites")
    min_chars: int = Field(default=MIN_REWRITE_CHARS, ge=1, description="Minimum trimmed text length")
    column_type: Literal["prose-rewrite"] = "prose-rewrite"

    @staticmethod
    def get_column_emoji() -> str:
        return "\u270d\ufe0f"

    @property
    def required_columns(self) -> list[str]:
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []


class AuthorshipScoreColumnConfig(SingleColumnConfig):
    """Score text columns for machine-authorship likelihood from stylometric heuristics.

    Produces a 0-1 score, a label ("Likely AI", "Mixed", "Likely Human") and the raw
    sentence-length, lexical-diversity, contraction and punctuation statistics.

    Attributes:
        target_columns: Columns whose text content will be concatenated and scored.
        max_score: Scores below this value are ``is_valid=True``. Defaults to 0.65
            (the "Likely AI" threshold).
        include_details: Include the raw statistics in output.
        min_chars: Rows whose trimmed text is shorter than this are rejected.
    """

    target_columns: list[str]
    max_score: float = Field(default=0.65, ge=0, le=1, description="Scores below this are is_valid=True")
    include_details: bool = Field(default=True, description="Include raw feature statistics in output")
    min_chars: int = Field(default=MIN_AUTHORSHIP_CHARS, ge=1, description="Minimum trimmed text length")
    column_type: Literal["authorship-score"] = "authorship-score"

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f575\ufe0f"

    @property
    def required_columns(self) -> list[str]:
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []


class TextOverlapColumnConfig(SingleColumnConfig):
    """Estimate textual overlap against a built-in reference corpus and within the text itself.

    Attributes:
        target_columns: Columns whose text content will be concatenated and checked.
        max_percent_overlap: Overlap at or below this percentage is ``is_valid=True``.
        include_matches: Include the individual corpus and self-repetition matches.
        min_chars: Rows whose trimmed text is shorter than this are rejected.
    """

    target_columns: list[str]
    max_percent_overlap: float = Field(default=25.0, ge=0, le=100, description="Overlap at or below this is is_valid=True")
    include_matches: bool = Field(default=True, description="Include match records in output")
    min_chars: int = Field(default=MIN_OVERLAP_CHARS, ge=1, description="Minimum trimmed text length")
    column_type: Literal["text-overlap"] = "text-overlap"

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f50d"

    @property
    def required_columns(self) -> list[str]:
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []
