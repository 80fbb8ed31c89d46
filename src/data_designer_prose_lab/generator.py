from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Callable, Iterable

from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_prose_lab.authorship import score_authorship
from data_designer_prose_lab.config import (
    AuthorshipScoreColumnConfig,
    ProseRewriteColumnConfig,
    TextOverlapColumnConfig,
)
from data_designer_prose_lab.overlap import check_overlap
from data_designer_prose_lab.rewriter import rewrite_text
from data_designer_prose_lab.validation import TextTooShortError, require_min_length

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


def row_text(values: Iterable[object]) -> str:
    return " ".join(str(v) for v in values if v is not None)


def process_row(text: str, min_chars: int, analyze: Callable[[str], dict]) -> dict:
    """Validate one row's text and run ``analyze`` on it, or describe why it was rejected."""
    try:
        require_min_length(text, min_chars)
    except TextTooShortError as e:
        logger.warning(f"   skipping row: {e}")
        return {"is_valid": False, "error": str(e)}
    return analyze(text)


def _apply(data: pd.DataFrame, name: str, target_columns: list[str], min_chars: int, analyze: Callable[[str], dict]) -> pd.DataFrame:
    results = [
        process_row(row_text(row.values), min_chars, analyze)
        for _, row in data[target_columns].iterrows()
    ]
    data = data.copy()
    data[name] = results
    return data


class ProseRewriteColumnGenerator(ColumnGeneratorFullColumn[ProseRewriteColumnConfig]):
    """Column generator that paraphrases text with randomized clause and synonym rewrites."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\u270d\ufe0f Rewriting column {self.config.name!r}")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   tone: {self.config.tone}, keep_length: {self.config.keep_length}, seed: {self.config.seed}")

        rng = random.Random(self.config.seed)

        def _rewrite(text: str) -> dict:
            rewritten = rewrite_text(text, tone=self.config.tone, keep_length=self.config.keep_length, rng=rng)
            return {"is_valid": True, "rewritten": rewritten}

        return _apply(data, self.config.name, self.config.target_columns, self.config.min_chars, _rewrite)


class AuthorshipScoreColumnGenerator(ColumnGeneratorFullColumn[AuthorshipScoreColumnConfig]):
    """Column generator that scores text for machine-authorship likelihood."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\U0001f575\ufe0f Scoring column {self.config.name!r} for machine authorship")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   max_score: {self.config.max_score}")

        def _score(text: str) -> dict:
            result = score_authorship(text)
            output: dict = {
                "is_valid": result["score"] < self.config.max_score,
                "ai_score": result["score"],
                "ai_label": result["label"],
            }
            if self.config.include_details:
                output["ai_details"] = result["details"]
            return output

        return _apply(data, self.config.name, self.config.target_columns, self.config.min_chars, _score)


class TextOverlapColumnGenerator(ColumnGeneratorFullColumn[TextOverlapColumnConfig]):
    """Column generator that estimates overlap with the reference corpus and self-repetition."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\U0001f50d Checking column {self.config.name!r} for textual overlap")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   max_percent_overlap: {self.config.max_percent_overlap}")

        def _check(text: str) -> dict:
            result = check_overlap(text)
            output: dict = {
                "is_valid": result["percent_overlap"] <= self.config.max_percent_overlap,
                "percent_overlap": result["percent_overlap"],
                "uniqueness": result.get("uniqueness"),
            }
            if self.config.include_matches:
                output["overlap_matches"] = result["matches"]
            return output

        return _apply(data, self.config.name, self.config.target_columns, self.config.min_chars, _check)
