# SPDX-License-Identifier: Apache-2.0
"""Prose Lab plugin for NeMo Data Designer.

Adds three heuristic text-analysis column types, all rule-based with no model
weights and no API calls:

- ``prose-rewrite``: paraphrases text with clause reordering, synonym
  substitution, tone and length shaping.
- ``authorship-score``: scores how machine-written text looks from sentence
  length, burstiness, lexical diversity, contractions and punctuation variety.
- ``text-overlap``: estimates overlap with a small reference corpus and
  between the text's own sentences using 6-word shingles.

Usage::

    from data_designer_prose_lab import AuthorshipScoreColumnConfig

    builder.add_column(AuthorshipScoreColumnConfig(
        name="authorship",
        target_columns=["article"],
        max_score=0.65,
    ))
"""

from data_designer_prose_lab.authorship import AuthorshipHyperparameters, score_authorship
from data_designer_prose_lab.config import (
    AuthorshipScoreColumnConfig,
    ProseRewriteColumnConfig,
    TextOverlapColumnConfig,
)
from data_designer_prose_lab.overlap import OverlapHyperparameters, check_overlap
from data_designer_prose_lab.rewriter import RewriteHyperparameters, rewrite_text
from data_designer_prose_lab.text import split_sentences, tokenize

__all__ = [
    "ProseRewriteColumnConfig",
    "AuthorshipScoreColumnConfig",
    "TextOverlapColumnConfig",
    "rewrite_text",
    "score_authorship",
    "check_overlap",
    "split_sentences",
    "tokenize",
    "RewriteHyperparameters",
    "AuthorshipHyperparameters",
    "OverlapHyperparameters",
]
