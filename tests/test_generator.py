import pandas as pd
import pytest
from pydantic import ValidationError

from data_designer_prose_lab.config import (
    AuthorshipScoreColumnConfig,
    ProseRewriteColumnConfig,
    TextOverlapColumnConfig,
)
from data_designer_prose_lab.generator import (
    AuthorshipScoreColumnGenerator,
    ProseRewriteColumnGenerator,
    TextOverlapColumnGenerator,
    process_row,
    row_text,
)


class TestColumnConfigs:
    def test_rewrite_defaults(self):
        config = ProseRewriteColumnConfig(name="rewrite", target_columns=["article"])
        assert config.tone == "natural"
        assert config.keep_length == "medium"
        assert config.seed is None
        assert config.min_chars == 20
        assert config.column_type == "prose-rewrite"
        assert config.required_columns == ["article"]
        assert config.side_effect_columns == []

    def test_rewrite_rejects_unknown_tone(self):
        with pytest.raises(ValidationError):
            ProseRewriteColumnConfig(name="rewrite", target_columns=["article"], tone="pirate")

    def test_authorship_defaults(self):
        config = AuthorshipScoreColumnConfig(name="authorship", target_columns=["a", "b"])
        assert config.max_score == 0.65
        assert config.include_details is True
        assert config.min_chars == 20
        assert config.required_columns == ["a", "b"]

    def test_authorship_score_bounds(self):
        with pytest.raises(ValidationError):
            AuthorshipScoreColumnConfig(name="authorship", target_columns=["a"], max_score=1.5)

    def test_overlap_defaults(self):
        config = TextOverlapColumnConfig(name="overlap", target_columns=["article"])
        assert config.max_percent_overlap == 25.0
        assert config.include_matches is True
        assert config.min_chars == 50
        assert config.column_type == "text-overlap"

    def test_overlap_min_chars_must_be_positive(self):
        with pytest.raises(ValidationError):
            TextOverlapColumnConfig(name="overlap", target_columns=["article"], min_chars=0)


class TestRowHandling:
    def test_row_text_skips_missing_values(self):
        assert row_text(["Title here.", None, 42]) == "Title here. 42"

    def test_process_row_runs_analysis(self):
        result = process_row("This text is comfortably long enough.", 20, lambda text: {"is_valid": True, "n": len(text)})
        assert result == {"is_valid": True, "n": 37}

    def test_process_row_rejects_short_text(self):
        calls = []
        result = process_row("too short", 20, lambda text: calls.append(text) or {})
        assert result == {"is_valid": False, "error": "Please provide at least 20 characters."}
        assert calls == []


HUMAN_TEXT = (
    "AI is important. It can help people solve problems quickly and reliably, "
    "and it can also reduce costs."
)
REPEATED_SENTENCE = "the quick brown fox jumps over the lazy sleeping dog."
REPEATED_TEXT = f"{REPEATED_SENTENCE} {REPEATED_SENTENCE}"
LONG_WORDS_TEXT = "Supercalifragilisticexpialidocious antidisestablishmentarianism"
REWRITE_TEXT = (
    "Good tools help people work fast, and they reduce costs. "
    "Many teams use them because they improve results quickly."
)


def _generate(generator_cls, config, data):
    return generator_cls(config=config, resource_provider=None).generate(data)


class TestColumnGenerators:
    def test_rewrite_rows(self):
        data = pd.DataFrame({"title": ["Short one.", "Notes:"], "body": ["Too short.", REWRITE_TEXT]})
        config = ProseRewriteColumnConfig(name="rewrite", target_columns=["title", "body"], seed=11)
        out = _generate(ProseRewriteColumnGenerator, config, data)
        assert list(data.columns) == ["title", "body"]
        first, second = out["rewrite"].tolist()
        assert first == {"is_valid": True, "rewritten": "Short one. Too short."}
        assert second["is_valid"] is True
        assert isinstance(second["rewritten"], str) and second["rewritten"]

    def test_rewrite_is_reproducible_with_seed(self):
        data = pd.DataFrame({"body": [REWRITE_TEXT, REWRITE_TEXT, REWRITE_TEXT]})
        config = ProseRewriteColumnConfig(name="rewrite", target_columns=["body"], tone="casual", keep_length="longer", seed=5)
        first = _generate(ProseRewriteColumnGenerator, config, data)["rewrite"].tolist()
        second = _generate(ProseRewriteColumnGenerator, config, data)["rewrite"].tolist()
        assert first == second

    def test_rewrite_rejects_short_rows(self):
        data = pd.DataFrame({"body": ["tiny"]})
        config = ProseRewriteColumnConfig(name="rewrite", target_columns=["body"])
        out = _generate(ProseRewriteColumnGenerator, config, data)
        assert out["rewrite"].tolist() == [{"is_valid": False, "error": "Please provide at least 20 characters."}]

    def test_authorship_threshold(self):
        data = pd.DataFrame({"body": [HUMAN_TEXT]})
        lenient = AuthorshipScoreColumnConfig(name="authorship", target_columns=["body"])
        strict = AuthorshipScoreColumnConfig(name="authorship", target_columns=["body"], max_score=0.345)
        [passed] = _generate(AuthorshipScoreColumnGenerator, lenient, data)["authorship"].tolist()
        [failed] = _generate(AuthorshipScoreColumnGenerator, strict, data)["authorship"].tolist()
        assert passed["is_valid"] is True
        assert passed["ai_score"] == 0.345
        assert passed["ai_label"] == "Likely Human"
        assert passed["ai_details"]["avg_sentence_len"] == 9.0
        assert failed["is_valid"] is False

    def test_authorship_without_details(self):
        data = pd.DataFrame({"body": [HUMAN_TEXT]})
        config = AuthorshipScoreColumnConfig(name="authorship", target_columns=["body"], include_details=False)
        [result] = _generate(AuthorshipScoreColumnGenerator, config, data)["authorship"].tolist()
        assert set(result) == {"is_valid", "ai_score", "ai_label"}

    def test_overlap_threshold(self):
        data = pd.DataFrame({"body": [REPEATED_TEXT]})
        at_limit = TextOverlapColumnConfig(name="overlap", target_columns=["body"])
        below = TextOverlapColumnConfig(name="overlap", target_columns=["body"], max_percent_overlap=20.0)
        [passed] = _generate(TextOverlapColumnGenerator, at_limit, data)["overlap"].tolist()
        [failed] = _generate(TextOverlapColumnGenerator, below, data)["overlap"].tolist()
        assert passed["is_valid"] is True
        assert passed["percent_overlap"] == 25.0
        assert passed["uniqueness"] == 75.0
        assert len(passed["overlap_matches"]) == 1
        assert failed["is_valid"] is False

    def test_overlap_without_matches(self):
        data = pd.DataFrame({"body": [REPEATED_TEXT]})
        config = TextOverlapColumnConfig(name="overlap", target_columns=["body"], include_matches=False)
        [result] = _generate(TextOverlapColumnGenerator, config, data)["overlap"].tolist()
        assert set(result) == {"is_valid", "percent_overlap", "uniqueness"}

    def test_overlap_short_circuit_has_no_uniqueness(self):
        data = pd.DataFrame({"body": [LONG_WORDS_TEXT, "too short to check"]})
        config = TextOverlapColumnConfig(name="overlap", target_columns=["body"])
        few_tokens, rejected = _generate(TextOverlapColumnGenerator, config, data)["overlap"].tolist()
        assert few_tokens == {"is_valid": True, "percent_overlap": 0, "uniqueness": None, "overlap_matches": []}
        assert rejected == {"is_valid": False, "error": "Please provide at least 50 characters."}
