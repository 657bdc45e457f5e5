# tests/test_config.py
"""Tests for configuration loading."""

import dataclasses
import json

import pytest
from blog_seo.config import Config, ScoringWeights, default_weights
from blog_seo.constants import DEFAULT_CATEGORY_WEIGHTS, DEFAULT_WORDS_PER_MINUTE


class TestScoringWeights:
    """Test suite for ScoringWeights."""

    def test_defaults(self):
        assert default_weights.to_dict() == DEFAULT_CATEGORY_WEIGHTS
        assert default_weights.total == 100

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            default_weights.keyword = 50

    def test_negative_weight_rejected(self):
        with pytest.raises(ValueError):
            ScoringWeights(links=-1)

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("SEO_WEIGHT_KEYWORD", "30")
        monkeypatch.setenv("SEO_WEIGHT_IMAGES", "not-a-number")

        weights = ScoringWeights.from_env()

        assert weights.keyword == 30.0
        assert weights.images == DEFAULT_CATEGORY_WEIGHTS["images"]

    @pytest.mark.parametrize("value", ["nan", "inf", "-inf", "-5"])
    def test_from_env_ignores_non_finite_and_negative(self, monkeypatch, value):
        monkeypatch.setenv("SEO_WEIGHT_KEYWORD", value)

        weights = ScoringWeights.from_env()

        assert weights.keyword == DEFAULT_CATEGORY_WEIGHTS["keyword"]

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite_weight_rejected(self, value):
        with pytest.raises(ValueError, match="finite"):
            ScoringWeights(keyword=value)

    @pytest.mark.parametrize("contents", [
        '{"keyword": "heavy"}',
        '{"keyword": NaN}',
        '{"keyword": -3}',
        '[1, 2, 3]',
        '{not json',
    ])
    def test_from_file_invalid_values(self, tmp_path, contents):
        path = tmp_path / "weights.json"
        path.write_text(contents)

        with pytest.raises(ValueError):
            ScoringWeights.from_file(str(path))

    def test_from_file(self, tmp_path):
        path = tmp_path / "weights.json"
        path.write_text(json.dumps({"weights": {"keyword": 40, "readability": 0}}))

        weights = ScoringWeights.from_file(str(path))

        assert weights.keyword == 40
        assert weights.readability == 0
        assert weights.content == DEFAULT_CATEGORY_WEIGHTS["content"]

    def test_from_file_unknown_category(self, tmp_path):
        path = tmp_path / "weights.json"
        path.write_text(json.dumps({"social": 10}))

        with pytest.raises(ValueError, match="social"):
            ScoringWeights.from_file(str(path))

    def test_from_missing_file(self, tmp_path):
        assert ScoringWeights.from_file(str(tmp_path / "nope.json")) == ScoringWeights()

    def test_save_to_file(self, tmp_path):
        path = tmp_path / "saved.json"
        ScoringWeights(keyword=50).save_to_file(str(path))

        saved = json.loads(path.read_text())
        assert saved["weights"]["keyword"] == 50


class TestConfig:
    """Test suite for Config."""

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("WORDS_PER_MINUTE", "250")
        monkeypatch.delenv("LOG_FILE", raising=False)

        config = Config.from_env()

        assert config.log_level == "DEBUG"
        assert config.words_per_minute == 250
        assert config.log_file is None

    def test_invalid_words_per_minute(self, monkeypatch):
        monkeypatch.setenv("WORDS_PER_MINUTE", "fast")
        assert Config.from_env().words_per_minute == DEFAULT_WORDS_PER_MINUTE
