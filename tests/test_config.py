"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from spider.config import Settings
from spider.schemas.game_engine import SuitVariant


class TestSettings:
    """Test environment-driven configuration."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DEFAULT_VARIANT", raising=False)
        monkeypatch.delenv("DEAL_SEED", raising=False)

        settings = Settings(_env_file=None)

        assert settings.DEFAULT_VARIANT == SuitVariant.TWO
        assert settings.DEAL_SEED is None

    @pytest.mark.parametrize(
        "raw, variant",
        [
            ("1", SuitVariant.ONE),
            ("4", SuitVariant.FOUR),
            ("four", SuitVariant.FOUR),
            ("Two", SuitVariant.TWO),
            (1, SuitVariant.ONE),
        ],
    )
    def test_variant_parsing(self, raw, variant: SuitVariant):
        assert Settings(DEFAULT_VARIANT=raw).DEFAULT_VARIANT == variant

    def test_invalid_variant(self):
        with pytest.raises(ValidationError):
            Settings(DEFAULT_VARIANT="3")

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_VARIANT", "one")
        monkeypatch.setenv("DEAL_SEED", "42")

        settings = Settings(_env_file=None)

        assert settings.DEFAULT_VARIANT == SuitVariant.ONE
        assert settings.DEAL_SEED == 42
