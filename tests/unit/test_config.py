from __future__ import annotations

import pytest

from recipebox.app.config import Settings
from recipebox.services.errors import ConfigurationError
from recipebox.services.extraction import RecipeExtractor


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("XAI_API_KEY", raising=False)
        settings = Settings(_env_file=None)

        assert settings.XAI_API_KEY.get_secret_value() == ""
        assert settings.XAI_API_URL == "https://api.x.ai/v1/chat/completions"
        assert settings.XAI_TEXT_MODEL == "grok-3-latest"
        assert settings.XAI_VISION_MODEL == "grok-2-vision-1212"
        assert settings.PAGE_MAX_CHARS == 15000
        assert settings.GENERATION_TEMPERATURE == 0.7
        assert settings.EXTRACTION_TEMPERATURE == 0.3

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("XAI_API_KEY", "xai-from-env")
        monkeypatch.setenv("xai_text_model", "grok-custom")
        monkeypatch.setenv("PAGE_MAX_CHARS", "5000")
        settings = Settings(_env_file=None)

        assert settings.XAI_API_KEY.get_secret_value() == "xai-from-env"
        assert settings.XAI_TEXT_MODEL == "grok-custom"
        assert settings.PAGE_MAX_CHARS == 5000

    def test_key_is_not_printed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("XAI_API_KEY", "xai-secret")
        assert "xai-secret" not in repr(Settings(_env_file=None))


class TestExtractorFromSettings:
    def test_placeholder_key_is_configuration_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("XAI_API_KEY", "your_api_key_here")
        with pytest.raises(ConfigurationError):
            RecipeExtractor.from_settings(Settings(_env_file=None))

    def test_settings_flow_into_extractor(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("XAI_API_KEY", "xai-test")
        monkeypatch.setenv("GENERATION_TEMPERATURE", "0.9")
        monkeypatch.setenv("PAGE_MAX_CHARS", "1200")
        extractor = RecipeExtractor.from_settings(Settings(_env_file=None))

        assert extractor.generation_temperature == 0.9
        assert extractor.page_max_chars == 1200
