import pytest

from llm.factory import get_llm_provider
from llm.providers.openai import OpenAIProvider


class TestGetLLMProvider:
    """Tests for get_llm_provider."""

    def test_disabled_returns_none(self, test_config):
        assert get_llm_provider(test_config) is None

    def test_openai_requires_api_key(self, test_config):
        test_config.llm_enabled = True

        with pytest.raises(ValueError):
            get_llm_provider(test_config)

    def test_openai_provider(self, test_config):
        test_config.llm_enabled = True
        test_config.llm_openai_api_key = "sk-test"

        provider = get_llm_provider(test_config)

        assert isinstance(provider, OpenAIProvider)
        assert provider.model == "gpt-4o-mini"

    def test_unknown_provider(self, test_config):
        test_config.llm_enabled = True
        test_config.llm_provider = "mystery"

        with pytest.raises(ValueError):
            get_llm_provider(test_config)

    def test_no_provider(self, test_config):
        test_config.llm_enabled = True
        test_config.llm_provider = None

        assert get_llm_provider(test_config) is None
