import pytest
from langchain_openai import ChatOpenAI

from src.core.config.provider_config import GROQ_BASE_URL, ProviderConfig
from src.integrations.providers import factory
from src.integrations.providers.groq_provider import GroqProvider
from src.integrations.providers.openai_provider import OpenAIProvider


@pytest.fixture(autouse=True)
def provider_config(monkeypatch):
    ai = ProviderConfig(api_key="test-key", provider="groq")
    monkeypatch.setattr(factory.config, "ai", ai)
    return ai


def test_default_provider_is_groq():
    provider = factory.get_provider()

    assert isinstance(provider, GroqProvider)
    assert provider.model == "llama3-70b-8192"
    assert provider.api_key == "test-key"
    assert provider.base_url == GROQ_BASE_URL
    assert provider.max_tokens == 600
    assert provider.temperature == 0.7
    assert provider.top_p == 0.9


def test_openai_provider_has_no_custom_base_url():
    provider = factory.get_provider(max_tokens=700, settings=ProviderConfig(api_key="sk-test", provider="OpenAI"))

    assert isinstance(provider, OpenAIProvider)
    assert provider.name == "openai"
    assert provider.model == "gpt-4.1-mini"
    assert provider.max_tokens == 700
    assert provider.base_url is None


def test_explicit_model_and_base_url_win(provider_config):
    provider_config.model = "llama-3.3-70b-versatile"
    provider_config.base_url = "http://localhost:8080/v1"

    provider = factory.get_provider()

    assert provider.model == "llama-3.3-70b-versatile"
    assert provider.base_url == "http://localhost:8080/v1"


def test_unsupported_provider():
    with pytest.raises(ValueError, match="Unsupported provider: bedrock"):
        factory.get_provider(settings=ProviderConfig(api_key="k", provider="bedrock"))


def test_describe_omits_api_key():
    description = factory.get_provider(max_tokens=600).describe()

    assert description == {
        "provider": "groq",
        "model": "llama3-70b-8192",
        "base_url": GROQ_BASE_URL,
        "max_tokens": 600,
        "temperature": 0.7,
        "top_p": 0.9,
    }


def test_get_chat_model_builds_chat_openai():
    llm = factory.get_chat_model(max_tokens=600)

    assert isinstance(llm, ChatOpenAI)
    assert llm.max_tokens == 600
    assert llm.model_name == "llama3-70b-8192"
    assert llm.openai_api_base == GROQ_BASE_URL
