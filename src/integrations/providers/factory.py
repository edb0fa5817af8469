"""
Provider factory.

Resolves the configured provider and builds a chat model for a given
completion budget. The insight service calls ``get_chat_model`` once per
analysis.
"""

from langchain_core.language_models.chat_models import BaseChatModel

from src.core.config import config
from src.core.config.provider_config import ProviderConfig
from src.integrations.providers.base import ChatProvider
from src.integrations.providers.groq_provider import GroqProvider
from src.integrations.providers.openai_provider import OpenAIProvider

PROVIDER_MAP: dict[str, type[ChatProvider]] = {
    "groq": GroqProvider,
    "openai": OpenAIProvider,
}


def get_provider(max_tokens: int = 600, settings: ProviderConfig | None = None) -> ChatProvider:
    """
    Build the provider described by ``settings`` (the global AI config by default).

    Raises:
        ValueError: If the provider name is not supported.
    """
    settings = settings or config.ai
    provider_name = settings.provider.lower()

    provider_class = PROVIDER_MAP.get(provider_name)
    if provider_class is None:
        supported = ", ".join(sorted(PROVIDER_MAP))
        raise ValueError(f"Unsupported provider: {provider_name}. Supported: {supported}")

    return provider_class(
        model=settings.get_model_for_provider(provider_name),
        api_key=settings.api_key,
        max_tokens=max_tokens,
        temperature=settings.temperature,
        top_p=settings.top_p,
        base_url=settings.get_base_url_for_provider(provider_name),
    )


def get_chat_model(max_tokens: int = 600, settings: ProviderConfig | None = None) -> BaseChatModel:
    return get_provider(max_tokens=max_tokens, settings=settings).build_chat_model()
