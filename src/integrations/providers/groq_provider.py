from src.core.config.provider_config import GROQ_BASE_URL
from src.integrations.providers.openai_provider import OpenAIProvider


class GroqProvider(OpenAIProvider):
    """Groq's OpenAI-compatible endpoint, the default provider."""

    name = "groq"
    default_base_url = GROQ_BASE_URL
