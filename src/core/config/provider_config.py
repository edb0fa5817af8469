"""
Provider configuration.
"""

from dataclasses import dataclass

GROQ_BASE_URL = "https://api.groq.com/openai/v1"


@dataclass
class ProviderConfig:
    """Chat completion provider configuration."""

    api_key: str
    provider: str = "groq"
    model: str | None = None
    base_url: str | None = None
    temperature: float = 0.7
    top_p: float = 0.9
    # Free tier limits of the default provider
    requests_per_minute: int = 30
    tokens_per_minute: int = 6000

    def get_model_for_provider(self, provider: str) -> str:
        """Get the appropriate model for the given provider with fallbacks."""
        provider = provider.lower()

        if self.model:
            return self.model
        if provider == "groq":
            return "llama3-70b-8192"
        return "gpt-4.1-mini"

    def get_base_url_for_provider(self, provider: str) -> str | None:
        """Groq speaks the OpenAI protocol on its own endpoint."""
        if self.base_url:
            return self.base_url
        if provider.lower() == "groq":
            return GROQ_BASE_URL
        return None

    @property
    def active(self) -> bool:
        return bool(self.api_key)
