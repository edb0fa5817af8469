"""
Chat provider interface.

A provider pins down which OpenAI-compatible endpoint answers the analysis
prompts and with which sampling settings.
"""

from abc import ABC, abstractmethod
from typing import Any

from langchain_core.language_models.chat_models import BaseChatModel


class ChatProvider(ABC):
    """An OpenAI-compatible chat completion endpoint."""

    name: str = ""
    default_base_url: str | None = None

    def __init__(
        self,
        model: str,
        api_key: str,
        max_tokens: int = 600,
        temperature: float = 0.7,
        top_p: float = 0.9,
        base_url: str | None = None,
    ) -> None:
        self.model = model
        self.api_key = api_key
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.top_p = top_p
        self.base_url = base_url or self.default_base_url

    @abstractmethod
    def build_chat_model(self) -> BaseChatModel:
        """Create the LangChain chat model for one completion budget."""

    def describe(self) -> dict[str, Any]:
        """Provider settings without the API key, for logs and status output."""
        return {
            "provider": self.name,
            "model": self.model,
            "base_url": self.base_url,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "top_p": self.top_p,
        }
