"""
Chat model providers for the repository analyses.

Groq (default) and OpenAI, both reached through ``langchain_openai.ChatOpenAI``.
"""

from src.integrations.providers.factory import get_chat_model, get_provider

__all__ = [
    "get_provider",
    "get_chat_model",
]
