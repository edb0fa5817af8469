from langchain_openai import ChatOpenAI

from src.integrations.providers.base import ChatProvider


class OpenAIProvider(ChatProvider):
    """OpenAI chat completions, or any endpoint speaking the same protocol via ``base_url``."""

    name = "openai"

    def build_chat_model(self) -> ChatOpenAI:
        return ChatOpenAI(
            model=self.model,
            api_key=self.api_key,
            base_url=self.base_url,
            max_tokens=self.max_tokens,  # type: ignore[call-arg]
            temperature=self.temperature,
            top_p=self.top_p,
        )
