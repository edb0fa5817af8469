"""
Main configuration class that composes all configs.
"""

import json
import os

from dotenv import load_dotenv

from src.core.config.cors_config import CORSConfig
from src.core.config.github_config import GitHubConfig
from src.core.config.logging_config import LoggingConfig
from src.core.config.provider_config import ProviderConfig

# Load environment variables from a .env file
load_dotenv()

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5500",
]


class Config:
    """Main configuration class."""

    def __init__(self) -> None:
        self.github = GitHubConfig(
            token=os.getenv("GITHUB_TOKEN", ""),
            api_base_url=os.getenv("GITHUB_API_BASE_URL", "https://api.github.com"),
            user_agent=os.getenv("GITHUB_USER_AGENT", "OpenSourceGuide-AI/1.0"),
            timeout=float(os.getenv("GITHUB_TIMEOUT", "60")),
        )

        provider = os.getenv("AI_PROVIDER", "groq").lower()
        api_key_var = "OPENAI_API_KEY" if provider == "openai" else "GROQ_API_KEY"
        self.ai = ProviderConfig(
            provider=provider,
            api_key=os.getenv(api_key_var, ""),
            model=os.getenv("AI_MODEL"),
            base_url=os.getenv("AI_BASE_URL"),
            temperature=float(os.getenv("AI_TEMPERATURE", "0.7")),
            top_p=float(os.getenv("AI_TOP_P", "0.9")),
            requests_per_minute=int(os.getenv("AI_REQUESTS_PER_MINUTE", "30")),
            tokens_per_minute=int(os.getenv("AI_TOKENS_PER_MINUTE", "6000")),
        )

        # CORS configuration
        cors_headers = os.getenv("CORS_HEADERS", '["*"]')
        cors_origins = os.getenv("CORS_ORIGINS", json.dumps(DEFAULT_CORS_ORIGINS))

        try:
            self.cors = CORSConfig(
                headers=json.loads(cors_headers),
                origins=json.loads(cors_origins),
                allow_credentials=os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true",
            )
        except json.JSONDecodeError:
            # Fallback to default values if JSON parsing fails
            self.cors = CORSConfig(headers=["*"], origins=list(DEFAULT_CORS_ORIGINS))

        self.logging = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
            format=os.getenv("LOG_FORMAT", "%(asctime)s %(levelname)8s %(message)s"),
        )

        # Development settings
        self.debug = os.getenv("DEBUG", "false").lower() == "true"
        self.environment = os.getenv("ENVIRONMENT", "development")
        self.port = int(os.getenv("PORT", "3000"))

    def validate(self) -> bool:
        """
        Validate configuration.

        Missing credentials only downgrade the service (unauthenticated GitHub
        access, fallback analyses), so they are reported rather than enforced at startup.
        """
        errors = []

        if not self.github.token:
            errors.append("GITHUB_TOKEN is not set (60 requests/hour limit applies)")

        if not self.ai.api_key:
            key_name = "OPENAI_API_KEY" if self.ai.provider == "openai" else "GROQ_API_KEY"
            errors.append(f"{key_name} is required for the {self.ai.provider} provider")

        if self.ai.provider not in ("groq", "openai"):
            errors.append(f"Unsupported AI_PROVIDER: {self.ai.provider}")

        if errors:
            raise ValueError(f"Configuration errors: {', '.join(errors)}")

        return True


# Global config instance
config = Config()
