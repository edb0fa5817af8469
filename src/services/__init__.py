"""
Application services that coordinate GitHub and the chat model.
"""

from src.services.onboarding import OnboardingOrchestrator

__all__ = ["OnboardingOrchestrator"]
