"""
Onboarding analyses produced by a chat completion model.
"""

from src.insights.service import InsightService

__all__ = ["InsightService"]
