"""
Integrations for external services and APIs.

This package contains integrations for the GitHub REST API and
chat completion providers (Groq, OpenAI).
"""
