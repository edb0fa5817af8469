"""
CORS configuration for the browser frontend.
"""

from dataclasses import dataclass


@dataclass
class CORSConfig:
    """Origins and headers the frontend may use when calling the API."""

    headers: list[str]
    origins: list[str]
    allow_credentials: bool = True
