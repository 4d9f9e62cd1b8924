"""Backend services for the PJiFitness Coach API."""

from backend.services.openai_gateway import OpenAIGateway

__all__ = [
    "OpenAIGateway",
]
