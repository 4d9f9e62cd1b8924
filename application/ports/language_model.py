"""
Language Model Interface (Port).

Defines the calls the use cases make to a hosted model: JSON generation,
chat completion (text or vision) and speech synthesis.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol


@dataclass
class GenerationResult:
    """Text returned by a model call plus timing for debug payloads."""

    text: str
    elapsed_ms: int = 0
    model: Optional[str] = None
    debug: Dict[str, Any] = field(default_factory=dict)


class LanguageModel(Protocol):
    """Abstract interface for model calls."""

    async def generate_json(
        self,
        system: str,
        user: str,
        max_output_tokens: int,
        temperature: float,
        feature: str,
    ) -> GenerationResult:
        """
        Request a JSON object response.

        Returns:
            GenerationResult whose text is the raw (undecoded) JSON string

        Raises:
            UpstreamTimeoutError: The call exceeded its deadline
            UpstreamError: Non-success response or no output text
        """
        ...

    async def complete_chat(
        self,
        messages: List[Dict[str, Any]],
        temperature: float,
        feature: str,
    ) -> GenerationResult:
        """Run a chat completion over role/content messages."""
        ...

    async def synthesize_speech(self, text: str) -> bytes:
        """Render text to MP3 audio."""
        ...
