"""Generate Speech Use Case: coach voice MP3 for a piece of text."""
import logging
from typing import Any

from application.exceptions import BadRequestError
from application.ports import LanguageModel

logger = logging.getLogger(__name__)


class GenerateSpeechUseCase:
    def __init__(self, model: LanguageModel):
        self._model = model

    async def execute(self, text: Any) -> bytes:
        if not text or not str(text).strip():
            raise BadRequestError("Missing text input")
        audio = await self._model.synthesize_speech(str(text))
        logger.info(f"Synthesized {len(audio)} bytes of speech")
        return audio
