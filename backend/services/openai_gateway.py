"""
OpenAI adapter for the LanguageModel port.

JSON generation goes through the Responses API; chat and vision go through
Chat Completions; speech through the audio endpoint. The client is built from
Settings on first use, so routes that never call the model (pings, smoke
checks) work without an API key.
"""

import logging
import time
from typing import Any, Dict, List, Optional

import openai
from openai import AsyncOpenAI

from application.exceptions import UpstreamError, UpstreamTimeoutError, truncate
from application.ports import GenerationResult
from backend.ai.client_factory import AIClientFactory, AIRequestContext
from backend.ai.output import extract_output_text
from backend.ai.prompts import SPEECH_INSTRUCTIONS
from backend.settings import Settings

logger = logging.getLogger(__name__)


class OpenAIGateway:
    """LanguageModel implementation backed by the OpenAI SDK."""

    def __init__(self, settings: Settings, client: Optional[AsyncOpenAI] = None):
        self._settings = settings
        self._client = client

    def _get_client(self, feature: str) -> AsyncOpenAI:
        if self._client is None:
            context = AIRequestContext(
                feature_name=feature,
                environment=self._settings.environment,
            )
            self._client = AIClientFactory.create_openai_client(self._settings, context)
        return self._client

    async def _call(self, feature: str, model: str, request) -> Any:
        started = time.monotonic()
        try:
            return await request(self._get_client(feature))
        except openai.APITimeoutError as e:
            elapsed_ms = int((time.monotonic() - started) * 1000)
            logger.error(f"OpenAI timeout after {elapsed_ms}ms ({feature})")
            raise UpstreamTimeoutError(
                "OpenAI timeout (took too long). Try again.",
                debug={"model": model, "openai_ms": elapsed_ms, "message": str(e)},
            ) from e
        except openai.APIStatusError as e:
            logger.error(f"OpenAI returned {e.status_code} ({feature})")
            raise UpstreamError(
                "OpenAI request failed",
                debug={
                    "model": model,
                    "openai_status": e.status_code,
                    "openai_error": truncate(e.response.text if e.response is not None else e.message),
                },
            ) from e
        except openai.APIConnectionError as e:
            logger.error(f"OpenAI connection error ({feature}): {e}")
            raise UpstreamError(
                "OpenAI request failed",
                debug={"model": model, "message": truncate(str(e))},
            ) from e

    def _result(self, response: Any, model: str, started: float) -> GenerationResult:
        elapsed_ms = int((time.monotonic() - started) * 1000)
        text = extract_output_text(response)
        if not text:
            raise UpstreamError(
                "No output from model",
                debug={"model": model, "openai_ms": elapsed_ms, "no_output": True},
            )
        return GenerationResult(text=text, elapsed_ms=elapsed_ms, model=model)

    async def generate_json(
        self,
        system: str,
        user: str,
        max_output_tokens: int,
        temperature: float,
        feature: str,
    ) -> GenerationResult:
        model = self._settings.openai_workout_model
        started = time.monotonic()
        response = await self._call(
            feature,
            model,
            lambda client: client.responses.create(
                model=model,
                input=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
                text={"format": {"type": "json_object"}},
                max_output_tokens=max_output_tokens,
                temperature=temperature,
            ),
        )
        result = self._result(response, model, started)
        logger.info(f"{feature}: model answered in {result.elapsed_ms}ms")
        return result

    async def complete_chat(
        self,
        messages: List[Dict[str, Any]],
        temperature: float,
        feature: str,
    ) -> GenerationResult:
        model = self._settings.openai_chat_model
        started = time.monotonic()
        response = await self._call(
            feature,
            model,
            lambda client: client.chat.completions.create(
                model=model,
                messages=messages,
                temperature=temperature,
            ),
        )
        return self._result(response, model, started)

    async def synthesize_speech(self, text: str) -> bytes:
        model = self._settings.openai_tts_model
        response = await self._call(
            "speech",
            model,
            lambda client: client.audio.speech.create(
                model=model,
                voice=self._settings.openai_tts_voice,
                input=text,
                instructions=SPEECH_INSTRUCTIONS,
                response_format="mp3",
            ),
        )
        return response.content
