"""
Unit tests for backend/services/openai_gateway.py

The AsyncOpenAI client is a MagicMock with AsyncMock endpoints.
"""

import httpx
import openai
import pytest
from unittest.mock import AsyncMock, MagicMock

from application.exceptions import ConfigurationError, UpstreamError, UpstreamTimeoutError
from backend.services import OpenAIGateway
from backend.settings import Settings

REQUEST = httpx.Request("POST", "https://api.openai.com/v1/responses")


@pytest.fixture
def settings():
    return Settings(environment="test", openai_api_key="sk-test", _env_file=None)


@pytest.fixture
def openai_client():
    client = MagicMock()
    client.responses.create = AsyncMock(return_value={"output_text": '{"days": []}'})
    client.chat.completions.create = AsyncMock(
        return_value={"choices": [{"message": {"content": "Nice work today."}}]}
    )
    client.audio.speech.create = AsyncMock(return_value=MagicMock(content=b"ID3audio"))
    return client


@pytest.fixture
def gateway(settings, openai_client):
    return OpenAIGateway(settings, client=openai_client)


async def _generate(gateway):
    return await gateway.generate_json(
        system="sys", user="usr", max_output_tokens=900, temperature=0.4, feature="create_workout_plan"
    )


@pytest.mark.unit
class TestGenerateJson:
    @pytest.mark.asyncio
    async def test_returns_text(self, gateway, openai_client, settings):
        result = await _generate(gateway)

        assert result.text == '{"days": []}'
        assert result.model == settings.openai_workout_model
        assert result.elapsed_ms >= 0

        kwargs = openai_client.responses.create.call_args.kwargs
        assert kwargs["text"] == {"format": {"type": "json_object"}}
        assert kwargs["max_output_tokens"] == 900
        assert kwargs["input"][0] == {"role": "system", "content": "sys"}

    @pytest.mark.asyncio
    async def test_empty_output(self, gateway, openai_client):
        openai_client.responses.create.return_value = {"output": []}

        with pytest.raises(UpstreamError, match="No output from model") as exc_info:
            await _generate(gateway)

        assert exc_info.value.debug["no_output"] is True

    @pytest.mark.asyncio
    async def test_timeout(self, gateway, openai_client):
        openai_client.responses.create.side_effect = openai.APITimeoutError(request=REQUEST)

        with pytest.raises(UpstreamTimeoutError) as exc_info:
            await _generate(gateway)

        assert exc_info.value.status_code == 504
        assert "openai_ms" in exc_info.value.debug

    @pytest.mark.asyncio
    async def test_status_error(self, gateway, openai_client):
        response = httpx.Response(500, request=REQUEST, text="upstream broke")
        openai_client.responses.create.side_effect = openai.APIStatusError(
            "server error", response=response, body=None
        )

        with pytest.raises(UpstreamError, match="OpenAI request failed") as exc_info:
            await _generate(gateway)

        assert exc_info.value.debug["openai_status"] == 500
        assert exc_info.value.debug["openai_error"] == "upstream broke"

    @pytest.mark.asyncio
    async def test_connection_error(self, gateway, openai_client):
        openai_client.responses.create.side_effect = openai.APIConnectionError(request=REQUEST)

        with pytest.raises(UpstreamError, match="OpenAI request failed"):
            await _generate(gateway)


@pytest.mark.unit
class TestCompleteChat:
    @pytest.mark.asyncio
    async def test_returns_reply(self, gateway, openai_client, settings):
        messages = [{"role": "system", "content": "coach"}, {"role": "user", "content": "hi"}]

        result = await gateway.complete_chat(messages, temperature=0.7, feature="coach_chat")

        assert result.text == "Nice work today."
        assert result.model == settings.openai_chat_model
        assert openai_client.chat.completions.create.call_args.kwargs["messages"] == messages


@pytest.mark.unit
class TestSynthesizeSpeech:
    @pytest.mark.asyncio
    async def test_returns_audio_bytes(self, gateway, openai_client, settings):
        audio = await gateway.synthesize_speech("Great job")

        assert audio == b"ID3audio"
        kwargs = openai_client.audio.speech.create.call_args.kwargs
        assert kwargs["voice"] == settings.openai_tts_voice
        assert kwargs["response_format"] == "mp3"
        assert kwargs["input"] == "Great job"


@pytest.mark.unit
class TestLazyClient:
    def test_construction_needs_no_key(self):
        OpenAIGateway(Settings(environment="test", openai_api_key=None, _env_file=None))

    @pytest.mark.asyncio
    async def test_missing_key_on_first_call(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        gateway = OpenAIGateway(Settings(environment="test", openai_api_key=None, _env_file=None))

        with pytest.raises(ConfigurationError, match="Missing OPENAI_API_KEY"):
            await _generate(gateway)
