# This project was developed with assistance from AI tools.
"""Tests for the provider transport, with provider HTTP faked by httpx.MockTransport."""

import json

import httpx
import pytest

from src.inference import client as client_mod
from src.inference.client import clear_client_cache, get_completion
from src.inference.config import ProviderConfig, ProviderKind
from src.inference.errors import LLMConfigurationError, LLMTransportError

_OPENAI = ProviderConfig(
    kind=ProviderKind.OPENAI,
    model_name="gpt-4o-mini",
    endpoint="https://api.openai.com/v1",
    api_key="sk-test",
)

_GEMINI = ProviderConfig(
    kind=ProviderKind.GEMINI,
    model_name="gemini-1.5-flash",
    endpoint="https://generativelanguage.googleapis.com/v1beta",
    api_key="g-test",
)


def _chat_completion(content):
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "created": 0,
        "model": "gpt-4o-mini",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


def _gemini_reply(text):
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}


def _mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


# -- OpenAI --


@pytest.mark.asyncio
async def test_openai_sends_prompt_as_system_message():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers.get("Authorization")
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=_chat_completion("The APR is 8.9%."))

    async with _mock_client(handler) as http_client:
        text = await get_completion("PROMPT", _OPENAI, http_client=http_client)

    assert text == "The APR is 8.9%."
    assert seen["url"] == "https://api.openai.com/v1/chat/completions"
    assert seen["auth"] == "Bearer sk-test"
    assert seen["body"]["model"] == "gpt-4o-mini"
    assert seen["body"]["messages"] == [{"role": "system", "content": "PROMPT"}]
    assert seen["body"]["temperature"] == 0.4
    assert seen["body"]["max_tokens"] == 500


@pytest.mark.asyncio
async def test_openai_error_status_raises_transport_error():
    def handler(request):
        return httpx.Response(500, json={"error": {"message": "boom"}})

    async with _mock_client(handler) as http_client:
        with pytest.raises(LLMTransportError, match="OpenAI API error: 500"):
            await get_completion("PROMPT", _OPENAI, http_client=http_client)


@pytest.mark.asyncio
async def test_openai_empty_choices_raises_transport_error():
    def handler(request):
        body = _chat_completion("x")
        body["choices"] = []
        return httpx.Response(200, json=body)

    async with _mock_client(handler) as http_client:
        with pytest.raises(LLMTransportError, match="unexpected response shape"):
            await get_completion("PROMPT", _OPENAI, http_client=http_client)


@pytest.mark.asyncio
async def test_openai_null_content_raises_transport_error():
    def handler(request):
        return httpx.Response(200, json=_chat_completion(None))

    async with _mock_client(handler) as http_client:
        with pytest.raises(LLMTransportError, match="unexpected response shape"):
            await get_completion("PROMPT", _OPENAI, http_client=http_client)


@pytest.mark.asyncio
async def test_openai_network_failure_raises_transport_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with _mock_client(handler) as http_client:
        with pytest.raises(LLMTransportError, match="request failed"):
            await get_completion("PROMPT", _OPENAI, http_client=http_client)


def test_openai_client_cached_per_endpoint_and_key():
    clear_client_cache()
    first = client_mod._get_openai_client(_OPENAI)
    assert client_mod._get_openai_client(_OPENAI) is first
    clear_client_cache()
    assert client_mod._get_openai_client(_OPENAI) is not first
    clear_client_cache()


# -- Gemini --


@pytest.mark.asyncio
async def test_gemini_request_shape():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["key"] = request.headers.get("x-goog-api-key")
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=_gemini_reply("Tenure is 12 to 60 months."))

    async with _mock_client(handler) as http_client:
        text = await get_completion("PROMPT", _GEMINI, http_client=http_client)

    assert text == "Tenure is 12 to 60 months."
    assert seen["url"] == (
        "https://generativelanguage.googleapis.com/v1beta/models/gemini-1.5-flash:generateContent"
    )
    assert seen["key"] == "g-test"
    assert seen["body"] == {
        "contents": [{"role": "user", "parts": [{"text": "PROMPT"}]}],
        "generationConfig": {"temperature": 0.4, "maxOutputTokens": 500},
    }


@pytest.mark.asyncio
async def test_gemini_error_status_raises_transport_error():
    def handler(request):
        return httpx.Response(403, text="API key not valid")

    async with _mock_client(handler) as http_client:
        with pytest.raises(LLMTransportError, match="Gemini API error: 403"):
            await get_completion("PROMPT", _GEMINI, http_client=http_client)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {},
        {"candidates": []},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"content": {"parts": [{"text": ""}]}}]},
        {"candidates": [{"content": {"parts": [{"text": 42}]}}]},
    ],
)
async def test_gemini_unexpected_shape_raises_transport_error(body):
    def handler(request):
        return httpx.Response(200, json=body)

    async with _mock_client(handler) as http_client:
        with pytest.raises(LLMTransportError, match="unexpected response shape"):
            await get_completion("PROMPT", _GEMINI, http_client=http_client)


@pytest.mark.asyncio
async def test_gemini_non_json_raises_transport_error():
    def handler(request):
        return httpx.Response(200, text="<html>oops</html>")

    async with _mock_client(handler) as http_client:
        with pytest.raises(LLMTransportError, match="non-JSON"):
            await get_completion("PROMPT", _GEMINI, http_client=http_client)


@pytest.mark.asyncio
async def test_gemini_network_failure_raises_transport_error():
    def handler(request):
        raise httpx.ConnectTimeout("timed out", request=request)

    async with _mock_client(handler) as http_client:
        with pytest.raises(LLMTransportError, match="request failed"):
            await get_completion("PROMPT", _GEMINI, http_client=http_client)


# -- Dispatch --


@pytest.mark.asyncio
async def test_simulated_provider_has_no_transport():
    with pytest.raises(LLMConfigurationError):
        await get_completion("PROMPT", ProviderConfig(kind=ProviderKind.SIMULATED))
