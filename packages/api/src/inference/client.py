# This project was developed with assistance from AI tools.
"""LLM transport for the two supported providers.

OpenAI goes through the openai SDK (configurable base_url, so any
OpenAI-compatible endpoint works). Gemini has no SDK in our stack and is
called over its REST API with httpx. Both paths return plain text or raise
LLMTransportError; nothing here retries or streams.
"""

import logging
from typing import Any

import httpx
import openai
from openai import AsyncOpenAI

from .config import ProviderConfig, ProviderKind
from .errors import LLMConfigurationError, LLMTransportError

logger = logging.getLogger(__name__)

# Cached per (endpoint, key) to reuse HTTP connections across requests
_clients: dict[tuple[str, str], AsyncOpenAI] = {}


def _get_openai_client(
    provider: ProviderConfig,
    http_client: httpx.AsyncClient | None = None,
) -> AsyncOpenAI:
    """Return an AsyncOpenAI client for the provider, cached unless injected."""
    if http_client is not None:
        return AsyncOpenAI(
            base_url=provider.endpoint,
            api_key=provider.api_key,
            timeout=provider.timeout_seconds,
            max_retries=0,
            http_client=http_client,
        )
    key = (provider.endpoint, provider.api_key)
    if key not in _clients:
        _clients[key] = AsyncOpenAI(
            base_url=provider.endpoint,
            api_key=provider.api_key,
            timeout=provider.timeout_seconds,
            max_retries=0,
        )
    return _clients[key]


def clear_client_cache() -> None:
    """Clear cached clients (useful after config reload)."""
    _clients.clear()


async def _openai_completion(
    prompt: str,
    provider: ProviderConfig,
    http_client: httpx.AsyncClient | None,
) -> str:
    client = _get_openai_client(provider, http_client)
    try:
        response = await client.chat.completions.create(
            model=provider.model_name,
            messages=[{"role": "system", "content": prompt}],
            temperature=provider.temperature,
            max_tokens=provider.max_tokens,
        )
    except openai.APIStatusError as exc:
        raise LLMTransportError(f"OpenAI API error: {exc.status_code} {exc.message}") from exc
    except openai.APIError as exc:
        raise LLMTransportError(f"OpenAI API request failed: {exc}") from exc

    try:
        content = response.choices[0].message.content
    except (AttributeError, IndexError, TypeError) as exc:
        raise LLMTransportError("OpenAI API returned an unexpected response shape.") from exc
    if not content or not isinstance(content, str):
        raise LLMTransportError("OpenAI API returned an unexpected response shape.")
    return content


def _extract_gemini_text(data: Any) -> str:
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as exc:
        raise LLMTransportError("Gemini API returned an unexpected response shape.") from exc
    if not text or not isinstance(text, str):
        raise LLMTransportError("Gemini API returned an unexpected response shape.")
    return text


async def _gemini_completion(
    prompt: str,
    provider: ProviderConfig,
    http_client: httpx.AsyncClient | None,
) -> str:
    url = f"{provider.endpoint}/models/{provider.model_name}:generateContent"
    payload = {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        "generationConfig": {
            "temperature": provider.temperature,
            "maxOutputTokens": provider.max_tokens,
        },
    }
    headers = {"Content-Type": "application/json", "x-goog-api-key": provider.api_key}

    owns_client = http_client is None
    client = http_client or httpx.AsyncClient(timeout=provider.timeout_seconds)
    try:
        response = await client.post(url, json=payload, headers=headers)
    except httpx.HTTPError as exc:
        raise LLMTransportError(f"Gemini API request failed: {exc}") from exc
    finally:
        if owns_client:
            await client.aclose()

    if not response.is_success:
        raise LLMTransportError(f"Gemini API error: {response.status_code} {response.text}")

    try:
        data = response.json()
    except ValueError as exc:
        raise LLMTransportError("Gemini API returned a non-JSON response.") from exc
    return _extract_gemini_text(data)


async def get_completion(
    prompt: str,
    provider: ProviderConfig,
    *,
    http_client: httpx.AsyncClient | None = None,
) -> str:
    """Send the grounded prompt to the resolved provider and return its text.

    Args:
        prompt: The full grounded prompt.
        provider: Output of ``resolve_provider``.
        http_client: Optional client override, used by tests to plug in
            an ``httpx.MockTransport``.

    Raises:
        LLMTransportError: Network failure, non-success status, or a
            response body without the expected text field.
        LLMConfigurationError: Called with the simulated provider, which
            never goes over the wire.
    """
    if provider.kind is ProviderKind.OPENAI:
        return await _openai_completion(prompt, provider, http_client)
    if provider.kind is ProviderKind.GEMINI:
        return await _gemini_completion(prompt, provider, http_client)
    raise LLMConfigurationError(f"Provider '{provider.kind.value}' has no remote transport")
