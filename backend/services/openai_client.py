"""
OpenAI Chat Completions client for Wikipedia-grounded summaries.

Uses the OpenAI SDK on top of the app's shared httpx client.

Endpoint:
    POST <OPENAI_BASE_URL>/chat/completions

Auth:
    Authorization: Bearer <OPENAI_API_KEY>, set by the SDK.

The SDK is built with ``max_retries=0``: every provider failure surfaces once.
"""

import logging
from typing import Any

import openai
from openai import AsyncOpenAI

from config import Settings
from errors import ClientInputError, ConfigurationError
from services.upstream import Success, TransportFailure, UpstreamError, UpstreamOutcome, unwrap

logger = logging.getLogger(__name__)

PROVIDER = "AI provider"

SYSTEM_PROMPT = (
    "You are a knowledgeable assistant specializing in Nigerian history, culture, "
    "and current affairs. Provide informative, accurate summaries."
)

MAX_TOKENS = 500
TEMPERATURE = 0.7


def _field(result: Any, name: str) -> str:
    value = result.get(name) if isinstance(result, dict) else None
    return "" if value is None else str(value)


def build_context(wiki_results: Any) -> str:
    """Join search hits as ``title: snippet`` blocks separated by blank lines.

    Anything other than a non-empty list gives no context.
    """
    if not isinstance(wiki_results, list) or not wiki_results:
        return ""
    return "\n\n".join(f"{_field(r, 'title')}: {_field(r, 'snippet')}" for r in wiki_results)


def build_prompt(query: str, context: str) -> str:
    if context:
        return (
            f'Based on the following Wikipedia information about "{query}", provide a '
            "comprehensive but concise summary in 2-3 paragraphs. Focus on key facts and "
            "historical and cultural significance relevant to Nigeria.\n\n"
            f"{context}"
        )
    return (
        f'Provide a comprehensive but concise summary about "{query}" in 2-3 paragraphs, '
        "focusing on key facts and its historical and cultural significance to Nigeria."
    )


def build_completion_payload(prompt: str, model: str) -> dict:
    return {
        "model": model,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ],
        "max_tokens": MAX_TOKENS,
        "temperature": TEMPERATURE,
    }


def extract_summary(data: Any) -> str:
    """Pull ``choices[0].message.content`` out of a completion body.

    Any missing or oddly shaped step yields an empty string.
    """
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return ""
    return content if isinstance(content, str) else ""


async def request_completion(client: AsyncOpenAI, payload: dict) -> UpstreamOutcome:
    """Send the chat completion and map the SDK's result onto an outcome.

    The raw JSON body is kept instead of the parsed model so that
    malformed responses reach ``extract_summary`` untouched.
    """
    try:
        raw = await client.chat.completions.with_raw_response.create(**payload)
    except openai.APIStatusError as e:
        return UpstreamError(e.status_code, e.response.text)
    except openai.APIConnectionError as e:
        return TransportFailure(e)
    return Success(raw.http_response.json())


async def summarize(
    query: Any,
    wiki_results: Any,
    settings: Settings,
    client: AsyncOpenAI | None,
) -> str:
    """Validate input, build the prompt and return the model's summary text."""
    if not query:
        raise ClientInputError("Missing query")

    if client is None or not settings.openai_api_key:
        raise ConfigurationError("OPENAI_API_KEY")

    query = str(query)
    context = build_context(wiki_results)
    payload = build_completion_payload(build_prompt(query, context), settings.openai_model)

    logger.info("Requesting summary for %r (%d context results)", query, len(wiki_results) if context else 0)
    data = unwrap(await request_completion(client, payload), PROVIDER)
    return extract_summary(data)
