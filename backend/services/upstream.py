"""Outbound calls to third-party providers and translation of their outcomes.

``forward`` never raises for HTTP-level problems: it returns one of the
``UpstreamOutcome`` variants. ``unwrap`` turns an outcome into either the
decoded JSON body or the matching client-facing ``GatewayError``.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from errors import UpstreamProviderError, UpstreamTransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ForwardRequest:
    target_url: str
    method: str = "GET"
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Success:
    body: Any


@dataclass(frozen=True)
class UpstreamError:
    status_code: int
    raw_body: str


@dataclass(frozen=True)
class TransportFailure:
    cause: Exception


UpstreamOutcome = Success | UpstreamError | TransportFailure


async def forward(client: httpx.AsyncClient, request: ForwardRequest) -> UpstreamOutcome:
    """Issue the request once. No retries."""
    try:
        response = await client.request(
            request.method,
            request.target_url,
            headers=request.headers,
        )
    except httpx.RequestError as e:
        return TransportFailure(e)

    if not response.is_success:
        return UpstreamError(response.status_code, response.text)

    # A 2xx body that isn't JSON propagates as an internal error
    return Success(response.json())


def unwrap(outcome: UpstreamOutcome, provider: str) -> Any:
    """Return the JSON body of a successful outcome or raise the client-facing error."""
    if isinstance(outcome, Success):
        return outcome.body

    if isinstance(outcome, UpstreamError):
        logger.error("%s error: %s %s", provider, outcome.status_code, outcome.raw_body)
        raise UpstreamProviderError(provider, outcome.raw_body)

    logger.error("%s unreachable: %s", provider, outcome.cause, exc_info=outcome.cause)
    raise UpstreamTransportError()
