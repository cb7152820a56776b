# sends the single outbound POST for a provider and classifies the outcome right where
# the transport result becomes available. no retries, one attempt per request.

import logging
from typing import Any, Dict

import httpx

from diagram_gateway.providers.base import MalformedResponseError, Provider, UpstreamError

logger = logging.getLogger(__name__)

CONNECT_TIMEOUT = 10.0


def build_headers(provider: Provider) -> Dict[str, str]:
    headers: Dict[str, str] = {}
    if provider.authorization:
        headers["Authorization"] = provider.authorization
    headers.update(provider.headers)
    # provider extras never replace the content type
    headers["Content-Type"] = "application/json"
    return headers


def redact_headers(headers: Dict[str, str]) -> Dict[str, str]:
    return {k: ("***" if k.lower() == "authorization" else v) for k, v in headers.items()}


def redact_url(url: str) -> str:
    parsed = httpx.URL(url)
    if "key" not in parsed.params:
        return url
    return str(parsed.copy_set_param("key", "***"))


def _error_details(response: httpx.Response) -> Any:
    try:
        body: Any = response.json()
    except ValueError:
        body = response.text
    if isinstance(body, dict) and body.get("error"):
        return body["error"]
    # never the request URL: the Gemini key sits in its query string
    return body or f"Request failed with status code {response.status_code}"


async def dispatch(provider: Provider, prompt: str, *, timeout: float = 60.0) -> Any:
    """POST the provider's request body and return the parsed JSON response.

    Raises UpstreamError on a transport failure or a non-2xx status and
    MalformedResponseError when a 2xx body is not JSON.
    """
    headers = build_headers(provider)
    body = provider.build_request(prompt)
    logger.info("making request to %s", redact_url(provider.url))
    logger.debug("with headers: %s", redact_headers(headers))
    logger.debug("with body: %s", body)

    try:
        async with httpx.AsyncClient(timeout=httpx.Timeout(timeout, connect=CONNECT_TIMEOUT)) as client:
            r = await client.post(provider.url, json=body, headers=headers)
            logger.info("response status: %s", r.status_code)
            r.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise UpstreamError(e.response.status_code, _error_details(e.response)) from e
    except httpx.HTTPError as e:
        raise UpstreamError(None, str(e)) from e

    try:
        return r.json()
    except ValueError as e:
        raise MalformedResponseError(details=r.text or str(e)) from e


def extract(provider: Provider, data: Any) -> Any:
    try:
        return provider.extract_text(data)
    except (KeyError, IndexError, TypeError) as e:
        raise MalformedResponseError(
            details=f"unexpected {provider.name.value} response shape: {e!r}"
        ) from e
