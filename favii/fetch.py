from __future__ import annotations

from typing import Iterator

import httpx

from .config import Settings
from .errors import TransportError
from .log import get_logger

log = get_logger(__name__)


def make_client(cfg: Settings) -> httpx.Client:
    timeout = httpx.Timeout(cfg.timeout_s, connect=cfg.timeout_s)
    headers = {"User-Agent": cfg.user_agent}
    return httpx.Client(follow_redirects=cfg.follow_redirects, headers=headers, timeout=timeout)


def open_body(client: httpx.Client, url: str, *, raise_for_status: bool = False) -> httpx.Response:
    """Send a streaming GET for ``url`` and return the still-open response.

    The caller owns the response and must close it. Non-2xx responses are
    returned like any other unless ``raise_for_status`` is set.
    """
    try:
        request = client.build_request("GET", url)
        response = client.send(request, stream=True)
    except httpx.HTTPError as e:
        raise TransportError(url, e) from e

    log.debug("GET %s -> %s", url, response.status_code)
    if raise_for_status and not response.is_success:
        response.close()
        raise TransportError(url, f"HTTP {response.status_code}")
    return response


def iter_body(response: httpx.Response, *, max_bytes: int = 0) -> Iterator[bytes]:
    """Yield body chunks; stop once ``max_bytes`` are out when it is positive."""
    if max_bytes <= 0:
        yield from response.iter_bytes()
        return

    remaining = max_bytes
    for chunk in response.iter_bytes():
        if len(chunk) >= remaining:
            yield chunk[:remaining]
            log.debug("Body of %s truncated at %d bytes", response.url, max_bytes)
            return
        remaining -= len(chunk)
        yield chunk
