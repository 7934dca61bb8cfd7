from __future__ import annotations

from typing import Optional

import httpx

from .cache import MetaInfoCache
from .config import Settings
from .extract import extract_tags
from .fetch import iter_body, make_client, open_body
from .log import get_logger
from .model import PageMetaInfo
from .tokenizer import tokenize
from .urls import parse_origin

log = get_logger(__name__)


class Favii:
    """Fetches pages and hands back their meta/link tags.

    Pass your own ``httpx.Client`` to control transport details; otherwise one
    is built from ``settings`` and closed together with this object.

    With caching on, results are kept per hostname for the lifetime of the
    cache: asking for another path on a host that is already cached returns
    the page fetched first. Use ``refresh=True`` to fetch again and replace
    the entry.
    """

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        *,
        use_cache: Optional[bool] = None,
        cache: Optional[MetaInfoCache] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or Settings()
        self._owns_client = client is None
        self.client = client if client is not None else make_client(self.settings)
        self.use_cache = self.settings.use_cache if use_cache is None else use_cache
        self.cache = cache if cache is not None else MetaInfoCache()

    def __enter__(self) -> "Favii":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def get_page_info(self, url: str, *, refresh: bool = False) -> PageMetaInfo:
        """Return the meta/link tags of ``url``.

        Raises URLParseError before any request for a malformed URL,
        TransportError when the request fails and TokenizationError when the
        body breaks off mid-document.
        """
        origin = parse_origin(url)

        if self.use_cache and not refresh:
            cached = self.cache.get(origin.hostname)
            if cached is not None:
                log.debug("Cache hit for %s (%s)", origin.hostname, cached.url)
                return cached

        response = open_body(self.client, url, raise_for_status=self.settings.raise_for_status)
        try:
            tokens = tokenize(iter_body(response, max_bytes=self.settings.max_bytes))
            metas, links = extract_tags(tokens)
        finally:
            response.close()

        info = PageMetaInfo(
            url=origin.url,
            scheme=origin.scheme,
            hostname=origin.hostname,
            metas=metas,
            links=links,
        )
        if self.use_cache:
            self.cache.put(info)
        return info

    # Name used by earlier releases.
    get_meta_info = get_page_info

    def get_favicon_url(self, url: str, *, refresh: bool = False) -> str:
        return self.get_page_info(url, refresh=refresh).get_favicon_url()
