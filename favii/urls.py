from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

from .errors import URLParseError


@dataclass(frozen=True)
class Origin:
    url: str
    scheme: str
    hostname: str


def parse_origin(url: str) -> Origin:
    """Split ``url`` into scheme and hostname (port dropped).

    Raises URLParseError for anything that is not an absolute URL, e.g.
    ``"lol-lol.com"`` which has neither scheme nor host.
    """
    try:
        p = urlsplit(url)
        hostname = p.hostname
    except ValueError as e:
        raise URLParseError(url, str(e)) from e

    if not p.scheme:
        raise URLParseError(url, "missing scheme")
    if not hostname:
        raise URLParseError(url, "missing host")
    return Origin(url=url, scheme=p.scheme, hostname=hostname)
