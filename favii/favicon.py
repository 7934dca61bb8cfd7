from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from .model import LinkRecord

STRICT_ICON_RELS = ("icon", "shortcut icon")
DEFAULT_FAVICON_PATH = "/favicon.ico"


def normalize_href(href: str, *, scheme: str, hostname: str) -> str:
    """Turn a link href into an absolute URL on the page's origin.

    Classification is by plain string prefix: anything starting with "http"
    counts as absolute (so "httpfoo" does too), a leading "/" is host-relative
    and everything else is joined under the host root. Path of the page is
    never used.
    """
    if href.startswith("http"):
        return href
    if href.startswith("/"):
        return f"{scheme}://{hostname}{href}"
    return f"{scheme}://{hostname}/{href}"


def resolve_favicon_url(links: Iterable["LinkRecord"], *, scheme: str, hostname: str) -> str:
    """Pick the favicon URL advertised by ``links``.

    An exact rel of "icon" / "shortcut icon" beats any rel merely containing
    "icon" (e.g. "apple-touch-icon"); within each group the last link in
    document order wins. Falls back to /favicon.ico on the host.
    """
    strict = ""
    loose = ""
    for link in links:
        if link.rel in STRICT_ICON_RELS:
            strict = normalize_href(link.href, scheme=scheme, hostname=hostname)
        if "icon" in link.rel:
            loose = normalize_href(link.href, scheme=scheme, hostname=hostname)

    if strict:
        return strict
    if loose:
        return loose
    return f"{scheme}://{hostname}{DEFAULT_FAVICON_PATH}"
