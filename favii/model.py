from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Tuple

from .favicon import resolve_favicon_url


@dataclass(frozen=True)
class MetaRecord:
    name: str = ""
    content: str = ""


@dataclass(frozen=True)
class LinkRecord:
    rel: str = ""
    href: str = ""


@dataclass(frozen=True)
class PageMetaInfo:
    """Meta and link tags of one fetched page.

    ``scheme`` and ``hostname`` describe the URL that was requested, never an
    href found inside the page; relative favicon hrefs are resolved against them.
    """

    url: str
    scheme: str
    hostname: str
    metas: Tuple[MetaRecord, ...] = field(default_factory=tuple)
    links: Tuple[LinkRecord, ...] = field(default_factory=tuple)

    def get_favicon_url(self) -> str:
        return resolve_favicon_url(self.links, scheme=self.scheme, hostname=self.hostname)

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["metas"] = list(d["metas"])
        d["links"] = list(d["links"])
        return d
