from __future__ import annotations

import threading
from typing import Dict, Optional

from .model import PageMetaInfo


class MetaInfoCache:
    """In-memory hostname -> PageMetaInfo map, safe to share across threads.

    Entries live as long as the cache; there is no expiry. Storing an entry
    for a hostname replaces whatever was there. Lookups and stores are each
    atomic but nothing coalesces concurrent fetches of the same host: the
    last ``put`` wins.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: Dict[str, PageMetaInfo] = {}

    def get(self, hostname: str) -> Optional[PageMetaInfo]:
        with self._lock:
            return self._entries.get(hostname)

    def put(self, info: PageMetaInfo) -> None:
        with self._lock:
            self._entries[info.hostname] = info

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, hostname: object) -> bool:
        with self._lock:
            return hostname in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
