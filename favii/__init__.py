"""favii: fetch a page, collect its meta/link tags and resolve its favicon URL."""

from pathlib import Path

from .client import Favii
from .errors import FaviiError, TokenizationError, TransportError, URLParseError
from .model import LinkRecord, MetaRecord, PageMetaInfo


def _read_version() -> str:
    p = Path(__file__).resolve().parents[1] / "VERSION"
    try:
        return p.read_text(encoding="utf-8").strip()
    except OSError:
        # Installed without the source tree next to it.
        return "0.3.0"


__version__ = _read_version()

__all__ = [
    "Favii",
    "FaviiError",
    "LinkRecord",
    "MetaRecord",
    "PageMetaInfo",
    "TokenizationError",
    "TransportError",
    "URLParseError",
    "__version__",
]
