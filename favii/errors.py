from __future__ import annotations


class FaviiError(Exception):
    """Base class for everything favii raises on purpose."""


class URLParseError(FaviiError):
    """The input is not an absolute URL with a scheme and a host."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"invalid URL {url!r}: {reason}")
        self.url = url
        self.reason = reason


class TransportError(FaviiError):
    """Fetching the page failed before any body could be read."""

    def __init__(self, url: str, cause: BaseException | str):
        super().__init__(f"failed to fetch {url}: {cause}")
        self.url = url
        self.cause = cause


class TokenizationError(FaviiError):
    """The token stream broke off with something other than end-of-stream."""

    def __init__(self, cause: BaseException | None):
        super().__init__(f"tokenization failed: {cause}")
        self.cause = cause
