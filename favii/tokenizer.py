from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Tuple

from lxml import etree


class TokenKind(enum.Enum):
    START_TAG = "start_tag"
    SELF_CLOSING_TAG = "self_closing_tag"
    TEXT = "text"
    ERROR = "error"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    name: str = ""
    attrs: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)
    text: str = ""
    error: Optional[BaseException] = None


def tokenize(chunks: Iterable[bytes]) -> Iterator[Token]:
    """Lazily turn a stream of HTML byte chunks into tokens.

    Chunks are pushed into an lxml pull parser one at a time and the tokens
    for whatever it has seen so far are yielded before the next chunk is read.
    Elements are cleared once closed, so only the currently open branch stays
    in memory.

    The generator simply ends at end-of-stream. If the chunk source or the
    parser raises, a single ERROR token carrying the exception is yielded and
    the stream stops there.
    """
    parser = etree.HTMLPullParser(events=("start", "end"))
    fed = False
    try:
        for chunk in chunks:
            if not chunk:
                continue
            parser.feed(chunk)
            fed = True
            yield from _drain(parser)
        if not fed:
            return
        parser.close()
        yield from _drain(parser)
    except Exception as e:
        yield Token(kind=TokenKind.ERROR, error=e)


def _drain(parser: etree.HTMLPullParser) -> Iterator[Token]:
    for event, el in parser.read_events():
        # comments / processing instructions carry a non-str tag
        if not isinstance(el.tag, str):
            continue
        if event == "start":
            attrs = tuple((str(k), "" if v is None else str(v)) for k, v in el.attrib.items())
            yield Token(kind=TokenKind.START_TAG, name=el.tag.lower(), attrs=attrs)
        else:
            el.clear(keep_tail=True)
