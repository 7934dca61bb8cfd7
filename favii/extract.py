from __future__ import annotations

from typing import Iterable, List, Tuple

from .errors import TokenizationError
from .log import get_logger
from .model import LinkRecord, MetaRecord
from .tokenizer import Token, TokenKind

log = get_logger(__name__)

_TAG_KINDS = (TokenKind.START_TAG, TokenKind.SELF_CLOSING_TAG)


def extract_tags(tokens: Iterable[Token]) -> Tuple[Tuple[MetaRecord, ...], Tuple[LinkRecord, ...]]:
    """Collect every <meta> and <link> tag from a token stream, in document order.

    One record per tag: unknown attributes are ignored, missing ones stay
    empty and a repeated attribute keeps its last value. An ERROR token
    aborts the scan with TokenizationError; nothing collected so far is
    returned in that case.
    """
    metas: List[MetaRecord] = []
    links: List[LinkRecord] = []

    for tok in tokens:
        if tok.kind is TokenKind.ERROR:
            raise TokenizationError(tok.error) from tok.error
        if tok.kind not in _TAG_KINDS:
            continue

        if tok.name == "meta":
            name = content = ""
            for key, value in tok.attrs:
                if key == "name":
                    name = value
                elif key == "content":
                    content = value
            metas.append(MetaRecord(name=name, content=content))
        elif tok.name == "link":
            rel = href = ""
            for key, value in tok.attrs:
                if key == "rel":
                    rel = value
                elif key == "href":
                    href = value
            links.append(LinkRecord(rel=rel, href=href))

    log.debug("Extracted %d meta and %d link tags", len(metas), len(links))
    return tuple(metas), tuple(links)
