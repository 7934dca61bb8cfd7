from __future__ import annotations

import argparse
import json
from typing import List

from . import __version__
from .client import Favii
from .config import load_settings
from .errors import FaviiError
from .log import LogConfig, get_logger, setup_logging

log = get_logger(__name__)


def main(argv: List[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        prog="favii",
        description="Find the favicon URL (and meta/link tags) of web pages.",
    )
    p.add_argument("-V", "--version", action="version", version=f"favii {__version__}")
    p.add_argument("--config", default=None, help="YAML config file (optional). Env vars override defaults.")
    sub = p.add_subparsers(dest="cmd", required=True)

    fav = sub.add_parser("favicon", help="Print the favicon URL of each page, one per line.")
    fav.add_argument("urls", nargs="+", help="Absolute page URLs.")
    _add_common(fav)

    meta = sub.add_parser("meta", help="Print the meta/link tags of a page as JSON.")
    meta.add_argument("url", help="Absolute page URL.")
    _add_common(meta)

    args = p.parse_args(argv)
    cfg = load_settings(args.config)
    if args.log_level:
        cfg.log_level = args.log_level
    if args.no_color:
        cfg.no_color = True
    if args.no_cache:
        cfg.use_cache = False
    setup_logging(LogConfig(level=cfg.log_level, no_color=cfg.no_color))

    with Favii(settings=cfg) as f:
        if args.cmd == "favicon":
            return _cmd_favicon(f, args.urls)
        if args.cmd == "meta":
            return _cmd_meta(f, args.url)
    return 2


def _add_common(sp: argparse.ArgumentParser) -> None:
    sp.add_argument("--log-level", default=None, help="DEBUG/INFO/WARN/ERROR (overrides env/config).")
    sp.add_argument("--no-color", action="store_true", help="Disable colored logging.")
    sp.add_argument("--no-cache", action="store_true", help="Fetch every URL even when its host was seen before.")


def _cmd_favicon(f: Favii, urls: List[str]) -> int:
    rc = 0
    for url in urls:
        try:
            print(f.get_favicon_url(url))
        except FaviiError as e:
            log.error("%s", e)
            rc = 1
    return rc


def _cmd_meta(f: Favii, url: str) -> int:
    try:
        info = f.get_page_info(url)
    except FaviiError as e:
        log.error("%s", e)
        return 1
    data = info.to_dict()
    data["favicon_url"] = info.get_favicon_url()
    print(json.dumps(data, ensure_ascii=False, indent=2))
    return 0
