from favii.favicon import normalize_href, resolve_favicon_url
from favii.model import LinkRecord, PageMetaInfo


def _resolve(*links, scheme="https", hostname="example.com"):
    return resolve_favicon_url([LinkRecord(rel=r, href=h) for r, h in links], scheme=scheme, hostname=hostname)


def test_no_links_falls_back_to_default_path():
    assert _resolve() == "https://example.com/favicon.ico"
    assert _resolve(("stylesheet", "/main.css"), scheme="http", hostname="a.org") == "http://a.org/favicon.ico"


def test_strict_absolute_href_is_returned_unchanged():
    got = _resolve(
        ("apple-touch-icon", "/touch.png"),
        ("icon", "https://cdn.example.net/fav.png"),
        ("mask-icon", "/mask.svg"),
    )
    assert got == "https://cdn.example.net/fav.png"


def test_shortcut_icon_host_relative():
    assert _resolve(("shortcut icon", "/img/x.svg")) == "https://example.com/img/x.svg"


def test_shortcut_icon_path_relative_gets_root_slash():
    assert _resolve(("shortcut icon", "img/x.svg")) == "https://example.com/img/x.svg"


def test_loose_match_used_when_no_strict_match():
    assert _resolve(("apple-touch-icon", "/a.png")) == "https://example.com/a.png"


def test_last_strict_match_wins():
    got = _resolve(("icon", "/first.png"), ("shortcut icon", "/second.ico"))
    assert got == "https://example.com/second.ico"


def test_strict_beats_later_loose_match():
    got = _resolve(("icon", "/fav.png"), ("apple-touch-icon", "/touch.png"))
    assert got == "https://example.com/fav.png"


def test_rel_match_is_case_sensitive():
    # "Icon" is neither an exact match nor contains lowercase "icon"
    assert _resolve(("Icon", "/x.png")) == "https://example.com/favicon.ico"
    assert _resolve(("ICON", "/x.png"), ("icon-ish", "/y.png")) == "https://example.com/y.png"


def test_normalize_href_prefix_rules():
    kw = {"scheme": "https", "hostname": "example.com"}
    assert normalize_href("http://other.org/f.ico", **kw) == "http://other.org/f.ico"
    assert normalize_href("httpfoo.png", **kw) == "httpfoo.png"
    assert normalize_href("/f.ico", **kw) == "https://example.com/f.ico"
    assert normalize_href("f.ico", **kw) == "https://example.com/f.ico"
    assert normalize_href("//cdn.org/f.ico", **kw) == "https://example.com//cdn.org/f.ico"


def test_page_meta_info_uses_its_own_origin():
    info = PageMetaInfo(
        url="http://example.org:8080/some/deep/page",
        scheme="http",
        hostname="example.org",
        links=(LinkRecord(rel="icon", href="fav.png"),),
    )
    assert info.get_favicon_url() == "http://example.org/fav.png"
