import pytest

from phpfuncs.urls import (
    parse_str,
    parse_url,
    rawurldecode,
    rawurlencode,
    urldecode,
    urlencode,
)


def test_parse_url_components():
    parts = parse_url("https://example.com:8080/path?q=1#frag")
    assert parts.scheme == "https"
    assert parts.hostname == "example.com"
    assert parts.port == 8080
    assert parts.path == "/path"
    assert parts.query == "q=1"
    assert parts.fragment == "frag"


def test_parse_url_relative():
    parts = parse_url("foo/bar.ext")
    assert parts.scheme == ""
    assert parts.path == "foo/bar.ext"


@pytest.mark.parametrize("raw", ["http://example.com/\x7f", "http://exa\nmple.com", ":foo"])
def test_parse_url_rejects_invalid(raw):
    with pytest.raises(ValueError):
        parse_url(raw)


def test_parse_str_collects_repeated_keys():
    assert parse_str("a=1&b=2&a=3") == {"a": ["1", "3"], "b": ["2"]}


def test_parse_str_blank_and_missing_values():
    assert parse_str("a=&b&&c=x") == {"a": [""], "b": [""], "c": ["x"]}


def test_parse_str_decodes():
    assert parse_str("k=a+b") == {"k": ["a b"]}
    assert parse_str("k%3D=%26") == {"k=": ["&"]}


@pytest.mark.parametrize("query", ["x=%zz", "x=%4", "a=1;b=2"])
def test_parse_str_rejects_invalid(query):
    with pytest.raises(ValueError):
        parse_str(query)


def test_rawurlencode_pinned():
    assert rawurlencode("a b") == "a%20b"


def test_urlencode_pinned():
    assert urlencode("a b") == "a+b"


def test_rawurlencode_escapes_segment_separators():
    encoded = rawurlencode("a/b?c;d,e")
    for ch in "/?;,":
        assert ch not in encoded
    assert rawurldecode(encoded) == "a/b?c;d,e"


@pytest.mark.parametrize(
    "text", ["", "plain", "a b+c", "100% & more", "你好，世界", "/?&=#~_.-"]
)
def test_round_trips(text):
    assert rawurldecode(rawurlencode(text)) == text
    assert urldecode(urlencode(text)) == text


def test_urlencode_output_is_safe():
    encoded = urlencode("a b&c=d/e")
    assert set(encoded) <= set(
        "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_.~%+"
    )
    assert urldecode(encoded) == "a b&c=d/e"


def test_rawurldecode_keeps_plus():
    assert rawurldecode("a+b") == "a+b"


@pytest.mark.parametrize("func", [rawurldecode, urldecode])
@pytest.mark.parametrize("bad", ["%", "%g0", "abc%2"])
def test_decode_rejects_bad_escapes(func, bad):
    with pytest.raises(ValueError):
        func(bad)