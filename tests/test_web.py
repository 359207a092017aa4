import json

import httpx
import pytest
import respx

from autocrab.web import WebAccessError, WebRequester


@pytest.fixture
def open_requester():
    with WebRequester(True, []) as requester:
        yield requester


def test_disabled_network_is_refused():
    with WebRequester(False, []) as requester:
        with pytest.raises(WebAccessError, match="disabled"):
            requester.check_domain("https://example.com/")


@pytest.mark.parametrize(
    "url",
    ["https://api.example.com/x", "https://example.com/", "https://a.b.example.com"],
)
def test_wildcard_pattern_allows_subdomains_and_apex(url):
    with WebRequester(True, ["*.example.com"]) as requester:
        requester.check_domain(url)
        assert requester.allowed_domains == ["*.example.com"]


@pytest.mark.parametrize(
    "url", ["https://badexample.com/", "https://example.org/", "https://example.com.evil.org/"]
)
def test_wildcard_pattern_rejects_other_hosts(url):
    with WebRequester(True, ["*.example.com"]) as requester:
        with pytest.raises(WebAccessError, match="not in the allowed list"):
            requester.check_domain(url)


def test_exact_pattern_requires_exact_host():
    with WebRequester(True, [" example.com "]) as requester:
        requester.check_domain("https://example.com/page")
        with pytest.raises(WebAccessError):
            requester.check_domain("https://www.example.com/page")


def test_relative_url_is_invalid():
    with WebRequester(True, ["example.com"]) as requester:
        with pytest.raises(WebAccessError, match="Invalid URL"):
            requester.check_domain("example.com/page")


def test_get_returns_status_headers_and_body(open_requester):
    with respx.mock:
        route = respx.get("https://example.com/data").mock(
            return_value=httpx.Response(201, text="hello", headers={"X-Test": "yes"})
        )
        resp = open_requester.get("https://example.com/data")
        assert route.called
        sent = route.calls.last.request
    assert resp.status == 201
    assert resp.body == "hello"
    assert ("x-test", "yes") in resp.headers
    assert sent.headers["user-agent"] == "AutoCrab/0.1"


def test_get_truncates_long_bodies(open_requester):
    long_body = "a" * 50010
    with respx.mock:
        respx.get("https://example.com/big").mock(
            return_value=httpx.Response(200, text=long_body)
        )
        resp = open_requester.get("https://example.com/big")
    assert resp.body.startswith("a" * 50000 + "...\n")
    assert resp.body.endswith("[内容截断，共 50010 字符]")


def test_get_keeps_at_most_twenty_headers(open_requester):
    many = {f"x-h{i}": str(i) for i in range(30)}
    with respx.mock:
        respx.get("https://example.com/h").mock(
            return_value=httpx.Response(200, text="", headers=many)
        )
        resp = open_requester.get("https://example.com/h")
    assert len(resp.headers) == 20


def test_get_refused_domain_sends_nothing():
    with WebRequester(True, ["example.com"]) as requester, respx.mock:
        route = respx.get("https://example.org/").mock(return_value=httpx.Response(200))
        with pytest.raises(WebAccessError):
            requester.get("https://example.org/")
        assert not route.called


def test_post_json_sends_document(open_requester):
    payload = {"symbol": "BTCUSDT", "n": 3}
    with respx.mock:
        route = respx.post("https://example.com/api").mock(
            return_value=httpx.Response(200, text="done")
        )
        resp = open_requester.post_json("https://example.com/api", payload)
        sent = route.calls.last.request
    assert json.loads(sent.content) == payload
    assert resp.status == 200
    assert resp.body == "done"
    assert resp.headers == []