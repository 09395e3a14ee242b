import asyncio
import json

import httpx
import pytest

from ddgsearch import DDGS
from ddgsearch.client import REFERER, USER_AGENTS
from ddgsearch.config.schema import Config
from ddgsearch.errors import (
    BackendNotImplementedError,
    InvalidOptionError,
    MissingKeywordsError,
    UnknownBackendError,
)
from ddgsearch.models import SearchOptions


async def _no_sleep(delay: float) -> None:
    return None


def _feed_handler(requests: list[httpx.Request]):
    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.url.host == "duckduckgo.com":
            return httpx.Response(200, text='vqd="4-token"')
        if request.url.host == "links.duckduckgo.com":
            if request.url.params["s"] != "0":
                return httpx.Response(200, text=json.dumps({"results": []}))
            return httpx.Response(
                200,
                text=json.dumps(
                    {"results": [{"u": "https://a.example", "t": "A", "a": "alpha"}]}
                ),
            )
        return httpx.Response(
            200,
            text=(
                '<div class="results_links"><a class="result__a" href="https://h.example">H</a>'
                '<a class="result__snippet">html</a></div>'
            ),
        )

    return handler


def test_default_headers_pick_one_user_agent() -> None:
    client = DDGS()
    assert client.headers["User-Agent"] in USER_AGENTS
    assert client.headers["Referer"] == REFERER
    assert client.timeout == 10.0


def test_caller_headers_and_timeout_win() -> None:
    client = DDGS(headers={"User-Agent": "custom"}, timeout_ms=2500)
    assert client.headers == {"User-Agent": "custom"}
    assert client.timeout == 2.5


def test_config_headers_used_when_present() -> None:
    config = Config.model_validate({"http": {"headers": {"User-Agent": "from-config"}, "timeoutMs": 500}})
    client = DDGS(config)
    assert client.headers == {"User-Agent": "from-config"}
    assert client.timeout == 0.5


def test_resolve_options_defaults_and_overrides() -> None:
    client = DDGS()
    assert client.resolve_options() == SearchOptions(
        region="wt-wt", safesearch="moderate", timelimit="none", backend="api"
    )
    resolved = client.resolve_options({"region": "us-en", "timelimit": "week"}, backend="html")
    assert resolved == SearchOptions(region="us-en", safesearch="moderate", timelimit="w", backend="html")


def test_resolve_options_uses_config_defaults() -> None:
    config = Config.model_validate({"search": {"region": "fr-fr", "backend": "html"}})
    resolved = DDGS(config).resolve_options({})
    assert resolved.region == "fr-fr"
    assert resolved.backend == "html"


def test_resolve_options_rejects_bad_values() -> None:
    client = DDGS()
    with pytest.raises(InvalidOptionError):
        client.resolve_options({"safesearch": "strict"})
    with pytest.raises(InvalidOptionError):
        client.resolve_options({"timelimit": "decade"})
    with pytest.raises(InvalidOptionError):
        client.resolve_options({"page": 2})


@pytest.mark.asyncio
@pytest.mark.parametrize("backend", ["api", "html"])
async def test_empty_keywords_fail_for_every_backend(backend: str) -> None:
    client = DDGS(transport=httpx.MockTransport(_feed_handler([])), sleep=_no_sleep)
    with pytest.raises(MissingKeywordsError):
        await client.text("", {"backend": backend})


@pytest.mark.asyncio
async def test_empty_keywords_fail_with_empty_options() -> None:
    client = DDGS(transport=httpx.MockTransport(_feed_handler([])), sleep=_no_sleep)
    with pytest.raises(MissingKeywordsError):
        await client.search("", {})


@pytest.mark.asyncio
async def test_lite_backend_not_implemented() -> None:
    client = DDGS(transport=httpx.MockTransport(_feed_handler([])), sleep=_no_sleep)
    with pytest.raises(BackendNotImplementedError):
        await client.text("cats", {"backend": "lite"})


@pytest.mark.asyncio
async def test_unknown_backend() -> None:
    client = DDGS(transport=httpx.MockTransport(_feed_handler([])), sleep=_no_sleep)
    with pytest.raises(UnknownBackendError) as exc_info:
        await client.text("cats", {"backend": "bogus"})
    assert not isinstance(exc_info.value, BackendNotImplementedError)


@pytest.mark.asyncio
async def test_text_dispatches_to_feed_backend_with_headers() -> None:
    requests: list[httpx.Request] = []
    client = DDGS(
        headers={"User-Agent": "test-agent"},
        transport=httpx.MockTransport(_feed_handler(requests)),
        sleep=_no_sleep,
    )

    results = await client.text("cats")

    assert [r.to_dict() for r in results] == [
        {"title": "A", "href": "https://a.example", "body": "alpha"}
    ]
    assert [r.url.host for r in requests] == ["duckduckgo.com", "links.duckduckgo.com", "links.duckduckgo.com"]
    assert all(r.headers["User-Agent"] == "test-agent" for r in requests)


@pytest.mark.asyncio
async def test_text_dispatches_to_html_backend() -> None:
    requests: list[httpx.Request] = []
    client = DDGS(transport=httpx.MockTransport(_feed_handler(requests)), sleep=_no_sleep)

    results = await client.text("cats", backend="html")

    assert [r.href for r in results] == ["https://h.example"]
    assert requests[0].method == "POST"
    assert requests[0].url.host == "html.duckduckgo.com"


@pytest.mark.asyncio
async def test_concurrent_searches_do_not_share_state() -> None:
    requests: list[httpx.Request] = []
    client = DDGS(transport=httpx.MockTransport(_feed_handler(requests)), sleep=_no_sleep)

    first, second = await asyncio.gather(client.text("cats"), client.text("dogs"))

    assert [r.href for r in first] == ["https://a.example"]
    assert [r.href for r in second] == ["https://a.example"]
