"""Tests for the aiohttp network capability."""

import asyncio

from aiohttp import test_utils, web

from glosbe_lookup.html_parser import SoupParser
from glosbe_lookup.http_client import AiohttpNetwork
from glosbe_lookup.pipeline import compose_scraped_lines, scrape_document


async def fetch_from_test_server(body: bytes, status: int = 200):
    """Serve ``body`` once as UTF-8 HTML and GET it through AiohttpNetwork."""
    async def handler(request):
        return web.Response(body=body, status=status, content_type="text/html", charset="utf-8")

    app = web.Application()
    app.router.add_get("/lo/vi/word", handler)
    async with test_utils.TestServer(app) as server:
        return await AiohttpNetwork().get(str(server.make_url("/lo/vi/word")))


def test_get_returns_status_and_text():
    response = asyncio.run(fetch_from_test_server("<p>mèo</p>".encode("utf-8")))

    assert response.ok
    assert response.text == "<p>mèo</p>"


def test_get_returns_error_status_without_raising():
    response = asyncio.run(fetch_from_test_server(b"gone", status=404))

    assert response.status == 404
    assert response.ok is False


def test_invalid_utf8_bytes_still_yield_meanings():
    """Test a stray invalid byte is replaced instead of failing the scrape."""
    body = b"<html><body><div class='meaning'>m\xff\xfeo</div></body></html>"

    response = asyncio.run(fetch_from_test_server(body))
    lines = compose_scraped_lines(scrape_document(SoupParser().parse(response.text)))

    assert response.ok
    assert lines == ["m\ufffd\ufffdo"]
