"""
HttpFetcher tests against a local aiohttp server.
"""

import asyncio

from aiohttp import test_utils, web
from tests.conftest import fixed_clock, read_log_messages

from fetchlist.core.downloader import Downloader
from fetchlist.net.fetcher import FetchResult, HttpFetcher

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 2048


def make_app() -> web.Application:
    async def image(request):
        return web.Response(body=PNG_BYTES, content_type="image/png")

    async def missing(request):
        return web.Response(status=404, text="no such file")

    async def moved(request):
        raise web.HTTPFound("/files/image.png")

    app = web.Application()
    app.router.add_get("/files/image.png", image)
    app.router.add_get("/files/missing.png", missing)
    app.router.add_get("/old/image.png", moved)
    return app


def fetch_all(paths):
    async def scenario():
        async with test_utils.TestServer(make_app()) as server:
            async with HttpFetcher() as fetcher:
                return [
                    await fetcher.fetch(str(server.make_url(path))) for path in paths
                ]

    return asyncio.run(scenario())


def test_successful_fetch_returns_status_and_body():
    [result] = fetch_all(["/files/image.png"])
    assert result == FetchResult(status=200, body=PNG_BYTES)
    assert result.ok


def test_error_status_returns_body_instead_of_raising():
    [result] = fetch_all(["/files/missing.png"])
    assert result.status == 404
    assert result.body == b"no such file"
    assert not result.ok


def test_redirect_reports_first_status_in_chain():
    [result] = fetch_all(["/old/image.png"])
    assert result.status == 302
    assert not result.ok


def test_redirected_link_counts_as_error(tmp_path, make_config):
    async def scenario():
        async with test_utils.TestServer(make_app()) as server:
            links = tmp_path / "links.txt"
            links.write_text(str(server.make_url("/old/image.png")), encoding="utf-8")
            config = make_config(links, log_level=1)
            return await Downloader(config, clock=fixed_clock).run()

    report = asyncio.run(scenario())

    assert (report.stats.downloaded, report.stats.errored) == (0, 1)
    assert not (tmp_path / "out" / "image.png").exists()
    messages = read_log_messages(report.log_file)
    assert any(m.endswith("/old/image.png (HTTP code: 302)") for m in messages)


def test_connection_failure_returns_none():
    async def scenario():
        async with HttpFetcher() as fetcher:
            return await fetcher.fetch("http://127.0.0.1:1/nothing.jpg")

    assert asyncio.run(scenario()) is None


def test_invalid_url_returns_none():
    async def scenario():
        async with HttpFetcher() as fetcher:
            return await fetcher.fetch("not a url at all")

    assert asyncio.run(scenario()) is None


def test_downloader_end_to_end(tmp_path, make_config):
    async def scenario():
        async with test_utils.TestServer(make_app()) as server:
            links = tmp_path / "links.txt"
            links.write_text(
                "\n".join(
                    str(server.make_url(p))
                    for p in ("/files/image.png", "/files/missing.png")
                ),
                encoding="utf-8",
            )
            config = make_config(links, log_level=3)
            report = await Downloader(config, clock=fixed_clock).run()
            return report

    report = asyncio.run(scenario())

    assert (report.stats.downloaded, report.stats.errored) == (1, 1)
    assert (tmp_path / "out" / "image.png").read_bytes() == PNG_BYTES
    assert not (tmp_path / "out" / "missing.png").exists()
    messages = read_log_messages(report.log_file)
    assert any(
        m.endswith("/files/image.png | Size: 2.01 KB | HTTP code: 200")
        for m in messages
    )
    assert any(m.endswith("/files/missing.png (HTTP code: 404)") for m in messages)
