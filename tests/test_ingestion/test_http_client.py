"""Tests for the HTML fetcher."""

import httpx
import pytest
import respx

from src.ingestion.http_client import (
    DEFAULT_USER_AGENT,
    FetchError,
    HTMLFetcher,
    HTTPClientError,
)


class TestFetchError:
    """Tests for the fetch error taxonomy."""

    def test_is_http_client_error(self):
        error = FetchError("boom", status_code=503, url="https://x.gov")

        assert isinstance(error, HTTPClientError)
        assert error.status_code == 503
        assert error.url == "https://x.gov"
        assert str(error) == "boom"


class TestHTMLFetcher:
    """Tests for HTMLFetcher."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_fetch_returns_markup(self):
        respx.get("https://www.ic3.gov/PSA").mock(
            return_value=httpx.Response(200, text="<html>ok</html>")
        )

        async with HTMLFetcher() as fetcher:
            html = await fetcher.fetch("https://www.ic3.gov/PSA")

        assert html == "<html>ok</html>"

    @pytest.mark.asyncio
    @respx.mock
    async def test_sends_identity_headers(self):
        route = respx.get("https://www.ic3.gov/PSA").mock(
            return_value=httpx.Response(200, text="")
        )

        async with HTMLFetcher() as fetcher:
            await fetcher.fetch("https://www.ic3.gov/PSA")

        request = route.calls.last.request
        assert request.headers["User-Agent"] == DEFAULT_USER_AGENT
        assert request.headers["Accept"] == "text/html,*/*"

    @pytest.mark.asyncio
    @respx.mock
    async def test_custom_user_agent(self):
        route = respx.get("https://www.ic3.gov/PSA").mock(
            return_value=httpx.Response(200, text="")
        )

        async with HTMLFetcher(user_agent="TestBot/0.1") as fetcher:
            await fetcher.fetch("https://www.ic3.gov/PSA")

        assert route.calls.last.request.headers["User-Agent"] == "TestBot/0.1"

    @pytest.mark.asyncio
    @respx.mock
    async def test_non_success_status_raises(self):
        respx.get("https://oig.ssa.gov/scam-alerts/").mock(
            return_value=httpx.Response(404, text="not found")
        )

        async with HTMLFetcher() as fetcher:
            with pytest.raises(FetchError) as exc_info:
                await fetcher.fetch("https://oig.ssa.gov/scam-alerts/")

        assert exc_info.value.status_code == 404
        assert exc_info.value.url == "https://oig.ssa.gov/scam-alerts/"
        assert "404" in str(exc_info.value)

    @pytest.mark.asyncio
    @respx.mock
    async def test_no_retry_on_server_error(self):
        route = respx.get("https://consumer.ftc.gov/consumer-alerts").mock(
            return_value=httpx.Response(503)
        )

        async with HTMLFetcher() as fetcher:
            with pytest.raises(FetchError):
                await fetcher.fetch("https://consumer.ftc.gov/consumer-alerts")

        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_transport_error_raises_fetch_error(self):
        respx.get("https://www.ic3.gov/PSA").mock(
            side_effect=httpx.ConnectError("Connection refused")
        )

        async with HTMLFetcher() as fetcher:
            with pytest.raises(FetchError) as exc_info:
                await fetcher.fetch("https://www.ic3.gov/PSA")

        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    @respx.mock
    async def test_follows_redirects(self):
        respx.get("https://oig.ssa.gov/scam-alerts").mock(
            return_value=httpx.Response(
                301, headers={"Location": "https://oig.ssa.gov/scam-alerts/"}
            )
        )
        respx.get("https://oig.ssa.gov/scam-alerts/").mock(
            return_value=httpx.Response(200, text="<html>alerts</html>")
        )

        async with HTMLFetcher() as fetcher:
            html = await fetcher.fetch("https://oig.ssa.gov/scam-alerts")

        assert html == "<html>alerts</html>"

    @pytest.mark.asyncio
    async def test_injected_client_not_closed(self):
        client = httpx.AsyncClient()
        fetcher = HTMLFetcher(client=client)

        await fetcher.aclose()

        assert not client.is_closed
        await client.aclose()

    @pytest.mark.asyncio
    async def test_malformed_url_raises_fetch_error(self):
        async with HTMLFetcher() as fetcher:
            with pytest.raises(FetchError) as exc_info:
                await fetcher.fetch("https://consumer.ftc.gov/consumer-alerts/bad\x7f")

        assert isinstance(exc_info.value.__cause__, httpx.InvalidURL)
        assert exc_info.value.status_code is None
