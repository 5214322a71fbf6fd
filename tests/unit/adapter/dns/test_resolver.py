"""Unit tests for the TXT record resolvers."""

from unittest.mock import AsyncMock, MagicMock, patch

import dns.exception
import dns.resolver
import httpx
import pytest

from kiiaren.adapter.dns import DohTxtResolver, MockTxtResolver, SystemTxtResolver
from kiiaren.domain.service import TxtRecordResolver

RESOLVER_URL = "https://dns.example/resolve"
NAME = "_kiiaren-verification.acme.com"


def doh_client(payload=None, get_error=None, json_error=None, status_error=None):
    """Patch target for httpx.AsyncClient returning a canned DoH response."""
    response = MagicMock()
    response.json = MagicMock(return_value=payload, side_effect=json_error)
    response.raise_for_status = MagicMock(side_effect=status_error)

    client = MagicMock()
    client.get = AsyncMock(return_value=response, side_effect=get_error)

    client_cls = MagicMock()
    client_cls.return_value.__aenter__ = AsyncMock(return_value=client)
    client_cls.return_value.__aexit__ = AsyncMock(return_value=False)
    return client_cls, client


class TestDohTxtResolver:
    """Tests for DNS-over-HTTPS lookups."""

    @pytest.mark.asyncio
    async def test_returns_txt_answers_only(self):
        payload = {
            "Status": 0,
            "Answer": [
                {"name": NAME, "type": 5, "TTL": 300, "data": "alias.acme.com."},
                {"name": NAME, "type": 16, "TTL": 300, "data": '"kiiaren-verification=abc"'},
                {"name": NAME, "type": 16, "TTL": 300, "data": '"v=spf1 -all"'},
            ],
        }
        client_cls, client = doh_client(payload)

        with patch("httpx.AsyncClient", client_cls):
            records = await DohTxtResolver(RESOLVER_URL).lookup_txt(NAME)

        assert records == ['"kiiaren-verification=abc"', '"v=spf1 -all"']
        client.get.assert_awaited_once()
        args, kwargs = client.get.call_args
        assert args[0] == RESOLVER_URL
        assert kwargs["params"] == {"name": NAME, "type": "TXT"}
        assert kwargs["headers"]["Accept"] == "application/dns-json"

    @pytest.mark.asyncio
    async def test_no_answer_section(self):
        client_cls, _ = doh_client({"Status": 3})

        with patch("httpx.AsyncClient", client_cls):
            records = await DohTxtResolver(RESOLVER_URL).lookup_txt(NAME)

        assert records == []

    @pytest.mark.asyncio
    async def test_transport_error_yields_no_records(self):
        client_cls, _ = doh_client(get_error=httpx.ConnectError("unreachable"))

        with patch("httpx.AsyncClient", client_cls):
            records = await DohTxtResolver(RESOLVER_URL).lookup_txt(NAME)

        assert records == []

    @pytest.mark.asyncio
    async def test_http_error_status_yields_no_records(self):
        error = httpx.HTTPStatusError(
            "server error", request=MagicMock(), response=MagicMock()
        )
        client_cls, _ = doh_client({}, status_error=error)

        with patch("httpx.AsyncClient", client_cls):
            records = await DohTxtResolver(RESOLVER_URL).lookup_txt(NAME)

        assert records == []

    @pytest.mark.asyncio
    async def test_invalid_json_yields_no_records(self):
        client_cls, _ = doh_client(json_error=ValueError("not json"))

        with patch("httpx.AsyncClient", client_cls):
            records = await DohTxtResolver(RESOLVER_URL).lookup_txt(NAME)

        assert records == []


class TestSystemTxtResolver:
    """Tests for lookups through dnspython."""

    @pytest.mark.asyncio
    async def test_joins_character_strings(self):
        rdata = MagicMock()
        rdata.strings = [b"kiiaren-verification=", b"abc"]
        resolver = MagicMock()
        resolver.resolve = AsyncMock(return_value=[rdata])

        with patch("dns.asyncresolver.Resolver", return_value=resolver):
            records = await SystemTxtResolver().lookup_txt(NAME)

        assert records == ["kiiaren-verification=abc"]
        resolver.resolve.assert_awaited_once_with(NAME, "TXT")

    @pytest.mark.asyncio
    async def test_undecodable_bytes_do_not_raise(self):
        """Non-UTF-8 TXT data is replaced, not raised out of the adapter."""
        garbage = MagicMock()
        garbage.strings = [b"\xff\xfekiiaren"]
        valid = MagicMock()
        valid.strings = [b"kiiaren-verification=abc"]
        resolver = MagicMock()
        resolver.resolve = AsyncMock(return_value=[garbage, valid])

        with patch("dns.asyncresolver.Resolver", return_value=resolver):
            records = await SystemTxtResolver().lookup_txt(NAME)

        assert records == ["\ufffd\ufffdkiiaren", "kiiaren-verification=abc"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [dns.resolver.NXDOMAIN(), dns.resolver.NoAnswer(), dns.exception.Timeout()],
    )
    async def test_failures_yield_no_records(self, error):
        resolver = MagicMock()
        resolver.resolve = AsyncMock(side_effect=error)

        with patch("dns.asyncresolver.Resolver", return_value=resolver):
            records = await SystemTxtResolver().lookup_txt(NAME)

        assert records == []


class TestMockTxtResolver:
    @pytest.mark.asyncio
    async def test_records_and_queries(self):
        resolver = MockTxtResolver({NAME: ['"a"']})

        assert await resolver.lookup_txt(NAME) == ['"a"']
        assert await resolver.lookup_txt("other.example") == []
        assert resolver.queries == [NAME, "other.example"]

        resolver.clear(NAME)
        assert await resolver.lookup_txt(NAME) == []


class TestTxtRecordResolverPort:
    def test_port_is_abstract(self):
        with pytest.raises(TypeError):
            TxtRecordResolver()

    def test_adapters_implement_port(self):
        assert issubclass(DohTxtResolver, TxtRecordResolver)
        assert issubclass(SystemTxtResolver, TxtRecordResolver)
        assert isinstance(MockTxtResolver(), TxtRecordResolver)
