"""TXT record lookups for the domain verification challenge.

Two backends:
- DNS-over-HTTPS JSON API (Google / Cloudflare format), the default
- the host's resolver via dnspython

Every failure is logged and reported as an empty record list, so the
verification engine reports "no TXT records found" instead of erroring.
"""

import dns.asyncresolver
import dns.exception
import dns.resolver
import httpx
import logfire
from pydantic import BaseModel, ConfigDict, Field

from kiiaren.adapter.error import DnsLookupError
from kiiaren.domain.service.domain_claim_service import TxtRecordResolver

# RR type code for TXT in DoH JSON answers
TXT_RECORD_TYPE = 16


class DnsAnswer(BaseModel):
    """One answer entry of a DoH JSON response."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    type: int
    ttl: int | None = Field(default=None, alias="TTL")
    data: str


class DnsResponse(BaseModel):
    """DoH JSON response (application/dns-json).

    Only the fields needed to extract TXT answers are modelled.
    """

    model_config = ConfigDict(populate_by_name=True)

    status: int = Field(default=0, alias="Status")
    answer: list[DnsAnswer] = Field(default_factory=list, alias="Answer")


class DohTxtResolver(TxtRecordResolver):
    """TXT lookups through a DNS-over-HTTPS JSON endpoint."""

    def __init__(self, resolver_url: str, timeout: float = 10.0) -> None:
        """Initialize DoH resolver.

        Args:
            resolver_url: JSON API endpoint, e.g. https://dns.google/resolve
            timeout: Request timeout in seconds
        """
        self.resolver_url = resolver_url
        self.timeout = timeout

    async def lookup_txt(self, name: str) -> list[str]:
        """Return the raw data of every TXT answer at ``name``.

        Args:
            name: Fully qualified DNS name

        Returns:
            TXT record data as served (usually still quoted), or an empty
            list if the lookup failed or found nothing
        """
        with logfire.span("dns.lookup_txt", name=name, backend="doh"):
            try:
                response = await self._query(name)
            except DnsLookupError as e:
                logfire.warn("DNS lookup failed", name=name, error=str(e))
                return []

            records = [
                answer.data
                for answer in response.answer
                if answer.type == TXT_RECORD_TYPE
            ]
            logfire.info(
                "DNS TXT lookup complete",
                name=name,
                dns_status=response.status,
                record_count=len(records),
            )
            return records

    async def _query(self, name: str) -> DnsResponse:
        """Run the HTTP query.

        Raises:
            DnsLookupError: On transport errors, non-2xx status or a body
                that is not a DoH JSON response
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(
                    self.resolver_url,
                    params={"name": name, "type": "TXT"},
                    headers={"Accept": "application/dns-json"},
                )
                response.raise_for_status()
                return DnsResponse.model_validate(response.json())
        except httpx.HTTPError as e:
            raise DnsLookupError(f"DoH request for {name} failed: {e}") from e
        except ValueError as e:
            # JSON decode and pydantic validation errors
            raise DnsLookupError(f"Invalid DoH response for {name}: {e}") from e


class SystemTxtResolver(TxtRecordResolver):
    """TXT lookups through the host's configured resolver (dnspython)."""

    def __init__(self, timeout: float = 10.0) -> None:
        self.timeout = timeout

    async def lookup_txt(self, name: str) -> list[str]:
        """Return every TXT record at ``name``, character-strings joined."""
        with logfire.span("dns.lookup_txt", name=name, backend="system"):
            try:
                answers = await self._query(name)
            except DnsLookupError as e:
                logfire.warn("DNS lookup failed", name=name, error=str(e))
                return []

            records = []
            for rdata in answers:
                # A TXT record may be split into several character-strings.
                # Undecodable bytes become U+FFFD and simply fail to match.
                records.append(
                    "".join(
                        s.decode("utf-8", errors="replace")
                        if isinstance(s, bytes)
                        else s
                        for s in rdata.strings
                    )
                )
            logfire.info(
                "DNS TXT lookup complete", name=name, record_count=len(records)
            )
            return records

    async def _query(self, name: str) -> list:
        """Resolve TXT rdata; a missing name or record type yields []."""
        resolver = dns.asyncresolver.Resolver()
        resolver.lifetime = self.timeout
        try:
            answers = await resolver.resolve(name, "TXT")
            return list(answers)
        except (dns.resolver.NXDOMAIN, dns.resolver.NoAnswer):
            return []
        except dns.exception.DNSException as e:
            raise DnsLookupError(f"DNS query for {name} failed: {e}") from e


class MockTxtResolver(TxtRecordResolver):
    """In-memory TXT records for tests.

    Records are returned exactly as stored, so tests can use the quoted
    form a DoH endpoint serves.
    """

    def __init__(self, records: dict[str, list[str]] | None = None) -> None:
        self.records: dict[str, list[str]] = dict(records or {})
        self.queries: list[str] = []

    def set_records(self, name: str, records: list[str]) -> None:
        """Publish (or replace) the TXT records at ``name``."""
        self.records[name] = list(records)

    def clear(self, name: str | None = None) -> None:
        """Remove the records at ``name``, or everything."""
        if name is None:
            self.records.clear()
        else:
            self.records.pop(name, None)

    async def lookup_txt(self, name: str) -> list[str]:
        self.queries.append(name)
        return list(self.records.get(name, []))
