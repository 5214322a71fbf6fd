"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class DnsLookupError(AdapterError):
    """A DNS query could not be completed (transport, HTTP status or parse).

    Resolvers catch this and report "no records"; it never reaches the
    domain layer.
    """

    pass
