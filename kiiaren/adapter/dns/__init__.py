"""DNS TXT record resolvers used for domain verification."""

from .resolver import (
    TXT_RECORD_TYPE,
    DohTxtResolver,
    MockTxtResolver,
    SystemTxtResolver,
)

__all__ = [
    "TXT_RECORD_TYPE",
    "DohTxtResolver",
    "MockTxtResolver",
    "SystemTxtResolver",
]
