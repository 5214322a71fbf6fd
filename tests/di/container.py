"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from kiiaren.util.di import PROVIDERS, Component, ProviderBase, get_provider


def _mockable() -> list[type[ProviderBase]]:
    return [p for p in PROVIDERS if p.__subclasses__()]


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every mockable component is mocked by default.

    Args:
        unmock: Components that should use their production implementation,
            e.g. ``{"persistence"}`` to run against Postgres with in-memory DNS.

    Raises:
        ValueError: If ``unmock`` names a component that has no mock
    """
    unmock = unmock or set()
    known = {p.__mock_component__ for p in _mockable()}
    unknown = unmock - known
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = [
        get_provider(
            base,
            use_mock=bool(base.__subclasses__())
            and base.__mock_component__ not in unmock,
        )()
        for base in PROVIDERS
    ]

    # FastapiProvider lets the same container serve a TestClient
    return make_async_container(*providers, FastapiProvider())
