"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from forum.util.di import PROVIDERS, Component, get_provider


def mockable_components() -> set[Component]:
    """Names of every component that ships a mock implementation."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ is not None
    }


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every mockable component is mocked by default.

    Mock persistence and storage are APP-scoped, so state survives across
    requests made against one container. Build a fresh container per test.

    Args:
        unmock: Components that should use their production implementation.
            Those need postgres or S3-compatible storage reachable with the
            settings found in the environment.

    Returns:
        Container that also serves FastAPI request objects, usable with
        ``create_app(container)``

    Raises:
        ValueError: If ``unmock`` names an unknown component

    Examples:
        # Unit tests and API tests - everything in memory
        container = build_test_container()

        # Repository tests against a real database
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()

    unknown = unmock - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    providers = [
        get_provider(base, use_mock=base.__mock_component__ not in unmock)()
        for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())
