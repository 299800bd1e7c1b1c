"""Test container with per-component mocking."""

from dishka import AsyncContainer, make_async_container

from tbn.util.di import PROVIDERS, Component, get_provider, is_component


def component_names() -> set[str]:
    """Names of every swappable component."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if is_component(base) and hasattr(base, "__mock_component__")
    }


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every component is mocked unless unmocked.

    Settings are read from the environment, as in production.

    Args:
        unmock: Components that should use their production implementation

    Returns:
        Configured test container

    Raises:
        ValueError: If ``unmock`` names an unknown component

    Examples:
        build_test_container()                          # all mocks
        build_test_container(unmock={"persistence"})    # real PostgreSQL
        build_test_container(unmock={"broadcast"})      # live TBN site
    """
    unmock = unmock or set()
    unknown = unmock - component_names()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = []
    for base in PROVIDERS:
        name = getattr(base, "__mock_component__", None)
        use_mock = is_component(base) and name not in unmock
        providers.append(get_provider(base, use_mock=use_mock)())

    return make_async_container(*providers)
