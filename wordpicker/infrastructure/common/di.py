from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[], T]:
    """
    Create a FastAPI dependency for a container provider.

    Resolves the provider per request, so overrides installed on the
    container (e.g. in tests) take effect immediately.
    """

    def dependency() -> T:
        return provider()

    return dependency
