import inspect
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Union


@dataclass(frozen=True)
class StaticValue:
    """A configuration value known up front."""

    value: Any

    async def resolve(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Provider:
    """A configuration value produced on demand by a plain function.

    The function is called with no arguments every time the value is needed,
    so rotating credentials are picked up on the next call.
    """

    func: Callable[[], Any]

    async def resolve(self) -> Any:
        return self.func()


@dataclass(frozen=True)
class AsyncProvider:
    """Like ``Provider``, for a coroutine function."""

    func: Callable[[], Awaitable[Any]]

    async def resolve(self) -> Any:
        return await self.func()


Resolver = Union[StaticValue, Provider, AsyncProvider]


def _is_async_callable(value: Any) -> bool:
    return inspect.iscoroutinefunction(value) or inspect.iscoroutinefunction(
        getattr(value, "__call__", None)
    )


def to_resolver(value: Any) -> Optional[Resolver]:
    """Normalize a raw configuration value into a Resolver.

    Args:
        value: A plain value, a zero-argument function or coroutine function,
            an existing resolver, or None.

    Returns:
        Optional[Resolver]: None when the value is absent.
    """
    if value is None or isinstance(value, (StaticValue, Provider, AsyncProvider)):
        return value
    if _is_async_callable(value):
        return AsyncProvider(value)
    if callable(value):
        return Provider(value)
    return StaticValue(value)


async def resolve(resolver: Optional[Resolver]) -> Any:
    if resolver is None:
        return None
    return await resolver.resolve()
