import asyncio
from enum import Enum
from logging import getLogger
from typing import Any, Awaitable, Callable, Generator, Generic, TypeVar

from ..models.errors import CancelError
from .constants import REQUEST_ABORTED_MESSAGE

T = TypeVar("T")
U = TypeVar("U")

OnCancel = Callable[[Callable[[], Any]], None]

logger = getLogger("openapi_runtime")


class PromiseState(str, Enum):
    PENDING = "pending"
    SETTLED = "settled"
    CANCELLED = "cancelled"


class CancelablePromise(Generic[T]):
    """An awaitable result of an in-flight call that its owner can cancel.

    The executor runs as its own task as soon as the promise is created, so a
    promise must be created while an event loop is running. The executor
    receives an ``on_cancel`` function to register cleanup handlers (e.g.
    setting an abort signal); they run once, the first time ``cancel()`` is
    called on a pending promise.

    Awaiting a cancelled promise raises ``CancelError("Request aborted")``.
    Cancelling a settled promise does nothing.

    Examples:
        ```python
        promise = client.simple.get_call_without_parameters_and_response()
        promise.cancel()
        await promise  # raises CancelError
        ```
    """

    def __init__(self, executor: Callable[[OnCancel], Awaitable[T]]) -> None:
        self._state = PromiseState.PENDING
        self._cancel_handlers: list[Callable[[], Any]] = []
        self._task: asyncio.Task[T] = asyncio.get_running_loop().create_task(
            self._run(executor)
        )
        self._task.add_done_callback(self._on_done)

    async def _run(self, executor: Callable[[OnCancel], Awaitable[T]]) -> T:
        return await executor(self._on_cancel)

    def _on_cancel(self, handler: Callable[[], Any]) -> None:
        if self._state is PromiseState.CANCELLED:
            handler()
            return
        self._cancel_handlers.append(handler)

    def _on_done(self, task: "asyncio.Task[T]") -> None:
        if self._state is PromiseState.PENDING:
            self._state = PromiseState.SETTLED
        if not task.cancelled():
            # mark the exception as retrieved; it is re-raised on await
            task.exception()

    @property
    def state(self) -> PromiseState:
        return self._state

    @property
    def is_cancelled(self) -> bool:
        return self._state is PromiseState.CANCELLED

    def cancel(self) -> None:
        """Abort the in-flight call.

        No-op once the call has settled or was already cancelled.
        """
        if self._state is not PromiseState.PENDING or self._task.done():
            return

        self._state = PromiseState.CANCELLED
        logger.debug("Request cancelled")

        handlers, self._cancel_handlers = self._cancel_handlers, []
        try:
            for handler in handlers:
                handler()
        finally:
            self._task.cancel()

    async def _wait(self) -> T:
        try:
            value = await self._task
        except asyncio.CancelledError as e:
            if self._state is PromiseState.CANCELLED:
                raise CancelError(REQUEST_ABORTED_MESSAGE) from e
            raise
        except Exception as e:
            if self._state is PromiseState.CANCELLED and not isinstance(
                e, CancelError
            ):
                # the executor turned the abort into its own error
                raise CancelError(REQUEST_ABORTED_MESSAGE) from e
            raise
        if self._state is PromiseState.CANCELLED:
            # the executor swallowed the abort and returned anyway
            raise CancelError(REQUEST_ABORTED_MESSAGE)
        return value

    def __await__(self) -> Generator[Any, None, T]:
        return self._wait().__await__()

    def then(self, fn: Callable[[T], U]) -> "CancelablePromise[U]":
        """Derive a promise whose value is ``fn`` applied to this one's.

        Cancelling the derived promise cancels this one too.
        """

        async def executor(on_cancel: OnCancel) -> U:
            return fn(await self)

        derived: CancelablePromise[U] = CancelablePromise(executor)
        # registered eagerly so a cancel before the first await still propagates
        derived._on_cancel(self.cancel)
        return derived
