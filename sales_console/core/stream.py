import asyncio
import logging
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Subscription:
    """
    A scheduled run of a Single.

    Awaiting the subscription waits until its callbacks have run. Exceptions
    raised by the callbacks themselves are re-raised to the awaiter; a
    cancelled subscription settles quietly.
    """

    def __init__(self, task: "asyncio.Task[None]"):
        self._task = task

    @property
    def closed(self) -> bool:
        return self._task.done()

    def cancel(self):
        self._task.cancel()

    # Rx naming
    unsubscribe = cancel

    async def _settle(self):
        await asyncio.wait({self._task})
        if not self._task.cancelled() and self._task.exception() is not None:
            raise self._task.exception()

    def __await__(self):
        return self._settle().__await__()


class Single(Generic[T]):
    """
    Lazy single-value stream over a coroutine factory.

    Nothing runs until the Single is awaited or subscribed to, and each await
    or subscription runs the factory again (one fresh call per subscriber).
    """

    def __init__(self, factory: Callable[[], Awaitable[T]], description: str = ""):
        self._factory = factory
        self.description = description

    def __await__(self):
        return self._factory().__await__()

    def __repr__(self):
        return f"Single({self.description or self._factory!r})"

    def subscribe(
        self,
        on_next: Optional[Callable[[T], Any]] = None,
        on_error: Optional[Callable[[Exception], Any]] = None,
        on_complete: Optional[Callable[[], Any]] = None,
    ) -> Subscription:
        """
        Schedule one run on the running event loop.

        on_next gets the value on success, on_error the exception on failure.
        on_complete runs once the call has settled, after either branch.
        """
        loop = asyncio.get_running_loop()
        task = loop.create_task(self._run(on_next, on_error, on_complete))
        return Subscription(task)

    async def _run(self, on_next, on_error, on_complete):
        failure: Optional[Exception] = None
        try:
            value = await self._factory()
        except asyncio.CancelledError:
            raise
        except Exception as e:
            failure = e
        try:
            if failure is None:
                if on_next is not None:
                    on_next(value)
            elif on_error is not None:
                on_error(failure)
            else:
                logger.error(f"Unhandled error in {self!r}: {failure}")
        finally:
            # Settlement hook runs even when on_next or on_error raised
            if on_complete is not None:
                on_complete()
