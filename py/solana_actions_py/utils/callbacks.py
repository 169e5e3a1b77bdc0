# solana_actions_py/utils/callbacks.py

import asyncio
from typing import Any, Callable, Coroutine, TypeVar

from ..types import Failure, Outcome

T = TypeVar("T")

OnComplete = Callable[[Outcome[T]], None]


def run_with_callback(
    pipeline: Coroutine[Any, Any, Outcome[T]],
    on_complete: OnComplete,
) -> "asyncio.Task[Outcome[T]]":
    """
    Schedules an outcome-returning pipeline on the running loop and hands
    its outcome to on_complete exactly once.

    A cancelled task never calls on_complete. Must be called from inside a
    running event loop.
    """
    task = asyncio.create_task(pipeline)

    def _done(fut: "asyncio.Future[Outcome[T]]") -> None:
        if fut.cancelled():
            return
        exc = fut.exception()
        if exc is not None:
            on_complete(Failure(exc))
            return
        on_complete(fut.result())

    task.add_done_callback(_done)
    return task
