"""Callback hooks invoked around SDK calls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

T = TypeVar("T")


@dataclass(frozen=True)
class ActionCallback(Generic[T]):
    """Hooks invoked around an SDK call.

    Attributes:
        success: Called with the result when the call succeeds.
        error: Called with the exception before it is re-raised.
        finally_: Called once the call has completed either way.
    """

    success: Callable[[T], None] | None = None
    error: Callable[[BaseException], None] | None = None
    finally_: Callable[[], None] | None = None


async def run_with_callback(
    call: Awaitable[T],
    callback: ActionCallback[Any] | None,
    *,
    notify_success: bool = True,
) -> T:
    """Await *call*, reporting the outcome to *callback*.

    Exceptions always propagate to the caller after ``error`` has run.
    """
    if callback is None:
        return await call
    try:
        result = await call
    except Exception as e:
        if callback.error is not None:
            callback.error(e)
        raise
    else:
        if notify_success and callback.success is not None:
            callback.success(result)
        return result
    finally:
        if callback.finally_ is not None:
            callback.finally_()


__all__: list[str] = ["ActionCallback", "run_with_callback"]
