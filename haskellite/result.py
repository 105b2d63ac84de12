"""
Result helpers.

Fallible results are kungfu's Result: `Ok(value)` or `Error(error)`. These
helpers bridge exception-based code into Results and back, synchronously or
through an awaitable.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from kungfu import Error, LazyCoroResult, Ok, Result

from ._errors import MissingValueError


def catching[T](thunk: Callable[[], T]) -> Result[T, Exception]:
    """
    Call thunk, turning a raised exception into Error.

    **When to use:** Bridge between exception-based code and Results.

    Example:
        catching(lambda: int("123"))   # Ok(123)
        catching(lambda: int("nope"))  # Error(ValueError(...))

    NOTE: Catches Exception subclasses only; KeyboardInterrupt and friends
          still propagate.
    """
    try:
        return Ok(thunk())
    except Exception as exc:
        return Error(exc)


def map_catching[T, R](result: Result[T, Exception], mapper: Callable[[T], R]) -> Result[R, Exception]:
    """
    Map the Ok value; an exception raised by mapper becomes Error.

    Example:
        map_catching(Ok("hello"), lambda s: f"{s} world")  # Ok("hello world")
        map_catching(Ok("x"), int)                          # Error(ValueError(...))
        map_catching(Error(exc), int)                       # Error(exc), mapper not called
    """
    match result:
        case Ok(value):
            return catching(lambda: mapper(value))
        case Error(err):
            return Error(err)


def resolve_errors[T](result: Result[T, Exception], resolver: Callable[[Exception], T]) -> Result[T, Exception]:
    """
    Attempt to recover from Error.

    Ok is returned unchanged. On Error, resolver receives the error; its return
    value becomes Ok, an exception it raises becomes the new Error.

    Example:
        def resolver(error: Exception) -> int:
            if isinstance(error, ValueError):
                return -1
            raise error

        resolve_errors(catching(lambda: int("nope")), resolver)  # Ok(-1)
    """
    match result:
        case Ok(_):
            return result
        case Error(err):
            return catching(lambda: resolver(err))


def get_or_default[T, E](result: Result[T, E], default: Callable[[], T]) -> T:
    """Ok value, or default() on Error."""
    match result:
        case Ok(value):
            return value
        case Error(_):
            return default()


def get_or_raise[T, E](result: Result[T, E], error: Callable[[], BaseException] | None = None) -> T:
    """
    Ok value, or raise.

    On Error raises error() when given, the contained error when it is an
    exception, MissingValueError otherwise.
    """
    match result:
        case Ok(value):
            return value
        case Error(err):
            if error is not None:
                raise error()
            if isinstance(err, BaseException):
                raise err
            raise MissingValueError(f"get_or_raise called on Error({err!r})")


def on_value[T, E](result: Result[T, E], fn: Callable[[T], object]) -> Result[T, E]:
    """Call fn with the Ok value, return result unchanged for chaining."""
    match result:
        case Ok(value):
            fn(value)
    return result


def on_error[T, E](result: Result[T, E], fn: Callable[[E], object]) -> Result[T, E]:
    """Call fn with the error, return result unchanged for chaining."""
    match result:
        case Error(err):
            fn(err)
    return result


async def from_awaitable[T](awaitable: Awaitable[T]) -> Result[T, Exception]:
    """
    Await and convert the outcome into Ok(value) or Error(exc).

    Example:
        result = await from_awaitable(fetch_user(42))
        on_error(on_value(result, handle_user), handle_error)
    """
    try:
        return Ok(await awaitable)
    except Exception as exc:
        return Error(exc)


def catching_async[T](thunk: Callable[[], Awaitable[T]]) -> LazyCoroResult[T, Exception]:
    """
    Lazy version of from_awaitable: nothing runs until the result is awaited.

    NOTE: thunk must be a zero-arg callable (lambda) for laziness.
          A coroutine object would already be created at call time.
    """
    async def run() -> Result[T, Exception]:
        return await from_awaitable(thunk())

    return LazyCoroResult(run)


__all__ = (
    "catching",
    "map_catching",
    "resolve_errors",
    "get_or_default",
    "get_or_raise",
    "on_value",
    "on_error",
    "from_awaitable",
    "catching_async",
)
