"""Utilities for running async operations in CLI commands."""

import asyncio
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import ParamSpec, TypeVar

P = ParamSpec("P")
T = TypeVar("T")


def coro(f: Callable[P, Awaitable[T]]) -> Callable[P, T]:
    """
    Decorator that makes an async function synchronous for Click.

    Usage:
        @click.command()
        @coro
        async def my_command():
            await some_async_operation()
    """

    @wraps(f)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        return asyncio.run(f(*args, **kwargs))

    return wrapper
