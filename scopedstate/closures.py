"""Closure-backed helpers that keep their state private.

- create_id_generator: sequential IDs from a private last-issued value
- capture_each: one callback per value, each bound to its own value
- memoize: results cached in a dict only the wrapper can reach
- create_greeting: formatter bound to a construction-time greeting
"""

import functools
import logging
from typing import Any, Callable, Iterable, List, TypeVar

from scopedstate.utils.logging import ActionType, log_handle_created
from scopedstate.utils.validation import InputValidator, require_valid

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

_KWARGS_MARK = object()


def create_id_generator(start: int = 0) -> Callable[[], int]:
    """Create a function returning ``start + 1``, ``start + 2``, ... on each call.

    Generators created separately count independently.

    Raises:
        InvalidArgumentError: If ``start`` is not an integer.
    """
    last_id = require_valid(
        InputValidator.validate_integer(start), "start", "IdGenerator"
    )

    def next_id() -> int:
        nonlocal last_id
        last_id += 1
        return last_id

    log_handle_created("IdGenerator", start)
    return next_id


def capture_each(values: Iterable[T], action: Callable[[T], R]) -> List[Callable[[], R]]:
    """Build one deferred call of ``action`` per value.

    Each callback is bound to the value current at the iteration that
    created it, so invoking the callbacks later yields ``action(v)`` for
    every ``v`` in order.

    Raises:
        InvalidArgumentError: If ``action`` is not callable.
    """
    action = require_valid(InputValidator.validate_callable(action), "action", "capture_each")

    callbacks = []
    for value in values:
        # bind this iteration's value
        callbacks.append(functools.partial(action, value))

    logger.debug(f"[{ActionType.CAPTURE.value}] built {len(callbacks)} callback(s)")
    return callbacks


def _cache_key(args: tuple, kwargs: dict) -> tuple:
    # Argument types are part of the key: 1, 1.0 and True compare equal
    items = sorted(kwargs.items())
    key = args + tuple(type(arg) for arg in args)
    if items:
        key += (_KWARGS_MARK,) + tuple(items) + tuple(type(value) for _, value in items)
    return key


def _describe_call(args: tuple, kwargs: dict) -> str:
    if not kwargs:
        return f"{args}"
    return f"{args} {kwargs}"


def memoize(fn: Callable[..., R]) -> Callable[..., R]:
    """Wrap ``fn`` with a private result cache.

    The cache key is built from the positional and keyword arguments, which
    must therefore be hashable. Arguments that compare equal but differ in
    type, such as 1, 1.0 and True, get separate entries. Falsy results are
    cached like any other.

    The wrapper exposes ``cache_size()`` and ``cache_clear()``; the cache
    itself is not reachable from outside.

    Raises:
        InvalidArgumentError: If ``fn`` is not callable.
    """
    fn = require_valid(InputValidator.validate_callable(fn), "fn", "memoize")
    cache: dict = {}
    name = getattr(fn, "__name__", repr(fn))

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> R:
        key = _cache_key(args, kwargs)
        if key in cache:
            logger.debug(
                f"[{ActionType.CACHE_HIT.value}] {name}: "
                f"Fetching from cache for arguments: {_describe_call(args, kwargs)}"
            )
            return cache[key]

        logger.debug(
            f"[{ActionType.CACHE_MISS.value}] {name}: "
            f"Calculating result for arguments: {_describe_call(args, kwargs)}"
        )
        result = fn(*args, **kwargs)
        cache[key] = result
        return result

    def cache_size() -> int:
        return len(cache)

    def cache_clear() -> None:
        cache.clear()

    wrapper.cache_size = cache_size
    wrapper.cache_clear = cache_clear
    return wrapper


def create_greeting(greeting: str) -> Callable[[str], str]:
    """Create a formatter producing ``"<greeting>, <name>!"``.

    Raises:
        InvalidArgumentError: If ``greeting`` is not a string.
    """
    greeting = require_valid(InputValidator.validate_text(greeting), "greeting", "Greeting")

    def greet(name: str) -> str:
        return f"{greeting}, {name}!"

    log_handle_created("Greeting", greeting)
    return greet
