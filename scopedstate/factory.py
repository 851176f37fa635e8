"""Scoped state factory.

Each call to create() allocates a fresh counter inside a closure and returns
a handle exposing only increment() and get(). Handles never share state.

A handle created with thread_safe=True owns a single lock that guards both
operations; other handles are unaffected by it.
"""

from threading import Lock

from scopedstate.models import StatefulHandle
from scopedstate.utils.config import ScopedStateConfig
from scopedstate.utils.logging import log_handle_created
from scopedstate.utils.validation import InputValidator, require_valid


def create(initial: int = 0, *, thread_safe: bool = False) -> StatefulHandle:
    """Create a handle over a private counter.

    Args:
        initial: Starting value of the counter. Any integer is accepted.
        thread_safe: Serialise increment() and get() with a lock owned by
            this handle alone.

    Returns:
        StatefulHandle whose counter starts at ``initial``.

    Raises:
        InvalidArgumentError: If ``initial`` is not an integer.
    """
    initial = require_valid(
        InputValidator.validate_integer(initial), "initial", "StatefulHandle"
    )
    count = initial

    if thread_safe:
        lock = Lock()

        def increment() -> None:
            nonlocal count
            with lock:
                count += 1

        def get() -> int:
            with lock:
                return count

    else:

        def increment() -> None:
            nonlocal count
            count += 1

        def get() -> int:
            return count

    log_handle_created("StatefulHandle", initial, thread_safe=thread_safe)
    return StatefulHandle(initial=initial, increment=increment, get=get)


def create_from_config(config: ScopedStateConfig) -> StatefulHandle:
    """Create a handle using the initial value and locking mode from config."""
    return create(config.initial_value, thread_safe=config.thread_safe)
