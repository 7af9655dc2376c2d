from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar

from dimap.exceptions import DIMapCircularDependencyError

logger = logging.getLogger(__name__)

ResolutionEntry = tuple[int, str]

# (owner id, service name) pairs under construction. The tuple is never mutated,
# so threads and tasks running in a copied context cannot see each other's entries.
_resolution_stack: ContextVar[tuple[ResolutionEntry, ...]] = ContextVar(
    "dimap_resolution_stack",
    default=(),
)


def get_resolution_stack() -> tuple[ResolutionEntry, ...]:
    """Return the services under construction in the current context, outermost first."""
    return _resolution_stack.get()


@contextmanager
def constructing(owner: object, name: str) -> Generator[None, None, None]:
    """Mark service ``name`` of ``owner`` as under construction for the block.

    The entry is removed when the block exits, whether construction succeeded
    or failed, so a later request starts from a clean stack. Entries are keyed
    by owner, so containers building each other's services do not interfere.

    Raises:
        DIMapCircularDependencyError: If ``name`` is already being constructed
            by ``owner`` higher on the current stack.

    """
    stack = _resolution_stack.get()
    entry = (id(owner), name)
    if entry in stack:
        chain = [
            entry_name
            for entry_owner, entry_name in stack[stack.index(entry) :]
            if entry_owner == entry[0]
        ]
        logger.debug("Circular reference detected: %s", " -> ".join([*chain, name]))
        raise DIMapCircularDependencyError(name, [*chain, name])

    token = _resolution_stack.set((*stack, entry))
    try:
        yield
    finally:
        _resolution_stack.reset(token)
