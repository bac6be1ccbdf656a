"""HookRegistry Protocol — how the host runtime learns about plugin entry points."""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol

type HookHandler = Callable[[Any], Awaitable[Any]]


class HookRegistry(Protocol):
    """Registers a handler for a named lifecycle hook.

    Handlers return the payload they received (possibly replaced) so that the
    next plugin in the chain observes the same event.
    """

    def register_hook(self, name: str, handler: HookHandler) -> None: ...
