"""FakeHookRegistry — collects registered hook handlers by name."""

from asq_code.plugin.domain.hooks import HookHandler


class FakeHookRegistry:
    def __init__(self) -> None:
        self.handlers: dict[str, HookHandler] = {}

    def register_hook(self, name: str, handler: HookHandler) -> None:
        self.handlers[name] = handler
