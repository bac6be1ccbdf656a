"""Notifier Protocol — the host's fire-and-forget event channel."""

from typing import Any, Protocol

type Payload = dict[str, Any]


class Notifier(Protocol):
    """Pushes events to connected clients. No delivery acknowledgement is returned."""

    def emit_to_role(
        self, event_name: str, payload: Payload, session_id: str, role: str
    ) -> None: ...

    def emit_to_connection(
        self, event_name: str, payload: Payload, connection_id: str
    ) -> None: ...
