"""In-memory audit storage, for tests and short-lived sessions."""

from typing import Optional

from finledger.models.audit import AuditEvent, AuditEventType
from finledger.services.storage.interface import AuditStorageInterface


class InMemoryAuditStorage(AuditStorageInterface):
    """Keeps audit events in a list, oldest first."""

    def __init__(self):
        self._events: list[AuditEvent] = []

    @property
    def events(self) -> list[AuditEvent]:
        return list(self._events)

    def append_event(self, event: AuditEvent) -> bool:
        self._events.append(event)
        return True

    def get_recent_events(
        self,
        limit: int = 100,
        event_type: Optional[AuditEventType] = None,
    ) -> list[AuditEvent]:
        matching = [
            e for e in reversed(self._events)
            if event_type is None or e.event_type == event_type
        ]
        return matching[:limit]
