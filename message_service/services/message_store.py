"""Thread-safe in-memory store for messages keyed by integer ID."""

from __future__ import annotations

import threading
from typing import Optional

from message_service.telemetry import observe_message_operation, set_stored_messages


class MessageStore:
    """Mapping of message ID to contents guarded by a single lock.

    Every operation holds the lock for its whole duration, so reads and writes
    observe one total order regardless of which ID they touch.
    """

    def __init__(self) -> None:
        self._messages: dict[int, str] = {}
        self._lock = threading.Lock()

    def create(self, message_id: int, contents: str) -> bool:
        """Insert a new message; return False if the ID is already taken."""

        with self._lock:
            if message_id in self._messages:
                observe_message_operation("create", "conflict")
                return False
            self._messages[message_id] = contents
            set_stored_messages(len(self._messages))

        observe_message_operation("create", "ok")
        return True

    def update(self, message_id: int, contents: str) -> bool:
        """Replace an existing message; return False if the ID is unknown."""

        with self._lock:
            if message_id not in self._messages:
                observe_message_operation("update", "missing")
                return False
            self._messages[message_id] = contents

        observe_message_operation("update", "ok")
        return True

    def get(self, message_id: int) -> Optional[str]:
        with self._lock:
            contents = self._messages.get(message_id)

        observe_message_operation("get", "ok" if contents is not None else "missing")
        return contents

    def __contains__(self, message_id: object) -> bool:
        with self._lock:
            return message_id in self._messages

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)


__all__ = ["MessageStore"]
