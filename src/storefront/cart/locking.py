"""Per-session mutual exclusion for cart mutations.

A cart mutation reads the cart, changes it and commits it. Two requests for the
same session must not interleave inside that sequence, or one of them loses its
update. Requests for different sessions never wait on each other.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager


class SessionLocks:
    """Registry of one re-entrant lock per session id.

    Locks are reference counted and dropped once no caller holds or waits on
    them, so the registry does not grow with every session ever seen.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: dict[str, threading.RLock] = {}
        self._users: dict[str, int] = {}

    @contextmanager
    def hold(self, session_id: str) -> Iterator[None]:
        with self._guard:
            lock = self._locks.setdefault(session_id, threading.RLock())
            self._users[session_id] = self._users.get(session_id, 0) + 1

        try:
            with lock:
                yield
        finally:
            with self._guard:
                self._users[session_id] -= 1
                if self._users[session_id] == 0:
                    del self._users[session_id]
                    del self._locks[session_id]

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)


session_locks = SessionLocks()
