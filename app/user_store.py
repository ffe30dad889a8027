from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Dict, List, Optional

from app.rules.base import DuplicateUsername


@dataclass(frozen=True)
class UserRecord:
    username: str
    password: str
    email: str


def _key(username: Optional[str]) -> str:
    return (username or "").lower()


class InMemoryUserStore:
    """Append-only, process-local user store.

    Records keep insertion order and are unique by username under
    case-insensitive comparison. Nothing is persisted and nothing is shared
    between instances. Passwords are kept exactly as given.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._users: List[UserRecord] = []
        self._by_key: Dict[str, UserRecord] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def exists(self, *, username: Optional[str]) -> bool:
        if username is None:
            return False
        with self._lock:
            return _key(username) in self._by_key

    def add(self, record: UserRecord) -> UserRecord:
        k = _key(record.username)
        with self._lock:
            if k in self._by_key:
                raise DuplicateUsername(record.username)
            self._users.append(record)
            self._by_key[k] = record
            return record

    def get(self, *, username: Optional[str]) -> Optional[UserRecord]:
        if username is None:
            return None
        with self._lock:
            return self._by_key.get(_key(username))

    def all(self) -> List[UserRecord]:
        with self._lock:
            return list(self._users)
