"""Bearer token holder for API clients.

A session keeps the token issued at login together with the signed-in
profile. Persistence is optional and goes through a `TokenStore`, so a CLI
can keep the session in a file while tests keep it in memory.
"""

from pathlib import Path
from typing import Any, Protocol

import orjson
from loguru import logger
from pydantic import BaseModel


class StoredSession(BaseModel):
    token: str
    user: dict[str, Any] = {}


class TokenStore(Protocol):
    def load(self) -> StoredSession | None: ...

    def save(self, session: StoredSession) -> None: ...

    def clear(self) -> None: ...


class InMemoryTokenStore:
    def __init__(self) -> None:
        self._session: StoredSession | None = None

    def load(self) -> StoredSession | None:
        return self._session

    def save(self, session: StoredSession) -> None:
        self._session = session

    def clear(self) -> None:
        self._session = None


class FileTokenStore:
    """Keeps the session as JSON in a single file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> StoredSession | None:
        if not self.path.exists():
            return None
        try:
            return StoredSession.model_validate(orjson.loads(self.path.read_bytes()))
        except (orjson.JSONDecodeError, ValueError) as e:
            logger.warning(f"Ignoring unreadable session file {self.path}: {e}")
            return None

    def save(self, session: StoredSession) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_bytes(orjson.dumps(session.model_dump()))

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)


class AuthSession:
    def __init__(self, store: TokenStore | None = None):
        self.store = store
        self.token: str | None = None
        self.user: dict[str, Any] = {}

        if store is not None:
            saved = store.load()
            if saved is not None:
                self.token = saved.token
                self.user = saved.user

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def set(self, token: str, user: dict[str, Any] | None = None) -> None:
        self.token = token
        self.user = user or {}
        if self.store is not None:
            self.store.save(StoredSession(token=token, user=self.user))

    def clear(self) -> None:
        self.token = None
        self.user = {}
        if self.store is not None:
            self.store.clear()

    def auth_headers(self) -> dict[str, str]:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}
