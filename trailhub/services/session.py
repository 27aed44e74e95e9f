import json
import logging
from collections.abc import Callable
from pathlib import Path

from pydantic import BaseModel, SecretStr

from trailhub.models import User
from trailhub.types import Language

logger = logging.getLogger(__name__)


class _PersistedSession(BaseModel):
    token: SecretStr | None = None
    user: User | None = None
    language: Language = Language.ES


class SessionContext:
    """Process-wide login state, passed explicitly to the API client.

    `load()` restores a persisted session on start-up; `logout()` clears it
    in memory and on disk and notifies registered listeners.
    """

    def __init__(self, path: Path | None = None, language: Language = Language.ES):
        self.path = path
        self.language = language
        self._token: SecretStr | None = None
        self.user: User | None = None
        self._logout_listeners: list[Callable[[], None]] = []

    @classmethod
    def load(cls, path: Path, language: Language = Language.ES) -> "SessionContext":
        session = cls(path=path, language=language)

        if not path.exists():
            logger.debug(f"No persisted session at {path}")
            return session

        try:
            state = _PersistedSession.model_validate_json(path.read_text(encoding="utf-8"))
        except ValueError as e:
            logger.warning(f"Ignoring unreadable session file {path}: {e}")
            return session

        session._token = state.token
        session.user = state.user
        session.language = state.language
        logger.info(f"Restored session from {path}")
        return session

    @property
    def token(self) -> str | None:
        return self._token.get_secret_value() if self._token else None

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def start(self, token: str, user: User | None = None) -> None:
        self._token = SecretStr(token)
        self.user = user
        self._persist()
        logger.info("Session started")

    def set_language(self, language: Language) -> None:
        self.language = language
        self._persist()

    def add_logout_listener(self, listener: Callable[[], None]) -> None:
        self._logout_listeners.append(listener)

    def logout(self) -> None:
        was_authenticated = self.is_authenticated
        self._token = None
        self.user = None

        if self.path is not None and self.path.exists():
            self.path.unlink()
            logger.debug(f"Removed session file {self.path}")

        if was_authenticated:
            logger.info("Session cleared")
            for listener in self._logout_listeners:
                listener()

    def _persist(self) -> None:
        if self.path is None:
            return

        state = {
            "token": self.token,
            "user": self.user.model_dump(mode="json") if self.user else None,
            "language": self.language.value,
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(state), encoding="utf-8")
