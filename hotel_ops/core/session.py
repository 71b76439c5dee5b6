"""Session state for the authenticated dashboard user"""

import json
import logging
from datetime import datetime, timezone
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import jwt

from .storage import MemoryStorage, TOKEN_KEY, USER_ID_KEY, USER_KEY

logger = logging.getLogger(__name__)

TeardownListener = Callable[[str], None]


@dataclass
class Session:
    """Bearer credential plus the identity it belongs to"""
    token: str
    user_id: str
    user: dict = field(default_factory=dict)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def claims(self) -> dict[str, Any]:
        """Unverified JWT claims of the token; empty for opaque tokens"""
        try:
            return jwt.decode(self.token, options={"verify_signature": False})
        except jwt.PyJWTError:
            return {}

    @property
    def expires_at(self) -> Optional[datetime]:
        exp = self.claims.get("exp")
        if exp is None:
            return None
        return datetime.fromtimestamp(int(exp), tz=timezone.utc)

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        expires_at = self.expires_at
        if expires_at is None:
            return False
        return (now or datetime.now(timezone.utc)) >= expires_at


class SessionState:
    """
    Holds the current session and persists it to storage.

    Read by every gateway call. Written only by login/logout and by
    teardown after the backend answers 401.
    """

    def __init__(self, storage: Optional[MemoryStorage] = None):
        self.storage = storage if storage is not None else MemoryStorage()
        self._session: Optional[Session] = None
        self._listeners: list[TeardownListener] = []

    @property
    def current(self) -> Optional[Session]:
        return self._session

    @property
    def is_authenticated(self) -> bool:
        return self._session is not None

    @property
    def user_id(self) -> Optional[str]:
        return self._session.user_id if self._session else None

    def start(self, token: str, user: dict) -> Session:
        """Begin a session after login or registration"""
        user_id = str(user.get("id") or "")
        session = Session(token=token, user_id=user_id, user=dict(user))
        if not session.user_id:
            session.user_id = str(session.claims.get("sub") or "")

        self.storage.set_item(TOKEN_KEY, token)
        self.storage.set_item(USER_ID_KEY, session.user_id)
        self.storage.set_item(USER_KEY, json.dumps(session.user))
        self._session = session
        logger.info(f"Session started for user {session.user_id}")
        return session

    def restore(self) -> Optional[Session]:
        """Load a previously persisted session, dropping expired ones"""
        token = self.storage.get_item(TOKEN_KEY)
        if not token:
            return None

        raw_user = self.storage.get_item(USER_KEY)
        try:
            user = json.loads(raw_user) if raw_user else {}
        except ValueError:
            logger.warning("Stored user record is not valid JSON")
            user = {}

        session = Session(
            token=token,
            user_id=self.storage.get_item(USER_ID_KEY) or "",
            user=user if isinstance(user, dict) else {},
        )
        if session.is_expired():
            logger.info("Stored session has expired")
            self._clear_storage()
            return None

        self._session = session
        return session

    def end(self) -> None:
        """Explicit logout"""
        if self._session:
            logger.info(f"Session ended for user {self._session.user_id}")
        self._session = None
        self._clear_storage()

    def teardown(self, reason: str = "unauthorized", token: Optional[str] = None) -> bool:
        """
        Forced logout after an authorization failure.

        With `token`, only the session holding that token is torn down;
        a rejection of a token that has since been replaced is ignored.
        Returns whether a session was torn down.
        """
        if self._session is None:
            return False
        if token is not None and self._session.token != token:
            logger.debug(f"Ignoring rejection of a replaced token: {reason}")
            return False

        logger.warning(f"Tearing down session: {reason}")
        self._session = None
        self._clear_storage()
        for listener in list(self._listeners):
            listener(reason)
        return True

    def add_teardown_listener(self, listener: TeardownListener) -> None:
        """Register a callback run on forced logout (e.g. login redirect)"""
        self._listeners.append(listener)

    def remove_teardown_listener(self, listener: TeardownListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def bearer_token(self, fallback: Optional[str] = None) -> Optional[str]:
        return self._session.token if self._session else fallback

    def _clear_storage(self) -> None:
        for key in (TOKEN_KEY, USER_ID_KEY, USER_KEY):
            self.storage.remove_item(key)
