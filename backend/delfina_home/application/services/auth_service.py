"""Admin authentication: password sign-in, bearer sessions, state-change listeners.

There is a single admin account, configured through the environment. Sessions
are kept in process and referenced by a signed JWT, so signing out revokes a
token immediately even though it has not expired yet.
"""

import hmac
import logging
import secrets
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt

from delfina_home.domain.entities import AdminSession, AuthEvent
from delfina_home.domain.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

JWT_ALGO = "HS256"
INVALID_CREDENTIALS = "Invalid login credentials"

AuthListener = Callable[[AuthEvent, AdminSession | None], None]


class AuthSubscription:
    """Handle returned by ``on_auth_state_change``.

    Use it as a context manager, or call ``unsubscribe`` on teardown.
    """

    def __init__(self, service: "AuthService", listener: AuthListener):
        self._service = service
        self._listener = listener
        self.active = True

    def unsubscribe(self) -> None:
        if self.active:
            self._service._listeners.remove(self._listener)
            self.active = False

    def __enter__(self) -> "AuthSubscription":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.unsubscribe()


class AuthService:
    """Signs the admin in and out and answers "is this token a live session?"."""

    def __init__(
        self,
        admin_email: str,
        admin_password: str,
        secret_key: str,
        session_ttl: timedelta = timedelta(days=7),
    ):
        self._admin_email = admin_email.strip().lower()
        self._admin_password = admin_password
        if not secret_key:
            secret_key = secrets.token_urlsafe(32)
        self._secret_key = secret_key
        self._session_ttl = session_ttl
        self._sessions: dict[str, AdminSession] = {}
        self._listeners: list[AuthListener] = []

    # ── Sign in / out ───────────────────────────────────────────────

    def sign_in_with_password(self, email: str, password: str) -> AdminSession:
        """Open a session for the admin account.

        Raises ``AuthenticationError`` with a user-facing message when the
        credentials do not match or no admin account is configured.
        """
        if not self._admin_email or not self._admin_password:
            raise AuthenticationError(INVALID_CREDENTIALS)

        email_ok = hmac.compare_digest(email.strip().lower().encode(), self._admin_email.encode())
        password_ok = hmac.compare_digest(password.encode(), self._admin_password.encode())
        if not (email_ok and password_ok):
            logger.warning("Rejected admin sign-in for %s", email.strip())
            raise AuthenticationError(INVALID_CREDENTIALS)

        now = datetime.now(timezone.utc)
        session_id = str(uuid4())
        expires_at = now + self._session_ttl
        token = jwt.encode(
            {"sub": self._admin_email, "sid": session_id, "iat": now, "exp": expires_at},
            self._secret_key,
            algorithm=JWT_ALGO,
        )
        session = AdminSession(
            id=session_id,
            email=self._admin_email,
            access_token=token,
            created_at=now,
            expires_at=expires_at,
        )
        self._prune_expired()
        self._sessions[session_id] = session
        self._emit(AuthEvent.SIGNED_IN, session)
        return session

    def sign_out(self, token: str) -> None:
        """Revoke the session behind ``token``. Unknown tokens are ignored."""
        session = self.get_session(token)
        if session is None:
            return
        self._sessions.pop(session.id, None)
        self._emit(AuthEvent.SIGNED_OUT, None)

    def get_session(self, token: str | None) -> AdminSession | None:
        """The live session for ``token``, or None if it is invalid, expired or revoked."""
        if not token:
            return None
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[JWT_ALGO])
        except jwt.ExpiredSignatureError:
            self._drop_expired(token)
            return None
        except jwt.InvalidTokenError:
            return None

        return self._sessions.get(payload.get("sid", ""))

    @property
    def session_count(self) -> int:
        return len(self._sessions)

    def _drop_expired(self, token: str) -> None:
        """Forget the session behind a token whose signature is valid but whose ``exp`` has passed."""
        payload = jwt.decode(
            token, self._secret_key, algorithms=[JWT_ALGO], options={"verify_exp": False}
        )
        self._sessions.pop(payload.get("sid", ""), None)

    def _prune_expired(self) -> None:
        now = datetime.now(timezone.utc)
        for session_id in [s.id for s in self._sessions.values() if s.is_expired(now)]:
            del self._sessions[session_id]

    # ── Listeners ───────────────────────────────────────────────────

    def on_auth_state_change(self, listener: AuthListener) -> AuthSubscription:
        self._listeners.append(listener)
        return AuthSubscription(self, listener)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def _emit(self, event: AuthEvent, session: AdminSession | None) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, session)
            except Exception:
                logger.exception("Auth listener failed on %s", event.value)
