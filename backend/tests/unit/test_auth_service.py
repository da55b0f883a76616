"""Unit tests for AuthService sign-in, sessions and state-change listeners."""

from datetime import timedelta

import pytest

from delfina_home.application.services import AuthService
from delfina_home.application.services.auth_service import INVALID_CREDENTIALS
from delfina_home.domain.entities import AuthEvent
from delfina_home.domain.exceptions import AuthenticationError


@pytest.fixture
def auth() -> AuthService:
    return AuthService("admin@delfinahome.com", "s3cret", "test-signing-key")


def test_sign_in_returns_live_session(auth: AuthService):
    session = auth.sign_in_with_password("Admin@DelfinaHome.com ", "s3cret")

    assert session.email == "admin@delfinahome.com"
    assert auth.get_session(session.access_token) == session


@pytest.mark.parametrize(
    ("email", "password"),
    [
        ("admin@delfinahome.com", "wrong"),
        ("someone@else.com", "s3cret"),
        ("", ""),
    ],
)
def test_sign_in_rejects_bad_credentials(auth: AuthService, email: str, password: str):
    with pytest.raises(AuthenticationError, match=INVALID_CREDENTIALS):
        auth.sign_in_with_password(email, password)


def test_sign_in_disabled_without_configured_account():
    auth = AuthService("", "", "key")
    with pytest.raises(AuthenticationError):
        auth.sign_in_with_password("", "")


def test_sign_out_revokes_token(auth: AuthService):
    session = auth.sign_in_with_password("admin@delfinahome.com", "s3cret")

    auth.sign_out(session.access_token)

    assert auth.get_session(session.access_token) is None


def test_unknown_and_foreign_tokens_have_no_session(auth: AuthService):
    other = AuthService("admin@delfinahome.com", "s3cret", "another-key")
    foreign = other.sign_in_with_password("admin@delfinahome.com", "s3cret")

    assert auth.get_session(None) is None
    assert auth.get_session("not-a-jwt") is None
    assert auth.get_session(foreign.access_token) is None


def test_expired_session_is_dropped():
    auth = AuthService("admin@delfinahome.com", "s3cret", "key", session_ttl=timedelta(seconds=-1))

    for _ in range(5):
        session = auth.sign_in_with_password("admin@delfinahome.com", "s3cret")
        assert auth.get_session(session.access_token) is None

    assert auth.session_count == 0


def test_sign_in_prunes_expired_sessions():
    auth = AuthService("admin@delfinahome.com", "s3cret", "key", session_ttl=timedelta(seconds=-1))

    for _ in range(3):
        auth.sign_in_with_password("admin@delfinahome.com", "s3cret")

    assert auth.session_count == 1


def test_listeners_see_sign_in_and_sign_out(auth: AuthService):
    events = []
    auth.on_auth_state_change(lambda event, session: events.append((event, session)))

    session = auth.sign_in_with_password("admin@delfinahome.com", "s3cret")
    auth.sign_out(session.access_token)

    assert events == [(AuthEvent.SIGNED_IN, session), (AuthEvent.SIGNED_OUT, None)]


def test_unsubscribe_stops_notifications(auth: AuthService):
    events = []
    with auth.on_auth_state_change(lambda event, session: events.append(event)):
        assert auth.listener_count == 1
    assert auth.listener_count == 0

    auth.sign_in_with_password("admin@delfinahome.com", "s3cret")
    assert events == []


def test_failing_listener_does_not_break_sign_in(auth: AuthService):
    def boom(event, session):
        raise RuntimeError("listener failed")

    auth.on_auth_state_change(boom)
    session = auth.sign_in_with_password("admin@delfinahome.com", "s3cret")
    assert auth.get_session(session.access_token) is not None
