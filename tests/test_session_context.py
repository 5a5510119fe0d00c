# tests/test_session_context.py

from __future__ import annotations

import pytest
from flask_login import current_user
from werkzeug.exceptions import Unauthorized

from nckuboard.errors import InvalidCredentialsError
from nckuboard.services.session_context import SessionContext, SessionIdentity, load_identity


def test_login_rejects_non_institutional_email() -> None:
    ctx = SessionContext()
    with pytest.raises(InvalidCredentialsError):
        ctx.login("x@yahoo.com")
    assert ctx.current_identity() is None


def test_login_sets_identity() -> None:
    ctx = SessionContext()
    identity = ctx.login("x@gs.ncku.edu.tw")
    assert identity == SessionIdentity("x@gs.ncku.edu.tw")
    assert ctx.current_identity() is identity
    assert ctx.require_identity().email == "x@gs.ncku.edu.tw"


def test_require_identity_without_login_is_unauthorized() -> None:
    with pytest.raises(Unauthorized):
        SessionContext().require_identity()


def test_identity_id_is_the_email() -> None:
    assert SessionIdentity("a@ncku.edu.tw").get_id() == "a@ncku.edu.tw"


def test_loader_rechecks_domain() -> None:
    assert load_identity("a@ncku.edu.tw") == SessionIdentity("a@ncku.edu.tw")
    assert load_identity("a@evil.com") is None


def test_persist_and_restore_through_flask_login(app) -> None:
    with app.test_request_context("/"):
        assert SessionContext.from_request().current_identity() is None

        ctx = SessionContext()
        ctx.login("x@gs.ncku.edu.tw")
        ctx.persist()

        assert current_user.is_authenticated
        restored = SessionContext.from_request().current_identity()
        assert restored == SessionIdentity("x@gs.ncku.edu.tw")


def test_persist_without_identity_is_unauthorized(app) -> None:
    with app.test_request_context("/"):
        with pytest.raises(Unauthorized):
            SessionContext().persist()


def test_login_error_message_is_translatable(app) -> None:
    ctx = SessionContext()
    with pytest.raises(InvalidCredentialsError) as exc:
        ctx.login("x@yahoo.com")
    # lazy string from Flask-Babel, resolved when the login page renders it
    assert not isinstance(exc.value.args[0], str)
    with app.test_request_context("/"):
        assert "NCKU email" in str(exc.value)
