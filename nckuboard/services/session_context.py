# nckuboard/services/session_context.py
from __future__ import annotations

import logging
from dataclasses import dataclass

from flask_login import UserMixin, current_user, login_user
from werkzeug.exceptions import Unauthorized

from ..errors import InvalidCredentialsError
from ..extensions import _l
from .validator import is_institutional_email

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionIdentity(UserMixin):
    """The signed-in user. Flask-Login stores ``email`` as the session id."""

    email: str

    def get_id(self) -> str:
        return self.email


def load_identity(user_id: str) -> SessionIdentity | None:
    # user_loader: the cookie is signed, but re-check the domain anyway
    if not is_institutional_email(user_id):
        return None
    return SessionIdentity(user_id)


class SessionContext:
    """
    Identity for one request, passed explicitly to whatever needs it.

    Handlers build one with ``from_request()``; tests can build one directly
    without a Flask session.
    """

    def __init__(self, identity: SessionIdentity | None = None):
        self._identity = identity

    @classmethod
    def from_request(cls) -> SessionContext:
        if getattr(current_user, "is_authenticated", False):
            return cls(SessionIdentity(current_user.get_id()))
        return cls()

    def login(self, email) -> SessionIdentity:
        if not is_institutional_email(email):
            log.warning("login refused for %r", email)
            raise InvalidCredentialsError(_l("Please sign in with an NCKU email (@gs.ncku.edu.tw or @ncku.edu.tw)."))
        self._identity = SessionIdentity(email)
        log.info("login ok: %s", email)
        return self._identity

    def persist(self) -> None:
        """Write the identity into the Flask session cookie."""
        if self._identity is None:
            raise Unauthorized()
        login_user(self._identity)

    def current_identity(self) -> SessionIdentity | None:
        return self._identity

    def require_identity(self) -> SessionIdentity:
        if self._identity is None:
            raise Unauthorized()
        return self._identity
