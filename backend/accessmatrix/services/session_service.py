# Overview: Session identity providers feeding PrincipalResolver.

"""
Identity providers.

A provider is any zero-argument callable returning SessionData (or an
awaitable of it). Records are passed through raw; parsing and the
"malformed means absent" rule live in the resolver.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from flask import current_app, has_request_context, request, session

from .principal_service import SessionData


EMPLOYEE_SESSION_KEY = "employee-session"
CURRENT_USER_KEY = "currentUser"


class KeyValueSessionProvider:
    """
    Reads identity records from a key-value mapping.

    Matches the browser storage layout of the legacy client:
    `employee-session` for a signed-in employee, `currentUser` otherwise.
    """

    def __init__(self, storage: Mapping[str, Any], *, admin_scope: bool = False):
        self.storage = storage
        self.admin_scope = admin_scope

    def __call__(self) -> SessionData:
        return SessionData(
            employee_session=self.storage.get(EMPLOYEE_SESSION_KEY),
            current_user=self.storage.get(CURRENT_USER_KEY),
            admin_scope=self.admin_scope,
        )


class FlaskSessionProvider:
    """
    Reads identity records from the signed Flask session cookie.

    The admin scope signal is derived from the request path and the
    ADMIN_SCOPE_PREFIX setting.
    """

    def __call__(self) -> SessionData:
        if not has_request_context():
            return SessionData()

        prefix = current_app.config.get("ADMIN_SCOPE_PREFIX") or ""
        return SessionData(
            employee_session=session.get(EMPLOYEE_SESSION_KEY),
            current_user=session.get(CURRENT_USER_KEY),
            admin_scope=bool(prefix) and request.path.startswith(prefix),
        )
