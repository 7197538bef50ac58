# Overview: Resolves the acting principal and its permission set from session identity data.

"""
Principal resolution.

Input is raw session identity data (SessionData); output is a Resolution
holding the principal, the administrator flag and a total PermissionSet,
or None when no principal can be established.

ADMINISTRATOR DECISION TABLE (first matching rule wins):
1. role      - identity role is one of ADMIN_ROLES
2. owner     - identity carries isOwner == True
3. email     - identity email is one of ADMIN_EMAILS
4. scope     - the request runs under the admin scope (only with TRUST_ADMIN_SCOPE on)
Employee sessions never match: an employee is never an administrator.

EMPLOYEE PERMISSIONS (first available source wins):
1. permissions stored inline on the employee session
2. permissions stored on the roster record with the same email
3. employee baseline defaults

Missing identity never resolves to an administrator.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from ..permissions import (
    PermissionSet,
    MalformedPermissionData,
    RoleArchetype,
    build_administrator_defaults,
    build_employee_baseline_defaults,
)
from .roster_service import EmployeeRoster, normalize_email


logger = logging.getLogger(__name__)

IDENTITY_FIELDS = ("email", "role", "id", "employeeId", "isOwner")

SOURCE_ADMINISTRATOR = "administrator"
SOURCE_SESSION = "session"
SOURCE_ROSTER = "roster"
SOURCE_BASELINE = "baseline"


@dataclass(frozen=True)
class SessionData:
    """
    Raw identity inputs for one resolution.

    employee_session / current_user may be mappings or JSON strings.
    admin_scope is the contextual signal (e.g. request under /admin).
    """
    employee_session: Any = None
    current_user: Any = None
    admin_scope: bool = False


@dataclass(frozen=True)
class Principal:
    role: str
    email: str | None = None
    employee_id: str | None = None
    name: str | None = None

    def to_dict(self) -> dict:
        return {
            "role": self.role,
            "email": self.email,
            "employee_id": self.employee_id,
            "name": self.name,
        }


@dataclass(frozen=True)
class Resolution:
    principal: Principal
    is_administrator: bool
    permission_set: PermissionSet
    source: str
    admin_rule: str | None = None


def parse_identity_record(value: Any, require_identity: bool = True) -> dict | None:
    """
    Normalize an identity record to a dict.

    Accepts a mapping or a JSON object string. Anything else, including
    unparsable JSON, is absent. Records without any identifying field are
    absent too unless require_identity is False.
    """
    if value is None:
        return None
    if isinstance(value, (str, bytes)):
        try:
            value = json.loads(value)
        except ValueError:
            logger.warning("Ignoring unparsable identity record")
            return None
    if not isinstance(value, Mapping):
        logger.warning("Ignoring identity record of type %s", type(value).__name__)
        return None
    record = dict(value)
    if require_identity and not any(record.get(field) not in (None, "") for field in IDENTITY_FIELDS):
        logger.warning("Ignoring identity record without identifying fields")
        return None
    return record


class PrincipalResolver:
    def __init__(
        self,
        roster: EmployeeRoster | None = None,
        *,
        admin_roles: Iterable[str] = ("ADMIN", "OWNER"),
        admin_emails: Iterable[str] = (),
        trust_admin_scope: bool = False,
    ):
        self.roster = roster
        self.admin_roles = frozenset(role.strip().upper() for role in admin_roles)
        self.admin_emails = frozenset(
            e for e in (normalize_email(email) for email in admin_emails) if e
        )
        self.trust_admin_scope = trust_admin_scope

        self.admin_rules: list[tuple[str, Callable[[dict, SessionData], bool]]] = [
            ("role", self._has_admin_role),
            ("owner", self._is_owner),
            ("email", self._is_admin_email),
            ("scope", self._in_admin_scope),
        ]

    @classmethod
    def from_config(cls, config: Mapping, roster: EmployeeRoster | None = None) -> "PrincipalResolver":
        return cls(
            roster,
            admin_roles=config.get("ADMIN_ROLES", ("ADMIN", "OWNER")),
            admin_emails=config.get("ADMIN_EMAILS", ()),
            trust_admin_scope=config.get("TRUST_ADMIN_SCOPE", False),
        )

    # -- administrator rules --

    def _has_admin_role(self, identity: dict, session: SessionData) -> bool:
        role = identity.get("role")
        return isinstance(role, str) and role.strip().upper() in self.admin_roles

    def _is_owner(self, identity: dict, session: SessionData) -> bool:
        return identity.get("isOwner") is True

    def _is_admin_email(self, identity: dict, session: SessionData) -> bool:
        email = normalize_email(identity.get("email"))
        return email is not None and email in self.admin_emails

    def _in_admin_scope(self, identity: dict, session: SessionData) -> bool:
        return self.trust_admin_scope and bool(session.admin_scope)

    def match_admin_rule(self, identity: dict, session: SessionData) -> str | None:
        """Return the name of the first administrator rule that matches, or None."""
        for name, rule in self.admin_rules:
            if rule(identity, session):
                return name
        return None

    # -- resolution --

    def identify(self, session: SessionData) -> tuple[dict | None, bool]:
        """Pick the identity record and whether it is an employee session."""
        # Any parsed employee session is an employee, identifying fields or not
        employee = parse_identity_record(session.employee_session, require_identity=False)
        if employee is not None:
            return employee, True

        user = parse_identity_record(session.current_user)
        if user is not None:
            return user, user.get("isEmployee") is True

        return None, False

    def resolve(self, session: SessionData) -> Resolution | None:
        identity, is_employee = self.identify(session)
        if identity is None:
            logger.info("No identity data available; principal left unresolved")
            return None

        email = normalize_email(identity.get("email"))
        employee_id = identity.get("id", identity.get("employeeId"))
        employee_id = str(employee_id) if employee_id is not None else None
        name = identity.get("name")

        rule = None if is_employee else self.match_admin_rule(identity, session)
        if rule is not None:
            logger.debug("Principal %s resolved as administrator via %s rule", email, rule)
            return Resolution(
                principal=Principal(RoleArchetype.ADMINISTRATOR, email, employee_id, name),
                is_administrator=True,
                permission_set=build_administrator_defaults(),
                source=SOURCE_ADMINISTRATOR,
                admin_rule=rule,
            )

        permission_set, source = self._employee_permissions(identity, email, is_employee)
        logger.debug("Principal %s resolved as employee (permissions from %s)", email, source)
        return Resolution(
            principal=Principal(RoleArchetype.EMPLOYEE, email, employee_id, name),
            is_administrator=False,
            permission_set=permission_set,
            source=source,
        )

    def _employee_permissions(self, identity: dict, email: str | None, is_employee: bool) -> tuple[PermissionSet, str]:
        stored, source = None, SOURCE_BASELINE

        if is_employee and identity.get("permissions") is not None:
            stored, source = identity["permissions"], SOURCE_SESSION
        elif self.roster is not None and email is not None:
            record = self.roster.find_by_email(email)
            if record is not None and record.permissions is not None:
                stored, source = record.permissions, SOURCE_ROSTER

        baseline = build_employee_baseline_defaults()
        if stored is None:
            return baseline, SOURCE_BASELINE

        try:
            return PermissionSet.from_mapping(stored, base=baseline), source
        except MalformedPermissionData as e:
            logger.warning("Malformed permissions for %s from %s, using baseline: %s", email, source, e)
            return baseline, SOURCE_BASELINE
