# Overview: Service-layer operations for employee permission records; lookup and grant persistence.

"""
Employee roster lookups and per-employee grant persistence.

The resolver only needs `find_by_email`; two rosters implement it:
- InMemoryEmployeeRoster: records held in memory (e.g. parsed from the
  JSON employee list a legacy client kept in browser storage)
- DatabaseEmployeeRoster: the `employee_permissions` table

Administrator edits go through the module-level functions below. They
always store a total set so later reads never depend on the baseline
that was current at write time.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterable

from ..extensions import db
from ..models import EmployeePermission
from ..permissions import (
    PermissionSet,
    MalformedPermissionData,
    build_employee_baseline_defaults,
)
from accessmatrix.time_utils import utcnow


logger = logging.getLogger(__name__)


def normalize_email(email: Any) -> str | None:
    if not isinstance(email, str):
        return None
    email = email.strip().lower()
    return email or None


@dataclass(frozen=True)
class EmployeeRecord:
    email: str
    employee_id: str | None = None
    name: str | None = None
    permissions: Any = None

    @classmethod
    def from_mapping(cls, data: Mapping) -> "EmployeeRecord | None":
        """Build a record from the legacy employee shape; None if it has no usable email."""
        email = normalize_email(data.get("email"))
        if email is None:
            return None
        employee_id = data.get("id", data.get("employeeId"))
        return cls(
            email=email,
            employee_id=str(employee_id) if employee_id is not None else None,
            name=data.get("name"),
            permissions=data.get("permissions"),
        )


class EmployeeRoster:
    """Lookup of employee records by identity."""

    def find_by_email(self, email: str) -> EmployeeRecord | None:
        raise NotImplementedError


class InMemoryEmployeeRoster(EmployeeRoster):
    def __init__(self, records: Iterable[EmployeeRecord | Mapping] = ()):
        self._records: dict[str, EmployeeRecord] = {}
        for record in records:
            if isinstance(record, Mapping):
                record = EmployeeRecord.from_mapping(record)
            if record is None:
                continue
            self._records[record.email] = record

    @classmethod
    def from_json(cls, raw: str | None) -> "InMemoryEmployeeRoster":
        """
        Parse a JSON array of employee objects.

        Unparsable input is treated as an empty roster.
        """
        if not raw:
            return cls()
        try:
            data = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning("Ignoring unparsable employee roster")
            return cls()
        if not isinstance(data, list):
            logger.warning("Ignoring employee roster that is not a list")
            return cls()
        return cls(item for item in data if isinstance(item, Mapping))

    def find_by_email(self, email: str) -> EmployeeRecord | None:
        key = normalize_email(email)
        if key is None:
            return None
        return self._records.get(key)

    def __len__(self) -> int:
        return len(self._records)


class DatabaseEmployeeRoster(EmployeeRoster):
    """Roster backed by the employee_permissions table. Requires an app context."""

    def find_by_email(self, email: str) -> EmployeeRecord | None:
        row = _get_row(email)
        if row is None:
            return None
        return EmployeeRecord(
            email=row.email,
            employee_id=row.employee_id,
            name=row.name,
            permissions=row.permissions,
        )


def _get_row(email: str) -> EmployeePermission | None:
    key = normalize_email(email)
    if key is None:
        return None
    return db.session.query(EmployeePermission).filter_by(email=key).first()


def _require_email(email: str) -> str:
    key = normalize_email(email)
    if key is None:
        raise ValueError("A non-empty employee email is required")
    return key


def stored_permission_set(permissions: Any) -> PermissionSet:
    """
    Turn stored permission data into a total set.

    Missing or malformed data falls back to the employee baseline.
    """
    baseline = build_employee_baseline_defaults()
    if permissions is None:
        return baseline
    try:
        return PermissionSet.from_mapping(permissions, base=baseline)
    except MalformedPermissionData as e:
        logger.warning("Stored employee permissions are malformed, using baseline: %s", e)
        return baseline


def get_employee_permission_set(email: str) -> PermissionSet:
    """Effective permission set for an employee (stored grants or baseline)."""
    row = _get_row(email)
    return stored_permission_set(row.permissions if row else None)


def save_employee_permissions(
    email: str,
    permission_set: PermissionSet,
    *,
    updated_by: str | None = None,
    employee_id: str | None = None,
    name: str | None = None,
) -> EmployeePermission:
    """
    Store an employee's permission set, replacing any previous record wholesale.
    """
    key = _require_email(email)

    row = db.session.query(EmployeePermission).filter_by(email=key).first()
    if row is None:
        row = EmployeePermission(email=key)
        db.session.add(row)

    row.permissions = permission_set.to_dict()
    row.updated_at = utcnow()
    row.updated_by = updated_by
    if employee_id is not None:
        row.employee_id = employee_id
    if name is not None:
        row.name = name

    db.session.commit()
    logger.info("Saved permissions for %s (%d granted)", key, len(permission_set.granted()))
    return row


def set_employee_capability(
    email: str,
    category: str,
    capability: str,
    value: bool,
    *,
    updated_by: str | None = None,
) -> EmployeePermission:
    """Grant or revoke a single capability. Raises UnknownPermissionError for bad names."""
    updated = get_employee_permission_set(email).with_grant(category, capability, value)
    return save_employee_permissions(email, updated, updated_by=updated_by)


def set_employee_category(
    email: str,
    category: str,
    value: bool,
    *,
    updated_by: str | None = None,
) -> EmployeePermission:
    """Grant or revoke every capability in a category."""
    updated = get_employee_permission_set(email).with_category(category, value)
    return save_employee_permissions(email, updated, updated_by=updated_by)


def reset_employee_permissions(email: str) -> bool:
    """Delete an employee's record so they fall back to the baseline."""
    row = _get_row(email)
    if row is None:
        return False  # Nothing stored in the first place

    db.session.delete(row)
    db.session.commit()
    logger.info("Reset permissions for %s to baseline", row.email)
    return True
