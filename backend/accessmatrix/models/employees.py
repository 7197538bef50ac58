from __future__ import annotations

from ..extensions import db
from accessmatrix.time_utils import to_utc_z


class EmployeePermission(db.Model):
    """
    Individually customized permission set for one employee.

    Identity match is by normalized (trimmed, lower-case) email.
    `permissions` holds a category -> capability -> bool mapping; records
    written by this package are always total over the schema, older rows
    may be sparse and are merged over the employee baseline on read.

    Absence of a row means the employee uses the baseline defaults.
    """
    __tablename__ = "employee_permissions"
    __table_args__ = (
        db.UniqueConstraint("email", name="uq_employee_permissions_email"),
        {"sqlite_autoincrement": True},
    )

    id = db.Column(db.Integer, primary_key=True)

    email = db.Column(db.String(255), nullable=False, index=True)
    employee_id = db.Column(db.String(64), nullable=True)
    name = db.Column(db.String(255), nullable=True)

    permissions = db.Column(db.JSON, nullable=False, default=dict)

    updated_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=db.func.now())
    updated_by = db.Column(db.String(255), nullable=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "email": self.email,
            "employee_id": self.employee_id,
            "name": self.name,
            "permissions": self.permissions,
            "updated_at": to_utc_z(self.updated_at),
            "updated_by": self.updated_by,
        }
