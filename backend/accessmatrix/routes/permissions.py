# Overview: Flask API routes exposing the permission store and employee grant editing.

# backend/accessmatrix/routes/permissions.py
"""
Permission routes.

Provides endpoints for:
- The signed-in principal's snapshot and visible menus
- Reloading the snapshot after a login or grant change
- The capability catalog
- Administrator edits of per-employee grants

Answers are decided per request; clients must not cache them.
"""

from collections.abc import Mapping

from flask import Blueprint, request, jsonify

from ..decorators import get_permission_store, require_administrator
from ..permissions import (
    PERMISSION_SCHEMA,
    PermissionSet,
    UnknownPermissionError,
    build_employee_baseline_defaults,
)
from ..services import permission_service, roster_service

permissions_bp = Blueprint("permissions", __name__, url_prefix="/api/permissions")


def _principal_email():
    principal = get_permission_store().current().principal
    return principal.email if principal else None


# =============================================================================
# CURRENT PRINCIPAL
# =============================================================================

@permissions_bp.get("/me")
def current_permissions():
    """Current snapshot. Unresolved principals get state UNLOADED and no permissions."""
    return jsonify(get_permission_store().current().to_dict())


@permissions_bp.get("/menus")
def current_menus():
    store = get_permission_store()
    return jsonify({
        "is_administrator": permission_service.is_administrator(store),
        "menus": permission_service.visible_menus(store),
    })


@permissions_bp.post("/reload")
def reload_permissions():
    snapshot = get_permission_store().load_sync()
    return jsonify(snapshot.to_dict())


@permissions_bp.get("/schema")
def permission_schema():
    """
    Capability catalog grouped by category.

    Query params:
    - category: str - only return one category
    """
    category = request.args.get("category")
    if category and category not in PERMISSION_SCHEMA:
        return jsonify({"error": f"Unknown category: {category}"}), 404

    categories = [category] if category else list(PERMISSION_SCHEMA)
    return jsonify({
        "categories": [
            {
                "category": name,
                "capabilities": [
                    {"code": code, "name": label, "description": description}
                    for code, label, description in PERMISSION_SCHEMA[name]
                ],
            }
            for name in categories
        ]
    })


# =============================================================================
# EMPLOYEE GRANTS (administrator only)
# =============================================================================

@permissions_bp.get("/employees/<email>")
@require_administrator
def get_employee_permissions(email):
    record = roster_service.DatabaseEmployeeRoster().find_by_email(email)
    effective = roster_service.stored_permission_set(record.permissions if record else None)
    return jsonify({
        "email": roster_service.normalize_email(email),
        "customized": record is not None,
        "permissions": effective.to_dict(),
    })


@permissions_bp.put("/employees/<email>")
@require_administrator
def replace_employee_permissions(email):
    """
    Replace an employee's grants.

    Body:
    - permissions: {category: {capability: bool}} (merged over the baseline)
    - name, employee_id: optional record details
    """
    payload = request.get_json(silent=True) or {}
    permissions = payload.get("permissions")
    if not isinstance(permissions, Mapping):
        return jsonify({"error": "permissions must be an object"}), 400

    permission_set = PermissionSet.from_mapping(permissions, base=build_employee_baseline_defaults())
    try:
        row = roster_service.save_employee_permissions(
            email,
            permission_set,
            updated_by=_principal_email(),
            employee_id=payload.get("employee_id"),
            name=payload.get("name"),
        )
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    return jsonify(row.to_dict())


@permissions_bp.patch("/employees/<email>/grants")
@require_administrator
def update_employee_grant(email):
    """
    Change one capability, or a whole category when capability is omitted.

    Body: {"category": str, "capability": str | null, "value": bool}
    """
    payload = request.get_json(silent=True) or {}
    category = payload.get("category")
    capability = payload.get("capability")
    value = payload.get("value")

    if not isinstance(category, str) or not isinstance(value, bool):
        return jsonify({"error": "category (string) and value (boolean) are required"}), 400

    try:
        if capability is None:
            row = roster_service.set_employee_category(
                email, category, value, updated_by=_principal_email()
            )
        else:
            row = roster_service.set_employee_capability(
                email, category, capability, value, updated_by=_principal_email()
            )
    except (UnknownPermissionError, ValueError) as e:
        return jsonify({"error": str(e)}), 400

    return jsonify(row.to_dict())


@permissions_bp.delete("/employees/<email>")
@require_administrator
def reset_employee_permissions(email):
    if not roster_service.reset_employee_permissions(email):
        return jsonify({"error": "No stored permissions for this employee"}), 404
    return jsonify({"email": roster_service.normalize_email(email), "customized": False})
