# Overview: Per-request permission store and route guard decorators.

from functools import wraps
from flask import current_app, g, jsonify, request

from .services import permission_service
from .services.permission_store import PermissionStore
from .services.principal_service import PrincipalResolver
from .services.roster_service import DatabaseEmployeeRoster
from .services.session_service import FlaskSessionProvider


def build_permission_store() -> PermissionStore:
    """Construct an (unloaded) store for the current app configuration."""
    resolver = PrincipalResolver.from_config(current_app.config, DatabaseEmployeeRoster())
    return PermissionStore(resolver, FlaskSessionProvider())


def get_permission_store() -> PermissionStore:
    """
    Return the request's permission store, loading it on first use.

    One store per request: guards and views in the same request share it,
    and the next request sees any grant edits made in between.
    """
    store = g.get("permission_store")
    if store is None:
        store = build_permission_store()
        store.load_sync()
        g.permission_store = store
    return store


def _deny(required: str, message: str):
    store = get_permission_store()
    principal = store.current().principal
    current_app.logger.warning(
        "Permission denied: %s %s requires %s (principal=%s)",
        request.method,
        request.path,
        required,
        principal.email if principal else None,
    )
    return jsonify({
        "error": "Permission denied",
        "required_permission": required,
        "message": message,
    }), 403


def require_principal(f):
    """Require a resolved principal; 401 while the store is not loaded."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not get_permission_store().current().is_loaded:
            return jsonify({"error": "Authentication required"}), 401
        return f(*args, **kwargs)
    return decorated_function


def require_menu(menu_key: str):
    """Require visibility of a navigation menu (administrators always pass)."""
    def decorator(f):
        @wraps(f)
        @require_principal
        def decorated_function(*args, **kwargs):
            if not permission_service.can_access_menu(get_permission_store(), menu_key):
                return _deny(f"menu:{menu_key}", f"Menu '{menu_key}' is not available")
            return f(*args, **kwargs)
        return decorated_function
    return decorator


def require_action(category: str, action: str):
    """Require a specific capability."""
    def decorator(f):
        @wraps(f)
        @require_principal
        def decorated_function(*args, **kwargs):
            if not permission_service.can_perform_action(get_permission_store(), category, action):
                return _deny(f"{category}.{action}", f"Permission denied: {category}.{action}")
            return f(*args, **kwargs)
        return decorated_function
    return decorator


def require_any_action(category: str, *actions: str):
    """Require any of the listed capabilities within one category."""
    def decorator(f):
        @wraps(f)
        @require_principal
        def decorated_function(*args, **kwargs):
            if not permission_service.has_any_permission(get_permission_store(), category, actions):
                required = f"{category}.ANY_OF:{','.join(actions)}"
                return _deny(required, f"Requires any of: {', '.join(actions)}")
            return f(*args, **kwargs)
        return decorated_function
    return decorator


def require_administrator(f):
    """Require the administrator archetype."""
    @wraps(f)
    @require_principal
    def decorated_function(*args, **kwargs):
        if not permission_service.is_administrator(get_permission_store()):
            return _deny("ADMINISTRATOR", "Administrator access required")
        return f(*args, **kwargs)
    return decorated_function
