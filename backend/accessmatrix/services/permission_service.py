# Overview: Permission query API evaluated against a PermissionStore's current snapshot.

"""
Permission checks.

DESIGN PRINCIPLES:
- Fail closed: anything not explicitly granted is denied
- Never raise: unknown names and unloaded stores answer False
- No caching: every call reads the store's current snapshot, so a reload
  takes effect on the next check
- Administrators see every menu regardless of their stored set
"""

from __future__ import annotations

import logging
from typing import Iterable

from ..permissions import MENU_CAPABILITIES, get_menu_capability
from .permission_store import PermissionStore


logger = logging.getLogger(__name__)


def has_permission(store: PermissionStore, category: str, capability: str) -> bool:
    """Return the grant at (category, capability); False if unloaded or unknown."""
    snapshot = store.current()
    if not snapshot.is_loaded:
        return False
    return snapshot.permission_set.get(category, capability)


def has_any_permission(store: PermissionStore, category: str, capabilities: Iterable[str]) -> bool:
    """True if at least one listed capability is granted."""
    return any(has_permission(store, category, capability) for capability in capabilities)


def has_all_permissions(store: PermissionStore, category: str, capabilities: Iterable[str]) -> bool:
    """True if every listed capability is granted (False for an empty list)."""
    capabilities = list(capabilities)
    return bool(capabilities) and all(
        has_permission(store, category, capability) for capability in capabilities
    )


def can_access_menu(store: PermissionStore, menu_key: str) -> bool:
    """
    Menu visibility check.

    Administrators bypass the capability lookup entirely. Employees need
    the capability mapped to the menu in MENU_CAPABILITIES; unknown menu
    keys are denied.
    """
    snapshot = store.current()
    if not snapshot.is_loaded:
        return False

    if snapshot.is_administrator:
        return True

    mapped = get_menu_capability(menu_key)
    if mapped is None:
        logger.debug("Unknown menu key %r denied", menu_key)
        return False

    category, capability = mapped
    return has_permission(store, category, capability)


def can_perform_action(store: PermissionStore, category: str, action: str) -> bool:
    """Action gate. Same answer as has_permission; kept separate for action call sites."""
    return has_permission(store, category, action)


def is_administrator(store: PermissionStore) -> bool:
    snapshot = store.current()
    return snapshot.is_loaded and snapshot.is_administrator


def visible_menus(store: PermissionStore) -> list[str]:
    """Menu keys the current principal may see, in navigation order."""
    return [menu_key for menu_key in MENU_CAPABILITIES if can_access_menu(store, menu_key)]
