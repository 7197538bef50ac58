# Overview: Menu key -> (category, capability) lookup used for menu visibility.

from .categories import PermissionCategory


# Navigation order. Keys not listed here are never visible to employees.
MENU_CAPABILITIES = {
    "quotes": (PermissionCategory.MANAGE_QUOTES, "menuPage"),
    "orders": (PermissionCategory.MANAGE_ORDERS, "menuPage"),
    "invoices": (PermissionCategory.MANAGE_INVOICES, "menuPage"),
    "customers": (PermissionCategory.MANAGE_CUSTOMERS, "menuPage"),
    "inventory": (PermissionCategory.MANAGE_INVENTORY, "menuPageVisible"),
    "purchase": (PermissionCategory.MANAGE_PURCHASE, "menuPageVisible"),
    "products": (PermissionCategory.MANAGE_PRODUCTS, "viewProducts"),
    "logistics": (PermissionCategory.MANAGE_DELIVERY, "menuPage"),
    "admin": (PermissionCategory.COMPANY_ADMIN, "companySetting"),
}


def get_menu_capability(menu_key):
    """Return the (category, capability) pair gating a menu, or None."""
    if not isinstance(menu_key, str):
        return None
    return MENU_CAPABILITIES.get(menu_key)
