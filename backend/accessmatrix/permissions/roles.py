# Overview: Role archetypes and their default permission sets.

from .categories import PermissionCategory
from .permission_set import PermissionSet


class RoleArchetype:
    """Role archetypes a principal can resolve to."""
    ADMINISTRATOR = "ADMINISTRATOR"
    EMPLOYEE = "EMPLOYEE"


# Capabilities granted to newly created staff. Everything not listed is False.
# Purchasing, product pricing, user management and company administration
# stay closed until an administrator grants them per employee.
EMPLOYEE_BASELINE_GRANTS = {
    PermissionCategory.MANAGE_CUSTOMERS: [
        "menuPage",
        "addNew",
        "creditLimitView",
        "accountingTermsView",
    ],
    PermissionCategory.MANAGE_ORDERS: [
        "menuPage",
        "addNew",
        "edit",
        "viewStatusPage",
        "viewAllOrders",
    ],
    PermissionCategory.MANAGE_QUOTES: [
        "menuPage",
        "addNew",
        "edit",
        "sendQuote",
        "convertToOrder",
        "viewAllQuotes",
    ],
    PermissionCategory.MANAGE_INVOICES: [
        "menuPage",
        "generate",
        "send",
        "viewAllInvoices",
    ],
    PermissionCategory.MANAGE_INVENTORY: [
        "menuPageVisible",
    ],
    PermissionCategory.MODULES: [
        "manageOrders",
        "manageQuotes",
        "manageInvoices",
    ],
    PermissionCategory.DASHBOARD_REPORTS: [
        "salesReport",
    ],
}


def build_administrator_defaults() -> PermissionSet:
    """All capabilities in every category granted."""
    return PermissionSet.uniform(True)


def build_employee_baseline_defaults() -> PermissionSet:
    """Least-privilege set for staff without individually stored grants."""
    return PermissionSet({
        category: {code: True for code in codes}
        for category, codes in EMPLOYEE_BASELINE_GRANTS.items()
    })


DEFAULT_ROLE_PERMISSIONS = {
    RoleArchetype.ADMINISTRATOR: build_administrator_defaults,
    RoleArchetype.EMPLOYEE: build_employee_baseline_defaults,
}
