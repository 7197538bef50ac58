# Overview: Permission schema package.
# Re-exports the catalog, default sets and lookup helpers.

from .categories import PermissionCategory
from .definitions import PERMISSION_SCHEMA
from .menus import MENU_CAPABILITIES, get_menu_capability
from .permission_set import (
    PermissionSet,
    MalformedPermissionData,
    UnknownPermissionError,
    COVERAGE_ALL,
    COVERAGE_PARTIAL,
    COVERAGE_NONE,
)
from .roles import (
    RoleArchetype,
    EMPLOYEE_BASELINE_GRANTS,
    DEFAULT_ROLE_PERMISSIONS,
    build_administrator_defaults,
    build_employee_baseline_defaults,
)
from .helpers import (
    get_all_categories,
    get_capability_codes,
    get_capability_definition,
    validate_capability,
    iter_schema_pairs,
)

__all__ = [
    "PermissionCategory",
    "PERMISSION_SCHEMA",
    "MENU_CAPABILITIES",
    "get_menu_capability",
    "PermissionSet",
    "MalformedPermissionData",
    "UnknownPermissionError",
    "COVERAGE_ALL",
    "COVERAGE_PARTIAL",
    "COVERAGE_NONE",
    "RoleArchetype",
    "EMPLOYEE_BASELINE_GRANTS",
    "DEFAULT_ROLE_PERMISSIONS",
    "build_administrator_defaults",
    "build_employee_baseline_defaults",
    "get_all_categories",
    "get_capability_codes",
    "get_capability_definition",
    "validate_capability",
    "iter_schema_pairs",
]
