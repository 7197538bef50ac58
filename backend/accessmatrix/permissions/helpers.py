# Overview: Utility functions for schema lookups and validation.

from .definitions import PERMISSION_SCHEMA


def get_all_categories():
    """Get list of all category names, in display order."""
    return list(PERMISSION_SCHEMA)


def get_capability_codes(category):
    """Get capability codes of a category (empty list for unknown categories)."""
    return [cap[0] for cap in PERMISSION_SCHEMA.get(category, ())]


def get_capability_definition(category, code):
    """Get full definition for a capability code within a category."""
    for cap in PERMISSION_SCHEMA.get(category, ()):
        if cap[0] == code:
            return {
                "category": category,
                "code": cap[0],
                "name": cap[1],
                "description": cap[2],
            }
    return None


def validate_capability(category, code):
    """Check if a (category, capability) pair exists in the schema."""
    return code in get_capability_codes(category)


def iter_schema_pairs():
    """Yield every (category, capability) pair defined by the schema."""
    for category, capabilities in PERMISSION_SCHEMA.items():
        for cap in capabilities:
            yield category, cap[0]
