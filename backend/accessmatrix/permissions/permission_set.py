# Overview: Immutable, schema-total permission set value type.

"""
PermissionSet: a complete category -> capability -> bool matrix.

INVARIANT: a PermissionSet is always total over PERMISSION_SCHEMA. Every
category and every capability is present; nothing is "unknown". Sets are
never edited in place: the grant-editing helpers return new sets.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Iterable

from .definitions import PERMISSION_SCHEMA
from .helpers import get_capability_codes, validate_capability


logger = logging.getLogger(__name__)

COVERAGE_ALL = "all"
COVERAGE_PARTIAL = "partial"
COVERAGE_NONE = "none"


class MalformedPermissionData(ValueError):
    """Raised when stored permission data is not a category mapping."""
    pass


class UnknownPermissionError(KeyError):
    """Raised when a grant edit names a category or capability outside the schema."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "Unknown permission"


class PermissionSet:
    __slots__ = ("_grants",)

    def __init__(self, grants: Mapping[str, Mapping[str, bool]]):
        if not isinstance(grants, Mapping):
            raise MalformedPermissionData(
                f"Permission data must be a mapping, got {type(grants).__name__}"
            )

        # Always rebuilt from the schema so the set stays total and ordered.
        # Non-mapping category values grant nothing.
        self._grants = {}
        for category, capabilities in PERMISSION_SCHEMA.items():
            stored = grants.get(category)
            if not isinstance(stored, Mapping):
                stored = {}
            self._grants[category] = {
                code: stored.get(code) is True
                for code, _name, _description in capabilities
            }

    @classmethod
    def uniform(cls, value: bool) -> "PermissionSet":
        """Build a set with every capability set to `value`."""
        return cls({
            category: {cap[0]: value for cap in capabilities}
            for category, capabilities in PERMISSION_SCHEMA.items()
        })

    @classmethod
    def from_mapping(cls, data, base: "PermissionSet") -> "PermissionSet":
        """
        Merge stored permission data over a base set.

        Only boolean values present in `data` override the base; absent
        keys inherit the base value, so capabilities added to the schema
        after a record was saved never become granted by accident.
        Unknown categories/capabilities and non-boolean values are ignored.
        """
        if not isinstance(data, Mapping):
            raise MalformedPermissionData(
                f"Permission data must be a mapping, got {type(data).__name__}"
            )

        merged = base.to_dict()
        for category, capabilities in data.items():
            if category not in merged:
                logger.debug("Ignoring unknown permission category %r", category)
                continue
            if not isinstance(capabilities, Mapping):
                logger.warning("Ignoring malformed permissions for category %r", category)
                continue
            for code, value in capabilities.items():
                if code not in merged[category]:
                    logger.debug("Ignoring unknown capability %s.%s", category, code)
                    continue
                if isinstance(value, bool):
                    merged[category][code] = value

        return cls(merged)

    def get(self, category: str, capability: str) -> bool:
        """Return the grant for a pair; unknown names resolve to False."""
        if not isinstance(category, str) or not isinstance(capability, str):
            return False
        return self._grants.get(category, {}).get(capability, False)

    def categories(self) -> list[str]:
        return list(self._grants)

    def category(self, category: str) -> dict[str, bool]:
        return dict(self._grants.get(category, {}))

    def granted(self) -> list[tuple[str, str]]:
        """Sorted list of (category, capability) pairs that are granted."""
        return sorted(
            (category, code)
            for category, capabilities in self._grants.items()
            for code, value in capabilities.items()
            if value
        )

    def category_coverage(self, category: str) -> str:
        """Report whether all, some or none of a category's capabilities are granted."""
        values = list(self._grants.get(category, {}).values())
        if values and all(values):
            return COVERAGE_ALL
        if any(values):
            return COVERAGE_PARTIAL
        return COVERAGE_NONE

    def with_grant(self, category: str, capability: str, value: bool) -> "PermissionSet":
        """Return a copy with one capability changed."""
        if not validate_capability(category, capability):
            raise UnknownPermissionError(f"Unknown capability: {category}.{capability}")
        grants = self.to_dict()
        grants[category][capability] = bool(value)
        return PermissionSet(grants)

    def with_category(self, category: str, value: bool) -> "PermissionSet":
        """Return a copy with every capability of a category set to `value`."""
        codes = get_capability_codes(category)
        if not codes:
            raise UnknownPermissionError(f"Unknown category: {category}")
        grants = self.to_dict()
        grants[category] = {code: bool(value) for code in codes}
        return PermissionSet(grants)

    def with_grants(self, pairs: Iterable[tuple[str, str]], value: bool = True) -> "PermissionSet":
        result = self
        for category, capability in pairs:
            result = result.with_grant(category, capability, value)
        return result

    def to_dict(self) -> dict[str, dict[str, bool]]:
        return {category: dict(capabilities) for category, capabilities in self._grants.items()}

    def __eq__(self, other) -> bool:
        if not isinstance(other, PermissionSet):
            return NotImplemented
        return self._grants == other._grants

    __hash__ = None

    def __repr__(self) -> str:
        total = sum(len(capabilities) for capabilities in self._grants.values())
        return f"<PermissionSet granted={len(self.granted())}/{total}>"
