"""
PermissionSet value type tests.

Verifies:
- Merge-over-baseline construction from stored data
- Grant edits return new sets and reject unknown names
- Category coverage reporting
"""

import pytest

from accessmatrix.permissions import (
    COVERAGE_ALL,
    COVERAGE_NONE,
    COVERAGE_PARTIAL,
    MalformedPermissionData,
    PermissionSet,
    UnknownPermissionError,
    build_employee_baseline_defaults,
    get_capability_codes,
)


@pytest.fixture
def baseline():
    return build_employee_baseline_defaults()


class TestFromMapping:
    def test_stored_values_override_baseline(self, baseline):
        stored = {"manageQuotes": {"menuPage": True, "sendQuote": False}}
        result = PermissionSet.from_mapping(stored, base=baseline)

        assert result.get("manageQuotes", "menuPage") is True
        assert result.get("manageQuotes", "sendQuote") is False

    def test_absent_keys_inherit_baseline(self, baseline):
        stored = {"manageQuotes": {"sendQuote": False}}
        result = PermissionSet.from_mapping(stored, base=baseline)

        # Not mentioned in the stored record, so the baseline value applies
        assert result.get("manageQuotes", "convertToOrder") is True
        assert result.get("managePurchase", "confirmPurchase") is False
        assert result.get("manageOrders", "menuPage") is True

    def test_stored_grant_opens_sensitive_capability(self, baseline):
        stored = {"managePurchase": {"menuPageVisible": True}}
        result = PermissionSet.from_mapping(stored, base=baseline)
        assert result.get("managePurchase", "menuPageVisible") is True
        assert result.get("managePurchase", "delete") is False

    def test_unknown_names_ignored(self, baseline):
        stored = {
            "manageSpaceships": {"launch": True},
            "manageQuotes": {"teleport": True},
        }
        result = PermissionSet.from_mapping(stored, base=baseline)
        assert result == baseline
        assert result.get("manageSpaceships", "launch") is False
        assert result.get("manageQuotes", "teleport") is False

    @pytest.mark.parametrize("value", ["true", 1, None, [True]])
    def test_non_boolean_values_ignored(self, baseline, value):
        stored = {"managePurchase": {"menuPageVisible": value}}
        result = PermissionSet.from_mapping(stored, base=baseline)
        assert result.get("managePurchase", "menuPageVisible") is False

    def test_malformed_category_ignored(self, baseline):
        stored = {"manageQuotes": "everything", "managePurchase": {"addNew": True}}
        result = PermissionSet.from_mapping(stored, base=baseline)
        assert result.get("manageQuotes", "menuPage") is True
        assert result.get("managePurchase", "addNew") is True

    @pytest.mark.parametrize("data", [None, "[]", ["manageQuotes"], 42])
    def test_non_mapping_rejected(self, baseline, data):
        with pytest.raises(MalformedPermissionData):
            PermissionSet.from_mapping(data, base=baseline)

    def test_malformed_data_is_value_error(self, baseline):
        with pytest.raises(ValueError):
            PermissionSet.from_mapping("oops", base=baseline)


class TestConstructor:
    @pytest.mark.parametrize("value", [None, "everything", ["menuPage"], 1])
    def test_non_mapping_category_grants_nothing(self, value):
        permission_set = PermissionSet({"manageQuotes": value, "manageOrders": {"menuPage": True}})

        assert permission_set.category_coverage("manageQuotes") == COVERAGE_NONE
        assert permission_set.get("manageOrders", "menuPage") is True

    @pytest.mark.parametrize("grants", [None, "[]", ["manageQuotes"]])
    def test_non_mapping_rejected(self, grants):
        with pytest.raises(MalformedPermissionData):
            PermissionSet(grants)


class TestLookup:
    def test_total_dict(self, baseline):
        data = baseline.to_dict()
        for category in baseline.categories():
            assert set(data[category]) == set(get_capability_codes(category))

    @pytest.mark.parametrize(
        "category,capability",
        [("nope", "menuPage"), ("manageQuotes", "nope"), (None, "menuPage"), ("manageQuotes", None), (["x"], "y")],
    )
    def test_unknown_pairs_are_false(self, baseline, category, capability):
        assert baseline.get(category, capability) is False

    def test_to_dict_is_a_copy(self, baseline):
        data = baseline.to_dict()
        data["managePurchase"]["menuPageVisible"] = True
        assert baseline.get("managePurchase", "menuPageVisible") is False

    def test_category_copy(self, baseline):
        quotes = baseline.category("manageQuotes")
        quotes["delete"] = True
        assert baseline.get("manageQuotes", "delete") is False
        assert baseline.category("nope") == {}


class TestGrantEditing:
    def test_with_grant_returns_new_set(self, baseline):
        updated = baseline.with_grant("managePurchase", "menuPageVisible", True)

        assert updated.get("managePurchase", "menuPageVisible") is True
        assert baseline.get("managePurchase", "menuPageVisible") is False
        assert updated != baseline

    def test_with_grant_revoke(self, baseline):
        updated = baseline.with_grant("manageQuotes", "sendQuote", False)
        assert updated.get("manageQuotes", "sendQuote") is False

    @pytest.mark.parametrize("category,capability", [("nope", "menuPage"), ("manageQuotes", "nope")])
    def test_with_grant_unknown(self, baseline, category, capability):
        with pytest.raises(UnknownPermissionError):
            baseline.with_grant(category, capability, True)

    def test_with_category(self, baseline):
        updated = baseline.with_category("companyAdmin", True)
        assert all(updated.category("companyAdmin").values())

        revoked = updated.with_category("companyAdmin", False)
        assert revoked == baseline

    def test_with_category_unknown(self, baseline):
        with pytest.raises(UnknownPermissionError):
            baseline.with_category("nope", True)

    def test_with_grants(self, baseline):
        updated = baseline.with_grants([("logistic", "schedulePO"), ("logistic", "accessLogistic")])
        assert updated.category("logistic") == {"schedulePO": True, "accessLogistic": True}


class TestCoverage:
    def test_coverage_states(self, baseline):
        assert baseline.category_coverage("companyAdmin") == COVERAGE_NONE
        assert baseline.category_coverage("manageQuotes") == COVERAGE_PARTIAL
        assert baseline.with_category("logistic", True).category_coverage("logistic") == COVERAGE_ALL

    def test_unknown_category_coverage(self, baseline):
        assert baseline.category_coverage("nope") == COVERAGE_NONE


class TestEquality:
    def test_equal_by_content(self):
        assert PermissionSet.uniform(False) == PermissionSet({})
        assert PermissionSet.uniform(True) != PermissionSet.uniform(False)

    def test_not_equal_to_dict(self, baseline):
        assert baseline != baseline.to_dict()

    def test_unhashable(self, baseline):
        with pytest.raises(TypeError):
            hash(baseline)
