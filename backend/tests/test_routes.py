"""
Permission API tests.

Covers the current-principal endpoints, the capability catalog and
administrator-only grant editing.
"""

import pytest

from accessmatrix.permissions import PERMISSION_SCHEMA, build_employee_baseline_defaults

from conftest import sign_in


JANE = "jane@example.com"


# =============================================================================
# CURRENT PRINCIPAL
# =============================================================================


class TestCurrentPrincipal:
    def test_me_without_session(self, client, db_session):
        sign_in(client)
        response = client.get("/api/permissions/me")

        assert response.status_code == 200
        assert response.get_json() == {
            "state": "UNLOADED",
            "is_administrator": False,
            "principal": None,
            "source": None,
            "permissions": None,
        }

    def test_me_as_employee(self, employee_client):
        data = employee_client.get("/api/permissions/me").get_json()

        assert data["state"] == "LOADED"
        assert data["is_administrator"] is False
        assert data["source"] == "baseline"
        assert data["principal"] == {
            "role": "EMPLOYEE",
            "email": JANE,
            "employee_id": "7",
            "name": "Jane",
        }
        assert data["permissions"] == build_employee_baseline_defaults().to_dict()

    def test_me_as_administrator(self, admin_client):
        data = admin_client.get("/api/permissions/me").get_json()

        assert data["is_administrator"] is True
        assert data["principal"]["role"] == "ADMINISTRATOR"
        assert all(all(caps.values()) for caps in data["permissions"].values())

    def test_configured_admin_email(self, client, db_session):
        sign_in(client, current_user={"email": "Boss@Example.com", "role": "STAFF"})
        data = client.get("/api/permissions/me").get_json()
        assert data["is_administrator"] is True

    def test_employee_session_beats_owner_record(self, client, db_session):
        sign_in(
            client,
            current_user={"email": "owner@example.com", "role": "OWNER"},
            employee_session={"email": JANE},
        )
        data = client.get("/api/permissions/me").get_json()
        assert data["is_administrator"] is False
        assert data["principal"]["email"] == JANE

    def test_malformed_session_is_unloaded(self, client, db_session):
        sign_in(client, current_user="{not json")
        data = client.get("/api/permissions/me").get_json()
        assert data["state"] == "UNLOADED"

    def test_employee_menus(self, employee_client):
        data = employee_client.get("/api/permissions/menus").get_json()
        assert data == {
            "is_administrator": False,
            "menus": ["quotes", "orders", "invoices", "customers", "inventory"],
        }

    def test_admin_menus(self, admin_client):
        data = admin_client.get("/api/permissions/menus").get_json()
        assert data["is_administrator"] is True
        assert "admin" in data["menus"]
        assert "purchase" in data["menus"]

    def test_menus_without_session(self, client, db_session):
        sign_in(client)
        data = client.get("/api/permissions/menus").get_json()
        assert data == {"is_administrator": False, "menus": []}

    def test_reload(self, employee_client):
        response = employee_client.post("/api/permissions/reload")
        assert response.status_code == 200
        assert response.get_json()["state"] == "LOADED"


# =============================================================================
# SCHEMA
# =============================================================================


class TestSchema:
    def test_full_catalog(self, client):
        data = client.get("/api/permissions/schema").get_json()
        assert [entry["category"] for entry in data["categories"]] == list(PERMISSION_SCHEMA)

    def test_single_category(self, client):
        data = client.get("/api/permissions/schema?category=manageProducts").get_json()

        assert len(data["categories"]) == 1
        capabilities = {c["code"]: c for c in data["categories"][0]["capabilities"]}
        assert capabilities["viewCostPrice"] == {
            "code": "viewCostPrice",
            "name": "View Cost Price",
            "description": "See product cost prices",
        }

    def test_unknown_category(self, client):
        response = client.get("/api/permissions/schema?category=manageRockets")
        assert response.status_code == 404


# =============================================================================
# EMPLOYEE GRANTS
# =============================================================================


class TestGrantEditingAccess:
    @pytest.mark.parametrize(
        "method,path,body",
        [
            ("get", f"/api/permissions/employees/{JANE}", None),
            ("put", f"/api/permissions/employees/{JANE}", {"permissions": {}}),
            ("patch", f"/api/permissions/employees/{JANE}/grants",
             {"category": "managePurchase", "capability": "menuPageVisible", "value": True}),
            ("delete", f"/api/permissions/employees/{JANE}", None),
        ],
    )
    def test_employee_forbidden(self, employee_client, method, path, body):
        response = getattr(employee_client, method)(path, json=body)

        assert response.status_code == 403
        assert response.get_json()["required_permission"] == "ADMINISTRATOR"

    def test_anonymous_requires_authentication(self, client, db_session):
        sign_in(client)
        response = client.get(f"/api/permissions/employees/{JANE}")

        assert response.status_code == 401
        assert response.get_json() == {"error": "Authentication required"}


class TestGrantEditing:
    def test_get_uncustomized_employee(self, admin_client):
        data = admin_client.get(f"/api/permissions/employees/{JANE}").get_json()
        assert data["customized"] is False
        assert data["permissions"] == build_employee_baseline_defaults().to_dict()

    def test_patch_capability_then_employee_sees_it(self, client, db_session):
        sign_in(client, current_user={"email": "owner@example.com", "role": "OWNER"})
        response = client.patch(
            f"/api/permissions/employees/{JANE}/grants",
            json={"category": "managePurchase", "capability": "menuPageVisible", "value": True},
        )
        assert response.status_code == 200
        assert response.get_json()["updated_by"] == "owner@example.com"

        sign_in(client, employee_session={"email": JANE})
        menus = client.get("/api/permissions/menus").get_json()["menus"]
        assert "purchase" in menus

        me = client.get("/api/permissions/me").get_json()
        assert me["source"] == "roster"

    def test_patch_whole_category(self, admin_client):
        response = admin_client.patch(
            f"/api/permissions/employees/{JANE}/grants",
            json={"category": "manageQuotes", "value": False},
        )
        assert response.status_code == 200
        assert not any(response.get_json()["permissions"]["manageQuotes"].values())

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"category": "manageQuotes"},
            {"category": "manageQuotes", "value": "yes"},
            {"category": 5, "value": True},
            {"category": "manageRockets", "value": True},
            {"category": "manageQuotes", "capability": "launch", "value": True},
        ],
    )
    def test_patch_bad_input(self, admin_client, body):
        response = admin_client.patch(f"/api/permissions/employees/{JANE}/grants", json=body)
        assert response.status_code == 400

    def test_put_replaces_grants(self, admin_client):
        response = admin_client.put(
            f"/api/permissions/employees/{JANE}",
            json={
                "permissions": {"manageOrders": {"addNew": False}, "manageStock": {"menuPage": True}},
                "name": "Jane",
                "employee_id": "7",
            },
        )
        assert response.status_code == 200
        data = response.get_json()
        assert data["permissions"]["manageOrders"]["addNew"] is False
        assert data["permissions"]["manageOrders"]["menuPage"] is True
        assert data["name"] == "Jane"

        fetched = admin_client.get(f"/api/permissions/employees/{JANE}").get_json()
        assert fetched["customized"] is True
        assert fetched["permissions"] == data["permissions"]

    @pytest.mark.parametrize("body", [{}, {"permissions": "all"}, {"permissions": ["a"]}])
    def test_put_bad_input(self, admin_client, body):
        response = admin_client.put(f"/api/permissions/employees/{JANE}", json=body)
        assert response.status_code == 400

    def test_delete_resets(self, admin_client):
        admin_client.patch(
            f"/api/permissions/employees/{JANE}/grants",
            json={"category": "manageStock", "value": True},
        )

        response = admin_client.delete(f"/api/permissions/employees/{JANE}")
        assert response.status_code == 200
        assert response.get_json() == {"email": JANE, "customized": False}

        assert admin_client.delete(f"/api/permissions/employees/{JANE}").status_code == 404
