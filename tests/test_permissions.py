"""
Tests for role capabilities and how they gate the API.
"""

import pytest

from authentication.permissions import Capabilities, ROLE_CAPABILITIES


@pytest.mark.django_db
class TestCapabilities:
    """Test the role -> capability lookup."""

    def test_admin_has_every_capability(self, admin_user):
        for capability in (
            Capabilities.MANAGE_CATALOG,
            Capabilities.MANAGE_USERS,
            Capabilities.VIEW_REPORTS,
            Capabilities.CHECKOUT,
        ):
            assert admin_user.has_capability(capability)

    def test_cashier_can_only_checkout(self, cashier):
        assert cashier.has_capability(Capabilities.CHECKOUT)
        assert not cashier.has_capability(Capabilities.MANAGE_CATALOG)
        assert not cashier.has_capability(Capabilities.MANAGE_USERS)
        assert not cashier.has_capability(Capabilities.VIEW_REPORTS)

    def test_unknown_capability_is_denied(self, admin_user):
        assert not admin_user.has_capability("delete_everything")

    def test_capability_sets_are_fixed(self):
        assert ROLE_CAPABILITIES["KASIR"] == frozenset([Capabilities.CHECKOUT])


@pytest.mark.django_db
class TestEndpointAccess:
    """Test that endpoints enforce the capability of the caller's role."""

    @pytest.mark.parametrize(
        "path",
        [
            "/sales/transactions/",
            "/reports/daily/",
            "/reports/summary/cashier/1/",
            "/users/",
        ],
    )
    def test_cashier_forbidden_from_back_office_reads(self, cashier_client, path):
        response = cashier_client.get(path)

        assert response.status_code == 403
        assert response.json()["error"] is True

    def test_cashier_cannot_create_category(self, cashier_client):
        response = cashier_client.post("/menu/categories/", {"name": "Tea"}, format="json")
        assert response.status_code == 403

    def test_cashier_can_browse_menu(self, cashier_client, menu_items):
        response = cashier_client.get("/menu/items/")
        assert response.status_code == 200
        assert len(response.json()) == 2

    def test_cashier_can_checkout(self, cashier_client, sale_payload):
        response = cashier_client.post("/sales/transactions/", sale_payload, format="json")
        assert response.status_code == 201

    def test_anonymous_rejected(self, api_client):
        assert api_client.get("/menu/items/").status_code == 401
        assert api_client.post("/sales/transactions/", {}, format="json").status_code == 401

    def test_inactive_admin_rejected(self, admin_client, admin_user):
        admin_user.is_active = False
        admin_user.save()

        assert admin_client.get("/reports/daily/").status_code == 403
