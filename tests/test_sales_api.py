"""
Tests for the sales endpoints.
"""

import datetime
from decimal import Decimal

from django.utils import timezone

import pytest

from sales.models import Transaction, TransactionItem


@pytest.mark.django_db
class TestCheckout:
    """Test POST /sales/transactions/."""

    def test_checkout_returns_header(self, cashier_client, sale_payload):
        response = cashier_client.post("/sales/transactions/", sale_payload, format="json")

        assert response.status_code == 201
        data = response.json()
        assert data["change_amount"] == "8.40"
        assert data["total_amount"] == "61.60"
        assert data["payment_method"] == "CASH"
        assert data["customer_name"] == "Andi"
        assert "items" not in data

        totals = list(
            TransactionItem.objects.filter(transaction_id=data["id"])
            .order_by("id")
            .values_list("total_price", flat=True)
        )
        assert totals == [Decimal("31.00"), Decimal("25.00")]

    def test_float_amounts_are_rounded_to_cents(self, cashier_client, sale_payload):
        sale_payload["tax_amount"] = 5.6000000000000005
        sale_payload["total_amount"] = 61.6
        sale_payload["items"][0]["unit_price"] = 15.5

        response = cashier_client.post("/sales/transactions/", sale_payload, format="json")

        assert response.status_code == 201
        txn = Transaction.objects.get(pk=response.json()["id"])
        assert txn.tax_amount == Decimal("5.60")
        assert txn.change_amount == Decimal("8.40")

    def test_client_computed_fields_are_ignored(self, cashier_client, sale_payload):
        sale_payload["change_amount"] = "123.00"
        sale_payload["items"][0]["total_price"] = "1.00"

        response = cashier_client.post("/sales/transactions/", sale_payload, format="json")

        assert response.status_code == 201
        assert response.json()["change_amount"] == "8.40"
        item = TransactionItem.objects.filter(transaction_id=response.json()["id"]).order_by("id").first()
        assert item.total_price == Decimal("31.00")

    @pytest.mark.parametrize("field", ["tax_amount", "discount_amount", "cashier_id", "subtotal", "total_amount"])
    def test_missing_required_field_rejected(self, cashier_client, sale_payload, field):
        del sale_payload[field]

        response = cashier_client.post("/sales/transactions/", sale_payload, format="json")

        assert response.status_code == 400
        assert field in response.json()["details"]
        assert Transaction.objects.count() == 0

    @pytest.mark.parametrize(
        "quantity, unit_price",
        [(10**9, "99999999.99"), (2, "50000000.00"), (2147483648, "0.01")],
    )
    def test_line_total_beyond_column_rejected(self, cashier_client, sale_payload, quantity, unit_price):
        sale_payload["items"][0]["quantity"] = quantity
        sale_payload["items"][0]["unit_price"] = unit_price

        response = cashier_client.post("/sales/transactions/", sale_payload, format="json")

        assert response.status_code == 400
        assert "quantity" in response.json()["details"]["items"][0]
        assert Transaction.objects.count() == 0

    def test_largest_line_total_accepted_and_readable(self, admin_client, sale_payload):
        sale_payload["items"] = [
            {"menu_item_id": sale_payload["items"][0]["menu_item_id"], "quantity": 1, "unit_price": "99999999.99"}
        ]

        created = admin_client.post("/sales/transactions/", sale_payload, format="json")
        assert created.status_code == 201

        listing = admin_client.get("/sales/transactions/")
        assert listing.status_code == 200
        assert listing.json()[0]["items"][0]["total_price"] == "99999999.99"
        assert admin_client.get("/reports/daily/").status_code == 200

    def test_empty_items_rejected(self, cashier_client, sale_payload):
        sale_payload["items"] = []

        response = cashier_client.post("/sales/transactions/", sale_payload, format="json")

        assert response.status_code == 400
        assert "items" in response.json()["details"]
        assert Transaction.objects.count() == 0

    @pytest.mark.parametrize(
        "field, value",
        [
            ("total_amount", "0"),
            ("payment_received", "0"),
            ("subtotal", "0.00"),
            ("tax_amount", "-0.01"),
            ("discount_amount", "-5.00"),
            ("payment_method", "CRYPTO"),
        ],
    )
    def test_invalid_header_rejected(self, cashier_client, sale_payload, field, value):
        sale_payload[field] = value

        response = cashier_client.post("/sales/transactions/", sale_payload, format="json")

        assert response.status_code == 400
        assert field in response.json()["details"]
        assert Transaction.objects.count() == 0

    @pytest.mark.parametrize("field, value", [("quantity", 0), ("unit_price", "0.00")])
    def test_invalid_item_rejected(self, cashier_client, sale_payload, field, value):
        sale_payload["items"][0][field] = value

        response = cashier_client.post("/sales/transactions/", sale_payload, format="json")

        assert response.status_code == 400
        assert "items" in response.json()["details"]
        assert Transaction.objects.count() == 0

    def test_all_payment_methods_accepted(self, cashier_client, sale_payload):
        for method in ("CASH", "CARD", "DIGITAL_WALLET", "BANK_TRANSFER"):
            sale_payload["payment_method"] = method
            response = cashier_client.post("/sales/transactions/", sale_payload, format="json")
            assert response.status_code == 201

        assert Transaction.objects.count() == 4


@pytest.mark.django_db(transaction=True)
def test_unknown_menu_item_leaves_nothing(cashier_client, sale_payload):
    sale_payload["items"][1]["menu_item_id"] = 999999

    response = cashier_client.post("/sales/transactions/", sale_payload, format="json")

    assert response.status_code == 400
    assert response.json()["message"] == "Database integrity error"
    assert Transaction.objects.count() == 0
    assert TransactionItem.objects.count() == 0


@pytest.mark.django_db
class TestTransactionReads:
    """Test the read endpoints."""

    def test_get_transaction_with_items(self, admin_client, make_sale):
        txn = make_sale("31.00", quantity=2)

        response = admin_client.get(f"/sales/transactions/{txn.id}/")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == txn.id
        assert data["cashier"] == {"full_name": "Siti Kasir"}
        assert len(data["items"]) == 1
        assert data["items"][0]["menu_item_name"] == "Cafe Latte"
        assert data["items"][0]["quantity"] == 2
        assert data["items"][0]["total_price"] == "31.00"

    def test_get_unknown_transaction(self, admin_client):
        response = admin_client.get("/sales/transactions/999999/")

        assert response.status_code == 404
        assert response.json()["message"] == "Transaction not found"

    def test_list_with_limit_and_offset(self, admin_client, make_sale):
        sales = [make_sale(total) for total in ("10.00", "20.00", "30.00")]

        everything = admin_client.get("/sales/transactions/").json()
        assert [t["id"] for t in everything] == [s.id for s in reversed(sales)]

        page = admin_client.get("/sales/transactions/", {"limit": 2, "offset": 1}).json()
        assert [t["id"] for t in page] == [sales[1].id, sales[0].id]

    def test_negative_limit_rejected(self, admin_client):
        response = admin_client.get("/sales/transactions/", {"limit": -1})
        assert response.status_code == 400

    def test_by_date_range(self, admin_client, make_sale):
        inside = make_sale("10.00")
        outside = make_sale("20.00")
        Transaction.objects.filter(pk=outside.pk).update(
            transaction_date=timezone.now() - datetime.timedelta(days=3)
        )
        start = (timezone.now() - datetime.timedelta(hours=1)).isoformat()
        end = (timezone.now() + datetime.timedelta(hours=1)).isoformat()

        response = admin_client.get(
            "/sales/transactions/date-range/", {"start_date": start, "end_date": end}
        )

        assert response.status_code == 200
        assert [t["id"] for t in response.json()] == [inside.id]

    def test_date_range_requires_both_bounds(self, admin_client):
        response = admin_client.get("/sales/transactions/date-range/", {"start_date": "2026-01-01T00:00:00"})

        assert response.status_code == 400
        assert "end_date" in response.json()["details"]

    def test_by_cashier(self, admin_client, make_sale, cashier, other_cashier):
        mine = make_sale("10.00")
        make_sale("20.00", cashier_user=other_cashier)

        response = admin_client.get(f"/sales/transactions/cashier/{cashier.id}/")

        assert response.status_code == 200
        assert [t["id"] for t in response.json()] == [mine.id]
