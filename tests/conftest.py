"""
Pytest configuration and fixtures for the café POS backend.
"""

from decimal import Decimal

import pytest


@pytest.fixture
def api_client():
    """
    Fixture for Django REST framework API client.
    """
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def admin_user(django_user_model):
    return django_user_model.objects.create_user(
        username="owner", password="owner123", role="ADMIN", full_name="Cafe Owner"
    )


@pytest.fixture
def cashier(django_user_model):
    return django_user_model.objects.create_user(
        username="kasir1", password="kasir123", role="KASIR", full_name="Siti Kasir"
    )


@pytest.fixture
def other_cashier(django_user_model):
    return django_user_model.objects.create_user(
        username="kasir2", password="kasir123", role="KASIR", full_name="Budi Kasir"
    )


@pytest.fixture
def admin_client(admin_user):
    from rest_framework.test import APIClient

    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture
def cashier_client(cashier):
    from rest_framework.test import APIClient

    client = APIClient()
    client.force_authenticate(user=cashier)
    return client


@pytest.fixture
def category(db):
    from inventory.models import Category

    return Category.objects.create(name="Coffee", description="Hot and iced coffee")


@pytest.fixture
def menu_items(category):
    """Two menu items priced 15.50 and 25.00"""
    from inventory.models import MenuItem

    latte = MenuItem.objects.create(name="Cafe Latte", price=Decimal("15.50"), category=category)
    sandwich = MenuItem.objects.create(name="Club Sandwich", price=Decimal("25.00"), category=category)
    return latte, sandwich


@pytest.fixture
def sale_payload(menu_items, cashier):
    """Checkout payload: 2 x 15.50 + 1 x 25.00, 10% tax, paid 70.00"""
    latte, sandwich = menu_items
    return {
        "customer_name": "Andi",
        "subtotal": "56.00",
        "tax_amount": "5.60",
        "discount_amount": "0.00",
        "total_amount": "61.60",
        "payment_method": "CASH",
        "payment_received": "70.00",
        "cashier_id": cashier.id,
        "items": [
            {"menu_item_id": latte.id, "quantity": 2, "unit_price": "15.50"},
            {"menu_item_id": sandwich.id, "quantity": 1, "unit_price": "25.00"},
        ],
    }


@pytest.fixture
def make_sale(menu_items, cashier):
    """Factory that records a sale through the transaction engine."""
    from sales import services

    latte, _ = menu_items

    def _make_sale(total, quantity=1, menu_item=None, cashier_user=None, payment_method="CASH"):
        item = menu_item or latte
        total = Decimal(total)
        return services.create_transaction({
            "subtotal": total,
            "tax_amount": Decimal("0.00"),
            "discount_amount": Decimal("0.00"),
            "total_amount": total,
            "payment_method": payment_method,
            "payment_received": total,
            "cashier_id": (cashier_user or cashier).id,
            "items": [
                {"menu_item_id": item.id, "quantity": quantity, "unit_price": item.price},
            ],
        })

    return _make_sale
