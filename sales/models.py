from django.conf import settings
from django.db import models
from django.utils import timezone
from decimal import Decimal

from inventory.models import MenuItem


class PaymentMethod(models.TextChoices):
    CASH = 'CASH', 'Cash'
    CARD = 'CARD', 'Card'
    DIGITAL_WALLET = 'DIGITAL_WALLET', 'Digital Wallet'
    BANK_TRANSFER = 'BANK_TRANSFER', 'Bank Transfer'


class Transaction(models.Model):
    """
    A completed sale (receipt header). Written once together with its items
    and never updated or deleted afterwards.
    """
    transaction_date = models.DateTimeField(default=timezone.now, editable=False, db_index=True)

    customer_name = models.CharField(max_length=255, null=True, blank=True)
    customer_phone = models.CharField(max_length=30, null=True, blank=True)

    # Pricing fields
    subtotal = models.DecimalField(max_digits=10, decimal_places=2)
    tax_amount = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'))
    discount_amount = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'))
    total_amount = models.DecimalField(max_digits=10, decimal_places=2)

    # Payment fields
    payment_method = models.CharField(max_length=20, choices=PaymentMethod.choices)
    payment_received = models.DecimalField(max_digits=10, decimal_places=2)
    change_amount = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'))

    notes = models.TextField(null=True, blank=True)
    cashier = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name='transactions'
    )
    created_at = models.DateTimeField(default=timezone.now, editable=False)

    def __str__(self):
        return f"#{self.id} - {self.total_amount} ({self.payment_method})"

    class Meta:
        db_table = 'transactions'
        ordering = ['-created_at', '-id']


class TransactionItem(models.Model):
    transaction = models.ForeignKey(Transaction, related_name='items', on_delete=models.CASCADE)
    menu_item = models.ForeignKey(MenuItem, on_delete=models.PROTECT, related_name='transaction_items')
    quantity = models.PositiveIntegerField()
    # Price at the time of sale, independent of later menu price changes
    unit_price = models.DecimalField(max_digits=10, decimal_places=2)
    total_price = models.DecimalField(max_digits=10, decimal_places=2)
    notes = models.TextField(null=True, blank=True)

    def __str__(self):
        return f"{self.quantity} x {self.menu_item_id}"

    class Meta:
        db_table = 'transaction_items'
        ordering = ['id']
