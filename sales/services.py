"""
Transaction engine.

Persists a sale atomically (header plus every line item) and answers the
read queries used by the sales and reports endpoints.

Trust boundary for submitted amounts:

* ``change_amount`` and each item's ``total_price`` are recomputed here from
  the other inputs; anything the client sent for them is ignored.
* ``subtotal``, ``tax_amount``, ``discount_amount`` and ``total_amount`` are
  stored as submitted. Inconsistencies are logged, not rejected.
"""
import logging

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from .models import Transaction, TransactionItem
from .money import MAX_AMOUNT, ZERO, change_due, line_total, to_money

logger = logging.getLogger(__name__)

RECOMPUTED_FIELDS = ('change_amount', 'items.total_price')
PASS_THROUGH_FIELDS = ('subtotal', 'tax_amount', 'discount_amount', 'total_amount')


def _with_details(queryset=None):
    if queryset is None:
        queryset = Transaction.objects.all()
    return queryset.select_related('cashier').prefetch_related('items__menu_item')


def _check_totals(data, line_totals):
    items_total = sum(line_totals, ZERO)
    subtotal = to_money(data['subtotal'])
    if subtotal != items_total:
        logger.warning(
            "Submitted subtotal %s differs from sum of item totals %s (cashier %s)",
            subtotal, items_total, data['cashier_id'],
        )

    expected_total = to_money(
        subtotal + data['tax_amount'] - data['discount_amount']
    )
    total = to_money(data['total_amount'])
    if total != expected_total:
        logger.warning(
            "Submitted total %s differs from subtotal + tax - discount = %s (cashier %s)",
            total, expected_total, data['cashier_id'],
        )


def create_transaction(data):
    """
    Record a completed sale.

    ``data`` holds the validated header fields, ``cashier_id`` and a non-empty
    ``items`` list of ``{menu_item_id, quantity, unit_price, notes}``. Either
    the header and all items are stored, or nothing is.
    """
    items = data['items']
    line_totals = [line_total(item['quantity'], item['unit_price']) for item in items]
    if any(total > MAX_AMOUNT for total in line_totals):
        raise ValidationError(f"Line total exceeds the maximum amount of {MAX_AMOUNT}.")
    _check_totals(data, line_totals)

    # Sale time and record time are the same instant
    now = timezone.now()

    with transaction.atomic():
        txn = Transaction.objects.create(
            transaction_date=now,
            created_at=now,
            customer_name=data.get('customer_name') or None,
            customer_phone=data.get('customer_phone') or None,
            subtotal=to_money(data['subtotal']),
            tax_amount=to_money(data['tax_amount']),
            discount_amount=to_money(data['discount_amount']),
            total_amount=to_money(data['total_amount']),
            payment_method=data['payment_method'],
            payment_received=to_money(data['payment_received']),
            change_amount=change_due(data['payment_received'], data['total_amount']),
            notes=data.get('notes') or None,
            cashier_id=data['cashier_id'],
        )

        TransactionItem.objects.bulk_create([
            TransactionItem(
                transaction=txn,
                menu_item_id=item['menu_item_id'],
                quantity=item['quantity'],
                unit_price=to_money(item['unit_price']),
                total_price=total,
                notes=item.get('notes') or None,
            )
            for item, total in zip(items, line_totals)
        ])

    logger.info(
        "Transaction %s recorded: %s item(s), total %s, %s by cashier %s",
        txn.id, len(items), txn.total_amount, txn.payment_method, txn.cashier_id,
    )
    return txn


def get_transaction_by_id(transaction_id):
    """The transaction with its items and cashier, or None."""
    return _with_details().filter(pk=transaction_id).first()


def list_transactions(limit=None, offset=None):
    """Newest first. ``limit`` caps the result, ``offset`` skips leading rows."""
    queryset = _with_details()
    start = offset or 0
    if limit is not None:
        return list(queryset[start:start + limit])
    return list(queryset[start:])


def list_transactions_by_date_range(start, end):
    """Transactions whose ``transaction_date`` lies in [start, end]."""
    return list(_with_details(Transaction.objects.filter(
        transaction_date__gte=start,
        transaction_date__lte=end,
    )))


def list_transactions_by_cashier(cashier_id):
    return list(_with_details(Transaction.objects.filter(cashier_id=cashier_id)))
