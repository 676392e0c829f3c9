"""
Fixed-point money helpers.

Amounts are ``decimal.Decimal`` with two decimal places everywhere in the
application; floats never enter the arithmetic.
"""
from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal('0.01')
ZERO = Decimal('0.00')
# Largest value a DECIMAL(10, 2) amount column holds
MAX_AMOUNT = Decimal('99999999.99')


def to_money(value):
    """Quantize ``value`` (Decimal, int or numeric string) to cents."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def line_total(quantity, unit_price):
    return to_money(to_money(unit_price) * quantity)


def change_due(payment_received, total_amount):
    """Change owed to the customer. Negative when the payment falls short."""
    return to_money(to_money(payment_received) - to_money(total_amount))


def safe_average(total, count):
    if not count:
        return ZERO
    return to_money(to_money(total) / count)
