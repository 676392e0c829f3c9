"""
Sales reporting over recorded transactions.
"""
import datetime

from django.db.models import Count, DecimalField, Sum
from django.utils import timezone

from sales.models import PaymentMethod, Transaction, TransactionItem
from sales.money import ZERO, safe_average, to_money
from sales import services as sales_services

TOP_SELLERS_LIMIT = 10

# Sums over many rows outgrow the DECIMAL(10, 2) of a single amount
AGGREGATE_AMOUNT = DecimalField(max_digits=20, decimal_places=2)


def day_window(date):
    """
    First and last instant of ``date`` in the configured TIME_ZONE,
    i.e. [00:00:00.000, 23:59:59.999].
    """
    start = timezone.make_aware(datetime.datetime.combine(date, datetime.time.min))
    end = start + datetime.timedelta(days=1) - datetime.timedelta(milliseconds=1)
    return start, end


def get_top_selling_items(start, end, limit=TOP_SELLERS_LIMIT):
    rows = TransactionItem.objects.filter(
        transaction__transaction_date__gte=start,
        transaction__transaction_date__lte=end,
    ).values(
        'menu_item_id',
        'menu_item__name',
    ).annotate(
        total_quantity=Sum('quantity'),
        total_revenue=Sum('total_price', output_field=AGGREGATE_AMOUNT),
    ).order_by('-total_quantity', 'menu_item_id')[:limit]

    return [
        {
            'menu_item_id': row['menu_item_id'],
            'name': row['menu_item__name'],
            'quantity': row['total_quantity'],
            'revenue': to_money(row['total_revenue'] or ZERO),
        }
        for row in rows
    ]


def get_daily_sales_report(date):
    """Totals and top sellers for one calendar day"""
    start, end = day_window(date)

    totals = Transaction.objects.filter(
        transaction_date__gte=start,
        transaction_date__lte=end,
    ).aggregate(
        total=Sum('total_amount', output_field=AGGREGATE_AMOUNT),
        count=Count('id'),
    )
    total_sales = to_money(totals['total'] or ZERO)
    total_transactions = totals['count']

    return {
        'date': date,
        'total_sales': total_sales,
        'total_transactions': total_transactions,
        'average_transaction': safe_average(total_sales, total_transactions),
        'top_selling_items': get_top_selling_items(start, end),
    }


def summarize_transactions(transactions):
    """Totals over an already loaded list, plus a count per payment method."""
    total_sales = to_money(sum((txn.total_amount for txn in transactions), ZERO))
    total_transactions = len(transactions)

    payment_methods = {method: 0 for method in PaymentMethod.values}
    for txn in transactions:
        payment_methods[txn.payment_method] = payment_methods.get(txn.payment_method, 0) + 1

    return {
        'total_sales': total_sales,
        'total_transactions': total_transactions,
        'average_transaction': safe_average(total_sales, total_transactions),
        'payment_methods': payment_methods,
    }


def get_sales_summary_by_date_range(start, end):
    return summarize_transactions(sales_services.list_transactions_by_date_range(start, end))


def get_sales_summary_by_cashier(cashier_id):
    return summarize_transactions(sales_services.list_transactions_by_cashier(cashier_id))


def export_daily_sales_report(date):
    """Daily report as .xlsx bytes"""
    from .exports import build_daily_report_workbook

    return build_daily_report_workbook(get_daily_sales_report(date))
