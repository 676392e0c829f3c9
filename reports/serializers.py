from rest_framework import serializers

from sales.serializers import MoneyField


class DailyReportQuerySerializer(serializers.Serializer):
    """``date`` defaults to today in the configured time zone"""
    date = serializers.DateField(required=False)


class TotalField(MoneyField):
    """Amount summed over many transactions; wider than a single column"""

    def __init__(self, **kwargs):
        kwargs.setdefault('max_digits', 20)
        super().__init__(**kwargs)


class TopSellingItemSerializer(serializers.Serializer):
    menu_item_id = serializers.IntegerField()
    name = serializers.CharField()
    quantity = serializers.IntegerField()
    revenue = TotalField()


class DailySalesReportSerializer(serializers.Serializer):
    date = serializers.DateField()
    total_sales = TotalField()
    total_transactions = serializers.IntegerField()
    average_transaction = TotalField()
    top_selling_items = TopSellingItemSerializer(many=True)


class SalesSummarySerializer(serializers.Serializer):
    total_sales = TotalField()
    total_transactions = serializers.IntegerField()
    average_transaction = TotalField()
    payment_methods = serializers.DictField(child=serializers.IntegerField())
