from rest_framework import serializers

from authentication.serializers import CashierSerializer
from .models import PaymentMethod, Transaction, TransactionItem
from .money import MAX_AMOUNT, line_total, to_money
from . import services


class MoneyField(serializers.DecimalField):
    """
    Two-decimal amount. Inputs with more decimal places (e.g. 5.6000000000000005
    from a JS client) are rounded half-up to cents instead of rejected.
    """

    def __init__(self, **kwargs):
        kwargs.setdefault('max_digits', 10)
        kwargs.setdefault('decimal_places', 2)
        super().__init__(**kwargs)

    def validate_precision(self, value):
        if value.is_finite():
            value = to_money(value)
        return super().validate_precision(value)


# PositiveIntegerField upper bound
MAX_QUANTITY = 2147483647


# Input serializers
class TransactionItemInputSerializer(serializers.Serializer):
    menu_item_id = serializers.IntegerField()
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_QUANTITY)
    unit_price = MoneyField()
    notes = serializers.CharField(required=False, allow_null=True, allow_blank=True)

    def validate_unit_price(self, value):
        if value <= 0:
            raise serializers.ValidationError("Unit price must be greater than zero.")
        return value

    def validate(self, attrs):
        if line_total(attrs['quantity'], attrs['unit_price']) > MAX_AMOUNT:
            raise serializers.ValidationError(
                {'quantity': f"Line total exceeds the maximum amount of {MAX_AMOUNT}."}
            )
        return attrs


class TransactionCreateSerializer(serializers.Serializer):
    """
    Checkout payload. Item totals and change are derived server side, so
    ``total_price`` and ``change_amount`` are not accepted here.
    """
    customer_name = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True)
    customer_phone = serializers.CharField(max_length=30, required=False, allow_null=True, allow_blank=True)
    subtotal = MoneyField()
    tax_amount = MoneyField()
    discount_amount = MoneyField()
    total_amount = MoneyField()
    payment_method = serializers.ChoiceField(choices=PaymentMethod.choices)
    payment_received = MoneyField()
    notes = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    cashier_id = serializers.IntegerField()
    items = TransactionItemInputSerializer(many=True, allow_empty=False)

    def validate_subtotal(self, value):
        if value <= 0:
            raise serializers.ValidationError("Subtotal must be greater than zero.")
        return value

    def validate_tax_amount(self, value):
        if value < 0:
            raise serializers.ValidationError("Tax amount cannot be negative.")
        return value

    def validate_discount_amount(self, value):
        if value < 0:
            raise serializers.ValidationError("Discount amount cannot be negative.")
        return value

    def validate_total_amount(self, value):
        if value <= 0:
            raise serializers.ValidationError("Total amount must be greater than zero.")
        return value

    def validate_payment_received(self, value):
        if value <= 0:
            raise serializers.ValidationError("Payment received must be greater than zero.")
        return value

    def create(self, validated_data):
        return services.create_transaction(validated_data)


class TransactionListQuerySerializer(serializers.Serializer):
    limit = serializers.IntegerField(required=False, min_value=0)
    offset = serializers.IntegerField(required=False, min_value=0)


class DateRangeQuerySerializer(serializers.Serializer):
    start_date = serializers.DateTimeField()
    end_date = serializers.DateTimeField()


# Read serializers
class TransactionItemSerializer(serializers.ModelSerializer):
    transaction_id = serializers.IntegerField(read_only=True)
    menu_item_id = serializers.IntegerField(read_only=True)
    menu_item_name = serializers.CharField(source='menu_item.name', read_only=True)

    class Meta:
        model = TransactionItem
        fields = [
            'id', 'transaction_id', 'menu_item_id', 'menu_item_name',
            'quantity', 'unit_price', 'total_price', 'notes'
        ]
        read_only_fields = fields


class TransactionSerializer(serializers.ModelSerializer):
    """Header only; returned by checkout"""
    cashier_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Transaction
        fields = [
            'id', 'transaction_date', 'customer_name', 'customer_phone',
            'subtotal', 'tax_amount', 'discount_amount', 'total_amount',
            'payment_method', 'payment_received', 'change_amount',
            'notes', 'cashier_id', 'created_at'
        ]
        read_only_fields = fields


class TransactionDetailSerializer(TransactionSerializer):
    items = TransactionItemSerializer(many=True, read_only=True)
    cashier = CashierSerializer(read_only=True)

    class Meta(TransactionSerializer.Meta):
        fields = TransactionSerializer.Meta.fields + ['items', 'cashier']
        read_only_fields = fields
