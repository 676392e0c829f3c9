from rest_framework import generics, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import NotFound
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiExample, OpenApiParameter

from authentication.permissions import CanCheckout, CanViewReports
from .serializers import (
    TransactionCreateSerializer, TransactionSerializer, TransactionDetailSerializer,
    TransactionListQuerySerializer, DateRangeQuerySerializer
)
from . import services


class TransactionListCreateView(generics.GenericAPIView):
    """
    get: List transactions, newest first
    post: Record a completed sale
    """
    serializer_class = TransactionCreateSerializer

    def get_permissions(self):
        if self.request.method == 'POST':
            return [CanCheckout()]
        return [CanViewReports()]

    @extend_schema(
        summary="List transactions",
        parameters=[TransactionListQuerySerializer],
        responses={200: TransactionDetailSerializer(many=True)},
    )
    def get(self, request, *args, **kwargs):
        query = TransactionListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        transactions = services.list_transactions(**query.validated_data)
        return Response(TransactionDetailSerializer(transactions, many=True).data)

    @extend_schema(
        summary="Checkout",
        request=TransactionCreateSerializer,
        responses={201: TransactionSerializer},
        examples=[
            OpenApiExample(
                'Cash sale',
                value={
                    "subtotal": 56.00, "tax_amount": 5.60, "discount_amount": 0,
                    "total_amount": 61.60, "payment_method": "CASH",
                    "payment_received": 70.00,
                    "items": [
                        {"menu_item_id": 1, "quantity": 2, "unit_price": 15.50},
                        {"menu_item_id": 2, "quantity": 1, "unit_price": 25.00}
                    ]
                },
                request_only=True,
            )
        ]
    )
    def post(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        txn = serializer.save()
        return Response(TransactionSerializer(txn).data, status=status.HTTP_201_CREATED)


@extend_schema(summary="Transaction details", responses={200: TransactionDetailSerializer})
@api_view(['GET'])
@permission_classes([CanViewReports])
def transaction_detail(request, transaction_id):
    txn = services.get_transaction_by_id(transaction_id)
    if txn is None:
        raise NotFound('Transaction not found')
    return Response(TransactionDetailSerializer(txn).data)


@extend_schema(
    summary="Transactions in a date range (inclusive)",
    parameters=[DateRangeQuerySerializer],
    responses={200: TransactionDetailSerializer(many=True)},
)
@api_view(['GET'])
@permission_classes([CanViewReports])
def transactions_by_date_range(request):
    query = DateRangeQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    transactions = services.list_transactions_by_date_range(
        query.validated_data['start_date'], query.validated_data['end_date']
    )
    return Response(TransactionDetailSerializer(transactions, many=True).data)


@extend_schema(
    summary="Transactions recorded by one cashier",
    parameters=[OpenApiParameter('cashier_id', int, OpenApiParameter.PATH)],
    responses={200: TransactionDetailSerializer(many=True)},
)
@api_view(['GET'])
@permission_classes([CanViewReports])
def transactions_by_cashier(request, cashier_id):
    transactions = services.list_transactions_by_cashier(cashier_id)
    return Response(TransactionDetailSerializer(transactions, many=True).data)
