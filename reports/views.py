from django.http import HttpResponse
from django.utils import timezone
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema, OpenApiParameter

from authentication.permissions import CanViewReports
from sales.serializers import DateRangeQuerySerializer
from .exports import XLSX_CONTENT_TYPE
from .serializers import DailyReportQuerySerializer, DailySalesReportSerializer, SalesSummarySerializer
from . import services


def _report_date(request):
    query = DailyReportQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    return query.validated_data.get('date') or timezone.localdate()


@extend_schema(
    summary="Daily sales report",
    parameters=[DailyReportQuerySerializer],
    responses={200: DailySalesReportSerializer},
)
@api_view(['GET'])
@permission_classes([CanViewReports])
def daily_report(request):
    report = services.get_daily_sales_report(_report_date(request))
    return Response(DailySalesReportSerializer(report).data)


@extend_schema(
    summary="Daily sales report as Excel",
    parameters=[DailyReportQuerySerializer],
    responses={(200, XLSX_CONTENT_TYPE): OpenApiTypes.BINARY},
)
@api_view(['GET'])
@permission_classes([CanViewReports])
def daily_report_export(request):
    date = _report_date(request)
    response = HttpResponse(services.export_daily_sales_report(date), content_type=XLSX_CONTENT_TYPE)
    response['Content-Disposition'] = f'attachment; filename="daily_sales_{date.isoformat()}.xlsx"'
    return response


@extend_schema(
    summary="Sales summary for a date range (inclusive)",
    parameters=[DateRangeQuerySerializer],
    responses={200: SalesSummarySerializer},
)
@api_view(['GET'])
@permission_classes([CanViewReports])
def sales_summary_by_date_range(request):
    query = DateRangeQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    summary = services.get_sales_summary_by_date_range(
        query.validated_data['start_date'], query.validated_data['end_date']
    )
    return Response(SalesSummarySerializer(summary).data)


@extend_schema(
    summary="Sales summary for one cashier",
    parameters=[OpenApiParameter('cashier_id', int, OpenApiParameter.PATH)],
    responses={200: SalesSummarySerializer},
)
@api_view(['GET'])
@permission_classes([CanViewReports])
def sales_summary_by_cashier(request, cashier_id):
    summary = services.get_sales_summary_by_cashier(cashier_id)
    return Response(SalesSummarySerializer(summary).data)
