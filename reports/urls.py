from django.urls import path
from . import views

urlpatterns = [
    path('daily/', views.daily_report, name='daily-report'),
    path('daily/export/', views.daily_report_export, name='daily-report-export'),
    path('summary/date-range/', views.sales_summary_by_date_range, name='sales-summary-date-range'),
    path('summary/cashier/<int:cashier_id>/', views.sales_summary_by_cashier, name='sales-summary-cashier'),
]
