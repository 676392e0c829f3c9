from django.urls import path
from . import views

urlpatterns = [
    path('transactions/', views.TransactionListCreateView.as_view(), name='transaction-list-create'),
    path('transactions/date-range/', views.transactions_by_date_range, name='transactions-by-date-range'),
    path('transactions/cashier/<int:cashier_id>/', views.transactions_by_cashier, name='transactions-by-cashier'),
    path('transactions/<int:transaction_id>/', views.transaction_detail, name='transaction-detail'),
]
