from django.urls import path
from . import views

urlpatterns = [
    path('logs', views.LogListView.as_view(), name='logs'),
    path('redemptions', views.RedemptionListView.as_view(), name='redemptions'),
    path('balance', views.BalanceView.as_view(), name='balance'),
]
