from django.urls import path
from . import views

urlpatterns = [
    path('activities', views.ActivityListView.as_view(), name='activities'),
    path('activities/<uuid:pk>', views.ActivityDetailView.as_view(), name='activity-detail'),
]
