from django.urls import path
from . import views

urlpatterns = [
    path('public-key', views.PublicKeyView.as_view(), name='push-public-key'),
    path('subscribe', views.SubscribeView.as_view(), name='push-subscribe'),
    path('test', views.BroadcastTestView.as_view(), name='push-test'),
]
