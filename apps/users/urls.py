from django.urls import path
from . import views

urlpatterns = [
    path('signup', views.SignupView.as_view(), name='signup'),
    path('login', views.LoginView.as_view(), name='login'),
    path('federated', views.FederatedLoginView.as_view(), name='federated-login'),
    path('google', views.FederatedLoginView.as_view(), name='google-login'),
    path('me', views.MeView.as_view(), name='me'),
]
