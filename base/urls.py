# base/urls.py
from django.urls import path

from .views import login_view, logout_view

app_name = "base"

urlpatterns = [
    path("users/login/", login_view, name="login"),
    path("users/logout/", logout_view, name="logout"),
]
