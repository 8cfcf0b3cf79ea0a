"""
URL configuration for Injaz project.
"""
# Injaz/urls.py
from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.views.generic import RedirectView

urlpatterns = [
    # الدخول/الخروج عبر بوابة base
    path("", include(("base.urls", "base"), namespace="base")),

    # مساحة العمل: الموظفون، الأهداف، المهام، التقييم، الاستيراد/التصدير
    path("performance/", include(("performance.urls", "performance"), namespace="performance")),
    path("home/", RedirectView.as_view(pattern_name="performance:home", permanent=False)),

    # لوحة الإدارة
    path("admin/", admin.site.urls),
]

# Helpers أثناء التطوير
if settings.DEBUG:
    # Live reload (django_browser_reload)
    urlpatterns += [path("__reload__/", include("django_browser_reload.urls"))]
